"""Pytest fixtures for news file generator tests."""

from unittest.mock import MagicMock

import httpx
import pytest

from news_file_generator.clients import PageClient


@pytest.fixture
def sample_issue_body():
    """Issue body as rendered by the news appearance issue form."""
    return (
        "### News appearance link\n"
        "\n"
        "https://example.com/a\n"
        "\n"
        "### From which edition is it from?\n"
        "\n"
        "Winter 2024\n"
        "\n"
        "### Publication date\n"
        "\n"
        "2024-01-05\n"
    )


@pytest.fixture
def sample_page_html():
    """HTML page with title, descriptions, cover image and favicon."""
    return b"""<!DOCTYPE html>
<html>
<head>
  <title>Example headline</title>
  <meta name="description" content="Plain description">
  <meta property="og:description" content="Open Graph description">
  <meta property="og:image" content="https://cdn.example.com/cover.jpg">
  <link rel="icon" href="/static/icon.png">
</head>
<body><p>Story</p></body>
</html>
"""


@pytest.fixture
def mock_http_client():
    """Create a mock HTTP client."""
    return MagicMock(spec=httpx.Client)


@pytest.fixture
def make_page_client():
    """Build a PageClient whose HTTP client serves fixed content."""

    def _make(content: bytes, status_code: int = 200) -> PageClient:
        response = MagicMock()
        response.is_success = 200 <= status_code < 300
        response.status_code = status_code
        response.url = "https://example.com/a"
        response.content = content
        response.encoding = "utf-8"

        http_client = MagicMock(spec=httpx.Client)
        http_client.request.return_value = response

        client = PageClient()
        client._client = http_client
        return client

    return _make


@pytest.fixture
def make_stream_response():
    """Build a mock streaming response with a content type."""

    def _make(content_type: str | None, chunks: list[bytes] | None = None):
        response = MagicMock()
        response.headers = {} if content_type is None else {"content-type": content_type}
        response.iter_bytes.return_value = chunks if chunks is not None else [b"image-bytes"]
        return response

    return _make
