"""Tests for the AssetDownloader class."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest

from news_file_generator.aggregators import (
    AssetDownloader,
    extension_for_content_type,
    extension_for_url,
)


@pytest.fixture
def streaming_client(mock_http_client, make_stream_response):
    """Mock HTTP client whose stream() yields a response of a given type."""

    def _make(content_type: str | None, chunks: list[bytes] | None = None):
        response = make_stream_response(content_type, chunks)
        mock_http_client.stream.return_value.__enter__.return_value = response
        return mock_http_client

    return _make


class TestExtensionForContentType:
    """Tests for extension_for_content_type()."""

    @pytest.mark.parametrize(
        "content_type,extension",
        [
            ("image/jpeg", "jpg"),
            ("image/png", "png"),
            ("image/gif", "gif"),
            ("image/bmp", "bmp"),
            ("image/webp", "webp"),
            ("image/svg+xml", "svg"),
            ("image/tiff", "tiff"),
        ],
    )
    def test_known_types(self, content_type, extension):
        """Known image types map to their extension."""
        assert extension_for_content_type(content_type) == extension

    def test_parameters_and_case_are_ignored(self):
        """Media type parameters and case do not affect the mapping."""
        assert extension_for_content_type("Image/PNG; charset=binary") == "png"

    def test_unknown_types(self):
        """Unknown or missing types map to an empty string."""
        assert extension_for_content_type("text/html") == ""
        assert extension_for_content_type("image/heic") == ""
        assert extension_for_content_type("") == ""
        assert extension_for_content_type(None) == ""


class TestExtensionForUrl:
    """Tests for extension_for_url()."""

    def test_path_extension(self):
        """The extension comes from the URL path, dot included."""
        assert extension_for_url("https://example.com/static/icon.png") == ".png"

    def test_query_is_ignored(self):
        """Query strings do not contribute to the extension."""
        assert extension_for_url("https://example.com/icon.svg?v=3") == ".svg"

    def test_defaults_to_ico(self):
        """URLs without a path extension default to .ico."""
        assert extension_for_url("https://example.com/icon") == ".ico"
        assert extension_for_url("https://example.com") == ".ico"


class TestAssetDownloaderInit:
    """Tests for AssetDownloader initialization."""

    def test_init_without_client(self):
        """AssetDownloader can be created without an HTTP client."""
        downloader = AssetDownloader()

        assert downloader._client is None
        assert downloader._owns_client is True

    def test_init_with_client(self, mock_http_client):
        """AssetDownloader accepts an injected HTTP client."""
        downloader = AssetDownloader(http_client=mock_http_client)

        assert downloader._client is mock_http_client
        assert downloader._owns_client is False

    def test_internal_client_uses_timeout(self):
        """The internally created client uses the configured timeout."""
        with AssetDownloader(timeout=7.5) as downloader:
            client = downloader._get_client()
            assert client.timeout.read == 7.5

        assert downloader._client is None

    def test_context_manager_does_not_close_injected_client(self, mock_http_client):
        """Context manager does not close injected client."""
        with AssetDownloader(http_client=mock_http_client):
            pass

        mock_http_client.close.assert_not_called()


class TestDownload:
    """Tests for AssetDownloader.download()."""

    def test_bmp_content_type(self, tmp_path, streaming_client):
        """An image/bmp response is saved with a bmp extension."""
        client = streaming_client("image/bmp", [b"BM", b"pixels"])
        downloader = AssetDownloader(http_client=client)

        extension = downloader.download("https://cdn.example.com/cover", tmp_path / "abc")

        assert extension == "bmp"
        assert (tmp_path / "abc.bmp").read_bytes() == b"BMpixels"
        client.stream.assert_called_once_with("GET", "https://cdn.example.com/cover")

    def test_extension_follows_content_type_not_url(self, tmp_path, streaming_client):
        """The URL's own extension is ignored for cover images."""
        client = streaming_client("image/webp")
        downloader = AssetDownloader(http_client=client)

        extension = downloader.download("https://cdn.example.com/cover.jpg", tmp_path / "abc")

        assert extension == "webp"
        assert (tmp_path / "abc.webp").exists()
        assert not (tmp_path / "abc.jpg").exists()

    def test_unrecognized_content_type_writes_nothing(self, tmp_path, streaming_client, caplog):
        """A text/html response is not saved and returns an empty extension."""
        client = streaming_client("text/html")
        downloader = AssetDownloader(http_client=client)

        with caplog.at_level(logging.ERROR):
            extension = downloader.download("https://cdn.example.com/cover", tmp_path / "abc")

        assert extension == ""
        assert list(tmp_path.iterdir()) == []
        assert "Unable to determine the file extension" in caplog.text

    def test_missing_content_type_writes_nothing(self, tmp_path, streaming_client):
        """A response without a content type is not saved."""
        client = streaming_client(None)
        downloader = AssetDownloader(http_client=client)

        assert downloader.download("https://cdn.example.com/cover", tmp_path / "abc") == ""
        assert list(tmp_path.iterdir()) == []

    def test_creates_destination_directory(self, tmp_path, streaming_client):
        """Missing parent directories are created."""
        client = streaming_client("image/png")
        downloader = AssetDownloader(http_client=client)
        destination = tmp_path / "news" / "covers" / "abc"

        downloader.download("https://cdn.example.com/cover.png", destination)

        assert (tmp_path / "news" / "covers" / "abc.png").exists()

    def test_http_error_returns_empty(self, tmp_path, streaming_client):
        """HTTP errors are logged and return an empty extension."""
        client = streaming_client("image/png")
        response = client.stream.return_value.__enter__.return_value
        error_response = MagicMock()
        error_response.status_code = 403
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Forbidden", request=MagicMock(), response=error_response
        )
        downloader = AssetDownloader(http_client=client)

        assert downloader.download("https://cdn.example.com/cover", tmp_path / "abc") == ""
        assert list(tmp_path.iterdir()) == []

    def test_request_error_returns_empty(self, tmp_path, mock_http_client):
        """Network errors are logged and return an empty extension."""
        mock_http_client.stream.side_effect = httpx.ConnectError("Connection refused")
        downloader = AssetDownloader(http_client=mock_http_client)

        assert downloader.download("https://cdn.example.com/cover", tmp_path / "abc") == ""

    def test_invalid_url_returns_empty(self, tmp_path, mock_http_client):
        """Malformed URLs return an empty extension."""
        mock_http_client.stream.side_effect = httpx.InvalidURL("Invalid port")
        downloader = AssetDownloader(http_client=mock_http_client)

        assert downloader.download("https://cdn.example.com:x/", tmp_path / "abc") == ""

    def test_interrupted_stream_leaves_no_file(self, tmp_path, streaming_client, caplog):
        """A stream that fails midway leaves neither the image nor a partial file."""

        def interrupted_chunks():
            yield b"half"
            raise httpx.ReadError("Connection reset")

        client = streaming_client("image/jpeg")
        response = client.stream.return_value.__enter__.return_value
        response.iter_bytes.return_value = interrupted_chunks()
        downloader = AssetDownloader(http_client=client)

        with caplog.at_level(logging.WARNING):
            extension = downloader.download("https://cdn.example.com/cover", tmp_path / "abc")

        assert extension == ""
        assert not (tmp_path / "abc.jpg").exists()
        assert list(tmp_path.iterdir()) == []
        assert "Failed to download image" in caplog.text

    def test_completed_stream_leaves_no_partial_file(self, tmp_path, streaming_client):
        """Only the final image remains after a successful download."""
        client = streaming_client("image/png", [b"png-bytes"])
        downloader = AssetDownloader(http_client=client)

        downloader.download("https://cdn.example.com/cover", tmp_path / "abc")

        assert [p.name for p in tmp_path.iterdir()] == ["abc.png"]

    def test_unwritable_destination_returns_empty(self, tmp_path, streaming_client, caplog):
        """Filesystem errors are logged and return an empty extension."""
        client = streaming_client("image/png")
        downloader = AssetDownloader(http_client=client)
        blocker = tmp_path / "covers"
        blocker.write_text("not a directory")

        with caplog.at_level(logging.ERROR):
            extension = downloader.download("https://cdn.example.com/cover", blocker / "abc")

        assert extension == ""
        assert "Error saving image" in caplog.text


class TestDownloadFavicon:
    """Tests for AssetDownloader.download_favicon()."""

    def test_png_favicon_ignores_content_type(self, tmp_path, mock_http_client):
        """A .png favicon URL yields <hostname>.png whatever the content type."""
        response = MagicMock()
        response.headers = {"content-type": "image/x-icon"}
        response.content = b"icon-bytes"
        mock_http_client.get.return_value = response
        downloader = AssetDownloader(http_client=mock_http_client)

        filename = downloader.download_favicon(
            "https://static.example.com/assets/icon.png", tmp_path
        )

        assert filename == "static.example.com.png"
        assert (tmp_path / "static.example.com.png").read_bytes() == b"icon-bytes"

    def test_favicon_without_extension_defaults_to_ico(self, tmp_path, mock_http_client):
        """Favicon URLs without an extension are saved as .ico."""
        response = MagicMock()
        response.content = b"icon-bytes"
        mock_http_client.get.return_value = response
        downloader = AssetDownloader(http_client=mock_http_client)

        filename = downloader.download_favicon("https://example.com/icon", tmp_path)

        assert filename == "example.com.ico"
        assert (tmp_path / "example.com.ico").exists()

    def test_creates_icons_directory(self, tmp_path, mock_http_client):
        """The icons directory is created if missing."""
        response = MagicMock()
        response.content = b"icon-bytes"
        mock_http_client.get.return_value = response
        downloader = AssetDownloader(http_client=mock_http_client)
        icons_dir = tmp_path / "news" / "icons"

        downloader.download_favicon("https://example.com/favicon.ico", icons_dir)

        assert (icons_dir / "example.com.ico").exists()

    def test_http_error_returns_none(self, tmp_path, mock_http_client, caplog):
        """HTTP errors are logged and return None."""
        error_response = MagicMock()
        error_response.status_code = 404
        response = MagicMock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Not Found", request=MagicMock(), response=error_response
        )
        mock_http_client.get.return_value = response
        downloader = AssetDownloader(http_client=mock_http_client)

        with caplog.at_level(logging.ERROR):
            filename = downloader.download_favicon("https://example.com/favicon.ico", tmp_path)

        assert filename is None
        assert list(tmp_path.iterdir()) == []
        assert "HTTP 404" in caplog.text

    def test_request_error_returns_none(self, tmp_path, mock_http_client):
        """Network errors return None."""
        mock_http_client.get.side_effect = httpx.ConnectError("Connection refused")
        downloader = AssetDownloader(http_client=mock_http_client)

        assert downloader.download_favicon("https://example.com/favicon.ico", tmp_path) is None

    def test_url_without_host_returns_none(self, tmp_path, mock_http_client):
        """URLs without a host are rejected before any request."""
        downloader = AssetDownloader(http_client=mock_http_client)

        assert downloader.download_favicon("/favicon.ico", tmp_path) is None
        mock_http_client.get.assert_not_called()

    def test_unwritable_icons_directory_returns_none(self, tmp_path, mock_http_client, caplog):
        """Filesystem errors while saving are logged and return None."""
        response = MagicMock()
        response.content = b"icon-bytes"
        mock_http_client.get.return_value = response
        downloader = AssetDownloader(http_client=mock_http_client)
        icons_dir = tmp_path / "icons"
        icons_dir.write_text("not a directory")

        with caplog.at_level(logging.ERROR):
            filename = downloader.download_favicon("https://example.com/favicon.ico", icons_dir)

        assert filename is None
        assert "Error saving the favicon" in caplog.text
