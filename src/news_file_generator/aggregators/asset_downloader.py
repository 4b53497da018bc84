"""Asset downloader for cover images and favicons."""

import logging
import posixpath
from pathlib import Path
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/tiff": "tiff",
}

DEFAULT_FAVICON_EXTENSION = ".ico"


def extension_for_content_type(content_type: str | None) -> str:
    """Map a response content type to a file extension.

    Media type parameters (e.g. ``; charset=binary``) are ignored.

    Args:
        content_type: Value of the Content-Type header

    Returns:
        Extension without a dot, or "" if the type is not a known image type
    """
    if not content_type:
        return ""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return CONTENT_TYPE_EXTENSIONS.get(media_type, "")


def extension_for_url(url: str) -> str:
    """Infer a favicon extension from the URL path.

    Args:
        url: Absolute favicon URL

    Returns:
        Extension including the dot, ".ico" when the path has none
    """
    extension = posixpath.splitext(urlparse(url).path)[1]
    return extension or DEFAULT_FAVICON_EXTENSION


class AssetDownloader:
    """Downloads cover images and favicons for news appearances.

    Cover images are named by the caller and take their extension from the
    response content type. Favicons are named after the host serving them and
    take their extension from the URL path.

    Download failures are logged and reported through the return value.

    Example:
        with AssetDownloader() as downloader:
            ext = downloader.download(cover_url, covers_dir / "0123456789abcdef")
    """

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize the asset downloader.

        Args:
            http_client: Optional HTTP client for downloading assets.
                         If not provided, one will be created internally.
            timeout: Request timeout in seconds for an internally created client
        """
        self._client = http_client
        self._owns_client = http_client is None
        self.timeout = timeout

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self._client

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AssetDownloader":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager."""
        self.close()

    def download(self, source_url: str, destination: Path) -> str:
        """Stream an image to disk, naming it after its content type.

        Nothing is written when the content type is not a known image type.
        The stream goes to a ``.part`` sibling that is moved into place once
        complete, so a failed download leaves no file behind.

        Args:
            source_url: URL of the image
            destination: Target path without extension

        Returns:
            The extension written (without dot), or "" if nothing was saved
        """
        client = self._get_client()
        partial_path = None

        try:
            with client.stream("GET", source_url) as response:
                response.raise_for_status()

                content_type = response.headers.get("content-type")
                extension = extension_for_content_type(content_type)
                if not extension:
                    logger.error(
                        f"Unable to determine the file extension for {source_url} "
                        f"(content type: {content_type})"
                    )
                    return ""

                file_path = Path(f"{destination}.{extension}")
                file_path.parent.mkdir(parents=True, exist_ok=True)
                partial_path = file_path.with_name(f"{file_path.name}.part")
                with open(partial_path, "wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)

            partial_path.replace(file_path)

        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Failed to download image {source_url}: HTTP {e.response.status_code}"
            )
            return ""
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to download image {source_url}: {e}")
            self._remove_partial(partial_path)
            return ""
        except OSError as e:
            logger.error(f"Error saving image {source_url}: {e}")
            self._remove_partial(partial_path)
            return ""

        logger.info(f"Image saved to {file_path}")
        return extension

    def download_favicon(self, favicon_url: str, icons_dir: Path) -> str | None:
        """Download a favicon as ``<hostname><ext>`` into a directory.

        Args:
            favicon_url: Absolute URL of the favicon
            icons_dir: Directory to store the favicon in

        Returns:
            The saved file name, or None on failure
        """
        try:
            hostname = urlparse(favicon_url).hostname
        except ValueError as e:
            logger.error(f"Error saving the favicon {favicon_url}: {e}")
            return None
        if not hostname:
            logger.error(f"Error saving the favicon: no host in {favicon_url!r}")
            return None

        filename = f"{hostname}{extension_for_url(favicon_url)}"
        output_path = icons_dir / filename

        try:
            self._download_file(favicon_url, output_path)
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Error saving the favicon {favicon_url}: HTTP {e.response.status_code}"
            )
            return None
        except (httpx.RequestError, httpx.InvalidURL, OSError) as e:
            logger.error(f"Error saving the favicon {favicon_url}: {e}")
            return None

        logger.info(f"Favicon saved to {output_path}")
        return filename

    def _remove_partial(self, partial_path: Path | None) -> None:
        """Delete an incomplete download, if one was started."""
        if partial_path is None:
            return
        try:
            partial_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove incomplete download {partial_path}: {e}")

    def _download_file(self, url: str, destination: Path) -> None:
        """Download a file from URL to local path.

        Args:
            url: URL to download from
            destination: Local file path to save to

        Raises:
            httpx.HTTPStatusError: If the request returns an error status
            httpx.RequestError: If there's a network error
            OSError: If the file cannot be written
        """
        client = self._get_client()
        response = client.get(url)
        response.raise_for_status()

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(response.content)
