"""Network clients for fetching remote documents."""

from .client import Client
from .exceptions import (
    ClientError,
    ConnectionError,
    FetchError,
    InvalidURLError,
    NotFoundError,
    ParseError,
)
from .page_client import PageClient

__all__ = [
    "Client",
    "PageClient",
    "ClientError",
    "ConnectionError",
    "FetchError",
    "InvalidURLError",
    "NotFoundError",
    "ParseError",
]
