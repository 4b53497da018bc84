"""Content hashing for stable, filesystem-safe identifiers."""

import hashlib

HASH_LENGTH = 16


def hash_url(url: str) -> str:
    """Derive a short identifier from a URL.

    The identifier names the cover image and the generated news file, so the
    same link always maps to the same files across runs.

    Args:
        url: URL to hash

    Returns:
        First 16 lowercase hex characters of the SHA-256 digest of the URL
    """
    return hashlib.sha256(url.encode("utf-8")).hexdigest()[:HASH_LENGTH]
