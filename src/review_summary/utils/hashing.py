"""Content fingerprints used as summary cache keys."""

import hashlib


def hash_text(text: str) -> str:
    """Return the SHA-256 hex digest of ``text``.

    Args:
        text: Arbitrary input text (encoded as UTF-8)

    Returns:
        64-character lowercase hexadecimal digest

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"hash_text expects str, got {type(text).__name__}")
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
