"""Order- and case-independent hash of a JD set, used by callers as a cache key."""

import hashlib

SEPARATOR = "||"


def fingerprint(jd_texts) -> str:
    """SHA-256 hex digest of the trimmed, lowercased, sorted JD texts."""
    normalized = sorted(str(t).strip().lower() for t in jd_texts)
    return hashlib.sha256(SEPARATOR.join(normalized).encode("utf-8")).hexdigest()
