import hashlib

from skillgap.services.fingerprint import fingerprint


def test_fingerprint_is_sha256_hex():
    digest = fingerprint(["Python developer"])
    assert len(digest) == 64
    assert digest == hashlib.sha256(b"python developer").hexdigest()


def test_fingerprint_order_independent():
    assert fingerprint(["A", "B"]) == fingerprint(["B", "A"])


def test_fingerprint_case_and_whitespace_independent():
    assert fingerprint(["A", "B"]) == fingerprint(["b", "  a "])


def test_fingerprint_joins_with_separator():
    expected = hashlib.sha256(b"alpha||beta").hexdigest()
    assert fingerprint(["Beta", "Alpha"]) == expected


def test_fingerprint_distinguishes_sets():
    assert fingerprint(["a", "b"]) != fingerprint(["a", "c"])
    assert fingerprint(["a", "a"]) != fingerprint(["a"])


def test_fingerprint_deterministic():
    jds = ["Need Kubernetes", "Need Docker"]
    assert fingerprint(jds) == fingerprint(list(jds))
