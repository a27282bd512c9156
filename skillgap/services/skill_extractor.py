"""Lexical skill extraction against the canonical vocabulary.

Text is tokenized, then every 1-, 2- and 3-word window is normalized and
looked up in the vocabulary. Overlapping windows are checked independently,
so "spring boot" yields "spring" from both the bigram alias and the unigram.
"""

import re
from typing import Iterator

from skillgap.services.vocabulary import DEFAULT_VOCABULARY, SkillVocabulary

# Characters that may appear inside a skill name: letters, digits, whitespace, # + . -
_DISALLOWED_RE = re.compile(r"[^a-z0-9#+.\s-]")
_WHITESPACE_RE = re.compile(r"\s+")

MAX_NGRAM = 3


def _lookup(clean: str, vocabulary: SkillVocabulary) -> str | None:
    candidate = vocabulary.resolve_alias(clean)
    return candidate if candidate in vocabulary else None


def normalize_token(phrase, vocabulary: SkillVocabulary | None = None) -> str | None:
    """Convert a raw phrase to its canonical skill name, or None if unrecognized.

    lowercase -> trim -> strip punctuation except ``# + . -`` -> alias table
    -> vocabulary membership. Never raises.
    """
    if not phrase or not isinstance(phrase, str):
        return None
    if vocabulary is None:
        vocabulary = DEFAULT_VOCABULARY

    clean = _DISALLOWED_RE.sub("", phrase.lower().strip()).strip()
    if not clean:
        return None

    skill = _lookup(clean, vocabulary)
    if skill is None and clean.endswith("."):
        # sentence-final period, e.g. "...with React."
        trimmed = clean.rstrip(".").strip()
        if trimmed:
            skill = _lookup(trimmed, vocabulary)
    return skill


def tokenize(text: str) -> list[str]:
    """Lowercase, blank out disallowed characters and split on whitespace runs."""
    return [w for w in _WHITESPACE_RE.split(_DISALLOWED_RE.sub(" ", text.lower())) if w]


def _scan(words: list[str], vocabulary: SkillVocabulary) -> Iterator[str]:
    for i in range(len(words)):
        for n in range(1, min(MAX_NGRAM, len(words) - i) + 1):
            skill = normalize_token(" ".join(words[i:i + n]), vocabulary)
            if skill:
                yield skill


def extract_skills_ordered(text, vocabulary: SkillVocabulary | None = None) -> list[str]:
    """Return the distinct skills in ``text`` in order of first discovery.

    Non-string or empty input yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []
    if vocabulary is None:
        vocabulary = DEFAULT_VOCABULARY
    return list(dict.fromkeys(_scan(tokenize(text), vocabulary)))


def extract_skills(text, vocabulary: SkillVocabulary | None = None) -> set[str]:
    """Return the set of canonical skills mentioned in ``text``."""
    return set(extract_skills_ordered(text, vocabulary))
