"""Shared test configuration and fixtures."""

import pytest

from skillgap.api.router import limiter
from skillgap.services.vocabulary import SkillVocabulary


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def tiny_vocabulary():
    """A custom vocabulary unrelated to the default tables."""
    return SkillVocabulary.from_tables(
        {"pets": ("cat", "dog"), "tools": ("leash", "litter box")},
        {"kitty": "cat", "puppy": "dog"},
    )
