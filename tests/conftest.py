"""
Pytest configuration and fixtures for historical-translation tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing historical_translation
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from historical_translation.glossary import GlossaryEntry, GlossaryStore  # noqa: E402
from historical_translation.session import TranslationSession  # noqa: E402


# Configure anyio to only use asyncio (not trio)
@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_glossary_text() -> str:
    """Three glossary lines and one line of prose."""
    return "thee: you\nthou - you\nnot a glossary line\nverily: truly"


@pytest.fixture
def sample_entries() -> list[GlossaryEntry]:
    """Entries covering pronouns and theological vocabulary."""
    return [
        GlossaryEntry(original="LORD", translation="Señor", context="theological"),
        GlossaryEntry(original="thee", translation="you", context="pronoun"),
        GlossaryEntry(original="shepherd", translation="pastor", context=""),
    ]


@pytest.fixture
def store(sample_entries: list[GlossaryEntry]) -> GlossaryStore:
    """Store holding a single glossary 'kjv'."""
    s = GlossaryStore()
    s.load("kjv", sample_entries)
    return s


@pytest.fixture
def session() -> TranslationSession:
    """Fresh session with no glossaries loaded."""
    return TranslationSession()
