"""
Data models for glossaries and terminology results.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator


DEFAULT_PERIOD = "17th century"
DEFAULT_SOURCE = "imported"


class GlossaryEntry(BaseModel):
    """A single historical-term-to-modern-term mapping.

    Attributes:
        original: Source-language term, matched case-insensitively
        translation: Target-language rendering (empty when unknown)
        context: Free-text domain tag (e.g. "theological"); empty means unset
        source: Provenance label (e.g. "imported")
        period: Historical period tag
    """
    original: str = Field(..., description="Source-language term")
    translation: str = Field(default="", description="Target-language rendering")
    context: str = Field(default="", description="Domain tag")
    source: str = Field(default=DEFAULT_SOURCE, description="Provenance label")
    period: str = Field(default=DEFAULT_PERIOD, description="Historical period tag")

    @field_validator("original")
    @classmethod
    def original_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("original term must not be empty")
        return value


class Glossary(BaseModel):
    """A named, ordered sequence of glossary entries."""
    name: str
    entries: list[GlossaryEntry] = Field(default_factory=list)
    loaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def __len__(self) -> int:
        return len(self.entries)


class TerminologyMatch(BaseModel):
    """A glossary entry found relevant to a text or query.

    ``source`` is the name of the glossary the entry came from, not the
    entry's own provenance label.
    """
    term: str
    translation: str
    context: str
    source: str

    @classmethod
    def from_entry(cls, entry: GlossaryEntry, glossary_name: str) -> "TerminologyMatch":
        return cls(
            term=entry.original,
            translation=entry.translation,
            context=entry.context,
            source=glossary_name,
        )


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TranslationResult(BaseModel):
    """Outcome of a single translate request."""
    original_text: str = Field(..., serialization_alias="originalText")
    translated_text: str = Field(..., serialization_alias="translatedText")
    confidence: Confidence = Confidence.LOW
    notes: list[str] = Field(default_factory=list)
    terminology: list[TerminologyMatch] = Field(default_factory=list)


class GlossaryStats(BaseModel):
    """Reporting view of one loaded glossary."""
    name: str
    entry_count: int = Field(..., serialization_alias="entryCount")
    last_modified: str = Field(..., serialization_alias="lastModified")


class TranslationStats(BaseModel):
    """Process-wide usage counters."""
    total_translations: int = Field(default=0, serialization_alias="totalTranslations")
    glossaries_loaded: int = Field(default=0, serialization_alias="glossariesLoaded")
    server_uptime: int = Field(default=0, serialization_alias="serverUptime")
