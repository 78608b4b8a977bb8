"""
Glossary storage and terminology matching for historical translation.

Parses glossary documents into term mappings, keeps named glossaries in
memory, and finds glossary terminology in submitted text.
"""

from .models import (
    Confidence,
    Glossary,
    GlossaryEntry,
    GlossaryStats,
    TerminologyMatch,
    TranslationResult,
    TranslationStats,
)
from .parser import parse_glossary_line, parse_glossary_text
from .store import GlossaryStore
from .matcher import ProgressSink, match_terminology, search_terminology
from .loader import load_glossary_yaml

__all__ = [
    "Confidence",
    "Glossary",
    "GlossaryEntry",
    "GlossaryStats",
    "TerminologyMatch",
    "TranslationResult",
    "TranslationStats",
    "parse_glossary_line",
    "parse_glossary_text",
    "GlossaryStore",
    "ProgressSink",
    "match_terminology",
    "search_terminology",
    "load_glossary_yaml",
]
