"""
Historical Translation MCP Server - glossary management and terminology lookup
for translators of early-modern texts, built with FastMCP 2.10+.
"""

from .main import create_server
from .session import TranslationSession
from .glossary import GlossaryEntry, GlossaryStore, TerminologyMatch, TranslationResult
from .normalizer import normalize_historical_text

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("historical-translation-mcp")
except Exception:
    __version__ = "1.0.0"  # Fallback if metadata unavailable
__all__ = [
    "create_server",
    "TranslationSession",
    "GlossaryEntry",
    "GlossaryStore",
    "TerminologyMatch",
    "TranslationResult",
    "normalize_historical_text",
]
