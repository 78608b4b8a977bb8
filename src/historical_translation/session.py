"""
Translation session: the glossary store plus process-wide counters.

One session is created per server and handed to every tool, so state has
a single explicit owner instead of living in module globals.
"""

import logging
import time
from collections.abc import Sequence
from pathlib import Path
from threading import Lock

from .glossary import (
    Confidence,
    Glossary,
    GlossaryStats,
    GlossaryStore,
    ProgressSink,
    TerminologyMatch,
    TranslationResult,
    TranslationStats,
    load_glossary_yaml,
    match_terminology,
    parse_glossary_text,
    search_terminology,
)
from .glossary.models import DEFAULT_PERIOD

logger = logging.getLogger("historical-translation.session")

PASS_THROUGH_NOTE = "Basic pass-through translation - requires human review"


class TranslationSession:
    """Owns the glossary store, the translation counter and the uptime clock.

    Translation itself is a pass-through: the translated text equals the
    input, confidence is always low, and the value of a request lies in the
    glossary terminology found in the text.

    Attributes:
        store: Glossaries loaded in this session
        default_period: Period tag stamped on parsed entries
    """

    def __init__(self, store: GlossaryStore | None = None, default_period: str = DEFAULT_PERIOD) -> None:
        self.store = store if store is not None else GlossaryStore()
        self.default_period = default_period
        self._translation_count = 0
        self._counter_lock = Lock()
        self._started = time.monotonic()

    # ------------------------------------------------------------------
    # Glossaries
    # ------------------------------------------------------------------

    def load_glossary_text(self, name: str, text: str) -> Glossary:
        """Parse raw glossary text and store it under ``name``."""
        entries = parse_glossary_text(text, period=self.default_period)
        return self.store.load(name, entries)

    def load_glossary_file(self, path: Path, name: str | None = None) -> Glossary:
        """Load a YAML glossary file, optionally overriding its name."""
        yaml_name, entries = load_glossary_yaml(path, period=self.default_period)
        return self.store.load(yaml_name if name is None else name, entries)

    def preload_directory(self, directory: Path) -> int:
        """Load every ``*.yaml``/``*.yml`` glossary in a directory.

        Files that fail to load are logged and skipped.

        Returns:
            Number of glossaries loaded
        """
        if not directory.is_dir():
            logger.warning("Glossary directory %s does not exist", directory)
            return 0

        loaded = 0
        for path in sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")]):
            try:
                self.load_glossary_file(path)
                loaded += 1
            except Exception as e:
                logger.error("Failed to preload glossary %s: %s", path.name, e)
        return loaded

    # ------------------------------------------------------------------
    # Translation and search
    # ------------------------------------------------------------------

    def translate(
        self,
        text: str,
        context: str | None = None,
        use_glossaries: Sequence[str] | None = None,
        progress: ProgressSink | None = None,
    ) -> TranslationResult:
        """Run a translation pass over ``text``.

        Args:
            text: Text to translate
            context: Optional historical/theological context, echoed in the notes
            use_glossaries: Glossaries whose terminology should be looked up
            progress: Optional sink for (current, total) progress updates

        Returns:
            TranslationResult with the terminology found
        """
        glossary_names = list(use_glossaries or [])
        notes = [PASS_THROUGH_NOTE]
        if context:
            notes.append(f"Requested context: {context}")

        unknown = [name for name in glossary_names if name not in self.store]
        if unknown:
            notes.append(f"Glossaries not loaded: {', '.join(unknown)}")

        terminology = match_terminology(self.store, text, glossary_names, progress=progress)

        with self._counter_lock:
            self._translation_count += 1

        return TranslationResult(
            original_text=text,
            translated_text=text,
            confidence=Confidence.LOW,
            notes=notes,
            terminology=terminology,
        )

    def search(self, term: str, context_filter: str | None = None) -> list[TerminologyMatch]:
        """Search all loaded glossaries for ``term``."""
        return search_terminology(self.store, term, context_filter)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @property
    def translation_count(self) -> int:
        with self._counter_lock:
            return self._translation_count

    def uptime_seconds(self) -> int:
        return int(time.monotonic() - self._started)

    def stats(self) -> TranslationStats:
        """Current usage counters."""
        return TranslationStats(
            total_translations=self.translation_count,
            glossaries_loaded=self.store.size(),
            server_uptime=self.uptime_seconds(),
        )

    def glossary_stats(self) -> list[GlossaryStats]:
        """Entry counts and load times for every loaded glossary."""
        return self.store.stats()
