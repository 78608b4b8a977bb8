"""
In-memory registry of named glossaries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import RLock

from .models import Glossary, GlossaryEntry, GlossaryStats

logger = logging.getLogger("historical-translation.glossary.store")


class GlossaryStore:
    """Thread-safe mapping of glossary name to Glossary.

    Loading a name that already exists replaces its entries wholesale;
    nothing is ever merged. The replacement Glossary is fully built before
    it is swapped into the map, so readers see either the old or the new
    entry list. Readers copy what they need under the lock and iterate
    outside it.

    Example:
        >>> store = GlossaryStore()
        >>> _ = store.load("kjv", [GlossaryEntry(original="thee", translation="you")])
        >>> store.list()
        [('kjv', 1)]
    """

    def __init__(self) -> None:
        self._glossaries: dict[str, Glossary] = {}
        self._lock = RLock()

    def load(self, name: str, entries: Iterable[GlossaryEntry]) -> Glossary:
        """Create or replace the named glossary.

        Args:
            name: Glossary name (any string, including empty)
            entries: Entries in match-precedence order

        Returns:
            The newly stored Glossary
        """
        glossary = Glossary(name=name, entries=list(entries))

        with self._lock:
            replaced = name in self._glossaries
            self._glossaries[name] = glossary

        logger.info(
            "%s glossary '%s' with %d entries",
            "Replaced" if replaced else "Loaded",
            name,
            len(glossary.entries),
        )
        return glossary

    def get(self, name: str) -> Glossary | None:
        """Look up a glossary by name."""
        with self._lock:
            return self._glossaries.get(name)

    def list(self) -> list[tuple[str, int]]:
        """Return (name, entry count) pairs in insertion order."""
        with self._lock:
            return [(name, len(g.entries)) for name, g in self._glossaries.items()]

    def items(self) -> list[tuple[str, Glossary]]:
        """Snapshot of (name, Glossary) pairs in insertion order."""
        with self._lock:
            return list(self._glossaries.items())

    def size(self) -> int:
        """Number of distinct glossary names held."""
        with self._lock:
            return len(self._glossaries)

    def stats(self) -> list[GlossaryStats]:
        """Reporting view with entry counts and last load time."""
        return [
            GlossaryStats(
                name=name,
                entry_count=len(glossary.entries),
                last_modified=glossary.loaded_at.isoformat(),
            )
            for name, glossary in self.items()
        ]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._glossaries
