"""
Terminology matching and search over a GlossaryStore.

Both operations use case-insensitive substring matching, so a short term
such as "art" also matches inside "heart".
"""

import logging
from collections.abc import Callable, Sequence

from .models import TerminologyMatch
from .store import GlossaryStore

logger = logging.getLogger("historical-translation.glossary.matcher")

ProgressSink = Callable[[float, float], None]

PROGRESS_TOTAL = 100.0
PROGRESS_BASELINE = 10.0
PROGRESS_SPAN = 80.0


def _emit(progress: ProgressSink | None, current: float, total: float) -> None:
    """Send a progress update; a failing sink never affects the caller."""
    if progress is None:
        return
    try:
        progress(current, total)
    except Exception as exc:
        logger.warning("Progress sink failed at %.1f/%.1f: %s", current, total, exc)


def match_terminology(
    store: GlossaryStore,
    text: str,
    glossary_names: Sequence[str],
    progress: ProgressSink | None = None,
) -> list[TerminologyMatch]:
    """Find glossary terms that occur in ``text``.

    Glossaries are visited in the order given and entries in their stored
    order. Each entry is reported at most once per glossary no matter how
    often it occurs. Unknown glossary names are skipped.

    Args:
        store: Glossary store to consult
        text: Input text
        glossary_names: Names of the glossaries to use
        progress: Optional sink receiving (current, total) updates

    Returns:
        Matches tagged with the glossary they came from
    """
    matches: list[TerminologyMatch] = []
    if not glossary_names:
        return matches

    haystack = text.lower()
    total_glossaries = len(glossary_names)
    _emit(progress, PROGRESS_BASELINE, PROGRESS_TOTAL)

    for index, name in enumerate(glossary_names, start=1):
        glossary = store.get(name)
        if glossary is None:
            logger.debug("Skipping unknown glossary '%s'", name)
        else:
            for entry in glossary.entries:
                if entry.original.lower() in haystack:
                    matches.append(TerminologyMatch.from_entry(entry, name))

        _emit(
            progress,
            PROGRESS_BASELINE + index * PROGRESS_SPAN / total_glossaries,
            PROGRESS_TOTAL,
        )

    return matches


def search_terminology(
    store: GlossaryStore,
    term: str,
    context_filter: str | None = None,
) -> list[TerminologyMatch]:
    """Search every loaded glossary for a term.

    An entry qualifies when ``term`` occurs in its original or its
    translation. A non-empty ``context_filter`` must additionally occur in
    the entry's context, so entries without a context never pass it.

    Args:
        store: Glossary store to scan
        term: Query term
        context_filter: Optional context substring

    Returns:
        Matches tagged with the glossary they came from (possibly empty)
    """
    needle = term.lower()
    context_needle = context_filter.lower() if context_filter else None
    matches: list[TerminologyMatch] = []

    for name, glossary in store.items():
        for entry in glossary.entries:
            if needle not in entry.original.lower() and needle not in entry.translation.lower():
                continue
            if context_needle is not None and context_needle not in entry.context.lower():
                continue
            matches.append(TerminologyMatch.from_entry(entry, name))

    return matches
