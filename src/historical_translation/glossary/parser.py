"""
Line-oriented glossary parser.

Turns raw text extracted from a glossary document into ``GlossaryEntry``
objects. Lines look like ``term: translation`` or ``term - translation``;
anything else (headers, blank lines, prose) is skipped.
"""

import logging
import re

from .models import DEFAULT_PERIOD, DEFAULT_SOURCE, GlossaryEntry

logger = logging.getLogger("historical-translation.glossary.parser")

# Term is everything before the first ':' or '-'
_LINE_PATTERN = re.compile(r"^(?P<term>[^:-]*)[:-](?P<translation>.*)$")


def parse_glossary_line(line: str, period: str = DEFAULT_PERIOD) -> GlossaryEntry | None:
    """Parse a single glossary line.

    Args:
        line: One line of glossary text
        period: Period tag stamped on the entry

    Returns:
        GlossaryEntry, or None if the line is not a glossary line
    """
    match = _LINE_PATTERN.match(line)
    if not match:
        return None

    term = match.group("term").strip()
    if not term:
        return None

    return GlossaryEntry(
        original=term,
        translation=match.group("translation").strip(),
        context="",
        source=DEFAULT_SOURCE,
        period=period,
    )


def parse_glossary_text(text: str, period: str = DEFAULT_PERIOD) -> list[GlossaryEntry]:
    """Parse a block of glossary text into entries, preserving line order.

    Only the first separator on a line splits it, so translations may
    themselves contain ':' or '-'. Lines without a separator or with an
    empty term are skipped silently.

    Args:
        text: Raw extracted text
        period: Period tag stamped on every entry

    Returns:
        List of parsed entries

    Example:
        >>> [e.original for e in parse_glossary_text("thee: you\\nnot a line")]
        ['thee']
    """
    entries: list[GlossaryEntry] = []
    skipped = 0

    for line in text.splitlines():
        entry = parse_glossary_line(line, period=period)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    logger.debug("Parsed %d glossary entries (%d lines skipped)", len(entries), skipped)
    return entries
