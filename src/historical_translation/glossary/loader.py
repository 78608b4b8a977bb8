"""
YAML glossary files for preloading glossaries at startup.
"""

from pathlib import Path

import yaml

from .models import DEFAULT_PERIOD, GlossaryEntry


def load_glossary_yaml(path: Path, period: str = DEFAULT_PERIOD) -> tuple[str, list[GlossaryEntry]]:
    """Load a glossary from a YAML file.

    Expected YAML format:
        glossary: kjv-1611
        entries:
          - original: thee
            translation: you
            context: pronoun
          - original: LORD
            translation: Señor
            context: theological

    Args:
        path: Path to YAML file
        period: Period applied to entries that do not set one

    Returns:
        Tuple of (glossary name, entries). The name defaults to the file stem.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        ValueError: If the entries key is missing or an entry is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "entries" not in data:
        raise ValueError("YAML glossary must contain an 'entries' key")

    raw_entries = data["entries"] or []
    if not isinstance(raw_entries, list):
        raise ValueError("'entries' must be a list")

    name = str(data.get("glossary") or Path(path).stem)
    entries: list[GlossaryEntry] = []
    for index, entry_data in enumerate(raw_entries):
        if not isinstance(entry_data, dict):
            raise ValueError(f"entry {index} must be a mapping")
        entries.append(GlossaryEntry(**{"period": period, **entry_data}))
    return name, entries
