"""
Unit tests for YAML glossary files.
"""

from pathlib import Path

import pytest
import yaml

from historical_translation.glossary import load_glossary_yaml


def write_yaml(path: Path, data: object) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path


class TestLoadGlossaryYaml:
    """Test load_glossary_yaml."""

    def test_named_glossary(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "file.yaml", {
            "glossary": "kjv-1611",
            "entries": [
                {"original": "LORD", "translation": "Señor", "context": "theological"},
                {"original": "thee", "translation": "you", "period": "16th century"},
            ],
        })

        name, entries = load_glossary_yaml(path)

        assert name == "kjv-1611"
        assert entries[0].translation == "Señor"
        assert entries[0].period == "17th century"
        assert entries[1].period == "16th century"
        assert entries[1].source == "imported"

    def test_name_defaults_to_stem(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "geneva.yaml", {"entries": [{"original": "thou"}]})
        name, entries = load_glossary_yaml(path)
        assert name == "geneva"
        assert entries[0].translation == ""

    def test_missing_entries_key(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "bad.yaml", {"terms": []})
        with pytest.raises(ValueError):
            load_glossary_yaml(path)

    def test_blank_original_rejected(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "bad.yaml", {"entries": [{"original": " "}]})
        with pytest.raises(ValueError):
            load_glossary_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_glossary_yaml(tmp_path / "nope.yaml")

    def test_entries_must_be_mappings(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "words.yaml", {"entries": ["thee", "thou"]})
        with pytest.raises(ValueError, match="entry 0 must be a mapping"):
            load_glossary_yaml(path)

    def test_entries_must_be_list(self, tmp_path: Path) -> None:
        path = write_yaml(tmp_path / "dict.yaml", {"entries": {"thee": "you"}})
        with pytest.raises(ValueError, match="must be a list"):
            load_glossary_yaml(path)
