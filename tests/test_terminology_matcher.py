"""
Unit tests for terminology matching and search.
"""

from historical_translation.glossary import (
    GlossaryEntry,
    GlossaryStore,
    TerminologyMatch,
    match_terminology,
    parse_glossary_text,
    search_terminology,
)


class TestMatchTerminology:
    """Test matching glossary terms inside a text."""

    def test_case_insensitive_match(self) -> None:
        store = GlossaryStore()
        store.load("g1", [GlossaryEntry(original="LORD", translation="Señor")])

        matches = match_terminology(store, "The LORD is my shepherd", ["g1"])

        assert matches == [TerminologyMatch(term="LORD", translation="Señor", context="", source="g1")]

    def test_lowercase_text_matches_uppercase_entry(self, store: GlossaryStore) -> None:
        matches = match_terminology(store, "the lord is my shepherd", ["kjv"])
        assert [m.term for m in matches] == ["LORD", "shepherd"]

    def test_empty_glossary_list(self, store: GlossaryStore) -> None:
        assert match_terminology(store, "The LORD is my shepherd", []) == []

    def test_unknown_glossary_skipped(self, store: GlossaryStore) -> None:
        matches = match_terminology(store, "The LORD is my shepherd", ["missing", "kjv"])
        assert [m.source for m in matches] == ["kjv", "kjv"]

    def test_entry_reported_once(self, store: GlossaryStore) -> None:
        matches = match_terminology(store, "thee and thee and thee", ["kjv"])
        assert [m.term for m in matches] == ["thee"]

    def test_source_is_glossary_name(self, store: GlossaryStore) -> None:
        match = match_terminology(store, "LORD", ["kjv"])[0]
        assert match.source == "kjv"
        assert match.context == "theological"

    def test_glossary_order_outer_entry_order_inner(self) -> None:
        store = GlossaryStore()
        store.load("a", [GlossaryEntry(original="thou"), GlossaryEntry(original="art")])
        store.load("b", [GlossaryEntry(original="thou", translation="tú")])

        matches = match_terminology(store, "thou art", ["b", "a"])

        assert [(m.source, m.term) for m in matches] == [("b", "thou"), ("a", "thou"), ("a", "art")]

    def test_duplicate_across_glossaries(self) -> None:
        store = GlossaryStore()
        store.load("one", [GlossaryEntry(original="thee", translation="you")])
        store.load("two", [GlossaryEntry(original="thee", translation="te")])

        matches = match_terminology(store, "I thank thee", ["one", "two"])

        assert [(m.source, m.translation) for m in matches] == [("one", "you"), ("two", "te")]

    def test_substring_match(self) -> None:
        store = GlossaryStore()
        store.load("g", [GlossaryEntry(original="art", translation="eres")])
        assert len(match_terminology(store, "a contrite heart", ["g"])) == 1


class TestProgress:
    """Test the progress side channel."""

    def test_progress_scale(self, store: GlossaryStore) -> None:
        updates: list[tuple[float, float]] = []
        store.load("other", [])

        match_terminology(store, "text", ["kjv", "other"], progress=lambda c, t: updates.append((c, t)))

        assert updates == [(10.0, 100.0), (50.0, 100.0), (90.0, 100.0)]

    def test_progress_counts_unknown_glossaries(self, store: GlossaryStore) -> None:
        updates: list[tuple[float, float]] = []

        match_terminology(store, "text", ["missing"], progress=lambda c, t: updates.append((c, t)))

        assert updates == [(10.0, 100.0), (90.0, 100.0)]

    def test_no_progress_without_glossaries(self, store: GlossaryStore) -> None:
        updates: list[tuple[float, float]] = []
        match_terminology(store, "text", [], progress=lambda c, t: updates.append((c, t)))
        assert updates == []

    def test_failing_sink_does_not_change_result(self, store: GlossaryStore) -> None:
        def broken(current: float, total: float) -> None:
            raise RuntimeError("client went away")

        with_sink = match_terminology(store, "The LORD is my shepherd", ["kjv"], progress=broken)
        without_sink = match_terminology(store, "The LORD is my shepherd", ["kjv"])

        assert with_sink == without_sink


class TestSearchTerminology:
    """Test searching across all glossaries."""

    def test_matches_translation(self, sample_glossary_text: str) -> None:
        store = GlossaryStore()
        store.load("kjv", parse_glossary_text(sample_glossary_text))

        matches = search_terminology(store, "you")

        assert [m.term for m in matches] == ["thee", "thou"]

    def test_matches_original_or_translation(self, sample_glossary_text: str) -> None:
        store = GlossaryStore()
        store.load("kjv", parse_glossary_text(sample_glossary_text))

        assert [m.term for m in search_terminology(store, "VERI")] == ["verily"]
        assert [m.term for m in search_terminology(store, "truly")] == ["verily"]

    def test_context_filter_excludes_empty_context(self, sample_glossary_text: str) -> None:
        store = GlossaryStore()
        store.load("kjv", parse_glossary_text(sample_glossary_text))

        assert search_terminology(store, "you", "theological") == []

    def test_context_filter_case_insensitive(self, store: GlossaryStore) -> None:
        matches = search_terminology(store, "lord", "THEO")
        assert [m.term for m in matches] == ["LORD"]

    def test_empty_context_filter_is_no_filter(self, store: GlossaryStore) -> None:
        assert len(search_terminology(store, "shepherd", "")) == 1

    def test_scans_all_glossaries(self, store: GlossaryStore) -> None:
        store.load("geneva", [GlossaryEntry(original="Lord", translation="Señor", context="theological")])

        matches = search_terminology(store, "señor")

        assert [m.source for m in matches] == ["kjv", "geneva"]

    def test_no_match(self, store: GlossaryStore) -> None:
        assert search_terminology(store, "unicorn") == []

    def test_empty_store(self) -> None:
        assert search_terminology(GlossaryStore(), "you") == []
