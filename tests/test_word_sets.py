"""
Tests for word-set resolution and import normalisation.
"""

import pytest

from core.word_sets import (
    Card,
    WordSetError,
    default_word_set,
    dump_word_set,
    load_custom_set,
    normalize_entries,
    resolve_word_set,
)


class TestResolve:
    def test_custom_wins(self):
        custom = (Card("Hund", "dog"),)
        default = (Card("Katze", "cat"),)
        assert resolve_word_set(custom, default) is custom

    def test_none_falls_back(self):
        default = (Card("Katze", "cat"),)
        assert resolve_word_set(None, default) is default

    def test_empty_falls_back(self):
        default = (Card("Katze", "cat"),)
        assert resolve_word_set((), default) is default

    def test_default_set_is_usable(self):
        words = default_word_set()
        assert len(words) > 0
        assert all(c.term and c.translation for c in words)


class TestCard:
    def test_equality_is_identity(self):
        a = Card("house", "בית")
        b = Card("house", "בית")
        assert a == a
        assert a != b

    def test_immutable(self):
        c = Card("house", "בית")
        with pytest.raises(AttributeError):
            c.term = "home"


class TestNormalize:
    def test_strings_are_split_and_trimmed(self):
        cards = normalize_entries(["  apple , תפוח ", "book,ספר"])
        assert [(c.term, c.translation) for c in cards] == [
            ("apple", "תפוח"), ("book", "ספר"),
        ]

    def test_mappings(self):
        cards = normalize_entries([{"term": " dog ", "translation": "כלב"}])
        assert (cards[0].term, cards[0].translation) == ("dog", "כלב")

    def test_legacy_keys(self):
        cards = normalize_entries([{"en": "cat", "he": "חתול"}])
        assert (cards[0].term, cards[0].translation) == ("cat", "חתול")

    def test_incomplete_entries_dropped(self):
        cards = normalize_entries([
            "apple,תפוח",
            "no-comma",
            ",missing term",
            "missing translation,",
            {"term": "only term"},
            {"term": 3, "translation": "x"},
            42,
            None,
        ])
        assert [c.term for c in cards] == ["apple"]

    def test_extra_commas_keep_second_field(self):
        cards = normalize_entries(["one,two,three"])
        assert (cards[0].term, cards[0].translation) == ("one", "two")

    def test_empty_result_rejected(self):
        with pytest.raises(WordSetError, match="empty"):
            normalize_entries(["nothing here"])

    def test_non_list_rejected(self):
        with pytest.raises(WordSetError):
            normalize_entries({"term": "a", "translation": "b"})

    def test_word_set_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_entries([])


class TestPersistedForm:
    def test_dump_and_load(self):
        cards = (Card("sun", "שמש"), Card("moon", "ירח"))
        loaded = load_custom_set(dump_word_set(cards))
        assert [(c.term, c.translation) for c in loaded] == [
            ("sun", "שמש"), ("moon", "ירח"),
        ]

    def test_none_is_absent(self):
        assert load_custom_set(None) is None

    @pytest.mark.parametrize("raw", ["garbage", [], [{"x": 1}], 5])
    def test_malformed_is_absent(self, raw):
        assert load_custom_set(raw) is None
