"""
Tests for the word-list file reader.
"""

import json

import pytest

from core.extractor import (
    load_word_file,
    parse_json_word_list,
    parse_line_word_list,
    read_text_file,
)
from core.word_sets import WordSetError


class TestTxtReading:
    def test_read_utf8_file(self, tmp_path):
        f = tmp_path / "sample.txt"
        f.write_text("house,בית\nbook,ספר", encoding="utf-8")
        result = read_text_file(str(f))
        assert "בית" in result

    def test_latin1_fallback(self, tmp_path):
        f = tmp_path / "sample.txt"
        f.write_bytes("Straße,street".encode("latin-1"))
        assert "Straße" in read_text_file(f)

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            read_text_file("nonexistent_file.txt")


class TestParsers:
    def test_json_array(self):
        data = parse_json_word_list('["a,b", {"term": "c", "translation": "d"}]')
        assert data == ["a,b", {"term": "c", "translation": "d"}]

    def test_json_with_bom(self):
        assert parse_json_word_list('\ufeff["a,b"]') == ["a,b"]

    def test_json_not_array(self):
        with pytest.raises(WordSetError, match="array"):
            parse_json_word_list('{"term": "a"}')

    def test_json_invalid(self):
        with pytest.raises(WordSetError, match="JSON"):
            parse_json_word_list("[1, 2")

    def test_lines_skip_blank_and_comments(self):
        text = "# my words\n\n  dog , כלב \ncat,חתול\n"
        assert parse_line_word_list(text) == ["dog , כלב", "cat,חתול"]


class TestDispatch:
    def test_json_dispatch(self, tmp_path):
        f = tmp_path / "list.json"
        f.write_text(json.dumps([{"term": "sun", "translation": "שמש"}]), encoding="utf-8")
        assert load_word_file(f) == [{"term": "sun", "translation": "שמש"}]

    @pytest.mark.parametrize("name", ["list.txt", "list.CSV", "list.text"])
    def test_line_dispatch(self, tmp_path, name):
        f = tmp_path / name
        f.write_text("sun,שמש\nmoon,ירח", encoding="utf-8")
        assert load_word_file(f) == ["sun,שמש", "moon,ירח"]

    def test_unsupported_extension(self, tmp_path):
        f = tmp_path / "data.xyz"
        f.write_text("a,b", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_word_file(f)
