import logging

from letterfall_board import strings_to_board
from letterfall_letters import ALPHABET
from letterfall_words import (FALLBACK_WORDS, HORIZONTAL, VERTICAL, Dictionary, find_words,
                              load_dictionary, resolve_wildcards)


def test_dictionary_is_case_insensitive():
    d = Dictionary(["cat", " Dog "])
    assert d.is_valid("CAT") and d.is_valid("Cat") and "dog" in d
    assert not d.is_valid("CA")
    assert len(d) == 2


def test_single_wildcard_takes_first_completion():
    d = Dictionary()
    expected = next("DO" + letter for letter in ALPHABET if "DO" + letter in FALLBACK_WORDS)
    assert expected == "DOG"
    assert resolve_wildcards("DO?", d) == expected
    assert resolve_wildcards("DO?", d) == resolve_wildcards("DO?", d)


def test_wildcards_fill_left_to_right():
    assert resolve_wildcards("?A?", Dictionary()) == "BAD"
    assert resolve_wildcards("?A?", Dictionary(["CAT", "BAT", "BAR"])) == "BAR"


def test_unresolvable_wildcard_is_no_match():
    assert resolve_wildcards("Q??", Dictionary()) is None
    board = strings_to_board(["QX?"])
    assert find_words(board, Dictionary()) == []


def test_literal_run_must_be_whole_word():
    d = Dictionary()
    assert [m.word for m in find_words(strings_to_board(["CAT"]), d)] == ["CAT"]
    assert find_words(strings_to_board(["CATS"]), d) == []
    assert find_words(strings_to_board(["CA"]), d) == []


def test_match_carries_cells_and_flags():
    board = strings_to_board(["..ZO?"])
    [match] = find_words(board, Dictionary())
    assert match.word == "ZOO"
    assert match.cells == ((19, 2), (19, 3), (19, 4))
    assert match.direction == HORIZONTAL
    assert match.length == 3
    assert match.has_wildcard


def test_bombs_split_runs_and_junk_counts():
    board = strings_to_board(["cat#DOG"])
    words = find_words(board, Dictionary())
    assert [m.word for m in words] == ["CAT", "DOG"]
    assert not any(m.has_wildcard for m in words)


def test_vertical_words_and_shared_cells():
    board = strings_to_board(["C", "A", "TOP"])
    words = find_words(board, Dictionary())
    assert [(m.word, m.direction) for m in words] == [("TOP", HORIZONTAL), ("CAT", VERTICAL)]
    assert words[1].cells == ((17, 0), (18, 0), (19, 0))
    assert set(words[0].cells) & set(words[1].cells) == {(19, 0)}


def test_load_dictionary_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\n\n", encoding="utf-8")
    d = load_dictionary(str(path))
    assert d.is_valid("APPLE") and not d.is_valid("CAT")


def test_missing_dictionary_falls_back(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        d = load_dictionary(str(tmp_path / "nope.txt"))
    assert d.is_valid("CAT")
    assert "fallback" in caplog.text
    assert load_dictionary(None).is_valid("DOG")
