from pathlib import Path

import pytest

from breathalyzer.dictionary import EmptyDictionaryError, InvalidLengthError, WordSet, load_wordset


def _wordset() -> WordSet:
    return WordSet(["AA", "AB", "AAH", "AAL", "AAHS", "AAHED"])


def test_contains_checks_bucket_for_word_length() -> None:
    wordset = _wordset()

    assert wordset.contains("AAH")
    assert "AAHS" in wordset
    assert not wordset.contains("AAX")
    assert not wordset.contains("ZZZZZZZZ")


def test_contains_empty_word_is_false() -> None:
    wordset = _wordset()

    assert not wordset.contains("")
    assert not wordset.contains(None)


def test_add_chains_and_ignores_duplicates() -> None:
    wordset = WordSet().add("CAT").add("CAT").add("DOGS")

    assert len(wordset) == 2
    assert wordset.lengths() == [3, 4]


def test_add_empty_word_raises_invalid_length() -> None:
    with pytest.raises(InvalidLengthError) as excinfo:
        WordSet().add("")

    assert excinfo.value.length == 0


def test_remove_returns_word_or_none() -> None:
    wordset = _wordset()

    assert wordset.remove("AAH") == "AAH"
    assert wordset.remove("AAH") is None
    assert not wordset.contains("AAH")


def test_remove_never_creates_buckets() -> None:
    wordset = _wordset()

    assert wordset.remove("QWERTYUIOP") is None
    assert wordset.remove("") is None
    assert 10 not in wordset.lengths()


def test_emptied_bucket_behaves_like_absent_one() -> None:
    wordset = WordSet(["CAT"])
    wordset.remove("CAT")

    assert wordset.words_of_length(3) == frozenset()
    assert wordset.min_word_length() == 3


def test_words_of_length_returns_bucket_or_empty() -> None:
    wordset = _wordset()

    assert wordset.words_of_length(2) == {"AA", "AB"}
    assert wordset.words_of_length(7) == frozenset()


@pytest.mark.parametrize("length", [0, -1])
def test_words_of_length_rejects_non_positive(length: int) -> None:
    with pytest.raises(InvalidLengthError):
        _wordset().words_of_length(length)


def test_words_of_length_offset_zero_is_same_length() -> None:
    wordset = _wordset()

    assert wordset.words_of_length_offset(3, 0) == wordset.words_of_length(3)


def test_words_of_length_offset_unions_both_sides() -> None:
    wordset = _wordset()

    assert wordset.words_of_length_offset(3, 1) == {"AA", "AB", "AAHS"}
    assert wordset.words_of_length_offset(3, 2) == {"AAHED"}


def test_words_of_length_offset_skips_non_positive_lengths() -> None:
    wordset = _wordset()

    assert wordset.words_of_length_offset(2, 2) == {"AAHS"}
    assert wordset.words_of_length_offset(2, 5) == frozenset()


def test_min_and_max_word_length() -> None:
    wordset = _wordset()

    assert wordset.min_word_length() == 2
    assert wordset.max_word_length() == 5


def test_min_and_max_word_length_on_empty_dictionary() -> None:
    wordset = WordSet()

    with pytest.raises(EmptyDictionaryError):
        wordset.min_word_length()
    with pytest.raises(EmptyDictionaryError):
        wordset.max_word_length()


def test_from_lines_trims_and_skips_blank_lines() -> None:
    wordset = WordSet.from_lines(["  CAT\n", "\n", "DOGS \r\n", "   "])

    assert sorted(wordset) == ["CAT", "DOGS"]


def test_load_wordset_reads_one_word_per_line(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("AA\nAAH\n\nAAHED\n")

    wordset = load_wordset(path)

    assert len(wordset) == 3
    assert wordset.contains("AAHED")


def test_load_wordset_propagates_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_wordset(tmp_path / "missing.txt")


def test_is_empty_once_every_word_is_removed() -> None:
    wordset = WordSet(["A", "CAT", "HELLO"])
    wordset.remove("A")
    wordset.remove("HELLO")

    assert not wordset.is_empty()
    assert wordset.populated_lengths() == [3]

    wordset.remove("CAT")

    assert wordset.is_empty()
    assert wordset.populated_lengths() == []
    assert wordset.lengths() == [1, 3, 5]
