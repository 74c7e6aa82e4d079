import pytest
from hypothesis import given
from hypothesis import strategies as st

from drills.strings import is_palindrome, reverse_sentence, reverse_steps, string_length


@pytest.mark.parametrize("word", ["abba", "Abba", "NooN", ""])
def test_even_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["abcd", "ab", "abca"])
def test_even_non_palindromes(word):
    assert is_palindrome(word) is False


@given(st.text(alphabet="abcxyz", max_size=8))
def test_mirrored_even_words_are_palindromes(half):
    assert is_palindrome(half + half[::-1]) is True


def test_reverse_sentence():
    assert reverse_sentence("hello world") == "dlrow olleh"


@given(st.text())
def test_reverse_sentence_involution(sentence):
    assert reverse_sentence(reverse_sentence(sentence)) == sentence


@given(st.text())
def test_string_length_concatenation(text):
    assert string_length(text + text) == 2 * string_length(text)
    assert string_length("") == 0


def test_reverse_steps_empty():
    assert list(reverse_steps("")) == []


@given(st.text(min_size=1, max_size=20))
def test_reverse_steps_shape(text):
    steps = list(reverse_steps(text))
    assert steps[0] == text
    assert len(steps) == (len(text) + 1) // 2
    assert all(sorted(step) == sorted(text) for step in steps)
    if len(text) % 2:
        assert steps[-1] == text[::-1]