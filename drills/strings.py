"""Small exercises on strings."""

from collections.abc import Iterator


def is_palindrome(word: str) -> bool:
    """Compare mirrored characters case-insensitively, scanning up to and including the middle.

    The word counts as a palindrome when the number of matching comparisons
    equals half its length (rounded down).
    """
    lowered = word.lower()
    half = (len(lowered) + 1) // 2
    matches = sum(a == b for a, b in zip(lowered[:half], reversed(lowered)))
    return matches == len(word) // 2


def reverse_sentence(sentence: str) -> str:
    """Return the sentence with its characters in reverse order."""
    return sentence[::-1]


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def reverse_steps(text: str) -> Iterator[str]:
    """Reverse ``text`` by swapping from both ends, yielding the string before each swap."""
    chars = list(text)
    start, end = 0, len(chars) - 1
    while start <= end:
        yield "".join(chars)
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1