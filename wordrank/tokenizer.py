"""
tokenizer.py - Word Extraction

Splits a text stream on ASCII whitespace and yields the words that pass the
active acceptance predicate, lowercased.

Two predicates are available:
- simple:   every character is an ASCII letter
- extended: first character is a letter, "_" or "#" ("#" only as the whole
            word); later characters are letters, "-" or "_"
"""

import re
import string

ALPHA = frozenset(string.ascii_letters)
EXTENDED_FIRST = ALPHA | {"_", "#"}
EXTENDED_REST = ALPHA | {"-", "_"}

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
# NBSP and other Unicode spaces stay inside a word (and so reject it)
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def is_simple_word(word):
    """Accept a word made only of ASCII letters."""
    if not word:
        return False
    for char in word:
        if char not in ALPHA:
            return False
    return True


def is_extended_word(word):
    """
    Accept identifier-like words: "foo", "_bar", "snake_case", "kebab-case",
    and a lone "#". Anything following a leading "#" rejects the word.
    """
    if not word or word[0] not in EXTENDED_FIRST:
        return False
    if word[0] == "#":
        return len(word) == 1
    for char in word[1:]:
        if char not in EXTENDED_REST:
            return False
    return True


VARIANTS = {
    "simple": is_simple_word,
    "extended": is_extended_word,
}


def get_predicate(variant):
    """
    Look up the acceptance predicate by name.

    Raises:
        ValueError: If the variant is unknown
    """
    try:
        return VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown tokenizer variant {variant!r}, "
            f"expected one of {sorted(VARIANTS)}") from None


def normalize(word):
    """Fold A-Z to a-z. Other characters, including non-ASCII, are untouched."""
    return word.translate(_LOWER)


def tokenize(stream, variant="simple"):
    """
    Runtime Complexity: O(N)
    where N is the number of characters read from the stream.
    Each line is split once and every word is checked once.

    Args:
        stream: Iterable of text lines (open file, sys.stdin, StringIO)
        variant: Name of the acceptance predicate

    Yields:
        Accepted, lowercased tokens in encounter order
    """
    predicate = get_predicate(variant)
    for line in stream:
        for word in _WHITESPACE.split(line):
            if word and predicate(word):
                yield normalize(word)
