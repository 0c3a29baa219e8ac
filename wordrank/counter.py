"""
counter.py - Frequency Accumulation
"""


def compute_word_frequencies(tokens):
    """
    Runtime Complexity: O(T)
    where T is the number of tokens the tokenizer accepted. The iterable is
    consumed once; a token seen for the first time starts at 1.

    Returns:
        dict mapping token -> occurrences; iteration order carries no meaning
    """
    frequencies = {}
    for token in tokens:
        frequencies[token] = frequencies.get(token, 0) + 1
    return frequencies
