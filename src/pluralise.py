"""Utility for simple English pluralisation of section titles."""

import re

ALREADY_PLURAL_RE = re.compile(r"[^s]s$")
CONSONANT_Y_RE = re.compile(r"([^aeiou])y$", re.IGNORECASE)
SIBILANT_RE = re.compile(r"[sx]$")


def pluralise(word: str) -> str:
    """Return the simple plural of a word, or the word if it looks plural.

    Irregular plurals (tooth/teeth) are not handled.
    """
    if ALREADY_PLURAL_RE.search(word):
        return word
    if CONSONANT_Y_RE.search(word):
        return word[:-1] + "ies"
    if SIBILANT_RE.search(word):
        return word + "es"
    return word + "s"
