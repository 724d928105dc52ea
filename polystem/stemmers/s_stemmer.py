"""
S-stemmer: strips plural endings only.

Derived from the s-stemmer of the Atire search engine. Fast and
predictable, but it knows nothing about word structure, so it
over-strips words that merely end in "es" or "s":

- "flies" → "fly"
- "blesses" → "bless"
- "suitcases" → "suitcas"
- "theres" → "ther"
"""

from ..utils import ascii_lower


def simple_strip(word: str) -> str:
    """
    Lowercase a word and remove one plural suffix.

    Rules (first match wins):
    1. "ies" → "y"
    2. "es" → ""
    3. "s" → ""

    Args:
        word: Single token

    Returns:
        Lowercase stem

    Examples:
        >>> simple_strip("flies")
        'fly'
        >>> simple_strip("Suns")
        'sun'
    """
    stem = ascii_lower(word)

    if stem.endswith("ies"):
        return stem[:-3] + "y"
    if stem.endswith("es"):
        return stem[:-2]
    if stem.endswith("s"):
        return stem[:-1]

    return stem
