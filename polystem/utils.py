"""Utility functions shared by the stemmers"""

import string

# Only A-Z are folded; every other character passes through untouched
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """
    Lowercase ASCII letters only.

    Unlike str.lower(), non-ASCII characters keep their case and the
    result always has the same length as the input.

    Args:
        text: Input word

    Returns:
        Word with A-Z mapped to a-z

    Examples:
        >>> ascii_lower("Ponies")
        'ponies'

        >>> ascii_lower("CAFÉ")
        'cafÉ'
    """
    return text.translate(_ASCII_LOWER)
