"""
Utility functions for the books app
"""
from typing import Tuple


def split_names(full_name: str) -> Tuple[str, str]:
    """
    Split a full name into first and last name

    The first whitespace-separated token is the first name; everything
    after it, including middle names, is the last name.

    Examples:
        >>> split_names("Ada  King Lovelace")
        ('Ada', 'King Lovelace')
        >>> split_names("Plato")
        ('Plato', '')
    """
    tokens = (full_name or "").split()

    if not tokens:
        return "", ""

    return tokens[0], " ".join(tokens[1:])
