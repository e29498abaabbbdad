"""
Text normalization for keyword coverage.

Turns free text into an ordered list of lowercase tokens. Characters that
commonly belong to compound skill names (".", "#", "+") are kept so that
terms like "c++", "c#" and "node.js" survive tokenization.
"""

import re
from typing import List, Optional

from .config import MIN_TOKEN_LENGTH, STOP_WORDS

_NON_TOKEN_CHARS = re.compile(r"[^\w\s.#+]")
_WHITESPACE = re.compile(r"\s+")


def preprocess_text(text: Optional[str]) -> List[str]:
    """
    Normalize text into tokens.

    Steps: lowercase, replace every character other than word characters,
    whitespace, ".", "#" and "+" with a space, collapse whitespace, split,
    then drop short tokens and stop words.

    Args:
        text: Raw text, may be empty or None

    Returns:
        Ordered list of tokens (duplicates kept)
    """
    if not text:
        return []

    normalized = _NON_TOKEN_CHARS.sub(" ", text.lower())
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    if not normalized:
        return []

    return [
        word for word in normalized.split(" ")
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS
    ]
