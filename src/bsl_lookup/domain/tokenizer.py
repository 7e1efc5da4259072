"""Phrase tokenization – free text to ordered lookup words."""

from typing import List, Optional

from bsl_lookup.domain.errors import InvalidInput
from bsl_lookup.domain.models import Word


def tokenize(phrase: Optional[str]) -> List[Word]:
    """Lower-case, trim and split on whitespace runs. Raises InvalidInput if no words remain."""
    if phrase is None:
        raise InvalidInput("Phrase parameter is required")
    words = [w for w in phrase.lower().strip().split() if w]
    if not words:
        raise InvalidInput()
    return words
