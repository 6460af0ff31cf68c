from __future__ import annotations

import re
from typing import Optional

_NON_WORD = re.compile(r"[^A-Za-z0-9\s]")


def normalize_header(header: Optional[object]) -> str:
    """Convert a column label into its camelCase field key.

    "Functional Owner of Deliverable" -> "functionalOwnerOfDeliverable"
    """
    if header is None:
        return ""
    # punctuation separates words: "A/B Test!" -> "A B Test"
    text = _NON_WORD.sub(" ", str(header))
    tokens = text.split()
    if not tokens:
        return ""
    first, rest = tokens[0], tokens[1:]
    return first.lower() + "".join(t[:1].upper() + t[1:].lower() for t in rest)
