# mediarank/common/strings/collation.py
from __future__ import annotations

from typing import Tuple
import unicodedata


def strip_accents(text: str) -> str:
    """NFKD normalize and drop combining marks ("Éxämple" -> "Example")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str | None) -> Tuple[str, str]:
    """
    Sort key approximating a locale-aware comparison:
      - accents are ignored on the primary level
      - case is ignored on the primary level
      - the raw text breaks remaining ties so ordering stays total

    Examples:
      sorted(["b", "Á", "a"], key=collation_key) -> ["a", "Á", "b"]
    """
    if text is None:
        return ("", "")
    raw = str(text)
    return (strip_accents(raw).casefold(), raw)

