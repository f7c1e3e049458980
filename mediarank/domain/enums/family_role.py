from __future__ import annotations
from enum import StrEnum

class FamilyRole(StrEnum):
    parent = "parent"
    guardian = "guardian"
    child = "child"
    grandmother = "grandmother"
    grandfather = "grandfather"
    aunt = "aunt"
    uncle = "uncle"
    cousin = "cousin"
    sibling = "sibling"
    other = "other"
