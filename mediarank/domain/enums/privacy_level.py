from __future__ import annotations
from enum import StrEnum

class PrivacyLevel(StrEnum):
    private = "private"
    family_only = "family-only"
    public = "public"
