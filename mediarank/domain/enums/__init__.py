from mediarank.domain.enums.media_type import MediaType, COUNTED_MEDIA_TYPES
from mediarank.domain.enums.sort_option import SortOption
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel
__all__ = [
    "MediaType",
    "COUNTED_MEDIA_TYPES",
    "SortOption",
    "FamilyRole",
    "PrivacyLevel",
]
