from mediarank.services.schemas.media import (
    MediaItemIn,
    MediaItemRead,
)
from mediarank.services.schemas.rankings import (
    RankingUpsert,
    RankingPatch,
    RankingRead,
    RankingCheckRead,
    RankingImportEntry,
    RankingImportRequest,
)
from mediarank.services.schemas.stats import (
    UserStatsRead
)
from mediarank.services.schemas.users import (
    UserProfileRead,
    UserProfileUpdate,
)
from mediarank.services.schemas.families import (
    FamilyCreate,
    FamilyUpdate,
    FamilyRead,
    FamilySettingsRead,
    FamilySettingsUpdate,
    FamilyMemberCreate,
    FamilyMemberRead,
    FamilyMemberRoleUpdate,
)
__all__ = [
    "MediaItemIn",
    "MediaItemRead",
    "RankingUpsert",
    "RankingPatch",
    "RankingRead",
    "RankingCheckRead",
    "RankingImportEntry",
    "RankingImportRequest",
    "UserStatsRead",
    "UserProfileRead",
    "UserProfileUpdate",
    "FamilyCreate",
    "FamilyUpdate",
    "FamilyRead",
    "FamilySettingsRead",
    "FamilySettingsUpdate",
    "FamilyMemberCreate",
    "FamilyMemberRead",
    "FamilyMemberRoleUpdate",
]
