# mediarank/database/models/__init__.py

from mediarank.database.core.main import Base
from mediarank.database.models.ranking import Ranking
from mediarank.database.models.family import Family, FamilyMember
from mediarank.database.models.user import UserProfile

__all__ = [
    "Base",
    "Ranking",
    "Family",
    "FamilyMember",
    "UserProfile",
]
