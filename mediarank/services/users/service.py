from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from mediarank.common.errors import AuthenticationError, StoreError
from mediarank.common.logging import get_logger
from mediarank.common.strings.splitters import clean_text
from mediarank.common.timeutil import utcnow
from mediarank.domain.entities.user_profile import UserProfile
from mediarank.domain.ports.users import UserStorePort

logger = get_logger(__name__)


class UserService:
    def __init__(self, store: UserStorePort, *, clock: Callable[[], datetime] = utcnow) -> None:
        self.store = store
        self.clock = clock

    def get_user(self, uid: str) -> Optional[UserProfile]:
        try:
            return self.store.get(uid)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch user %s: %s", uid, e)
            raise StoreError("Failed to fetch user") from e

    def get_users_by_name(self, name: str) -> List[UserProfile]:
        """Exact display-name match, newest profile first."""
        name = (name or "").strip()
        if not name:
            return []
        try:
            return self.store.list_by_display_name(name)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch users by name: %s", e)
            raise StoreError("Failed to fetch users") from e

    def save_profile(
        self,
        uid: str,
        *,
        display_name: Optional[str] = None,
        email: Optional[str] = None,
        bio: Optional[str] = None,
        photo_url: Optional[str] = None,
        favorite_genres: Optional[Iterable[str]] = None,
    ) -> UserProfile:
        """
        Create the caller's profile or update it in place. Fields left as None
        keep their stored value; the family link is never touched here.
        """
        if not uid or not uid.strip():
            raise AuthenticationError()
        now = self.clock()
        try:
            current = self.store.get(uid) or UserProfile(uid=uid, created_at=now)
            genres = current.favorite_genres
            if favorite_genres is not None:
                genres = [g for g in (clean_text(x) for x in favorite_genres) if g]
            updated = replace(
                current,
                display_name=display_name.strip() if display_name is not None else current.display_name,
                email=clean_text(email) if email is not None else current.email,
                bio=bio if bio is not None else current.bio,
                photo_url=clean_text(photo_url) if photo_url is not None else current.photo_url,
                favorite_genres=genres,
                updated_at=now,
            )
            saved = self.store.save(updated)
        except SQLAlchemyError as e:
            logger.exception("Failed to save profile %s: %s", uid, e)
            raise StoreError("Failed to save profile") from e
        logger.info("Saved profile user=%s", uid)
        return saved
