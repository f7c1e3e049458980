# mediarank/services/api/deps.py
from __future__ import annotations
from functools import lru_cache
from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from mediarank.common.errors import AuthenticationError
from mediarank.common.settings import get_settings
from mediarank.database.core.main import SessionLocal
from mediarank.database.repos.family_repo import SqlAlchemyFamilyRepo
from mediarank.database.repos.ranking_repo import SqlAlchemyRankingRepo
from mediarank.database.repos.user_repo import SqlAlchemyUserRepo
from mediarank.services.families.service import FamilyService
from mediarank.services.rankings.service import RankingService
from mediarank.services.search.service import SearchService
from mediarank.services.users.service import UserService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # Using the Session.begin() context ensures COMMIT on normal exit,
    # and ROLLBACK if an exception bubbles out.
    with db.begin():
        yield db

def get_current_user_id(request: Request) -> str:
    """
    The identity-provider gateway resolves the caller and forwards the uid in
    a header; this service never sees credentials.
    """
    header = get_settings().api.user_header
    uid: Optional[str] = request.headers.get(header)
    if not uid or not uid.strip():
        raise AuthenticationError()
    return uid.strip()

def get_ranking_service(session: Session = Depends(transactional_session)) -> RankingService:
    return RankingService(SqlAlchemyRankingRepo(db=session))

def get_family_service(session: Session = Depends(transactional_session)) -> FamilyService:
    return FamilyService(SqlAlchemyFamilyRepo(session=session), SqlAlchemyUserRepo(session=session))

def get_user_service(session: Session = Depends(transactional_session)) -> UserService:
    return UserService(SqlAlchemyUserRepo(session=session))

@lru_cache(maxsize=1)
def get_search_service() -> SearchService:
    """One set of provider clients per process; httpx.Client is thread-safe."""
    return SearchService.from_settings()
