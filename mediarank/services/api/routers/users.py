from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from mediarank.common.errors import NotFoundError
from mediarank.common.settings import get_settings
from mediarank.services.api.deps import get_current_user_id, get_user_service
from mediarank.services.schemas import UserProfileRead, UserProfileUpdate
from mediarank.services.users.service import UserService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/users", tags=["users"])


def _profile_or_404(svc: UserService, uid: str) -> UserProfileRead:
    found = svc.get_user(uid)
    if not found:
        raise NotFoundError("User not found")
    return UserProfileRead.model_validate(found)


@router.get("", response_model=List[UserProfileRead])
def find_users(
    name: str = Query(..., description="Exact display name"),
    _user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
) -> List[UserProfileRead]:
    return [UserProfileRead.model_validate(u) for u in svc.get_users_by_name(name)]


@router.get("/me", response_model=UserProfileRead)
def get_me(
    user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
) -> UserProfileRead:
    return _profile_or_404(svc, user_id)


@router.put("/me", response_model=UserProfileRead)
def put_me(
    payload: UserProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
) -> UserProfileRead:
    saved = svc.save_profile(user_id, **payload.model_dump(exclude_unset=True))
    return UserProfileRead.model_validate(saved)


@router.get("/{uid}", response_model=UserProfileRead)
def get_user(
    uid: str,
    _user_id: str = Depends(get_current_user_id),
    svc: UserService = Depends(get_user_service),
) -> UserProfileRead:
    return _profile_or_404(svc, uid)
