from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from mediarank.common.errors import NotFoundError, PermissionDeniedError
from mediarank.common.settings import get_settings
from mediarank.domain.entities.family import Family
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.services.api.deps import get_current_user_id, get_family_service
from mediarank.services.families.service import FamilyService
from mediarank.services.schemas import (
    FamilyCreate,
    FamilyMemberCreate,
    FamilyMemberRead,
    FamilyMemberRoleUpdate,
    FamilyRead,
    FamilySettingsUpdate,
    FamilyUpdate,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/families", tags=["families"])


# ---- helpers ----

def _member_family_or_403(svc: FamilyService, family_id: str, user_id: str) -> Family:
    family = svc.get_family(family_id)
    if not family:
        raise NotFoundError("Family not found")
    if not family.has_member(user_id):
        raise PermissionDeniedError("Not a member of this family")
    return family


def _to_out(f: Family) -> FamilyRead:
    return FamilyRead.model_validate(f)


# ---- families ----

@router.post("", response_model=FamilyRead, status_code=HTTPStatus.CREATED)
def create_family(
    payload: FamilyCreate,
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyRead:
    return _to_out(svc.create_family(user_id, payload.name, payload.description))


@router.get("", response_model=List[FamilyRead])
def list_my_families(
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> List[FamilyRead]:
    return [_to_out(f) for f in svc.get_user_families(user_id)]


@router.get("/by-role/{role}", response_model=List[FamilyRead])
def list_my_families_by_role(
    role: FamilyRole,
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> List[FamilyRead]:
    return [_to_out(f) for f in svc.get_user_families_by_role(user_id, role)]


@router.get("/{family_id}", response_model=FamilyRead)
def get_family(
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyRead:
    return _to_out(_member_family_or_403(svc, family_id, user_id))


@router.patch("/{family_id}", response_model=FamilyRead)
def update_family(
    payload: FamilyUpdate,
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyRead:
    _member_family_or_403(svc, family_id, user_id)
    return _to_out(svc.update_family(family_id, name=payload.name, description=payload.description))


@router.delete("/{family_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_family(
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> None:
    svc.delete_family(family_id, user_id)


@router.put("/{family_id}/settings", response_model=FamilyRead)
def update_family_settings(
    payload: FamilySettingsUpdate,
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyRead:
    _member_family_or_403(svc, family_id, user_id)
    return _to_out(svc.update_family_settings(family_id, **payload.model_dump(exclude_unset=True)))


# ---- members ----

@router.get("/{family_id}/members", response_model=List[FamilyMemberRead])
def list_members(
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> List[FamilyMemberRead]:
    _member_family_or_403(svc, family_id, user_id)
    return [FamilyMemberRead.model_validate(m) for m in svc.get_family_member_roles(family_id)]


@router.post("/{family_id}/members", response_model=FamilyMemberRead, status_code=HTTPStatus.CREATED)
def add_member(
    payload: FamilyMemberCreate,
    family_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyMemberRead:
    _member_family_or_403(svc, family_id, user_id)
    member = svc.add_family_member(family_id, payload.user_id, payload.role)
    return FamilyMemberRead.model_validate(member)


@router.patch("/{family_id}/members/{member_id}", response_model=FamilyMemberRead)
def update_member_role(
    payload: FamilyMemberRoleUpdate,
    family_id: str = Path(...),
    member_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> FamilyMemberRead:
    _member_family_or_403(svc, family_id, user_id)
    return FamilyMemberRead.model_validate(svc.update_member_role(family_id, member_id, payload.role))


@router.delete("/{family_id}/members/{member_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_member(
    family_id: str = Path(...),
    member_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: FamilyService = Depends(get_family_service),
) -> None:
    _member_family_or_403(svc, family_id, user_id)
    svc.remove_family_member(family_id, member_id)
