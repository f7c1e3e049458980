from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response

from mediarank.common.settings import get_settings
from mediarank.domain.enums.media_type import MediaType
from mediarank.domain.policies.ranking_view import ALL_CATEGORIES
from mediarank.services.api.deps import get_current_user_id, get_ranking_service
from mediarank.services.mappers.rankings import (
    to_domain_media, to_import_entries, to_read_schema, to_stats_schema,
)
from mediarank.services.rankings.service import RankingService
from mediarank.services.schemas import (
    RankingCheckRead,
    RankingImportRequest,
    RankingPatch,
    RankingRead,
    RankingUpsert,
    UserStatsRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/rankings", tags=["rankings"])


@router.get("", response_model=List[RankingRead])
def list_rankings(
    sort: str = Query("rank-desc", description="rank-desc | rank-asc | date-desc | date-asc | title-asc"),
    category: str = Query(ALL_CATEGORIES, description='"all" or a media type'),
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> List[RankingRead]:
    return [to_read_schema(r) for r in svc.list_rankings(user_id, sort=sort, category=category)]


@router.put("", response_model=RankingRead, status_code=HTTPStatus.OK)
def upsert_ranking(
    payload: RankingUpsert,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> RankingRead:
    saved, created = svc.save_ranking(user_id, payload.rank, to_domain_media(payload.media), payload.notes)
    if created:
        response.status_code = HTTPStatus.CREATED
    return to_read_schema(saved)


@router.get("/stats", response_model=UserStatsRead)
def get_stats(
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> UserStatsRead:
    return to_stats_schema(svc.get_user_stats(user_id))


@router.get("/by-media/{media_id}", response_model=RankingCheckRead)
def check_if_ranked(
    media_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> RankingCheckRead:
    ranked, found = svc.check_if_ranked(user_id, media_id)
    return RankingCheckRead(ranked=ranked, ranking=to_read_schema(found) if found else None)


@router.get("/by-type/{media_type}", response_model=List[RankingRead])
def list_by_type(
    media_type: MediaType,
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> List[RankingRead]:
    return [to_read_schema(r) for r in svc.list_rankings_by_type(user_id, media_type)]


@router.post("/import", response_model=List[RankingRead])
def import_rankings(
    payload: RankingImportRequest,
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> List[RankingRead]:
    saved = svc.batch_import(user_id, to_import_entries(payload.rankings))
    return [to_read_schema(r) for r in saved]


@router.patch("/{ranking_id}", response_model=RankingRead)
def patch_ranking(
    payload: RankingPatch,
    ranking_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> RankingRead:
    saved = svc.update_ranking(user_id, ranking_id, rank=payload.rank, notes=payload.notes)
    return to_read_schema(saved)


@router.delete("/{ranking_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_ranking(
    ranking_id: str = Path(...),
    user_id: str = Depends(get_current_user_id),
    svc: RankingService = Depends(get_ranking_service),
) -> None:
    svc.delete_ranking(user_id, ranking_id)
