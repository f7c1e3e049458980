from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from mediarank.common.settings import get_settings
from mediarank.services.api.deps import get_current_user_id, get_search_service
from mediarank.services.schemas import MediaItemRead
from mediarank.services.search.service import SearchService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/search", tags=["search"])


@router.get("/{media_type}", response_model=List[MediaItemRead])
def search_media(
    media_type: str,
    q: str = Query("", description="Title substring; blank returns no results"),
    _user_id: str = Depends(get_current_user_id),
    svc: SearchService = Depends(get_search_service),
) -> List[MediaItemRead]:
    # media_type stays a str so "music" and unknown types answer 400, not 422
    return [MediaItemRead.model_validate(m) for m in svc.search(media_type, q)]
