# cookbook/app/routers/stories.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from cookbook.app.deps import get_caller_role, get_story_service, parse_id, require_admin
from cookbook.app.domain.models import CallerRole
from cookbook.app.infra.auth.tokens import AdminIdentity
from cookbook.app.schemas.recipes import StatusChange
from cookbook.app.schemas.stories import StoryResponse, StoryWrite, story_response
from cookbook.app.services.content_service import StoryService

router = APIRouter(prefix="/api/family-stories", tags=["family-stories"])

KIND = StoryService.KIND


@router.get("", response_model=list[StoryResponse])
def list_stories(
    scope: Optional[str] = Query(default=None),
    role: CallerRole = Depends(get_caller_role),
    service: StoryService = Depends(get_story_service),
) -> list[StoryResponse]:
    return [story_response(story) for story in service.list_visible(role, scope)]


@router.get("/{story_id}", response_model=StoryResponse)
def get_story(
    story_id: str,
    scope: Optional[str] = Query(default=None),
    role: CallerRole = Depends(get_caller_role),
    service: StoryService = Depends(get_story_service),
) -> StoryResponse:
    return story_response(service.get_visible(parse_id(story_id, KIND), role, scope))


@router.post("", response_model=StoryResponse, status_code=status.HTTP_201_CREATED)
def create_story(
    payload: StoryWrite,
    admin: AdminIdentity = Depends(require_admin),
    service: StoryService = Depends(get_story_service),
) -> StoryResponse:
    return story_response(service.create(payload.to_draft()))


@router.put("/{story_id}", response_model=StoryResponse)
def update_story(
    story_id: str,
    payload: StoryWrite,
    admin: AdminIdentity = Depends(require_admin),
    service: StoryService = Depends(get_story_service),
) -> StoryResponse:
    return story_response(service.update(parse_id(story_id, KIND), payload.to_draft()))


@router.patch("/{story_id}/status", response_model=StoryResponse)
def set_story_status(
    story_id: str,
    payload: StatusChange,
    admin: AdminIdentity = Depends(require_admin),
    service: StoryService = Depends(get_story_service),
) -> StoryResponse:
    return story_response(service.set_status(parse_id(story_id, KIND), payload.status))


@router.delete("/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_story(
    story_id: str,
    admin: AdminIdentity = Depends(require_admin),
    service: StoryService = Depends(get_story_service),
) -> Response:
    service.delete(parse_id(story_id, KIND))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
