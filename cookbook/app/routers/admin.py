# cookbook/app/routers/admin.py
"""
Admin-only moderation views. These always see every status.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from cookbook.app.deps import get_recipe_service, get_story_service, parse_id, require_admin
from cookbook.app.schemas.recipes import RecipeResponse, recipe_response
from cookbook.app.schemas.stories import StoryResponse, story_response
from cookbook.app.services.content_service import RecipeService, StoryService

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/recipes", response_model=list[RecipeResponse])
def admin_list_recipes(
    status: Optional[str] = Query(default=None, description="pending, approved or rejected"),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    return [recipe_response(recipe) for recipe in service.list_all(status)]


@router.get("/recipes/{recipe_id}", response_model=RecipeResponse)
def admin_get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    return recipe_response(service.get(parse_id(recipe_id, RecipeService.KIND)))


@router.get("/family-stories", response_model=list[StoryResponse])
def admin_list_stories(
    status: Optional[str] = Query(default=None, description="draft or published"),
    service: StoryService = Depends(get_story_service),
) -> list[StoryResponse]:
    return [story_response(story) for story in service.list_all(status)]


@router.get("/family-stories/{story_id}", response_model=StoryResponse)
def admin_get_story(
    story_id: str,
    service: StoryService = Depends(get_story_service),
) -> StoryResponse:
    return story_response(service.get(parse_id(story_id, StoryService.KIND)))
