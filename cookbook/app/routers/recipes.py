# cookbook/app/routers/recipes.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from cookbook.app.deps import get_caller_role, get_recipe_service, parse_id, require_admin
from cookbook.app.domain.models import CallerRole
from cookbook.app.infra.auth.tokens import AdminIdentity
from cookbook.app.schemas.recipes import (
    RecipeResponse,
    RecipeSubmission,
    RecipeWrite,
    StatusChange,
    recipe_response,
)
from cookbook.app.services.content_service import RecipeService

router = APIRouter(prefix="/api/recipes", tags=["recipes"])

KIND = RecipeService.KIND


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    scope: Optional[str] = Query(default=None, description='"all" shows every status to admins'),
    role: CallerRole = Depends(get_caller_role),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    return [recipe_response(recipe) for recipe in service.list_visible(role, scope)]


@router.post("/submit", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def submit_recipe(
    payload: RecipeSubmission,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    """
    Community submission. The recipe is stored as pending until an admin reviews it.
    """
    return recipe_response(service.submit(payload.to_draft()))


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: str,
    scope: Optional[str] = Query(default=None),
    role: CallerRole = Depends(get_caller_role),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    return recipe_response(service.get_visible(parse_id(recipe_id, KIND), role, scope))


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeWrite,
    admin: AdminIdentity = Depends(require_admin),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    return recipe_response(service.create(payload.to_draft()))


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: str,
    payload: RecipeWrite,
    admin: AdminIdentity = Depends(require_admin),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    return recipe_response(service.update(parse_id(recipe_id, KIND), payload.to_draft()))


@router.patch("/{recipe_id}/status", response_model=RecipeResponse)
def set_recipe_status(
    recipe_id: str,
    payload: StatusChange,
    admin: AdminIdentity = Depends(require_admin),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    return recipe_response(service.set_status(parse_id(recipe_id, KIND), payload.status))


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: str,
    admin: AdminIdentity = Depends(require_admin),
    service: RecipeService = Depends(get_recipe_service),
) -> Response:
    service.delete(parse_id(recipe_id, KIND))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
