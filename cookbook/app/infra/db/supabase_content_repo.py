from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from cookbook.app.domain.errors import StoreError
from cookbook.app.domain.models import (
    FamilyStory,
    Recipe,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)
from cookbook.app.domain.text import clean_str, to_lines
from cookbook.app.domain.workflow import parse_status
from cookbook.app.infra.db.base import RecipeRepository, StoryRepository

logger = logging.getLogger(__name__)

STORE_ERRORS = (APIError, httpx.HTTPError, ConnectionError, TimeoutError)


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: str | datetime | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None

    try:
        normalized = value.replace("Z", "+00:00") if value.endswith("Z") else value
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def _row_to_recipe(row: dict[str, Any]) -> Recipe:
    return Recipe(
        id=int(row["id"]),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        status=parse_status(row.get("status"), RecipeStatus, RecipeStatus.PENDING),
        cook_time=clean_str(row.get("cook_time")),
        servings=clean_str(row.get("servings")),
        ingredients=to_lines(row.get("ingredients")),
        instructions=to_lines(row.get("instructions")),
        image_url=clean_str(row.get("image_url")),
        submitter_name=clean_str(row.get("submitter_name")),
        submitter_email=clean_str(row.get("submitter_email")),
        submitter_notes=clean_str(row.get("submitter_notes")),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _row_to_story(row: dict[str, Any]) -> FamilyStory:
    return FamilyStory(
        id=int(row["id"]),
        title=str(row.get("title") or ""),
        video_url=str(row.get("video_url") or ""),
        status=parse_status(row.get("status"), StoryStatus, StoryStatus.DRAFT),
        description=clean_str(row.get("description")),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _recipe_payload(draft: RecipeDraft, status: RecipeStatus) -> dict[str, Any]:
    return {
        "title": draft.title.strip(),
        "description": draft.description.strip(),
        "cook_time": clean_str(draft.cook_time),
        "servings": clean_str(draft.servings),
        "ingredients": to_lines(draft.ingredients),
        "instructions": to_lines(draft.instructions),
        "image_url": clean_str(draft.image_url),
        "submitter_name": clean_str(draft.submitter_name),
        "submitter_email": clean_str(draft.submitter_email),
        "submitter_notes": clean_str(draft.submitter_notes),
        "status": status.value,
    }


def _story_payload(draft: StoryDraft, status: StoryStatus) -> dict[str, Any]:
    return {
        "title": draft.title.strip(),
        "description": clean_str(draft.description),
        "video_url": draft.video_url.strip(),
        "status": status.value,
    }


class _SupabaseTable:
    TABLE_NAME = ""

    def __init__(self, client: Client):
        self._client = client

    def _table(self):
        return self._client.table(self.TABLE_NAME)

    def _execute(self, operation: str, query) -> Any:
        try:
            return query.execute()
        except STORE_ERRORS as error:
            logger.error("Store error during %s on %s: %s", operation, self.TABLE_NAME, error)
            raise StoreError(operation, str(error)) from error

    def _select(self, operation: str, statuses: Optional[Iterable[Any]]) -> list[dict[str, Any]]:
        query = self._table().select("*")
        if statuses is not None:
            query = query.in_("status", sorted(status.value for status in statuses))
        # id breaks created_at ties in insertion order
        query = query.order("created_at", desc=True).order("id", desc=True)
        result = self._execute(operation, query)
        return result.data or []

    def _select_one(self, operation: str, item_id: int) -> Optional[dict[str, Any]]:
        result = self._execute(operation, self._table().select("*").eq("id", item_id).limit(1))
        rows = result.data or []
        return rows[0] if rows else None

    def _insert(self, operation: str, payload: dict[str, Any]) -> dict[str, Any]:
        result = self._execute(operation, self._table().insert(payload))
        rows = result.data or []
        if not rows:
            raise StoreError(operation, "insert returned no row")
        return rows[0]

    def _update(self, operation: str, item_id: int, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        payload = {**payload, "updated_at": _now_utc().isoformat()}
        result = self._execute(operation, self._table().update(payload).eq("id", item_id))
        rows = result.data or []
        return rows[0] if rows else None

    def _delete(self, operation: str, item_id: int) -> bool:
        result = self._execute(operation, self._table().delete().eq("id", item_id))
        return bool(result.data)


class SupabaseRecipeRepository(_SupabaseTable, RecipeRepository):
    TABLE_NAME = "recipes"

    def __init__(self, client: Client):
        super().__init__(client)
        logger.info("SupabaseRecipeRepository initialized")

    def list_recipes(self, statuses: Optional[Iterable[RecipeStatus]] = None) -> list[Recipe]:
        return [_row_to_recipe(row) for row in self._select("list_recipes", statuses)]

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        row = self._select_one("get_recipe", recipe_id)
        return _row_to_recipe(row) if row else None

    def create_recipe(self, draft: RecipeDraft, status: RecipeStatus) -> Recipe:
        row = self._insert("create_recipe", _recipe_payload(draft, status))
        return _row_to_recipe(row)

    def update_recipe(self, recipe_id: int, draft: RecipeDraft, status: RecipeStatus) -> Optional[Recipe]:
        row = self._update("update_recipe", recipe_id, _recipe_payload(draft, status))
        return _row_to_recipe(row) if row else None

    def set_recipe_status(self, recipe_id: int, status: RecipeStatus) -> Optional[Recipe]:
        row = self._update("set_recipe_status", recipe_id, {"status": status.value})
        return _row_to_recipe(row) if row else None

    def delete_recipe(self, recipe_id: int) -> bool:
        return self._delete("delete_recipe", recipe_id)

    def count_recipes(self) -> int:
        result = self._execute(
            "count_recipes",
            self._table().select("id", count="exact").limit(1),
        )
        return getattr(result, "count", 0) or 0


class SupabaseStoryRepository(_SupabaseTable, StoryRepository):
    TABLE_NAME = "family_stories"

    def __init__(self, client: Client):
        super().__init__(client)
        logger.info("SupabaseStoryRepository initialized")

    def list_stories(self, statuses: Optional[Iterable[StoryStatus]] = None) -> list[FamilyStory]:
        return [_row_to_story(row) for row in self._select("list_stories", statuses)]

    def get_story(self, story_id: int) -> Optional[FamilyStory]:
        row = self._select_one("get_story", story_id)
        return _row_to_story(row) if row else None

    def create_story(self, draft: StoryDraft, status: StoryStatus) -> FamilyStory:
        row = self._insert("create_story", _story_payload(draft, status))
        return _row_to_story(row)

    def update_story(self, story_id: int, draft: StoryDraft, status: StoryStatus) -> Optional[FamilyStory]:
        row = self._update("update_story", story_id, _story_payload(draft, status))
        return _row_to_story(row) if row else None

    def set_story_status(self, story_id: int, status: StoryStatus) -> Optional[FamilyStory]:
        row = self._update("set_story_status", story_id, {"status": status.value})
        return _row_to_story(row) if row else None

    def delete_story(self, story_id: int) -> bool:
        return self._delete("delete_story", story_id)
