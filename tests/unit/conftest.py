from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import pytest

from cookbook.app.config import Settings
from cookbook.app.domain.models import (
    FamilyStory,
    Recipe,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)
from cookbook.app.domain.text import clean_str, to_lines
from cookbook.app.infra.db.base import RecipeRepository, StoryRepository

BASE_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class RecipeRepositoryStub(RecipeRepository):
    def __init__(self) -> None:
        self.rows: dict[int, Recipe] = {}
        self._next_id = 1
        self.calls: list[str] = []

    def _tick(self) -> datetime:
        return BASE_TIME + timedelta(minutes=self._next_id)

    def list_recipes(self, statuses: Optional[Iterable[RecipeStatus]] = None) -> list[Recipe]:
        self.calls.append("list_recipes")
        allowed = set(statuses) if statuses is not None else None
        rows = [r for r in self.rows.values() if allowed is None or r.status in allowed]
        return sorted(rows, key=lambda r: (r.created_at, r.id), reverse=True)

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        self.calls.append("get_recipe")
        return self.rows.get(recipe_id)

    def create_recipe(self, draft: RecipeDraft, status: RecipeStatus) -> Recipe:
        self.calls.append("create_recipe")
        now = self._tick()
        recipe = Recipe(
            id=self._next_id,
            title=draft.title.strip(),
            description=draft.description.strip(),
            status=status,
            cook_time=clean_str(draft.cook_time),
            servings=clean_str(draft.servings),
            ingredients=to_lines(draft.ingredients),
            instructions=to_lines(draft.instructions),
            image_url=clean_str(draft.image_url),
            submitter_name=clean_str(draft.submitter_name),
            submitter_email=clean_str(draft.submitter_email),
            submitter_notes=clean_str(draft.submitter_notes),
            created_at=now,
            updated_at=now,
        )
        self.rows[recipe.id] = recipe
        self._next_id += 1
        return recipe

    def update_recipe(self, recipe_id: int, draft: RecipeDraft, status: RecipeStatus) -> Optional[Recipe]:
        self.calls.append("update_recipe")
        current = self.rows.get(recipe_id)
        if current is None:
            return None
        updated = replace(
            current,
            title=draft.title.strip(),
            description=draft.description.strip(),
            status=status,
            cook_time=clean_str(draft.cook_time),
            servings=clean_str(draft.servings),
            ingredients=to_lines(draft.ingredients),
            instructions=to_lines(draft.instructions),
            image_url=clean_str(draft.image_url),
            submitter_name=clean_str(draft.submitter_name),
            submitter_email=clean_str(draft.submitter_email),
            submitter_notes=clean_str(draft.submitter_notes),
        )
        self.rows[recipe_id] = updated
        return updated

    def set_recipe_status(self, recipe_id: int, status: RecipeStatus) -> Optional[Recipe]:
        self.calls.append("set_recipe_status")
        current = self.rows.get(recipe_id)
        if current is None:
            return None
        updated = replace(current, status=status)
        self.rows[recipe_id] = updated
        return updated

    def delete_recipe(self, recipe_id: int) -> bool:
        self.calls.append("delete_recipe")
        return self.rows.pop(recipe_id, None) is not None

    def count_recipes(self) -> int:
        return len(self.rows)


class StoryRepositoryStub(StoryRepository):
    def __init__(self) -> None:
        self.rows: dict[int, FamilyStory] = {}
        self._next_id = 1
        self.calls: list[str] = []

    def list_stories(self, statuses: Optional[Iterable[StoryStatus]] = None) -> list[FamilyStory]:
        self.calls.append("list_stories")
        allowed = set(statuses) if statuses is not None else None
        rows = [s for s in self.rows.values() if allowed is None or s.status in allowed]
        return sorted(rows, key=lambda s: (s.created_at, s.id), reverse=True)

    def get_story(self, story_id: int) -> Optional[FamilyStory]:
        self.calls.append("get_story")
        return self.rows.get(story_id)

    def create_story(self, draft: StoryDraft, status: StoryStatus) -> FamilyStory:
        self.calls.append("create_story")
        now = BASE_TIME + timedelta(minutes=self._next_id)
        story = FamilyStory(
            id=self._next_id,
            title=draft.title.strip(),
            video_url=draft.video_url.strip(),
            status=status,
            description=clean_str(draft.description),
            created_at=now,
            updated_at=now,
        )
        self.rows[story.id] = story
        self._next_id += 1
        return story

    def update_story(self, story_id: int, draft: StoryDraft, status: StoryStatus) -> Optional[FamilyStory]:
        self.calls.append("update_story")
        current = self.rows.get(story_id)
        if current is None:
            return None
        updated = replace(
            current,
            title=draft.title.strip(),
            video_url=draft.video_url.strip(),
            description=clean_str(draft.description),
            status=status,
        )
        self.rows[story_id] = updated
        return updated

    def set_story_status(self, story_id: int, status: StoryStatus) -> Optional[FamilyStory]:
        self.calls.append("set_story_status")
        current = self.rows.get(story_id)
        if current is None:
            return None
        updated = replace(current, status=status)
        self.rows[story_id] = updated
        return updated

    def delete_story(self, story_id: int) -> bool:
        self.calls.append("delete_story")
        return self.rows.pop(story_id, None) is not None


def create_test_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "SUPABASE_URL": "https://test.supabase.co",
        "SUPABASE_SERVICE_ROLE_KEY": "test-key",
        "ADMIN_USERNAME": "admin",
        "ADMIN_PASSWORD": "family-secret",
        "AUTH_SECRET_KEY": "test-signing-key",
        "RUN_MIGRATIONS": False,
        "SEED_SAMPLE_CONTENT": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def recipe_repo() -> RecipeRepositoryStub:
    return RecipeRepositoryStub()


@pytest.fixture
def story_repo() -> StoryRepositoryStub:
    return StoryRepositoryStub()


@pytest.fixture
def settings() -> Settings:
    return create_test_settings()
