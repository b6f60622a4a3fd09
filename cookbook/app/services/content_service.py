# cookbook/app/services/content_service.py
"""
Content services.
Apply the moderation workflow to recipe and family story operations.
"""
from __future__ import annotations

import logging
from typing import Optional

from cookbook.app.domain import workflow
from cookbook.app.domain.errors import NotFoundError
from cookbook.app.domain.models import (
    CallerRole,
    FamilyStory,
    Recipe,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)
from cookbook.app.infra.db.base import RecipeRepository, StoryRepository

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Service for the recipe cookbook.

    Responsibilities:
    - Filter reads by the caller's visibility
    - Decide the status of every write
    - Validate required fields before touching the store
    """

    KIND = "Recipe"

    def __init__(self, repository: RecipeRepository):
        self._repo = repository

    def list_visible(self, role: CallerRole, scope: Optional[str] = None) -> list[Recipe]:
        """
        List recipes the caller may see on the public endpoints.

        Args:
            role: Caller classification from the access gate
            scope: "all" widens the list to every status for admins
        """
        return self._repo.list_recipes(workflow.visible_recipe_statuses(role, scope))

    def get_visible(self, recipe_id: int, role: CallerRole, scope: Optional[str] = None) -> Recipe:
        """
        Get a recipe if the caller may see it.

        Raises:
            NotFoundError: If the recipe does not exist or is hidden from this caller
        """
        recipe = self._repo.get_recipe(recipe_id)
        allowed = workflow.visible_recipe_statuses(role, scope)
        if recipe is None or not workflow.is_visible(recipe.status, allowed):
            raise NotFoundError(self.KIND, recipe_id)
        return recipe

    def list_all(self, status: Optional[str] = None) -> list[Recipe]:
        status_filter = workflow.admin_status_filter(status, RecipeStatus)
        return self._repo.list_recipes([status_filter] if status_filter else None)

    def get(self, recipe_id: int) -> Recipe:
        recipe = self._repo.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError(self.KIND, recipe_id)
        return recipe

    def submit(self, draft: RecipeDraft) -> Recipe:
        """Public submission. The stored status is always pending."""
        workflow.validate_recipe(draft)
        recipe = self._repo.create_recipe(draft, workflow.submission_status())
        logger.info("Recipe submitted for review: id=%s, title=%s", recipe.id, recipe.title)
        return recipe

    def create(self, draft: RecipeDraft) -> Recipe:
        workflow.validate_recipe(draft)
        status = workflow.recipe_status_for_create(draft.status)
        recipe = self._repo.create_recipe(draft, status)
        logger.info("Recipe created: id=%s, status=%s", recipe.id, recipe.status.value)
        return recipe

    def update(self, recipe_id: int, draft: RecipeDraft) -> Recipe:
        workflow.validate_recipe(draft)
        current = self.get(recipe_id)
        status = workflow.recipe_status_for_update(draft.status, current.status)
        recipe = self._repo.update_recipe(recipe_id, draft, status)
        if recipe is None:
            raise NotFoundError(self.KIND, recipe_id)
        logger.info("Recipe updated: id=%s, status=%s", recipe.id, recipe.status.value)
        return recipe

    def set_status(self, recipe_id: int, status: object) -> Recipe:
        new_status = workflow.require_status(status, RecipeStatus)
        recipe = self._repo.set_recipe_status(recipe_id, new_status)
        if recipe is None:
            raise NotFoundError(self.KIND, recipe_id)
        logger.info("Recipe status changed: id=%s, status=%s", recipe_id, new_status.value)
        return recipe

    def delete(self, recipe_id: int) -> None:
        if not self._repo.delete_recipe(recipe_id):
            raise NotFoundError(self.KIND, recipe_id)
        logger.info("Recipe deleted: id=%s", recipe_id)


class StoryService:
    """
    Service for the family story archive. Stories are written by admins only.
    """

    KIND = "Family story"

    def __init__(self, repository: StoryRepository):
        self._repo = repository

    def list_visible(self, role: CallerRole, scope: Optional[str] = None) -> list[FamilyStory]:
        return self._repo.list_stories(workflow.visible_story_statuses(role, scope))

    def get_visible(self, story_id: int, role: CallerRole, scope: Optional[str] = None) -> FamilyStory:
        story = self._repo.get_story(story_id)
        allowed = workflow.visible_story_statuses(role, scope)
        if story is None or not workflow.is_visible(story.status, allowed):
            raise NotFoundError(self.KIND, story_id)
        return story

    def list_all(self, status: Optional[str] = None) -> list[FamilyStory]:
        status_filter = workflow.admin_status_filter(status, StoryStatus)
        return self._repo.list_stories([status_filter] if status_filter else None)

    def get(self, story_id: int) -> FamilyStory:
        story = self._repo.get_story(story_id)
        if story is None:
            raise NotFoundError(self.KIND, story_id)
        return story

    def create(self, draft: StoryDraft) -> FamilyStory:
        workflow.validate_story(draft)
        status = workflow.story_status_for_create(draft.status)
        story = self._repo.create_story(draft, status)
        logger.info("Family story created: id=%s, status=%s", story.id, story.status.value)
        return story

    def update(self, story_id: int, draft: StoryDraft) -> FamilyStory:
        workflow.validate_story(draft)
        current = self.get(story_id)
        status = workflow.story_status_for_update(draft.status, current.status)
        story = self._repo.update_story(story_id, draft, status)
        if story is None:
            raise NotFoundError(self.KIND, story_id)
        logger.info("Family story updated: id=%s, status=%s", story.id, story.status.value)
        return story

    def set_status(self, story_id: int, status: object) -> FamilyStory:
        new_status = workflow.require_status(status, StoryStatus)
        story = self._repo.set_story_status(story_id, new_status)
        if story is None:
            raise NotFoundError(self.KIND, story_id)
        logger.info("Family story status changed: id=%s, status=%s", story_id, new_status.value)
        return story

    def delete(self, story_id: int) -> None:
        if not self._repo.delete_story(story_id):
            raise NotFoundError(self.KIND, story_id)
        logger.info("Family story deleted: id=%s", story_id)
