# cookbook/app/infra/db/base.py
"""
Abstract base classes for the content store.
This interface allows easy swapping between different storage backends.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from cookbook.app.domain.models import (
    FamilyStory,
    Recipe,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)


class RecipeRepository(ABC):
    """
    Abstract interface for recipe persistence.

    Implementations:
    - SupabaseRecipeRepository: Postgres table accessed through Supabase
    """

    @abstractmethod
    def list_recipes(
        self,
        statuses: Optional[Iterable[RecipeStatus]] = None,
    ) -> list[Recipe]:
        """
        List recipes ordered by creation date descending.

        Args:
            statuses: Only return recipes in these statuses (None = all)

        Returns:
            List of recipes, newest first
        """
        pass

    @abstractmethod
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        """
        Get a recipe by its ID.

        Returns:
            The recipe, or None if not found
        """
        pass

    @abstractmethod
    def create_recipe(self, draft: RecipeDraft, status: RecipeStatus) -> Recipe:
        """
        Insert a new recipe.

        Args:
            draft: Validated, normalized fields
            status: Status decided by the moderation workflow

        Returns:
            The stored recipe with its assigned ID and timestamps
        """
        pass

    @abstractmethod
    def update_recipe(
        self,
        recipe_id: int,
        draft: RecipeDraft,
        status: RecipeStatus,
    ) -> Optional[Recipe]:
        """
        Replace every editable field of a recipe.

        Returns:
            The updated recipe, or None if it does not exist
        """
        pass

    @abstractmethod
    def set_recipe_status(
        self,
        recipe_id: int,
        status: RecipeStatus,
    ) -> Optional[Recipe]:
        """
        Change only the status of a recipe.

        Returns:
            The updated recipe, or None if it does not exist
        """
        pass

    @abstractmethod
    def delete_recipe(self, recipe_id: int) -> bool:
        """
        Delete a recipe.

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    def count_recipes(self) -> int:
        """Total number of stored recipes, any status."""
        pass


class StoryRepository(ABC):
    """
    Abstract interface for family story persistence.
    """

    @abstractmethod
    def list_stories(
        self,
        statuses: Optional[Iterable[StoryStatus]] = None,
    ) -> list[FamilyStory]:
        """
        List stories ordered by creation date descending.

        Args:
            statuses: Only return stories in these statuses (None = all)
        """
        pass

    @abstractmethod
    def get_story(self, story_id: int) -> Optional[FamilyStory]:
        pass

    @abstractmethod
    def create_story(self, draft: StoryDraft, status: StoryStatus) -> FamilyStory:
        pass

    @abstractmethod
    def update_story(
        self,
        story_id: int,
        draft: StoryDraft,
        status: StoryStatus,
    ) -> Optional[FamilyStory]:
        pass

    @abstractmethod
    def set_story_status(
        self,
        story_id: int,
        status: StoryStatus,
    ) -> Optional[FamilyStory]:
        pass

    @abstractmethod
    def delete_story(self, story_id: int) -> bool:
        pass
