from __future__ import annotations

from cookbook.app.domain.models import (
    CallerRole,
    FamilyStory,
    Recipe,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)


class TestRecipeStatus:
    def test_recipe_status_values(self) -> None:
        assert RecipeStatus.PENDING.value == "pending"
        assert RecipeStatus.APPROVED.value == "approved"
        assert RecipeStatus.REJECTED.value == "rejected"

    def test_recipe_status_is_string_enum(self) -> None:
        assert isinstance(RecipeStatus.PENDING, str)
        assert RecipeStatus.APPROVED == "approved"


class TestStoryStatus:
    def test_story_status_values(self) -> None:
        assert [status.value for status in StoryStatus] == ["draft", "published"]


class TestCallerRole:
    def test_roles(self) -> None:
        assert CallerRole.ADMIN.value == "admin"
        assert CallerRole.PUBLIC.value == "public"


class TestRecipe:
    def test_create_recipe_minimal(self) -> None:
        recipe = Recipe(id=1, title="Pie", description="desc", status=RecipeStatus.PENDING)

        assert recipe.ingredients == []
        assert recipe.instructions == []
        assert recipe.cook_time is None
        assert recipe.submitter_email is None

    def test_is_public_only_when_approved(self) -> None:
        assert Recipe(id=1, title="a", description="b", status=RecipeStatus.APPROVED).is_public is True
        assert Recipe(id=2, title="a", description="b", status=RecipeStatus.PENDING).is_public is False
        assert Recipe(id=3, title="a", description="b", status=RecipeStatus.REJECTED).is_public is False


class TestFamilyStory:
    def test_is_public_only_when_published(self) -> None:
        published = FamilyStory(id=1, title="t", video_url="v", status=StoryStatus.PUBLISHED)
        draft = FamilyStory(id=2, title="t", video_url="v", status=StoryStatus.DRAFT)

        assert published.is_public is True
        assert draft.is_public is False


class TestDrafts:
    def test_recipe_draft_defaults(self) -> None:
        draft = RecipeDraft()

        assert draft.title == ""
        assert draft.status is None
        assert draft.ingredients == []

    def test_lists_are_not_shared(self) -> None:
        first = RecipeDraft()
        second = RecipeDraft()
        first.ingredients.append("flour")

        assert second.ingredients == []

    def test_story_draft_defaults(self) -> None:
        draft = StoryDraft()

        assert draft.video_url == ""
        assert draft.description is None
