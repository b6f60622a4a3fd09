# cookbook/app/domain/workflow.py
"""
Moderation workflow.

Decides which status a write ends up with and which statuses a caller may
read. Every function here is pure: the outcome depends only on the incoming
values, the record's current status and the caller's role.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional, Type, TypeVar

from cookbook.app.domain.errors import ValidationError
from cookbook.app.domain.models import (
    CallerRole,
    RecipeDraft,
    RecipeStatus,
    StoryDraft,
    StoryStatus,
)

S = TypeVar("S", bound=Enum)

SCOPE_ALL = "all"

PUBLIC_RECIPE_STATUSES: FrozenSet[RecipeStatus] = frozenset({RecipeStatus.APPROVED})
PUBLIC_STORY_STATUSES: FrozenSet[StoryStatus] = frozenset({StoryStatus.PUBLISHED})


def match_status(value: object, status_cls: Type[S], strip: bool = True) -> Optional[S]:
    """Case-insensitive lookup of a status value; None when it is not a member."""
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        return None
    wanted = (value.strip() if strip else value).lower()
    for member in status_cls:
        if member.value == wanted:
            return member
    return None


def parse_status(value: object, status_cls: Type[S], fallback: S) -> S:
    return match_status(value, status_cls) or fallback


def require_status(value: object, status_cls: Type[S]) -> S:
    """Strict variant used by the status transition endpoints: only case is ignored."""
    status = match_status(value, status_cls, strip=False)
    if status is None:
        allowed = ", ".join(member.value for member in status_cls)
        raise ValidationError([f"Status must be one of: {allowed}."])
    return status


# Status assignment on write

def submission_status() -> RecipeStatus:
    return RecipeStatus.PENDING


def recipe_status_for_create(value: object) -> RecipeStatus:
    return parse_status(value, RecipeStatus, RecipeStatus.APPROVED)


def recipe_status_for_update(value: object, current: RecipeStatus) -> RecipeStatus:
    # Absent or unknown status leaves the record where it is.
    return parse_status(value, RecipeStatus, current)


def story_status_for_create(value: object) -> StoryStatus:
    return parse_status(value, StoryStatus, StoryStatus.PUBLISHED)


def story_status_for_update(value: object, current: StoryStatus) -> StoryStatus:
    return parse_status(value, StoryStatus, current)


# Field validation

def validate_recipe(draft: RecipeDraft) -> None:
    errors = []
    if not (draft.title or "").strip():
        errors.append("Title is required.")
    if not (draft.description or "").strip():
        errors.append("Description is required.")
    if errors:
        raise ValidationError(errors)


def validate_story(draft: StoryDraft) -> None:
    errors = []
    if not (draft.title or "").strip():
        errors.append("Title is required.")
    if not (draft.video_url or "").strip():
        errors.append("Video URL is required.")
    if errors:
        raise ValidationError(errors)


# Visibility on read

def wants_all(scope: Optional[str]) -> bool:
    return (scope or "").strip().lower() == SCOPE_ALL


def visible_recipe_statuses(
    role: CallerRole, scope: Optional[str] = None
) -> Optional[FrozenSet[RecipeStatus]]:
    """Statuses a caller may read on the public endpoints. None means unrestricted."""
    if role == CallerRole.ADMIN and wants_all(scope):
        return None
    return PUBLIC_RECIPE_STATUSES


def visible_story_statuses(
    role: CallerRole, scope: Optional[str] = None
) -> Optional[FrozenSet[StoryStatus]]:
    if role == CallerRole.ADMIN and wants_all(scope):
        return None
    return PUBLIC_STORY_STATUSES


def is_visible(status: Enum, allowed: Optional[FrozenSet]) -> bool:
    return allowed is None or status in allowed


def admin_status_filter(value: Optional[str], status_cls: Type[S]) -> Optional[S]:
    """Admin list filter; values outside the enum are ignored."""
    if not value:
        return None
    return match_status(value, status_cls)
