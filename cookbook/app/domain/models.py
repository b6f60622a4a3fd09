# cookbook/app/domain/models.py
"""
Domain models for the family cookbook.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class RecipeStatus(str, Enum):
    """Moderation status for recipes."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class StoryStatus(str, Enum):
    """Publication status for family stories."""
    DRAFT = "draft"
    PUBLISHED = "published"


class CallerRole(str, Enum):
    """Classification of the caller made by the access gate."""
    ADMIN = "admin"
    PUBLIC = "public"


@dataclass
class RecipeDraft:
    """
    Normalized recipe fields as they arrive from a write request.
    Status is left as the raw caller string; the workflow decides what it becomes.
    """
    title: str = ""
    description: str = ""
    cook_time: Optional[str] = None
    servings: Optional[str] = None
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    image_url: Optional[str] = None
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    submitter_notes: Optional[str] = None
    status: Optional[str] = None


@dataclass
class StoryDraft:
    """Normalized family story fields from a write request."""
    title: str = ""
    video_url: str = ""
    description: Optional[str] = None
    status: Optional[str] = None


@dataclass
class Recipe:
    id: int
    title: str
    description: str
    status: RecipeStatus
    cook_time: Optional[str] = None
    servings: Optional[str] = None
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    image_url: Optional[str] = None
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    submitter_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_public(self) -> bool:
        return self.status == RecipeStatus.APPROVED


@dataclass
class FamilyStory:
    id: int
    title: str
    video_url: str
    status: StoryStatus
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_public(self) -> bool:
        return self.status == StoryStatus.PUBLISHED
