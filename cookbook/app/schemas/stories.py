from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from cookbook.app.domain.models import FamilyStory, StoryDraft


class StoryWrite(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    videoUrl: Optional[str] = None
    status: Optional[str] = None

    def to_draft(self) -> StoryDraft:
        return StoryDraft(
            title=self.title or "",
            video_url=self.videoUrl or "",
            description=self.description,
            status=self.status,
        )


class StoryResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    videoUrl: str
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


def story_response(story: FamilyStory) -> StoryResponse:
    return StoryResponse(
        id=story.id,
        title=story.title,
        description=story.description,
        videoUrl=story.video_url,
        status=story.status.value,
        createdAt=story.created_at,
        updatedAt=story.updated_at,
    )
