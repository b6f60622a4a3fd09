from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field

from cookbook.app.domain.models import Recipe, RecipeDraft
from cookbook.app.domain.text import to_lines

# Lists arrive either as arrays or as one newline-separated string.
Lines = Annotated[list[str], BeforeValidator(to_lines)]


class RecipeSubmission(BaseModel):
    """Public submission payload. Any status sent by the client is ignored."""
    title: Optional[str] = None
    description: Optional[str] = None
    cookTime: Optional[str] = None
    servings: Optional[str] = None
    ingredients: Lines = Field(default_factory=list)
    instructions: Lines = Field(default_factory=list)
    imageUrl: Optional[str] = None
    submitterName: Optional[str] = None
    submitterEmail: Optional[str] = None
    submitterNotes: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Grandma's Apple Pie",
                "description": "Flaky crust, cinnamon apples.",
                "cookTime": "1 hr",
                "servings": "8",
                "ingredients": ["6 apples", "1 tsp cinnamon"],
                "instructions": ["Make the crust.", "Bake at 375 F for 50 minutes."],
                "submitterName": "Aunt May",
            }
        }
    }

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            title=self.title or "",
            description=self.description or "",
            cook_time=self.cookTime,
            servings=self.servings,
            ingredients=list(self.ingredients),
            instructions=list(self.instructions),
            image_url=self.imageUrl,
            submitter_name=self.submitterName,
            submitter_email=self.submitterEmail,
            submitter_notes=self.submitterNotes,
        )


class RecipeWrite(RecipeSubmission):
    """Admin create/update payload."""
    status: Optional[str] = None

    def to_draft(self) -> RecipeDraft:
        draft = super().to_draft()
        draft.status = self.status
        return draft


class StatusChange(BaseModel):
    status: Optional[str] = None


class RecipeResponse(BaseModel):
    id: int
    title: str
    description: str
    cookTime: Optional[str] = None
    servings: Optional[str] = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    imageUrl: Optional[str] = None
    status: str
    submitterName: Optional[str] = None
    submitterEmail: Optional[str] = None
    submitterNotes: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


def recipe_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        id=recipe.id,
        title=recipe.title,
        description=recipe.description,
        cookTime=recipe.cook_time,
        servings=recipe.servings,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        imageUrl=recipe.image_url,
        status=recipe.status.value,
        submitterName=recipe.submitter_name,
        submitterEmail=recipe.submitter_email,
        submitterNotes=recipe.submitter_notes,
        createdAt=recipe.created_at,
        updatedAt=recipe.updated_at,
    )
