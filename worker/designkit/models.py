"""Quiz submission models: the incoming form payload and the stored row."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class SubmissionForm(BaseModel):
    """The quiz payload as posted by the wizard (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_idea: str = Field(min_length=10, max_length=200)
    app_name: str | None = None
    target_audience: str
    target_audience_other: str | None = None
    main_action: str
    feelings: list[str] = Field(min_length=1, max_length=3)
    color_palette: str
    design_inspiration: str
    personality_serious_fun: int = Field(ge=1, le=5)
    personality_minimal_rich: int = Field(ge=1, le=5)
    personality_gentle_motivating: int = Field(ge=1, le=5)
    dark_mode: bool
    animations: bool
    illustrations: bool
    photos: bool
    gradients: bool
    rounded_corners: bool
    name: str = Field(min_length=2)
    email: EmailStr
    opted_in_marketing: bool

    @field_validator("feelings")
    @classmethod
    def _unique_feelings(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("feelings must not repeat")
        return value

    def to_record(self) -> dict[str, Any]:
        """Map the form onto the storage row (snake_case, resolved audience)."""
        return {
            "email": self.email,
            "name": self.name,
            "app_idea": self.app_idea,
            "app_name": self.app_name or None,
            "target_audience": self.target_audience_other or self.target_audience,
            "main_action": self.main_action,
            "feelings": list(self.feelings),
            "color_palette": self.color_palette,
            "design_inspiration": self.design_inspiration,
            "personality_serious_fun": self.personality_serious_fun,
            "personality_minimal_rich": self.personality_minimal_rich,
            "personality_gentle_motivating": self.personality_gentle_motivating,
            "dark_mode": self.dark_mode,
            "animations": self.animations,
            "illustrations": self.illustrations,
            "photos": self.photos,
            "gradients": self.gradients,
            "rounded_corners": self.rounded_corners,
            "opted_in_marketing": self.opted_in_marketing,
        }


class Submission(BaseModel):
    """A stored design_kit_submissions row.

    Enum-like fields are plain strings: unknown values are carried through
    and degrade the generated artifacts instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    created_at: str | None = None
    email: str = ""
    name: str | None = None
    app_idea: str
    app_name: str | None = None
    target_audience: str
    main_action: str
    feelings: tuple[str, ...] = Field(min_length=1, max_length=3)
    color_palette: str
    design_inspiration: str | None = None
    personality_serious_fun: int = Field(default=3, ge=1, le=5)
    personality_minimal_rich: int = Field(default=3, ge=1, le=5)
    personality_gentle_motivating: int = Field(default=3, ge=1, le=5)
    dark_mode: bool = False
    animations: bool = False
    illustrations: bool = False
    photos: bool = False
    gradients: bool = False
    rounded_corners: bool = False
    generated_prompt: str | None = None
    moodboard_images: tuple[str, ...] | None = None
    email_sent: bool = False
    opted_in_marketing: bool = False


@dataclass
class DesignKit:
    """Artifacts derived from one submission."""

    prompt: str
    queries: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
