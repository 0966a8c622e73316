"""Pydantic schemas and helpers for validating catalog payloads and responses."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.clothing_item import ClothingItem
from models.taxonomy import normalise_tags

HEX_COLOR_PATTERN = r"^#?[0-9a-fA-F]{6}$"

CategoryName = Literal["shirt", "tshirt", "trousers", "jeans", "blazer", "sneakers", "formal_shoes", "boots"]
FitName = Literal["slim", "regular", "oversized"]
FabricName = Literal["cotton", "denim", "wool", "leather", "synthetic"]


class ClothingItemInput(BaseModel):
    """Input contract for a single catalog entry."""

    item_id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    category: CategoryName
    primary_color: str = Field(pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    fit: FitName
    fabric: FabricName
    occasion_tags: List[str] = Field(min_length=1)
    created_at: Optional[str] = None

    @field_validator("occasion_tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("occasion_tags")
    @classmethod
    def _validate_tags(cls, value: List[str]) -> List[str]:
        tags = normalise_tags(tag.strip() for tag in value)
        if not tags:
            raise ValueError("occasion_tags must contain at least one non-blank tag")
        return tags

    def to_item(self, user_id: str) -> ClothingItem:
        return ClothingItem(
            item_id=self.item_id,
            user_id=user_id,
            category=self.category,
            primary_color=self.primary_color,
            secondary_color=self.secondary_color,
            fit=self.fit,
            fabric=self.fabric,
            occasion_tags=tuple(self.occasion_tags),
            created_at=self.created_at,
        )


class GenerateOutfitsRequest(BaseModel):
    """Envelope for an outfit generation call."""

    user_id: str = Field(min_length=1)
    occasion: str = ""
    max_outfits: Optional[int] = None
    items: List[ClothingItemInput] = Field(default_factory=list)


class GenerationSummaryModel(BaseModel):
    """Opaque history entry recorded when a generation returns outfits."""

    user_id: str
    occasion: str
    outfit_count: int
    timestamp: str
    history_id: str


class GenerateOutfitsResponse(BaseModel):
    """Structure returned by the application facade."""

    status: Literal["ok", "error", "needs_review"]
    outfits: List[Dict[str, Any]] = Field(default_factory=list)
    message: Optional[str] = None
    summary: Optional[GenerationSummaryModel] = None
    diagnostics: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "HEX_COLOR_PATTERN",
    "ClothingItemInput",
    "GenerateOutfitsRequest",
    "GenerateOutfitsResponse",
    "GenerationSummaryModel",
    "ValidationResult",
    "validation_failure",
]
