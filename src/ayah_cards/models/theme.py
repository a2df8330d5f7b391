"""Theme models for card backgrounds."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ThemeCategory(str, Enum):
    """Background categories a card can be drawn on."""

    SKY = "SKY"          # Sky, cosmos, day and night
    NATURE = "NATURE"    # Earth, mountains, seas
    JANNAT = "JANNAT"    # Gardens of paradise


class ThemeDecision(BaseModel):
    """Background choice applied to every card of one grouping pass."""

    model_config = ConfigDict(frozen=True)

    background_type: ThemeCategory
    text_color: str = "white"
    opacity: float = Field(default=0.5, ge=0.0, le=1.0)

    # How the decision was reached
    scores: dict[ThemeCategory, int] = Field(default_factory=dict)
    fallback: bool = False  # True when nothing matched and the pick was random

    def to_dict(self) -> dict:
        """Convert to the card wire shape."""
        return {
            "backgroundType": self.background_type.value,
            "textColor": self.text_color,
            "opacity": self.opacity,
        }
