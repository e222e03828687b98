"""
Damage — Typed damage components and their aggregate

Immutable Pydantic models for a parsed damage specification such as
"2d8+11 piercing plus 1d6 fire".

Component order is significant: the first component is the main damage
(usually physical) and is the one the component rescaler adjusts first.
"""

from pydantic import BaseModel, Field


# =============================================================================
# MODELS
# =============================================================================


class DamageComponent(BaseModel):
    """One typed part of a damage specification (expected value + type)."""

    average_value: float = Field(..., ge=0, allow_inf_nan=False, description="Expected damage")
    damage_type: str = Field(..., min_length=1, description="Damage type (e.g. 'fire')")

    model_config = {"frozen": True}


class Damage(BaseModel):
    """
    Ordered, non-empty list of damage components.

    Immutable model (frozen=True). Rescaling builds a new instance.
    """

    components: tuple[DamageComponent, ...] = Field(
        ..., min_length=1, description="Damage components, main component first"
    )

    model_config = {"frozen": True}

    def total_average_value(self) -> float:
        """Sum of the component expected values."""
        return sum(component.average_value for component in self.components)

    def damage_types(self) -> list[str]:
        return [component.damage_type for component in self.components]
