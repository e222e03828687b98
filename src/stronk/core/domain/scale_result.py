"""
ScaleResult — Outcome of one table lookup

Immutable Pydantic model produced once per scaling call and consumed by the
presentation layer.
"""

from enum import Enum

from pydantic import BaseModel, Field

from stronk.core.domain.proficiency import Proficiency
from stronk.core.domain.statistic import Statistic


# =============================================================================
# ENUMS
# =============================================================================


class ScaleMethod(str, Enum):
    """How the rescaled value was obtained from the table."""

    EXACT = "Exact"
    INTERPOLATED = "Interpolated"
    EXTRAPOLATED = "Extrapolated"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# SCALE RESULT MODEL
# =============================================================================


class ScaleResult(BaseModel):
    """
    Rescaled statistic with the proficiency rank and method of the lookup.

    - EXACT: the value matched a current-row entry
    - INTERPOLATED: the value fell between two entries; proficiency is the lower one
    - EXTRAPOLATED: the value fell outside the row; proficiency is the edge column
    """

    stat: Statistic = Field(..., description="Rescaled statistic (same kind)")
    proficiency: Proficiency = Field(..., description="Proficiency rank of the matched column")
    method: ScaleMethod = Field(..., description="Lookup method")

    model_config = {"frozen": True}
