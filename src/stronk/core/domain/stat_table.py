"""
StatTable — Level × proficiency reference table of one statistic

Immutable Pydantic model. Rows are levels MIN_LEVEL..MAX_LEVEL, columns are
proficiency ranks.

INVARIANTS (checked at construction):
1. One row per level (num_levels() rows)
2. Every row has one column per proficiency label, at least one column
3. Values never decrease left-to-right within a row
4. Values never decrease top-to-bottom within a column
5. Proficiency labels never decrease across columns

A table breaking these is malformed data, not user input: the scaling engine
relies on them to always find an exact, interpolated or extrapolated match.
"""

from pydantic import BaseModel, Field, model_validator

from stronk.core.domain.levels import MIN_LEVEL, num_levels
from stronk.core.domain.proficiency import Proficiency
from stronk.core.math.numerical_safeguards import is_valid_float


class StatTable(BaseModel):
    """Reference table: values[row][column], proficiencies[column]."""

    values: tuple[tuple[float, ...], ...] = Field(..., description="Rows of reference values")
    proficiencies: tuple[Proficiency, ...] = Field(
        ..., min_length=1, description="Proficiency rank of each column"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_table_invariants(self) -> "StatTable":
        """Check shape and monotonicity of the whole table."""
        rows = self.values
        columns = len(self.proficiencies)

        if len(rows) != num_levels():
            raise ValueError(f"table has {len(rows)} rows, expected {num_levels()}")

        for i, row in enumerate(rows):
            if len(row) != columns:
                raise ValueError(
                    f"row for level {i + MIN_LEVEL} has {len(row)} columns, expected {columns}"
                )
            if not all(is_valid_float(x) for x in row):
                raise ValueError(f"row for level {i + MIN_LEVEL} contains NaN/Inf")

        for i, row in enumerate(rows):
            level = i + MIN_LEVEL
            for j in range(columns - 1):
                if row[j] > row[j + 1]:
                    raise ValueError(
                        f"level {level}: column {j} ({row[j]}) > column {j + 1} ({row[j + 1]})"
                    )
            if i + 1 < len(rows):
                below = rows[i + 1]
                for j in range(columns):
                    if row[j] > below[j]:
                        raise ValueError(
                            f"column {j}: level {level} ({row[j]}) > level {level + 1} ({below[j]})"
                        )

        for j in range(columns - 1):
            if self.proficiencies[j] > self.proficiencies[j + 1]:
                raise ValueError(
                    f"proficiencies out of order: {self.proficiencies[j].label} "
                    f"before {self.proficiencies[j + 1].label}"
                )

        return self

    def row(self, row_index: int) -> tuple[float, ...]:
        return self.values[row_index]

    def num_columns(self) -> int:
        return len(self.proficiencies)
