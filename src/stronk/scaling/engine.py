"""
Scaling Engine — rescale a statistic from one level to another

Locates the statistic's value in the current-level row of its reference table
and produces the equivalent value in the target-level row.

Order of checks:
1. Outside [row[0], row[-1]] → EXTRAPOLATED from the violated edge (warning)
2. Equal (within EPS_FLOAT_EQ) to an entry → EXACT
3. Strictly between entries i and i+1 → INTERPOLATED, proficiency of column i

Given the table invariants exactly one case applies; falling through means
the table is malformed and raises ScalingContractViolation.
"""

import logging

from stronk.core.domain.levels import Levels
from stronk.core.domain.scale_result import ScaleMethod, ScaleResult
from stronk.core.domain.stat_table import StatTable
from stronk.core.domain.statistic import Statistic
from stronk.core.math.interpolation import (
    ScalingContractViolation,
    extrapolate,
    interpolate,
)
from stronk.core.math.numerical_safeguards import float_eq
from stronk.tables.registry import get_table_for_statistic

logger = logging.getLogger(__name__)


def _format_value(value: float) -> str:
    return f"{value:g}"


def scale_by_table(levels: Levels, stat: Statistic, table: StatTable) -> ScaleResult:
    """
    Rescale a statistic using an explicit reference table.

    Args:
        levels: Current and target levels
        stat: Statistic valid at levels.current
        table: Reference table for stat.kind

    Returns:
        ScaleResult with the statistic valid at levels.target

    Raises:
        ScalingContractViolation: If the table is malformed
    """
    cur_row = table.row(levels.current_row())
    tgt_row = table.row(levels.target_row())

    cur_min = cur_row[0]
    cur_max = cur_row[-1]

    # Within tolerance of an edge is an exact match, not an extrapolation
    too_low = stat.value < cur_min and not float_eq(stat.value, cur_min)
    too_high = stat.value > cur_max and not float_eq(stat.value, cur_max)

    if too_low or too_high:
        if too_low:
            logger.warning(
                "%s %s is too low for a level %d creature: minimum %s",
                stat.kind.display_name,
                _format_value(stat.value),
                levels.current,
                _format_value(cur_min),
            )
            edge = 0
        else:
            logger.warning(
                "%s %s is too high for a level %d creature: maximum %s",
                stat.kind.display_name,
                _format_value(stat.value),
                levels.current,
                _format_value(cur_max),
            )
            edge = len(cur_row) - 1

        scaled = extrapolate(cur_row[edge], tgt_row[edge], stat.value)
        return ScaleResult(
            stat=Statistic(kind=stat.kind, value=scaled),
            proficiency=table.proficiencies[edge],
            method=ScaleMethod.EXTRAPOLATED,
        )

    for i, entry in enumerate(cur_row):
        if float_eq(entry, stat.value):
            return ScaleResult(
                stat=Statistic(kind=stat.kind, value=tgt_row[i]),
                proficiency=table.proficiencies[i],
                method=ScaleMethod.EXACT,
            )

        if i < len(cur_row) - 1 and entry < stat.value < cur_row[i + 1]:
            scaled = interpolate(entry, cur_row[i + 1], tgt_row[i], tgt_row[i + 1], stat.value)
            return ScaleResult(
                stat=Statistic(kind=stat.kind, value=scaled),
                proficiency=table.proficiencies[i],
                method=ScaleMethod.INTERPOLATED,
            )

    raise ScalingContractViolation(
        f"{stat.kind.display_name} {stat.value} matched no column of the level "
        f"{levels.current} row {list(cur_row)}: table is malformed"
    )


def scale_statistic(
    levels: Levels,
    stat: Statistic,
    table: StatTable | None = None,
) -> ScaleResult:
    """
    Rescale a statistic, resolving its reference table from its kind when no
    table is given.
    """
    if table is None:
        table = get_table_for_statistic(stat.kind)

    return scale_by_table(levels, stat, table)
