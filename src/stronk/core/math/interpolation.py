"""
Interpolation — Mapping a Value Between Two Table Rows

The scaling engine locates a statistic inside the current-level row of a
reference table and maps it onto the target-level row. Two primitives cover
every case:

- interpolate: the value lies strictly between two current-row entries
- extrapolate: the value lies outside the current row entirely

CRITICAL INVARIANTS:
1. interpolate maps the open interval ]al, ar[ onto the closed interval [bl, br]
2. The target interval may be a single point, the source interval may not
3. extrapolate preserves the signed offset from the edge, never a ratio
4. A broken precondition → ScalingContractViolation (table data is malformed)

FORMULAS:
    interpolate: result = bl + ((val - al) / (ar - al)) * (br - bl)
    extrapolate: value <= cur_edge → tgt_edge - (cur_edge - value)
                 value >  cur_edge → tgt_edge + (value - cur_edge)
"""

from stronk.core.math.numerical_safeguards import float_eq, is_valid_float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScalingContractViolation(Exception):
    """
    Internal-consistency violation of the scaling engine.

    Raised when a reference table breaks its invariants or when a caller
    breaks a numeric contract. This is a programmer/data error, never a user
    input error, so callers must not swallow it.
    """
    pass


# =============================================================================
# INTERPOLATE
# =============================================================================


def interpolate(al: float, ar: float, bl: float, br: float, val: float) -> float:
    """
    Map a value from ]al, ar[ to [bl, br].

    Args:
        al: Left bound of the source interval (current row)
        ar: Right bound of the source interval, strictly greater than al
        bl: Left bound of the target interval (target row)
        br: Right bound of the target interval, bl <= br
        val: Value strictly inside ]al, ar[

    Returns:
        The linearly mapped value, inside [bl, br]

    Raises:
        ScalingContractViolation: If an interval or the value is malformed

    Examples:
        >>> interpolate(2.0, 5.0, 7.0, 10.0, 3.0)
        8.0
        >>> interpolate(1.0, 5.0, 4.0, 4.0, 2.0)
        4.0
    """
    if not all(is_valid_float(x) for x in (al, ar, bl, br, val)):
        raise ScalingContractViolation(
            f"interpolate received NaN/Inf: al={al}, ar={ar}, bl={bl}, br={br}, val={val}"
        )

    if not al < ar:
        raise ScalingContractViolation(f"source interval is empty: al={al} >= ar={ar}")

    if not bl <= br:
        raise ScalingContractViolation(f"target interval is reversed: bl={bl} > br={br}")

    if not al < val < ar:
        raise ScalingContractViolation(f"value {val} is not strictly inside ]{al}, {ar}[")

    ratio = (val - al) / (ar - al)
    result = bl + ratio * (br - bl)

    # Rounding cannot push the result out of the target interval
    return min(max(result, bl), br)


# =============================================================================
# EXTRAPOLATE
# =============================================================================


def extrapolate(cur_edge: float, tgt_edge: float, value: float) -> float:
    """
    Map a value that is outside the current row by x to outside the target
    row by the same x.

    Args:
        cur_edge: Edge entry of the current row (first or last column)
        tgt_edge: Same column's entry in the target row
        value: Statistic value, different from cur_edge

    Returns:
        tgt_edge shifted by the signed distance between value and cur_edge

    Raises:
        ScalingContractViolation: If value equals cur_edge (that is an exact match)

    Examples:
        >>> extrapolate(9.0, 3.0, 14.0)
        8.0
        >>> extrapolate(9.0, 3.0, 2.0)
        -4.0
    """
    if float_eq(cur_edge, value):
        raise ScalingContractViolation(
            f"value {value} sits on the edge {cur_edge}: nothing to extrapolate"
        )

    if value <= cur_edge:
        diff = cur_edge - value
        return tgt_edge - diff
    else:
        diff = value - cur_edge
        return tgt_edge + diff
