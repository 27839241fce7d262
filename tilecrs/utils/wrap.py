import math
from typing import Tuple


def wrap_num(
    x: float, wrap_range: Tuple[float, float], include_max: bool = True
) -> float:
    """
    Wrap a number into a half-open range using modular arithmetic.

    With include_max set, the result lies in (min, max]: the lower bound is
    folded onto the upper one, so -180 wraps to 180 for the longitude range.
    Otherwise the result lies in [min, max).

    Args:
        x: The number to wrap
        wrap_range: A (min, max) tuple with min < max
        include_max: Whether the upper bound belongs to the range. Default is True.

    Returns:
        The wrapped number. NaN and infinite inputs give NaN.

    Examples:
        >>> wrap_num(190, (-180, 180))
        -170.0
        >>> wrap_num(-180, (-180, 180))
        180.0
        >>> wrap_num(180, (-180, 180), include_max=False)
        -180.0
    """
    lo, hi = wrap_range
    wrapped = (x - lo) % (hi - lo) + lo

    if include_max and wrapped == lo:
        return float(hi)
    if not include_max and wrapped == hi:
        # float rounding of tiny negative offsets
        return float(lo)
    return float(wrapped)


def format_num(num: float, precision: int = 6) -> float:
    """
    Round a number to the given number of decimals, half away from zero.
    """
    if not math.isfinite(num):
        return num
    factor = 10**precision
    rounded = math.floor(abs(num) * factor + 0.5) / factor
    return math.copysign(rounded, num)
