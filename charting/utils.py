import math


def round_half_up(x: float) -> int:
    """Round halves towards positive infinity instead of to even."""
    return int(math.floor(x + 0.5))


def format_number(v: float) -> str:
    """Shortest plain rendering of a number: 100.0 -> '100', 0.5 -> '0.5'."""
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)
