import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def clamp(x: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, x))


def scale(x: float, in_low: float, in_high: float, out_low: float, out_high: float) -> float:
    """Linearly remap x from [in_low, in_high] to [out_low, out_high]."""
    return (x - in_low) * (out_high - out_low) / (in_high - in_low) + out_low


def round_half_up(x: float) -> int:
    # .5 always goes up, unlike round()
    return int(math.floor(x + 0.5))
