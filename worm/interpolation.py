"""
Render interpolation between two logic ticks
Game logic advances in whole cells; the renderer blends the previous and the
current generation of body positions by the fraction of the tick period that
has elapsed.
"""

import numpy as np


def interpolation_fraction(elapsed_ms, period_ms):
    """Fraction of the tick period elapsed, clamped to [0, 1]"""
    if period_ms <= 0:
        return 1.0
    return max(0.0, min(elapsed_ms / period_ms, 1.0))


def interpolate_body(previous, current, fraction):
    """
    Blend two generations of body positions

    Args:
        previous: Body cells at the start of the last tick (tail first)
        current: Body cells now (tail first)
        fraction: Interpolation fraction in [0, 1]

    Returns:
        float array of shape (len(current), 2). A segment with no predecessor
        (the new head after growing) stays at its current cell.
    """
    cur = np.asarray(current, dtype=float).reshape(-1, 2)
    prev = cur.copy()
    n = min(len(previous), len(cur))
    if n:
        prev[:n] = np.asarray(previous[:n], dtype=float).reshape(-1, 2)
    return prev + (cur - prev) * fraction
