from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
from scipy.interpolate import PchipInterpolator

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Tick step for ~count ticks over [start, stop], as 1/2/5 x 10^k.
    Negative values encode the inverse step (-10 means 0.1) so small steps stay exact.
    """
    if count <= 0:
        return math.inf
    step = (stop - start) / count
    if step == 0:
        return 0.0
    if step < 0 or not math.isfinite(step):
        return math.inf
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_domain(start: float, stop: float, count: int = 10) -> Tuple[float, float]:
    """Extend [start, stop] outward to round tick steps."""
    prestep = None
    while True:
        step = tick_increment(start, stop, count)
        if step == prestep or step == 0 or not math.isfinite(step):
            return start, stop
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        else:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        prestep = step


def nice_upper_bound(value: float, count: int = 10) -> float:
    """Upper bound of the rounded [0, value] domain (e.g. 137 -> 140, 47 -> 50)."""
    if value is None or value <= 0:
        return 0.0
    return nice_domain(0.0, float(value), count)[1]


def monotone_curve(
    xs: Sequence[float],
    ys: Sequence[float],
    *,
    samples_per_segment: int = 16,
) -> Tuple[list[float], list[float]]:
    """
    Dense points along a monotone cubic through (xs, ys).
    The curve hits every input point and stays within neighbouring y values.
    xs must be strictly increasing.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if len(x) < 2:
        return x.tolist(), y.tolist()

    f = PchipInterpolator(x, y)
    n = max(1, int(samples_per_segment))
    parts = [np.linspace(x[i], x[i + 1], n, endpoint=False) for i in range(len(x) - 1)]
    grid = np.concatenate(parts + [x[-1:]])
    yy = f(grid)
    # pin the knots exactly
    yy[::n] = y
    return grid.tolist(), yy.tolist()
