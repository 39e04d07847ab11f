"""
Surface function catalog.

A closed set of height fields z = f(x, y). Each function works on plain
floats and on numpy arrays alike, so the sampler can evaluate a whole
grid row at once.
"""

from __future__ import annotations

from enum import Enum

import numpy as np


class UnknownFunctionError(ValueError):
    """Raised when a name matches no catalog entry."""


class SurfaceFunction(Enum):
    SCHAFFER = "f1"
    EGGBOX = "f2"
    SINC = "f3"
    MOGULS = "f4"
    SADDLE = "f5"

    @property
    def alias(self) -> str:
        return self.name.lower()

    def __call__(self, x, y):
        return _FORMULAS[self](x, y)


def _schaffer(x, y):
    return np.sin(np.hypot(x, y))


def _eggbox(x, y):
    return np.power(2.0, np.sin(x)) * np.power(2.0, np.sin(y)) / 12


def _sinc(x, y):
    r = np.hypot(x, y)
    return np.sin(r) / r  # 0/0 at the origin


def _moguls(x, y):
    return np.sin(x * y / 10) / 10


def _saddle(x, y):
    return x * x - y * y


_FORMULAS = {
    SurfaceFunction.SCHAFFER: _schaffer,
    SurfaceFunction.EGGBOX: _eggbox,
    SurfaceFunction.SINC: _sinc,
    SurfaceFunction.MOGULS: _moguls,
    SurfaceFunction.SADDLE: _saddle,
}


def names() -> list[str]:
    """Aliases in catalog order, as shown to users."""
    return [f.alias for f in SurfaceFunction]


def resolve(name: str | SurfaceFunction) -> SurfaceFunction:
    """Look up a function by id ("f3") or alias ("sinc")."""
    if isinstance(name, SurfaceFunction):
        return name
    for f in SurfaceFunction:
        if name == f.value or name == f.alias:
            return f
    raise UnknownFunctionError(
        "should be one of " + ", ".join(f'"{n}"' for n in names())
    )


def evaluate(function_id: str | SurfaceFunction, x: float, y: float) -> float:
    """
    Evaluate a catalog function at a single point.

    Singular points come back as NaN or ±inf, never as an exception.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(resolve(function_id)(np.float64(x), np.float64(y)))
