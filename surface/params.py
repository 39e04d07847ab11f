"""
Request parameters → RenderConfig.

Overlays user-supplied form/query values on a base config. Each known
parameter is coerced to its declared type; the first bad key aborts the
whole parse. Mappings don't promise a key order, so when a request has
several bad keys, which one gets reported is unspecified.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from surface.color import HexColorError, decode_hex
from surface.functions import UnknownFunctionError, resolve
from surface.state import RenderConfig

FormValue = Union[str, Sequence[str]]


class RenderParameterError(ValueError):
    """Base class for every rejected request parameter."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class ParameterTypeError(RenderParameterError):
    """The value does not parse as the parameter's type."""


class ParameterValueError(RenderParameterError):
    """The value parses but is not acceptable."""


class MissingValueError(ParameterValueError):
    """The key was sent without any value."""


class UnknownParameterError(RenderParameterError):
    """The key is not a render parameter."""


# ASCII-only numerals: no surrounding whitespace, no "_" separators.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_int(name: str, raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ParameterTypeError(name, f'parameter "{name}" value should be an integer')
    value = int(raw)
    if value <= 0:
        raise ParameterValueError(name, f'parameter "{name}" value should be positive')
    return value


def _parse_float(name: str, raw: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise ParameterTypeError(name, f'parameter "{name}" value should be a float')
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise ParameterValueError(name, f'parameter "{name}" value should be a positive finite number')
    return value


def _parse_color(name: str, raw: str):
    try:
        return decode_hex(raw)
    except HexColorError as e:
        raise ParameterValueError(name, f'parameter "{name}" value error: {e}') from e


def _parse_function(name: str, raw: str):
    try:
        return resolve(raw)
    except UnknownFunctionError as e:
        raise ParameterValueError(name, f'parameter "{name}" value {e}') from e


# parameter name → (RenderConfig field, parser)
PARAMETERS: dict[str, tuple[str, Callable[[str, str], Any]]] = {
    "width": ("canvas_width", _parse_int),
    "height": ("canvas_height", _parse_int),
    "cells": ("grid_cells", _parse_int),
    "xyrange": ("domain_range", _parse_float),
    "lowest": ("low_color", _parse_color),
    "highest": ("high_color", _parse_color),
    "func": ("surface_function", _parse_function),
}

# Sent by the browser front end for its own use; accepted and ignored.
IGNORED_PARAMETERS = frozenset({"background"})


def _first_value(name: str, value: FormValue) -> str:
    if isinstance(value, str):
        return value
    if len(value) == 0:
        raise MissingValueError(name, f'no value for parameter "{name}"')
    return value[0]


def parse_render_params(
    form: Mapping[str, FormValue],
    base: Optional[RenderConfig] = None,
) -> RenderConfig:
    """
    Build the RenderConfig for a request.

    Args:
        form: Parameter name → value, or → list of values (first wins).
        base: Defaults to overlay; RenderConfig() when omitted.

    Raises:
        RenderParameterError: On the first unknown key or bad value.
    """
    overrides: dict[str, Any] = {}
    for name, value in form.items():
        raw = _first_value(name, value)
        if name in IGNORED_PARAMETERS:
            continue
        if name not in PARAMETERS:
            raise UnknownParameterError(name, f'wrong parameter "{name}"')
        field_name, parser = PARAMETERS[name]
        overrides[field_name] = parser(name, raw)

    if base is None:
        base = RenderConfig()
    return base.with_overrides(**overrides)
