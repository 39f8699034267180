"""Render resolved shapes as human-readable equations."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .config import ResolverConfig, get_resolver_config
from .model import ResolvedCircle, ResolvedLine, ResolvedLineUp, ResolvedShape


def format_number(value: float) -> str:
    """Shortest round-trip positional form: ``3.0 -> '3'``, ``1e-07 -> '0.0000001'``."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim="-")


def _offset_part(var: str, coord: float, tol: float) -> str:
    shift = -coord
    if abs(shift) < tol:
        return var
    if shift > 0:
        return f"({var}+{format_number(shift)})"
    return f"({var}-{format_number(-shift)})"


def _circle_equation(shape: ResolvedCircle, cfg: ResolverConfig) -> str:
    cx, cy = shape.center
    x_part = _offset_part("x", cx, cfg.zero_tolerance)
    y_part = _offset_part("y", cy, cfg.zero_tolerance)
    return f"{x_part}^2 + {y_part}^2 = {format_number(shape.radius)}^2"


def _line_equation(shape: ResolvedLine, cfg: ResolverConfig) -> str:
    tol = cfg.zero_tolerance
    k, m = shape.k, shape.m
    if abs(k) < tol:
        kx_part = ""
    elif abs(k - 1.0) < tol:
        kx_part = "x"
    elif abs(k + 1.0) < tol:
        kx_part = "-x"
    else:
        kx_part = f"{format_number(k)}x"

    if abs(m) < tol:
        m_part = ""
    elif m < 0:
        m_part = f"- {-m:.{cfg.intercept_precision}f}"
    else:
        m_part = f"+ {m:.{cfg.intercept_precision}f}"

    if not kx_part and not m_part:
        return "y = 0"
    return f"y = {kx_part} {m_part}"


def as_equation(shape: ResolvedShape, config: Optional[ResolverConfig] = None) -> str:
    """Return the canonical equation of ``shape``.

    Circles render as ``(x-3)^2 + (y+2)^2 = 5^2``, lines as
    ``y = 2x + 1.000000000`` and vertical lines as ``x = 4``.
    """

    cfg = config or get_resolver_config()
    if isinstance(shape, ResolvedCircle):
        return _circle_equation(shape, cfg)
    if isinstance(shape, ResolvedLine):
        return _line_equation(shape, cfg)
    if isinstance(shape, ResolvedLineUp):
        return f"x = {format_number(shape.x)}"
    raise TypeError(f"cannot format {type(shape).__name__} as an equation")


equation_string = as_equation

__all__ = ["as_equation", "equation_string", "format_number"]
