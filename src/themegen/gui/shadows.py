"""Small builders for box-shadow values used by the theme tokens.

All helpers are plain string transforms. Nothing is validated: a bad hex or
alpha simply ends up in the stylesheet as-is.
"""
from __future__ import annotations

from typing import Union

Number = Union[int, float]


def _num(value: Number) -> str:
    # 1.0 -> "1", 0.4 -> "0.4", -0.33 -> "-0.33"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def pseudo_3d_border(x: Number, y: Number, thickness: Number, color: str, alpha: str) -> str:
    """Hard-edged pseudo-3D border: a subpixel box-shadow with no blur."""
    return f"{_num(x)}px {_num(y)}px 0 {_num(thickness)}px #{color}{alpha}"


def light_p3d(
    alpha: str = "40",
    y: Number = 0.4,
    x: Number = 0,
    thickness: Number = 0.8,
    color: str = "000000",
) -> str:
    """Dark, low-offset edge for the light theme."""
    return pseudo_3d_border(x, y, thickness, color, alpha)


def dark_p3d(
    alpha: str = "30",
    y: Number = -0.33,
    x: Number = 0,
    thickness: Number = 1,
    color: str = "ffffff",
) -> str:
    """Light, upward highlight for the dark themes."""
    return pseudo_3d_border(x, y, thickness, color, alpha)


def ff_render_fix(alpha: str, color: str) -> str:
    """1px solid ring that hides Firefox's subpixel shadow rendering."""
    return f"0 0 0 1px #{color}{alpha}"


def light_ffrf(alpha: str = "12") -> str:
    return ff_render_fix(alpha, "000000")


def dark_ffrf(alpha: str = "15") -> str:
    return ff_render_fix(alpha, "ffffff")


def inset(value: str) -> str:
    return value + " inset"


def join_shadows(*parts: str) -> str:
    """Join shadow layers into one value. The first layer draws on top."""
    return ", ".join(parts)
