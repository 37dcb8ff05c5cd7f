"""Operator settings for core roughing and the machining bounding box."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from roughcut.paths import Interval


def read_double(text: str) -> float:
    """Parse a number typed into a field.

    Leading blanks are allowed. Trailing characters, digit separators and
    empty text are not. Raises ValueError if the text is not a number.
    """
    body = text.lstrip()
    if not body or body != body.rstrip() or "_" in body:
        raise ValueError(f"not a number: {text!r}")
    try:
        return float(body)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None


@dataclass
class CoreRoughSettings:
    """Tool and step sizes chosen for a core roughing run."""

    cornerrad: float = 3.0
    flatrad: float = 0.0
    stepdown: float = 15.0
    stepin: float = 1.5


@dataclass(frozen=True)
class BoundingBox:
    """The x, y and z ranges of a machining region; each range must not be reversed."""

    xrg: Interval
    yrg: Interval
    zrg: Interval

    def __post_init__(self) -> None:
        for name, rg in (("x", self.xrg), ("y", self.yrg), ("z", self.zrg)):
            if rg.lo > rg.hi:
                raise ValueError(
                    f"{name} range is reversed: {rg.lo} > {rg.hi}"
                )


def parse_bounding_box(values: Sequence[str]) -> BoundingBox:
    """Build a box from six texts: x min, x max, y min, y max, z min, z max.

    Raises ValueError if a text is not a number, the count is wrong, or a
    range is reversed.
    """
    if len(values) != 6:
        raise ValueError(f"expected six values, got {len(values)}")
    xlo, xhi, ylo, yhi, zlo, zhi = (read_double(v) for v in values)
    return BoundingBox(Interval(xlo, xhi), Interval(ylo, yhi), Interval(zlo, zhi))