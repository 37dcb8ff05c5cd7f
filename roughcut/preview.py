"""What part of a toolpath is shown while it is replayed."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from roughcut.paths import P2, P3, AnimatedPos, PathXSeries, convert_gz


class ReplayStyle(enum.Enum):
    """Whether a replay shows everything from the start or only the current level."""

    FROM_START = "from_start"
    ONE_LEVEL = "one_level"


def bad_gen_bound() -> list[P2]:
    """A rough closed stock boundary: part of a circle closed off by straight edges."""
    centre = P2(1.5, 1.5)
    pts = [
        centre + P2(math.cos(th), math.sin(th)) * 1.5
        for th in (2.0 * math.pi * j / 30 for j in range(-10, 10))
    ]
    pts.append(pts[-1] - P2(1.3, 0.0))
    pts.append(pts[0] + P2(0.0, 1.0))
    pts.append(pts[0])
    return pts


def _keep(strips: list[tuple[str, list[P3]]], kind: str, strip: list[P3]) -> None:
    # a strip of one vertex draws nothing
    if len(strip) >= 2:
        strips.append((kind, strip))


def visible_polylines(
    paths: Sequence[PathXSeries],
    pos: AnimatedPos,
    poslast: AnimatedPos,
    animated: bool,
) -> list[tuple[str, list[P3]]]:
    """The polylines shown between ``poslast`` and ``pos``.

    Each item is a kind, ``"cut"`` or ``"link"``, with its points. When
    animating, the level ``pos`` is on is cut short at the position reached.
    """
    strips: list[tuple[str, list[P3]]] = []
    for ip in range(poslast.ipathx, pos.ipathx + 1):
        path = paths[ip]
        final = animated and ip == pos.ipathx
        pths, brks, z = path.pths, path.brks, path.z

        if pths:
            strip = [convert_gz(pths[0], z)]
            limit = pos.iseg_on_path if final else len(pths)
            j = 0
            for i in range(1, limit):
                if j < len(brks) and i >= brks[j]:
                    _keep(strips, "cut", strip)
                    strip = []
                    while j < len(brks) and i == brks[j]:
                        j += 1
                strip.append(convert_gz(pths[i], z))
            if final:
                strip.append(convert_gz(pos.pt_on_path, z))
            _keep(strips, "cut", strip)

        nlinks = pos.ilink if final else len(brks)
        for link in path.linkpths[: max(nlinks, 0)]:
            _keep(strips, "link", list(link))
        if final and 0 <= pos.ilink < len(brks):
            link = path.linkpths[pos.ilink]
            if link:
                if pos.iseg_on_link > len(link):
                    raise ValueError("position lies beyond the end of its link")
                _keep(strips, "link", list(link[: pos.iseg_on_link]) + [pos.pt_on_link])
    return strips


def start_level(pos: AnimatedPos, style: ReplayStyle) -> int:
    """The first level shown for a replay in the given style."""
    return pos.ipathx if style is ReplayStyle.ONE_LEVEL else 0