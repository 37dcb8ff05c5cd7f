"""Walking along toolpaths by length, and writing them out as machine moves."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from roughcut.paths import (
    P2,
    P3,
    UNIT_INTERVAL,
    AnimatedPos,
    MachineParams,
    PathXSeries,
    along,
)

_CUT_LINE = "LX{:.3f}Y{:.3f}Z{:.3f}F{:d}\n"
_MOVE_XYZ = "LX{:.3f}Y{:.3f}Z{:.3f}\n"
_MOVE_XY = "LX{:.3f}Y{:.3f}\n"


class ThinFilter:
    """Drops planar points that lie within a tolerance of a straight run.

    A point is written only when the run since the last written point can no
    longer be replaced by a straight line within ``devtol``.
    """

    def __init__(self, devtol: float, z: float, fcut: int) -> None:
        self.z = z
        self.fcut = fcut
        self.sqdevtol = devtol * devtol
        self.pts: list[P2] = []
        self.ixstart = 0

    def add_point(self, pt: P2, out: TextIO) -> None:
        self.pts.append(pt)
        if len(self.pts) - self.ixstart == 1:
            if len(self.pts) == 1:
                out.write(_CUT_LINE.format(pt.u, pt.v, self.z, self.fcut))
            else:
                out.write(_MOVE_XY.format(pt.u, pt.v))
            return

        base = self.pts[self.ixstart]
        vec = pt - base
        veclen = vec.length()
        if veclen == 0.0:
            # the run has closed on itself; no deviation can be measured
            return
        for mid in self.pts[self.ixstart + 1 : -1]:
            lam = UNIT_INTERVAL.push_into((vec @ (mid - base)) / veclen / veclen)
            dev = mid - along(lam, base, pt)
            if dev @ dev > self.sqdevtol:
                corner = self.pts[-2]
                out.write(_MOVE_XY.format(corner.u, corner.v))
                self.ixstart = len(self.pts) - 2
                break

    def end(self, out: TextIO) -> None:
        """Write the last point held and start afresh."""
        if self.pts:
            last = self.pts[-1]
            out.write(_MOVE_XY.format(last.u, last.v))
        self.pts.clear()
        self.ixstart = 0


class _Cursor:
    """Distance still to travel, and distance travelled so far."""

    def __init__(self, adv: float) -> None:
        self.remaining = adv
        self.advanced = 0.0

    def step(self, lenseg: float) -> float | None:
        """Travel a segment; return the fraction along it where travel stops, if it does."""
        if self.remaining >= 0 and self.remaining - lenseg <= 0.0:
            self.advanced += self.remaining
            return self.remaining / lenseg if lenseg else 0.0
        self.advanced += lenseg
        self.remaining -= lenseg
        return None


def _pass_links(
    pos: AnimatedPos,
    path: PathXSeries,
    j: int,
    i: int,
    cursor: _Cursor,
    out: TextIO | None,
    fretract: int,
    thin: ThinFilter,
) -> int | None:
    """Travel every link that follows point ``i``; None if travel stopped on one."""
    brks, links = path.brks, path.linkpths
    while True:
        pos.ilink = j
        link = links[j]
        if out is not None and link:
            thin.end(out)
            out.write(_CUT_LINE.format(link[0].x, link[0].y, link[0].z, fretract))
        for il in range(1, len(link)):
            a, b = link[il - 1], link[il]
            lam = cursor.step((b - a).length())
            if lam is not None:
                pos.iseg_on_link = il
                pos.pt_on_link = along(lam, a, b)
                pos.on_path = False
                return None
            pos.pt_on_link = b
            pos.iseg_on_link = il
            if out is not None:
                out.write(_MOVE_XYZ.format(b.x, b.y, b.z))
        pos.iseg_on_link = len(link)
        if link:
            pos.pt_on_link = link[-1]
        j += 1
        if not (j < len(brks) and i == brks[j]):
            return j


def advance(
    pos: AnimatedPos,
    path: PathXSeries,
    adv: float,
    out: TextIO | None = None,
    fcut: int = -1,
    fretract: int = -1,
    tol: float = 0.0,
) -> tuple[bool, float]:
    """Travel ``adv`` along one toolpath level, updating ``pos``.

    A negative ``adv`` travels the whole level. When ``out`` is given the
    moves passed over are written to it. Returns whether the end of the level
    was reached and the distance travelled.
    """
    pths, brks = path.pths, path.brks
    if brks and brks[-1] != len(pths):
        raise ValueError("the last break must close the path")
    if len(path.linkpths) != len(brks):
        raise ValueError("every break needs a link")

    pos.ilink = -1
    cursor = _Cursor(adv)
    if not pths:
        return True, cursor.advanced

    thin = ThinFilter(tol, path.z, fcut)
    if out is not None:
        thin.add_point(pths[0], out)

    j = 0
    for i in range(1, len(pths)):
        if j == len(brks) or i < brks[j]:
            a, b = pths[i - 1], pths[i]
            lam = cursor.step((b - a).length())
            if lam is not None:
                pos.ilink = j
                pos.iseg_on_link = 0
                pos.iseg_on_path = i
                pos.pt_on_path = along(lam, a, b)
                pos.on_path = True
                return False, cursor.advanced
            pos.pt_on_path = b
            pos.iseg_on_path = i
            if out is not None:
                if not thin.pts:
                    thin.add_point(a, out)
                thin.add_point(b, out)
        else:
            nj = _pass_links(pos, path, j, i, cursor, out, fretract, thin)
            if nj is None:
                return False, cursor.advanced
            j = nj

    if j < len(brks):
        if _pass_links(pos, path, j, len(pths), cursor, out, fretract, thin) is None:
            return False, cursor.advanced
    return True, cursor.advanced


def post_process(out: TextIO, paths: Sequence[PathXSeries], params: MachineParams) -> None:
    """Write every level of the toolpath to ``out`` as machine moves."""
    pos = AnimatedPos()
    for path in paths:
        advance(pos, path, -1.0, out, params.fcut, params.fretract, params.thintol)


def total_length(paths: Sequence[PathXSeries]) -> float:
    """The length of all cutting runs and links together."""
    pos = AnimatedPos()
    return sum(advance(pos, path, -1.0)[1] for path in paths)


def position_at(paths: Sequence[PathXSeries], length: float) -> AnimatedPos:
    """The position reached after travelling ``length`` from the start."""
    if not paths:
        raise ValueError("no toolpath levels")
    pos = AnimatedPos()
    remaining = length
    for ip, path in enumerate(paths):
        finished, travelled = advance(pos, path, remaining)
        remaining -= travelled
        if not finished:
            break
    else:
        ip = len(paths)
    pos.ipathx = min(ip, len(paths) - 1)
    return pos