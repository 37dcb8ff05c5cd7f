"""Planar and spatial points, intervals and the toolpath containers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class P2:
    """A point or vector in the plane."""

    u: float
    v: float

    def __add__(self, other: P2) -> P2:
        return P2(self.u + other.u, self.v + other.v)

    def __sub__(self, other: P2) -> P2:
        return P2(self.u - other.u, self.v - other.v)

    def __mul__(self, k: float) -> P2:
        return P2(self.u * k, self.v * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> P2:
        return P2(self.u / k, self.v / k)

    def __neg__(self) -> P2:
        return P2(-self.u, -self.v)

    def __matmul__(self, other: P2) -> float:
        """Dot product."""
        return self.u * other.u + self.v * other.v

    def length(self) -> float:
        return math.hypot(self.u, self.v)

    def aperp(self) -> P2:
        """The vector turned a quarter turn anticlockwise."""
        return P2(-self.v, self.u)

    def cperp(self) -> P2:
        """The vector turned a quarter turn clockwise."""
        return P2(self.v, -self.u)

    def arg(self) -> float:
        """The direction angle in radians, in [0, 2*pi)."""
        a = math.atan2(self.v, self.u)
        return a + 2 * math.pi if a < 0.0 else a


@dataclass(frozen=True)
class P3:
    """A point or vector in space."""

    x: float
    y: float
    z: float

    def __add__(self, other: P3) -> P3:
        return P3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: P3) -> P3:
        return P3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> P3:
        return P3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> P3:
        return P3(self.x / k, self.y / k, self.z / k)

    def __matmul__(self, other: P3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def along(lam, a, b):
    """The point a fraction ``lam`` of the way from ``a`` to ``b``."""
    return a + (b - a) * lam


def convert_gz(p: P2, z: float) -> P3:
    """Lift a planar point to height ``z``."""
    return P3(p.u, p.v, z)


@dataclass(frozen=True)
class Interval:
    """A closed range of real numbers."""

    lo: float
    hi: float

    def inflate(self, r: float) -> Interval:
        return Interval(self.lo - r, self.hi + r)

    def half(self) -> float:
        return (self.lo + self.hi) / 2.0

    def leng(self) -> float:
        return self.hi - self.lo

    def union(self, other: Interval) -> Interval:
        return Interval(min(self.lo, other.lo), max(self.hi, other.hi))

    def push_into(self, x: float) -> float:
        """Clamp ``x`` into the interval."""
        return min(max(x, self.lo), self.hi)

    def __contains__(self, x: float) -> bool:
        return self.lo <= x <= self.hi


UNIT_INTERVAL = Interval(0.0, 1.0)


@dataclass
class MachineParams:
    """Cutting, linking and steering parameters for toolpath generation."""

    # linking
    leadoffdz: float = 0.1
    leadofflen: float = 1.1
    leadoffrad: float = 2.0
    retractzheight: float = 5.0
    leadoffsamplestep: float = 0.6
    # cutting
    toolcornerrad: float = 3.0
    toolflatrad: float = 0.0
    samplestep: float = 0.4
    stepdown: float = 15.0
    clearcuspheight: float = 5.0
    # weave
    triangleweaveres: float = 0.51
    flatradweaveres: float = 0.71
    # steering
    dchangright: float = 0.17
    dchangrightoncontour: float = 0.37
    dchangleft: float = -0.41
    dchangefreespace: float = -0.6
    sidecutdisplch: float = 0.0
    # output
    fcut: int = 1000
    fretract: int = 5000
    thintol: float = 0.0001


@dataclass
class PathXSeries:
    """One level of toolpath: points at a height, broken into runs joined by links.

    ``brks`` holds the index at which each run ends; ``linkpths`` holds the
    linking motion that follows each break, so the two lists have equal length.
    """

    z: float = 0.0
    pths: list[P2] = field(default_factory=list)
    brks: list[int] = field(default_factory=list)
    linkpths: list[list[P3]] = field(default_factory=list)

    def add(self, pt: P2) -> None:
        self.pths.append(pt)

    def break_path(self) -> None:
        """End the current run and open an empty link after it."""
        self.brks.append(len(self.pths))
        self.linkpths.append([])

    def append(self, points: Iterable[P2]) -> None:
        """Add a whole run of points and end it."""
        self.pths.extend(points)
        self.break_path()

    def segments(self) -> Iterator[list[P2]]:
        """Yield each completed run of points; points after the last break are left out."""
        start = 0
        for end in self.brks:
            yield self.pths[start:end]
            start = end

    def copy(self) -> PathXSeries:
        return PathXSeries(
            self.z,
            list(self.pths),
            list(self.brks),
            [list(link) for link in self.linkpths],
        )


def make_rect_boundary(xrg: Interval, yrg: Interval, z: float) -> PathXSeries:
    """A closed rectangular path around the given ranges at height ``z``."""
    px = PathXSeries(z=z)
    px.append(
        [
            P2(xrg.lo, yrg.lo),
            P2(xrg.hi, yrg.lo),
            P2(xrg.hi, yrg.hi),
            P2(xrg.lo, yrg.hi),
            P2(xrg.lo, yrg.lo),
        ]
    )
    return px


@dataclass
class AnimatedPos:
    """A position along a toolpath, on a cutting run or on a link."""

    ipathx: int = 0
    pt_on_link: P3 = field(default_factory=lambda: P3(0.0, 0.0, 0.0))
    ilink: int = -1
    iseg_on_link: int = 0
    on_path: bool = True
    pt_on_path: P2 = field(default_factory=lambda: P2(0.0, 0.0))
    iseg_on_path: int = 0


@dataclass
class Toolpath:
    """A set of toolpath levels with the tool that cuts them and the boundary used.

    A toolpath with neither a corner nor a flat radius is a plain boundary.
    """

    paths: list[PathXSeries] = field(default_factory=list)
    corner_rad: float = 0.0
    flat_rad: float = 0.0
    bound: PathXSeries = field(default_factory=PathXSeries)
    visible: bool = True
    pos: AnimatedPos = field(default_factory=AnimatedPos)
    poslast: AnimatedPos = field(default_factory=AnimatedPos)
    animated: bool = False
    forward: bool = False

    def add_path(self, path: PathXSeries) -> None:
        self.paths.append(path.copy())

    def is_boundary(self) -> bool:
        return self.corner_rad == 0 and self.flat_rad == 0

    def bounds(self) -> tuple[Interval, Interval, Interval]:
        """The x, y and z extents of all completed runs."""
        points = [
            convert_gz(p, path.z)
            for path in self.paths
            for run in path.segments()
            for p in run
        ]
        if not points:
            raise ValueError("toolpath has no points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return (
            Interval(min(xs), max(xs)),
            Interval(min(ys), max(ys)),
            Interval(min(zs), max(zs)),
        )

    def rect_boundary(self, z: float) -> PathXSeries:
        """A rectangle around this toolpath's plan extent at height ``z``."""
        xrg, yrg, _ = self.bounds()
        return make_rect_boundary(xrg, yrg, z)

    def draw_whole(self) -> None:
        """Set the shown interval to the whole toolpath and stop animating."""
        if not self.paths or not self.paths[-1].linkpths:
            return
        last = self.paths[-1]
        pos = self.pos
        pos.ipathx = len(self.paths) - 1
        self.poslast.ipathx = 0
        pos.ilink = len(last.linkpths) - 1
        link = last.linkpths[pos.ilink]
        pos.iseg_on_link = len(link) - 1
        pos.iseg_on_path = len(last.pths) - 1
        if link:
            pos.pt_on_link = link[-1]
        pos.pt_on_path = last.pths[-1]
        self.animated = False
        self.forward = False