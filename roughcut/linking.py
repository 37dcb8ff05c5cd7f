"""Linking motions between the end of one cutting run and the start of the next."""

from __future__ import annotations

import math

from roughcut.paths import P2, P3, MachineParams, along, convert_gz

_UNIT_TOL = 1e-6
_TWO_PI = 2.0 * math.pi


def _require_unit(direction: P2, name: str) -> None:
    if abs(direction.length() - 1.0) > _UNIT_TOL:
        raise ValueError(f"{name} must be a unit vector, got {direction}")


def _on_circle(centre: P2, angle: float, rad: float) -> P2:
    return centre - P2(math.cos(angle), math.sin(angle)) * rad


def _wrapped_range(a_from: float, a_to: float) -> tuple[float, float]:
    """Normalise two angles so the sweep from ``a_from`` to ``a_to`` runs forwards."""
    if a_from > _TWO_PI:
        a_from -= _TWO_PI
    if a_to > _TWO_PI:
        a_to -= _TWO_PI
    if a_from > a_to:
        a_to += _TWO_PI
    return a_from, a_to


def build_retract(pts: P3, pte: P3, params: MachineParams) -> list[P3]:
    """Lift from ``pts`` to the retract height, move across, and drop to ``pte``."""
    h = params.retractzheight
    if not (h > pts.z and h > pte.z):
        raise ValueError(
            f"retract height {h} must lie above both ends ({pts.z}, {pte.z})"
        )
    return [pts, P3(pts.x, pts.y, h), P3(pte.x, pte.y, h), pte]


def build_curl(pts: P2, dirs: P2, params: MachineParams, curl_in: bool) -> list[P2]:
    """An arc of length ``leadofflen`` tangent to ``dirs`` at ``pts``.

    A curl out starts at ``pts``; a curl in ends there.
    """
    _require_unit(dirs, "dirs")
    rad = params.leadoffrad
    step = params.leadoffsamplestep / rad

    centre = pts + dirs.aperp() * rad
    adiff = params.leadofflen / rad
    if curl_in:
        a_end = (centre - pts).arg()
        a = a_end - adiff
    else:
        a = (centre - pts).arg()
        a_end = a + adiff

    curl = [_on_circle(centre, a, rad)]
    a += step
    while a <= a_end:
        curl.append(_on_circle(centre, a, rad))
        a += step
    curl.append(_on_circle(centre, a_end, rad))
    return curl


def build_link(pts: P2, dirs: P2, pte: P2, dire: P2, params: MachineParams) -> list[P2]:
    """A planar link leaving ``pts`` along ``dirs`` and arriving at ``pte`` along ``dire``.

    The link follows an arc from the start, the common tangent of the two arcs,
    and an arc into the end. A zero ``dire`` means the end has no arrival
    direction and the tangent runs straight to ``pte``.
    """
    _require_unit(dirs, "dirs")
    no_arrival = dire == P2(0.0, 0.0)
    if not no_arrival:
        _require_unit(dire, "dire")

    rad = params.leadoffrad
    step = params.leadoffsamplestep / rad

    cts = pts + dirs.aperp() * rad
    cte = pte + dire.aperp() * rad

    tdir = cte - cts
    tdirp = tdir.aperp() * rad / tdir.length()

    tps = cts - tdirp
    tpe = pte if no_arrival else cte - tdirp

    link: list[P2] = []
    a, a_to = _wrapped_range((cts - pts).arg(), (cts - tps).arg())
    while a <= a_to:
        link.append(_on_circle(cts, a, rad))
        a += step
    if not link or link[-1] != tps:
        link.append(tps)

    if not no_arrival:
        a, a_to = _wrapped_range((cte - tpe).arg(), (cte - pte).arg())
        while a <= a_to:
            link.append(_on_circle(cte, a, rad))
            a += step
    if link[-1] != pte:
        link.append(pte)
    return link


def build_link_z(lnk2d: list[P2], z: float, params: MachineParams) -> list[P3]:
    """Lift a planar link off the cutting level with a ramp at each end.

    The link rises by ``leadoffdz`` over ``leadofflen`` from its start, runs at
    that height, and ramps back down to ``z`` at its end.
    """
    n = len(lnk2d)
    if n < 2:
        raise ValueError("a link needs at least two points")

    def seg(i: int, j: int) -> float:
        return (lnk2d[i] - lnk2d[j]).length()

    totallen = sum(seg(i, i - 1) for i in range(1, n))
    if totallen == 0.0:
        raise ValueError("a link must have non-zero length")

    dz_top = params.leadoffdz
    leadofflen = params.leadofflen
    if totallen < 2.0 * leadofflen:
        leadofflen = 0.5 * totallen

    start = [convert_gz(lnk2d[0], z)]
    ixstart = 1
    run = 0.0
    while ixstart < n:
        run += seg(ixstart, ixstart - 1)
        if run > leadofflen:
            break
        start.append(convert_gz(lnk2d[ixstart], z + run * dz_top / leadofflen))
        ixstart += 1
    if ixstart < n:
        run += seg(ixstart, ixstart - 1)
        lam = dz_top / (run * dz_top / leadofflen)
        pt = along(lam, lnk2d[ixstart - 1], lnk2d[ixstart])
        start.append(convert_gz(pt, z + dz_top))

    end = [convert_gz(lnk2d[-1], z)]
    ixend = n - 2
    run = 0.0
    while ixend > ixstart:
        run += seg(ixend, ixend + 1)
        if run > leadofflen:
            break
        end.append(convert_gz(lnk2d[ixend], z + run * dz_top / leadofflen))
        ixend -= 1
    if ixend >= ixstart:
        run += seg(ixend, ixend + 1)
        lam = dz_top / (run * dz_top / leadofflen)
        pt = along(lam, lnk2d[ixend + 1], lnk2d[ixend])
        end.append(convert_gz(pt, z + dz_top))

    middle = [convert_gz(p, z + dz_top) for p in lnk2d[ixstart : ixend + 1]]
    return start + middle + end[::-1]