"""The set of surfaces and toolpaths loaded together, and the roughing parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from roughcut.paths import Interval, MachineParams, Toolpath
from roughcut.settings import CoreRoughSettings


def machine_params(settings: CoreRoughSettings, surface_zmax: float) -> MachineParams:
    """Machining parameters for a core roughing run over a surface topping out at ``surface_zmax``."""
    return MachineParams(
        leadoffdz=0.1,
        leadofflen=1.1,
        leadoffrad=2.0,
        retractzheight=surface_zmax + 5.0,
        leadoffsamplestep=0.6,
        toolcornerrad=settings.cornerrad,
        toolflatrad=settings.flatrad,
        samplestep=0.4,
        stepdown=settings.stepdown,
        clearcuspheight=settings.stepdown / 3.0,
        triangleweaveres=0.51,
        flatradweaveres=0.71,
        dchangright=0.17,
        dchangrightoncontour=0.37,
        dchangleft=-0.41,
        dchangefreespace=-0.6,
        sidecutdisplch=0.0,
        fcut=1000,
        fretract=5000,
        thintol=0.0001,
    )


@dataclass
class Workspace:
    """Surfaces and toolpaths held together, in the order they were added.

    A toolpath is a ``Toolpath``; anything else is taken to be a surface and
    must offer ``bounds()`` and a ``visible`` flag.
    """

    items: list[Any] = field(default_factory=list)

    def add(self, item: Any) -> int:
        """Add an item and return its index."""
        self.items.append(item)
        return len(self.items) - 1

    def combined_extent(self) -> tuple[Interval, Interval, Interval]:
        """The x, y and z ranges that take in every item."""
        if not self.items:
            raise ValueError("workspace is empty")
        xrg = yrg = zrg = None
        for item in self.items:
            ix, iy, iz = item.bounds()
            if xrg is None:
                xrg, yrg, zrg = ix, iy, iz
            else:
                xrg, yrg, zrg = xrg.union(ix), yrg.union(iy), zrg.union(iz)
        return xrg, yrg, zrg

    def actor_labels(self) -> list[tuple[str, bool]]:
        """A label and visibility for each item, numbering each kind on its own."""
        counts = {"Surface": 0, "Boundary": 0, "Toolpath": 0}
        labels: list[tuple[str, bool]] = []
        for item in self.items:
            if isinstance(item, Toolpath):
                kind = "Boundary" if item.is_boundary() else "Toolpath"
            else:
                kind = "Surface"
            labels.append((f"{kind} {counts[kind]}", bool(item.visible)))
            counts[kind] += 1
        return labels

    def animatable(self) -> list[Toolpath]:
        """The toolpaths that have a tool and so can be replayed."""
        return [
            item
            for item in self.items
            if isinstance(item, Toolpath) and not item.is_boundary()
        ]

    def selected_boundary(self) -> Toolpath | None:
        """The first visible toolpath, or None."""
        return next(
            (
                item
                for item in self.items
                if isinstance(item, Toolpath) and item.visible
            ),
            None,
        )