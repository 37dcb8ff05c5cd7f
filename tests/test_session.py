from dataclasses import dataclass

import pytest

from roughcut.paths import Interval, Toolpath, make_rect_boundary
from roughcut.session import Workspace, machine_params
from roughcut.settings import CoreRoughSettings


@dataclass
class FakeSurface:
    xrg: Interval
    yrg: Interval
    zrg: Interval
    visible: bool = True

    def bounds(self):
        return self.xrg, self.yrg, self.zrg


def _surface(visible=True):
    return FakeSurface(Interval(-5.0, 5.0), Interval(0.0, 20.0), Interval(-3.0, 7.0), visible)


def _boundary(visible=True):
    path = make_rect_boundary(Interval(0.0, 10.0), Interval(0.0, 10.0), 8.0)
    return Toolpath(paths=[path], visible=visible)


def _toolpath(visible=True):
    path = make_rect_boundary(Interval(1.0, 30.0), Interval(2.0, 4.0), 2.0)
    return Toolpath(paths=[path], corner_rad=3.0, visible=visible)


def test_machine_params_fixed_values():
    params = machine_params(CoreRoughSettings(), 10.0)
    assert params.retractzheight - 10.0 == pytest.approx(5.0)
    assert params.samplestep == 0.4
    assert params.leadoffrad == 2.0
    assert params.dchangright == 0.17
    assert params.fcut == 1000
    assert params.fretract == 5000


def test_machine_params_takes_settings():
    settings = CoreRoughSettings(cornerrad=2.5, flatrad=1.0, stepdown=15.0, stepin=1.0)
    params = machine_params(settings, 0.0)
    assert params.toolcornerrad == 2.5
    assert params.toolflatrad == 1.0
    assert params.stepdown == 15.0
    assert params.clearcuspheight == pytest.approx(5.0)


def test_add_returns_index():
    ws = Workspace()
    assert ws.add(_surface()) == 0
    assert ws.add(_boundary()) == 1
    assert len(ws.items) == 2


def test_combined_extent_contains_every_item():
    ws = Workspace()
    items = [_surface(), _boundary(), _toolpath()]
    for item in items:
        ws.add(item)
    xrg, yrg, zrg = ws.combined_extent()
    for item in items:
        ix, iy, iz = item.bounds()
        assert xrg.lo <= ix.lo and ix.hi <= xrg.hi
        assert yrg.lo <= iy.lo and iy.hi <= yrg.hi
        assert zrg.lo <= iz.lo and iz.hi <= zrg.hi
    assert xrg.lo == -5.0 and xrg.hi == 30.0


def test_combined_extent_single_item_is_its_bounds():
    ws = Workspace()
    surf = _surface()
    ws.add(surf)
    assert ws.combined_extent() == surf.bounds()


def test_combined_extent_empty_raises():
    with pytest.raises(ValueError):
        Workspace().combined_extent()


def test_actor_labels_number_each_kind():
    ws = Workspace()
    for item in [_surface(), _boundary(), _toolpath(), _surface(visible=False), _boundary()]:
        ws.add(item)
    assert ws.actor_labels() == [
        ("Surface 0", True),
        ("Boundary 0", True),
        ("Toolpath 0", True),
        ("Surface 1", False),
        ("Boundary 1", True),
    ]


def test_animatable_excludes_boundaries():
    ws = Workspace()
    first = _toolpath()
    second = _toolpath(visible=False)
    for item in [_boundary(), first, _surface(), second]:
        ws.add(item)
    result = ws.animatable()
    assert len(result) == 2
    assert result[0] is first
    assert result[1] is second


def test_selected_boundary_first_visible_toolpath():
    ws = Workspace()
    hidden = _boundary(visible=False)
    shown = _boundary()
    for item in [_surface(), hidden, shown, _toolpath()]:
        ws.add(item)
    assert ws.selected_boundary() is shown


def test_selected_boundary_none_when_nothing_visible():
    ws = Workspace()
    ws.add(_surface())
    ws.add(_boundary(visible=False))
    assert ws.selected_boundary() is None