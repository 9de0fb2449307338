"""
Unit tests for the path builder and arc geometry
"""
import math
import pytest
import numpy as np

from snakeline.config import LayoutConfig
from snakeline.layout.path import (
    arc_center,
    build_guides,
    build_path,
    path_polyline,
    sample_arc,
    to_svg_path,
)
from snakeline.layout.slots import build_slots
from snakeline.layout.types import PathCommand, Slot
from snakeline.tests.unit.test_slots import row_positions


def path_for(n, scale=1.0):
    config = LayoutConfig()
    positions = row_positions(n, scale)
    slots = build_slots(positions, scale, config)
    return build_path(positions, slots, scale, config), slots


@pytest.mark.unit
class TestBuildPath:

    def test_empty(self):
        assert build_path([], [], 1.0, LayoutConfig()) == ()

    def test_single_entry(self):
        path, _ = path_for(1)
        assert [c.kind for c in path] == ['move', 'line', 'line']

    def test_starts_and_ends_on_slots(self):
        path, slots = path_for(5)
        assert path[0].point == (slots[0].x, slots[0].y)
        assert path[-1].point == (slots[-1].x, slots[-1].y)

    def test_one_arc_per_row_transition(self):
        path, _ = path_for(9)
        assert [c.kind for c in path].count('arc') == 2

    def test_sweep_alternates(self):
        path, _ = path_for(10)
        sweeps = [c.sweep for c in path if c.kind == 'arc']
        assert sweeps == [0, 1, 0]

    def test_radius_scales(self):
        path, _ = path_for(4, scale=0.25)
        arc = next(c for c in path if c.kind == 'arc')
        assert arc.radius == pytest.approx(10)

    def test_lines_carry_no_arc_parameters(self):
        path, _ = path_for(3)
        assert all(c.radius is None and c.sweep is None for c in path)


@pytest.mark.unit
class TestSvgPath:

    def test_serialization(self):
        commands = [
            PathCommand('move', 250, 340),
            PathCommand('line', 500, 340),
            PathCommand('arc', 500, 260, radius=40, sweep=0),
            PathCommand('line', 250.5, 260),
        ]
        assert to_svg_path(commands) == 'M 250 340 L 500 340 A 40 40 0 0 0 500 260 L 250.5 260'

    def test_empty(self):
        assert to_svg_path([]) == ''

    def test_negative_zero(self):
        assert to_svg_path([PathCommand('move', -0.0001, 0)]) == 'M 0 0'

    def test_unknown_command(self):
        with pytest.raises(ValueError):
            to_svg_path([PathCommand('curve', 0, 0)])


@pytest.mark.unit
class TestArcGeometry:

    def test_semicircle_centre_is_midpoint(self):
        cx, cy, r = arc_center((500, 340), (500, 260), 40, 0)
        assert (cx, cy, r) == (500, 300, 40)

    def test_small_radius_is_enlarged(self):
        _, _, r = arc_center((0, 0), (0, 100), 10, 1)
        assert r == pytest.approx(50)

    def test_sweep_zero_bulges_right_when_going_up(self):
        points = sample_arc((500, 340), (500, 260), 40, 0, n_points=49)
        assert points[24][0] == pytest.approx(540)
        assert points[24][1] == pytest.approx(300)

    def test_sweep_one_bulges_left_when_going_up(self):
        points = sample_arc((300, 260), (300, 180), 40, 1, n_points=49)
        assert points[24][0] == pytest.approx(260)

    def test_points_stay_on_circle(self):
        points = sample_arc((0, 0), (60, 0), 50, 1)
        cx, cy, r = arc_center((0, 0), (60, 0), 50, 1)
        distances = np.hypot(points[:, 0] - cx, points[:, 1] - cy)
        assert np.allclose(distances, r)

    def test_minor_arc(self):
        """Large-arc flag is 0: the sweep never exceeds half a turn"""
        points = sample_arc((0, 0), (60, 0), 50, 0)
        cx, cy, r = arc_center((0, 0), (60, 0), 50, 0)
        angles = np.unwrap(np.arctan2(points[:, 1] - cy, points[:, 0] - cx))
        assert abs(angles[-1] - angles[0]) <= math.pi + 1e-9

    def test_polyline_pins_endpoints(self):
        path, slots = path_for(6)
        points = path_polyline(path, arc_resolution=16)
        assert tuple(points[0]) == (slots[0].x, slots[0].y)
        assert tuple(points[-1]) == (slots[-1].x, slots[-1].y)
        # start point, 6 line endpoints, 15 further points for the arc
        assert len(points) == 1 + 6 + 15

    def test_polyline_empty(self):
        assert path_polyline(()).shape == (0, 2)


@pytest.mark.unit
class TestGuides:

    def test_one_guide_per_slot(self):
        _, slots = path_for(6)
        guides = build_guides(slots, 1.0, LayoutConfig())
        assert len(guides) == len(slots)
        assert [g.fading for g in guides].count(True) == 1
        assert guides[-1].fading

    def test_guide_points_to_next_slot(self):
        _, slots = path_for(2)
        guide = build_guides(slots, 1.0, LayoutConfig())[0]
        assert (guide.x0, guide.y0) == (slots[0].x, slots[0].y)
        assert guide.x1 == pytest.approx(slots[0].x + 20)
        assert guide.y1 == pytest.approx(slots[0].y)

    def test_tail_continues_away_from_previous_slot(self):
        _, slots = path_for(5)
        tail = build_guides(slots, 0.5, LayoutConfig())[-1]
        # last row runs right to left
        assert tail.x1 == pytest.approx(slots[-1].x - 30)

    def test_lone_slot_has_no_guides(self):
        assert build_guides([Slot(index=0, x=400, y=300)], 1.0, LayoutConfig()) == ()
