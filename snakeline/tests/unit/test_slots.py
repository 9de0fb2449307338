"""
Unit tests for slot placement
"""
import pytest

from snakeline.config import LayoutConfig
from snakeline.layout.slots import build_sections, build_slots, curve_shift, empty_slot
from snakeline.layout.types import ScaledPosition, Section, Viewport


def row_positions(n, scale=1.0, config=None):
    """Scaled positions laid out like the grid, origin at (0, 0)"""
    config = config or LayoutConfig()
    positions = []
    for i in range(n):
        row, pos = divmod(i, 3)
        column = pos if row % 2 == 0 else 2 - pos
        positions.append(ScaledPosition(
            index=i,
            x=column * config.col_pitch * scale,
            y=-row * config.row_pitch * scale,
            row=row,
            pos_in_row=pos,
        ))
    return positions


@pytest.mark.unit
class TestSections:

    def test_section_types(self):
        sections = build_sections(row_positions(7), 1.0, LayoutConfig())
        assert [s.section_type for s in sections] == [
            'straight', 'straight', 'curve', 'straight', 'straight', 'curve']

    def test_default_extension_is_inert(self):
        sections = build_sections(row_positions(4), 1.0, LayoutConfig())
        assert sections[1].end_x == sections[1].end.x

    def test_extension_before_curve(self):
        config = LayoutConfig.spacious()
        sections = build_sections(row_positions(7), 0.5, config)
        # row 0 ends going right, row 1 ends going left
        assert sections[1].end_x == pytest.approx(sections[1].end.x + 30 * 0.5)
        assert sections[4].end_x == pytest.approx(sections[4].end.x - 30 * 0.5)
        assert sections[0].end_x == sections[0].end.x

    def test_extension_moves_slot(self):
        config = LayoutConfig.spacious()
        slots = build_slots(row_positions(4), 1.0, config)
        # the gap before the row end is centred on the extended section
        assert slots[2].x == pytest.approx(150 + 15)
        assert slots[1].x == pytest.approx(50)
        assert slots[3].x == pytest.approx(200)
        plain = build_slots(row_positions(4), 1.0, LayoutConfig())
        assert plain[2].x == pytest.approx(150)

    def test_no_extension_without_following_curve(self):
        config = LayoutConfig.spacious()
        sections = build_sections(row_positions(3), 1.0, config)
        assert sections[-1].end_x == sections[-1].end.x


@pytest.mark.unit
class TestCurveShift:

    def test_even_to_odd_shifts_positive(self):
        sections = build_sections(row_positions(4), 1.0, LayoutConfig())
        assert curve_shift(sections[2], 1.0, LayoutConfig()) == 40

    def test_odd_to_even_shifts_negative(self):
        sections = build_sections(row_positions(7), 0.5, LayoutConfig())
        assert curve_shift(sections[5], 0.5, LayoutConfig()) == -20

    def test_fallback_uses_horizontal_direction(self):
        start = ScaledPosition(index=0, x=100, y=0, row=0, pos_in_row=0)
        left = ScaledPosition(index=1, x=0, y=-160, row=2, pos_in_row=0)
        right = ScaledPosition(index=1, x=200, y=-160, row=2, pos_in_row=0)
        config = LayoutConfig()
        assert curve_shift(Section('curve', start, left, left.x), 1.0, config) == 40
        assert curve_shift(Section('curve', start, right, right.x), 1.0, config) == -40


@pytest.mark.unit
class TestBuildSlots:

    def test_slot_count(self):
        for n in range(1, 11):
            assert len(build_slots(row_positions(n), 1.0, LayoutConfig())) == n + 1

    def test_indices_are_sequential(self):
        slots = build_slots(row_positions(5), 1.0, LayoutConfig())
        assert [s.index for s in slots] == list(range(6))

    def test_single_entry(self):
        slots = build_slots(row_positions(1), 1.0, LayoutConfig())
        assert [(s.x, s.y) for s in slots] == [(-50, 0), (50, 0)]

    def test_straight_slots_at_midpoints(self):
        slots = build_slots(row_positions(3), 1.0, LayoutConfig())
        assert [s.x for s in slots] == [-50, 50, 150, 250]
        assert all(s.curve_shift == 0 for s in slots)

    def test_curve_slot(self):
        slots = build_slots(row_positions(4), 1.0, LayoutConfig())
        curve = slots[3]
        assert (curve.x, curve.y) == (200, -40)
        assert curve.curve_shift == 40
        assert curve.display_x == 240

    def test_trailing_slot_follows_last_row(self):
        # last row (1) runs right to left
        slots = build_slots(row_positions(5), 1.0, LayoutConfig())
        assert (slots[-1].x, slots[-1].y) == (50, -80)

    def test_leading_slot_scales(self):
        slots = build_slots(row_positions(2, scale=0.5), 0.5, LayoutConfig())
        assert slots[0].x == -25

    def test_empty_slot_is_centred(self):
        slot = empty_slot(Viewport(800, 600))
        assert (slot.index, slot.x, slot.y) == (0, 400, 300)
