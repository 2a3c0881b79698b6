import math
import numpy as np
import pytest

from skadis import BoardParams, BoardLayout, generate_layout, with_changes
from skadis.skadis_enums import LayerName
from skadis.skadis_arc import polyline_area
from skadis_bridge import apply_layout

SCENARIO_A = dict(
    board_width=762, board_height=559, corner_radius=8,
    h_spacing=20, v_spacing=40, offset_top=40, offset_right=20,
    hole_width=5, hole_height=15,
)


class RecordingEmitter:
    """Stand-in for a drawing back end; records every call."""

    def __init__(self):
        self.calls = []

    def add_layer(self, name, color):
        self.calls.append(("add_layer", name, color))

    def set_active_layer(self, name):
        self.calls.append(("set_active_layer", name))

    def draw_polyline(self, points, closed):
        self.calls.append(("draw_polyline", list(points), closed))


class FailingEmitter(RecordingEmitter):
    def draw_polyline(self, points, closed):
        raise IOError("disk full")


def test_scenario_a():
    layout = generate_layout(BoardParams(**SCENARIO_A))
    assert isinstance(layout, BoardLayout)
    bulges = layout.outline.polyline.bulges
    assert len(bulges) == 8
    assert np.count_nonzero(bulges == math.tan(math.pi / 8)) == 4
    assert np.count_nonzero(bulges == 0.0) == 4
    assert tuple(layout.hole_centers()[0]) == (742.0, 519.0)


def test_scenario_b_sharp_corners():
    layout = generate_layout(BoardParams(**dict(SCENARIO_A, corner_radius=0)))
    assert np.all(layout.outline.polyline.bulges == 0.0)


def test_scenario_c_no_holes():
    p = BoardParams(**SCENARIO_A)
    p = with_changes(p, offset_right=p.board_width + p.hole_width)
    layout = generate_layout(p)
    assert len(layout.holes) == 0
    assert layout.layers()["HOLES"] == []
    assert len(layout.layers()["BOARD"]) == 1


def test_generation_is_deterministic():
    p = BoardParams(**SCENARIO_A)
    a = generate_layout(p)
    b = generate_layout(p)
    assert np.array_equal(a.outline.polyline.as_array(), b.outline.polyline.as_array())
    assert len(a.holes) == len(b.holes)
    for ha, hb in zip(a.holes, b.holes):
        assert np.array_equal(ha.polyline.as_array(), hb.polyline.as_array())
    assert np.array_equal(a.hole_centers(), b.hole_centers())


def test_layers_are_named_and_ordered():
    layout = generate_layout(BoardParams(**SCENARIO_A))
    layers = layout.layers()
    assert list(layers) == ["BOARD", "HOLES"]
    assert all(pl.layer == LayerName.HOLES for pl in layers["HOLES"])
    assert layers["BOARD"][0].layer == LayerName.BOARD


def test_every_polyline_has_area():
    layout = generate_layout(BoardParams(**SCENARIO_A))
    for polylines in layout.layers().values():
        for pl in polylines:
            assert abs(polyline_area(pl)) > 0


def test_holes_inside_board_for_consistent_params():
    p = BoardParams(**SCENARIO_A)
    c = generate_layout(p).hole_centers()
    assert np.all(c[:, 0] - p.hole_width / 2 >= 0)
    assert np.all(c[:, 0] + p.hole_width / 2 <= p.board_width)
    assert np.all(c[:, 1] - p.hole_height / 2 >= 0)
    assert np.all(c[:, 1] + p.hole_height / 2 <= p.board_height)


def test_apply_layout_passes_geometry_unchanged():
    layout = generate_layout(BoardParams(board_width=100, board_height=100))
    em = RecordingEmitter()
    apply_layout(layout, em)

    assert em.calls[0] == ("add_layer", "BOARD", 3)
    assert em.calls[1] == ("add_layer", "HOLES", 1)
    assert em.calls[2] == ("set_active_layer", "BOARD")

    draws = [c for c in em.calls if c[0] == "draw_polyline"]
    assert len(draws) == 1 + len(layout.holes)
    assert all(c[2] is True for c in draws)
    assert np.array_equal(np.asarray(draws[0][1]), layout.outline.polyline.as_array())
    assert np.array_equal(np.asarray(draws[1][1]), layout.holes[0].polyline.as_array())


def test_apply_layout_reports_emitter_failure_as_is():
    layout = generate_layout(BoardParams(board_width=100, board_height=100))
    with pytest.raises(OSError, match="disk full"):
        apply_layout(layout, FailingEmitter())


def test_apply_layout_requires_layout():
    with pytest.raises(ValueError):
        apply_layout(None, RecordingEmitter())


def test_summary_prints(capsys):
    generate_layout(BoardParams(**SCENARIO_A)).summary()
    out = capsys.readouterr().out
    assert "BoardLayout Summary" in out
    assert "Vertices: 8" in out
