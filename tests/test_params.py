import dataclasses
import math
import pytest

from skadis import config
from skadis.skadis_errors import InvalidParameterError
from skadis.skadis_params import BoardParams, DEFAULT_PARAMS, default_params, with_changes


def test_defaults_match_skadis_pattern():
    p = BoardParams()
    assert p.board_width == pytest.approx(762.0)
    assert p.board_height == pytest.approx(558.8)
    assert (p.hole_width, p.hole_height, p.hole_radius) == (5.0, 15.0, 3.0)
    assert (p.h_spacing, p.v_spacing) == (20.0, 40.0)
    assert (p.offset_top, p.offset_right) == (40.0, 20.0)
    assert p.corner_radius == config.DEFAULT_CORNER_RADIUS


def test_values_coerced_to_float():
    p = BoardParams(board_width=100, board_height=50)
    assert isinstance(p.board_width, float)
    assert isinstance(p.hole_width, float)


def test_params_are_immutable():
    p = BoardParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.board_width = 10.0


def test_reset_builds_fresh_value():
    p = default_params()
    assert p == DEFAULT_PARAMS
    assert p is not DEFAULT_PARAMS


def test_with_changes_leaves_input_untouched():
    base = default_params()
    changed = with_changes(base, board_width=300)
    assert changed.board_width == 300.0
    assert base.board_width == DEFAULT_PARAMS.board_width


def test_with_changes_validates():
    with pytest.raises(InvalidParameterError):
        with_changes(default_params(), board_height=0)


def test_effective_radii_are_clamped():
    p = BoardParams(board_width=100, board_height=40, corner_radius=500, hole_radius=9)
    assert p.effective_corner_radius == 20.0
    assert p.effective_hole_radius == 2.5
    # requested values are kept as given
    assert p.corner_radius == 500.0


@pytest.mark.parametrize("field", ["board_width", "board_height", "hole_width",
                                   "hole_height", "h_spacing", "v_spacing"])
def test_non_positive_dimension_rejected(field):
    with pytest.raises(InvalidParameterError):
        BoardParams(**{field: 0})
    with pytest.raises(ValueError):
        BoardParams(**{field: -1})


@pytest.mark.parametrize("field", ["corner_radius", "hole_radius", "offset_top", "offset_right"])
def test_zero_allowed_where_permitted(field):
    p = BoardParams(**{field: 0})
    assert getattr(p, field) == 0.0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_rejected(value):
    with pytest.raises(InvalidParameterError):
        BoardParams(board_width=value)


def test_negative_offset_rejected():
    with pytest.raises(InvalidParameterError):
        BoardParams(offset_right=-5)


def test_as_dict_has_every_field():
    d = BoardParams().as_dict()
    assert set(d) == {f.name for f in dataclasses.fields(BoardParams)}
