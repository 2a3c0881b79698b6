import io
import math

import ezdxf
from ezdxf import units
import numpy as np
import pytest

from skadis import BoardParams, EmitterError, generate_layout
from skadis_io import DxfEmitter, build_dxf, dxf_string, write_dxf
from skadis_io import dxf_writer


def make_layout(**overrides):
    kw = dict(board_width=200, board_height=120, corner_radius=8)
    kw.update(overrides)
    return generate_layout(BoardParams(**kw))


def read_back(text: str):
    return ezdxf.read(io.StringIO(text))


def test_dxf_has_layers_units_and_colors():
    doc = read_back(dxf_string(make_layout()))
    assert doc.units == units.MM
    assert doc.layers.get("BOARD").color == 3
    assert doc.layers.get("HOLES").color == 1


def test_polylines_are_closed_lwpolylines_on_their_layers():
    layout = make_layout()
    doc = read_back(dxf_string(layout))
    polys = doc.modelspace().query("LWPOLYLINE")
    assert len(polys) == 1 + len(layout.holes)
    assert all(p.closed for p in polys)
    layers = [p.dxf.layer for p in polys]
    assert layers.count("BOARD") == 1
    assert layers.count("HOLES") == len(layout.holes)


def test_outline_points_and_bulges_survive_export():
    layout = make_layout()
    doc = read_back(dxf_string(layout))
    board = doc.modelspace().query('LWPOLYLINE[layer=="BOARD"]').first
    xyb = np.asarray(list(board.get_points("xyb")), dtype=float)
    assert np.allclose(xyb, layout.outline.polyline.as_array())
    assert np.allclose(xyb[1::2, 2], math.tan(math.pi / 8))


def test_hole_bulges_survive_export():
    layout = make_layout()
    doc = read_back(dxf_string(layout))
    holes = doc.modelspace().query('LWPOLYLINE[layer=="HOLES"]')
    first = np.asarray(list(holes.first.get_points("xyb")), dtype=float)
    assert np.allclose(first, layout.holes[0].polyline.as_array())
    assert np.allclose(first[:, 2], [-1.0, 0.0, -1.0, 0.0])


def test_write_dxf_creates_file(tmp_path):
    out = write_dxf(make_layout(), tmp_path / "skadis_board.dxf")
    assert out.exists()
    doc = ezdxf.readfile(str(out))
    assert len(doc.modelspace().query("LWPOLYLINE")) > 1


def test_write_failure_raises_emitter_error_and_leaves_no_file(tmp_path):
    target = tmp_path / "missing_dir" / "board.dxf"
    with pytest.raises(EmitterError) as excinfo:
        write_dxf(make_layout(), target)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert not target.exists()


class _ShortWriteFile:
    """File wrapper that writes half of the data, then fails like a full disk."""

    def __init__(self, fh):
        self._fh = fh

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._fh.close()
        return False

    def write(self, data):
        self._fh.write(data[: len(data) // 2])
        raise OSError(28, "No space left on device")


def test_failed_write_keeps_previous_file_and_no_temp(tmp_path, monkeypatch):
    target = tmp_path / "board.dxf"
    target.write_text("OLD GOOD FILE")
    real_fdopen = dxf_writer.os.fdopen
    monkeypatch.setattr(dxf_writer.os, "fdopen",
                        lambda fd, *a, **kw: _ShortWriteFile(real_fdopen(fd, *a, **kw)))

    with pytest.raises(EmitterError) as excinfo:
        write_dxf(make_layout(), target)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert target.read_text() == "OLD GOOD FILE"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["board.dxf"]


def test_failed_replace_keeps_previous_file(tmp_path, monkeypatch):
    target = tmp_path / "board.dxf"
    target.write_text("OLD GOOD FILE")

    def refuse(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(dxf_writer.os, "replace", refuse)
    with pytest.raises(EmitterError):
        write_dxf(make_layout(), target)
    assert target.read_text() == "OLD GOOD FILE"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["board.dxf"]


def test_write_dxf_overwrites_existing_file(tmp_path):
    target = tmp_path / "board.dxf"
    target.write_text("OLD GOOD FILE")
    write_dxf(make_layout(), target)
    doc = ezdxf.readfile(str(target))
    assert len(doc.modelspace().query("LWPOLYLINE")) > 1


def test_emitter_requires_active_layer():
    em = DxfEmitter()
    em.add_layer("BOARD", 3)
    with pytest.raises(ValueError):
        em.draw_polyline([(0, 0, 0), (1, 0, 0), (1, 1, 0)], True)
    with pytest.raises(KeyError):
        em.set_active_layer("NOPE")


def test_build_dxf_returns_populated_emitter():
    em = build_dxf(make_layout(offset_right=1000))
    assert em.active_layer == "HOLES"
    assert len(em.msp.query("LWPOLYLINE")) == 1
