from .dxf_writer import DxfEmitter, build_dxf, dxf_string, write_dxf

__all__ = ["DxfEmitter", "build_dxf", "dxf_string", "write_dxf"]
