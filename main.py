"""
Generate a SKÅDIS-style pegboard DXF (and optionally a PNG preview).

Only the board size and corner radius are adjustable; the hole pattern is
fixed to the SKÅDIS grid.
"""
import argparse
import logging
import sys

from skadis import config
from skadis import BoardParams, EmitterError, InvalidParameterError, generate_layout
from skadis.logging_config import setup_logging
from skadis_io import write_dxf

logger = logging.getLogger("skadis.main")

CNC_HINT = (
    "For CNC cutting use an outside or pocket toolpath for the slots, "
    "not \"on the line\", so the bit radius is compensated."
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="SKÅDIS DXF generator", epilog=CNC_HINT)
    ap.add_argument("--board-width", type=float, default=config.DEFAULT_BOARD_WIDTH,
                    help="board width in mm (default: 30 in)")
    ap.add_argument("--board-height", type=float, default=config.DEFAULT_BOARD_HEIGHT,
                    help="board height in mm (default: 22 in)")
    ap.add_argument("--corner-radius", type=float, default=config.DEFAULT_CORNER_RADIUS,
                    help="board corner radius in mm")
    ap.add_argument("-o", "--output", default=str(config.DEFAULT_OUTPUT),
                    help="DXF output path")
    ap.add_argument("--preview", default=None, metavar="PNG",
                    help="also save a preview image")
    ap.add_argument("--summary", action="store_true", help="print a layout summary")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        params = BoardParams(
            board_width=args.board_width,
            board_height=args.board_height,
            corner_radius=args.corner_radius,
        )
    except InvalidParameterError as e:
        print(f"Invalid parameter: {e}", file=sys.stderr)
        return 2

    logger.debug("Parameters: %s", params.as_dict())
    layout = generate_layout(params)
    if args.summary:
        layout.summary()

    try:
        out = write_dxf(layout, args.output)
    except EmitterError as e:
        logger.error("DXF export to %s failed", args.output, exc_info=args.verbose)
        print(f"Failed to generate DXF: {e}", file=sys.stderr)
        return 1
    print(f"DXF written: {out}")

    if args.preview:
        import matplotlib
        matplotlib.use("Agg")
        from skadis.skadis_visual import SkadisPlotter
        png = SkadisPlotter(layout).save_preview(args.preview)
        logger.debug("Preview saved with %d holes", len(layout.holes))
        print(f"Preview written: {png}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
