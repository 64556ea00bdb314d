"""Minimal CLI for generating, viewing and exporting auditorium layouts.

Usage examples:
  python3 cli.py generate --out builds/auditorium.glb --summary
  python3 cli.py generate --rows 8 --seats-per-row 12 --row-elevation 0.4 --room-depth 30 --merge --out builds/big.glb
  python3 cli.py view
  python3 cli.py config
"""

import argparse
import sys
from pathlib import Path

from auditorium.assets import AssetProvider
from auditorium.constants import AUDITORIUM_VERSION
from auditorium.io import export_scene_to_glb
from auditorium.layout import InvalidParameters, LayoutParameters
from auditorium.scene import Scene, build_auditorium
from config import check_config, config


def _build_parameters(args) -> LayoutParameters:
    return LayoutParameters(
        room_width=args.room_width,
        room_depth=args.room_depth,
        room_height=args.room_height,
        row_count=args.rows,
        seats_per_row=args.seats_per_row,
        seat_spacing=args.seat_spacing,
        row_spacing=args.row_spacing,
        row_elevation=args.row_elevation,
    )


def _print_summary(scene: Scene):
    bounds = scene.bounds()
    print(f"Objects: {len(scene.objects)} | Bounds: min{bounds[0].round(3)} max{bounds[1].round(3)}")
    metrics = scene.last_layout_metrics
    if metrics:
        heights = ", ".join(f"{height:.3f}" for height in metrics["row_seat_heights"])
        print(
            "Layout metrics:"
            f" rows={metrics['rows']}"
            f" seats_per_row={metrics['seats_per_row']}"
            f" seats={metrics['seat_count']}"
            f" risers={metrics['riser_count']}"
            f" degenerate_risers={metrics['degenerate_riser_rows']}"
        )
        print(f"Row seat heights: [{heights}]")


def _generate(args) -> int:
    params = _build_parameters(args)
    assets = AssetProvider(
        seat_model_path=args.seat_model,
        seat_model_scale=args.seat_scale,
    )
    try:
        scene = build_auditorium(params, assets, include_room=not args.no_room, verbose=config.VERBOSE)
    except InvalidParameters as exc:
        print(f"Error: {exc}")
        return 2

    if args.out:
        export_scene_to_glb(scene, str(args.out), merge=args.merge)

    if args.summary:
        _print_summary(scene)
    return 0


def _view() -> int:
    # Qt stack is only needed for the viewer
    from PyQt5.QtWidgets import QApplication
    from gui.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec_()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Auditorium layout generator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {AUDITORIUM_VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a seating layout and export to GLB")
    gen.add_argument("--room-width", type=float, default=config.DEFAULT_ROOM_WIDTH, help="Room X extent")
    gen.add_argument("--room-depth", type=float, default=config.DEFAULT_ROOM_DEPTH, help="Room Z extent")
    gen.add_argument("--room-height", type=float, default=config.DEFAULT_ROOM_HEIGHT, help="Room Y extent")
    gen.add_argument("--rows", type=int, default=config.DEFAULT_ROW_COUNT, help="Number of seat rows")
    gen.add_argument("--seats-per-row", type=int, default=config.DEFAULT_SEATS_PER_ROW)
    gen.add_argument("--seat-spacing", type=float, default=config.DEFAULT_SEAT_SPACING,
                     help="Lateral distance between seat centers")
    gen.add_argument("--row-spacing", type=float, default=config.DEFAULT_ROW_SPACING,
                     help="Depth distance between rows")
    gen.add_argument("--row-elevation", type=float, default=config.DEFAULT_ROW_ELEVATION,
                     help="Height gained per row (negative values descend)")
    gen.add_argument("--seat-model", default=config.SEAT_MODEL_PATH, help="Seat model file (GLB/GLTF/OBJ)")
    gen.add_argument("--seat-scale", type=float, default=config.SEAT_MODEL_SCALE, help="Seat model scale")
    gen.add_argument("--no-room", action="store_true", help="Skip floor, walls and screen")
    gen.add_argument("--out", type=Path, help="Output GLB path")
    gen.add_argument("--merge", action="store_true", help="Merge meshes by color before export")
    gen.add_argument("--summary", action="store_true", help="Print counts, bounds and row heights")

    sub.add_parser("view", help="Open the interactive viewer")
    sub.add_parser("config", help="Print the current configuration")

    args = parser.parse_args(argv)

    if args.command == "generate":
        return _generate(args)
    if args.command == "view":
        check_config()
        return _view()
    if args.command == "config":
        print(config.get_summary())
        check_config()
    return 0


if __name__ == "__main__":
    sys.exit(main())
