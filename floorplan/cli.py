"""Command-line entry point.

Usage:
    floorplan build [--plan FILE] [--out FILE]
    floorplan reconstruct RECORD [--out FILE] [--no-snap] [--merge-tolerance X]
    floorplan serve [--host H] [--port P]
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from floorplan.core.plans import default_floor_plan, load_floor_plan
from floorplan.models import BuildParams, ReconstructParams
from floorplan.services.layout_service import LayoutService, parse_record

logger = logging.getLogger("floorplan")


def _write(text: str, out: str | None) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out)
    else:
        sys.stdout.write(text + "\n")


def _cmd_build(args: argparse.Namespace, service: LayoutService) -> int:
    plan = load_floor_plan(args.plan) if args.plan else default_floor_plan()
    params = BuildParams(cell_size=args.cell_size)
    layout = service.build(plan, params)
    record = service.export(layout, args.scene or plan.name, args.grid_size, params.wall_thickness)
    _write(record.to_json(), args.out)
    return 0


def _cmd_reconstruct(args: argparse.Namespace, service: LayoutService) -> int:
    record = parse_record(Path(args.record).read_text(encoding="utf-8"))
    params = ReconstructParams(
        merge_tolerance=args.merge_tolerance,
        min_segment_length=args.min_length,
        snap_to_grid=not args.no_snap,
        orientation_mode=args.orientation,
    )
    result, merged = service.reconstruct_to_record(record, params)
    logger.info(
        "%d raw segments, %d after merge",
        result.stats.raw_segments, result.stats.merged_segments,
    )
    _write(merged.to_json(), args.out)
    return 0


def _cmd_serve(args: argparse.Namespace, service: LayoutService) -> int:
    import uvicorn

    uvicorn.run("floorplan.api.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floorplan",
        description="Grid floor plan wall builder and reconstructor",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("build", help="Build a floor plan and export a layout record.")
    p.add_argument("--plan", default=None, help="Floor plan JSON (default: bundled hospital).")
    p.add_argument("--scene", default=None, help="Scene name written to the record.")
    p.add_argument("--cell-size", type=float, default=2.3)
    p.add_argument("--grid-size", type=float, default=0.5)
    p.add_argument("--out", default=None, help="Output file (default: stdout).")
    p.set_defaults(func=_cmd_build)

    p = sub.add_parser("reconstruct", help="Merge the walls of a layout record.")
    p.add_argument("record", help="Layout record JSON.")
    p.add_argument("--merge-tolerance", type=float, default=0.05)
    p.add_argument("--min-length", type=float, default=0.3)
    p.add_argument("--no-snap", action="store_true", help="Skip grid snapping.")
    p.add_argument(
        "--orientation", choices=["combined", "rotation", "scale"], default="combined",
    )
    p.add_argument("--out", default=None, help="Output file (default: stdout).")
    p.set_defaults(func=_cmd_reconstruct)

    p = sub.add_parser("serve", help="Run the HTTP API.")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return args.func(args, LayoutService())
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
