"""Impossible polygon command-line interface."""

from __future__ import annotations

import argparse
import json
import logging

from .config import PolygonConfig, parse_palette
from .construction import ConstructionError


def _add_common(parser: argparse.ArgumentParser, default_out: str | None) -> None:
    parser.add_argument("--sides", "-n", dest="n", type=int, default=3)
    parser.add_argument("--thickness", type=float, default=0.0)
    parser.add_argument("--perspective", type=float, default=0.5)
    parser.add_argument(
        "--colors",
        default="primary",
        help="Preset name (primary, greyscale, pastel) or a JSON array of colours",
    )
    parser.add_argument("--debug", action="store_true", help="Draw construction lines")
    if default_out is not None:
        parser.add_argument("--out", dest="output_path", default=default_out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Impossible polygon generator")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    svg = sub.add_parser("svg", help="Write the image as SVG")
    _add_common(svg, "image.svg")

    png = sub.add_parser("png", help="Render the image to PNG")
    _add_common(png, "image.png")
    png.add_argument("--dpi", type=int, default=150)

    export = sub.add_parser("json", help="Export the computed geometry as JSON")
    _add_common(export, "image.json")

    diagnose = sub.add_parser("diagnose", help="Print construction diagnostics")
    _add_common(diagnose, None)

    return parser


def _config_from_args(args) -> PolygonConfig:
    config = PolygonConfig(
        n=args.n,
        debug=args.debug,
        thickness_modifier=args.thickness,
        perspective_modifier=args.perspective,
        color_palette=parse_palette(args.colors),
    )
    config.check()
    return config


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    try:
        config = _config_from_args(args)
        if args.command == "svg":
            _cmd_svg(args, config)
        elif args.command == "png":
            _cmd_png(args, config)
        elif args.command == "json":
            _cmd_json(args, config)
        elif args.command == "diagnose":
            _cmd_diagnose(config)
    except (ValueError, ConstructionError) as exc:
        print(exc)
        raise SystemExit(1)


def _cmd_svg(args, config: PolygonConfig) -> None:
    from .generator import generate_svg
    from .io import save_svg

    save_svg(generate_svg(config), args.output_path)
    print(f"Saved {args.output_path}")


def _cmd_png(args, config: PolygonConfig) -> None:
    from .generator import generate_construction
    from .render import render_png

    construction = generate_construction(config)
    render_png(construction, args.output_path, config.color_palette, debug=config.debug, dpi=args.dpi)
    print(f"Saved {args.output_path}")


def _cmd_json(args, config: PolygonConfig) -> None:
    from .generator import generate_construction
    from .io import export_construction_json

    construction = generate_construction(config)
    export_construction_json(construction, config.color_palette, args.output_path)
    print(f"Saved {args.output_path}")


def _cmd_diagnose(config: PolygonConfig) -> None:
    from .diagnostics import diagnostics_report
    from .generator import generate_construction

    report = diagnostics_report(generate_construction(config))
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
