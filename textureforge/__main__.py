"""CLI entry point for TextureForge."""

import argparse
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from . import generate
from .color import Color
from .patterns import PRESETS

logger = logging.getLogger("textureforge")


def main():
    parser = argparse.ArgumentParser(
        description="Render procedural textures to image files"
    )
    parser.add_argument(
        "preset", nargs="?",
        help="Preset scene to render (see --list)"
    )
    parser.add_argument(
        "--list", "-l", action="store_true",
        help="List available presets and exit"
    )
    parser.add_argument(
        "--width", "-W", type=int, default=256,
        help="Output image width in pixels (default: 256)"
    )
    parser.add_argument(
        "--height", "-H", type=int, default=256,
        help="Output image height in pixels (default: 256)"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Noise seed for reproducible generation"
    )
    parser.add_argument(
        "--background", "-b", default=None,
        help="Flatten onto a background color, e.g. '#202020'"
    )
    parser.add_argument(
        "--output", "-o", default="texture.png",
        help="Output file path (default: texture.png)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    if args.list:
        for name in sorted(PRESETS):
            print(name)
        return 0

    if args.preset is None:
        parser.error("a preset name is required (see --list)")
    if args.preset not in PRESETS:
        parser.error(
            f"unknown preset {args.preset!r}, choose from: {', '.join(sorted(PRESETS))}")

    kwargs = {}
    if args.background:
        try:
            kwargs["background"] = Color.from_hex(args.background)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        image = generate(
            args.preset,
            width=args.width,
            height=args.height,
            seed=args.seed,
            **kwargs,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    logger.info("Saved %s (%dx%d) to %s", args.preset, image.size[0], image.size[1], output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
