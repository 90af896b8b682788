import argparse
import logging
import sys
from pathlib import Path

from ansigif.config import DitheringMode, ScaleMode
from ansigif.converter import build_from_file
from ansigif.exceptions import AnsiGifError
from ansigif.player import play
from ansigif.terminal import get_terminal_size


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play an animated GIF in a truecolor terminal")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-r", "--rows", type=int, default=None, help="Output height in rows (default: terminal height)")
    parser.add_argument(
        "-c", "--columns", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-s",
        "--scale",
        default=ScaleMode.FIT.value,
        choices=[m.value for m in ScaleMode],
        help="How the image is fitted to the output area (default: fit)",
    )
    parser.add_argument(
        "-d",
        "--dithering",
        default=DitheringMode.NONE.value,
        choices=[m.value for m in DitheringMode],
        help="none: half blocks, blocks: shade characters, chars: ASCII (default: none)",
    )
    parser.add_argument(
        "-b", "--background", default="black", help="Colour behind transparent pixels and dithered glyphs"
    )
    parser.add_argument("-j", "--jobs", type=int, default=1, help="Rows rendered concurrently (default: 1)")
    parser.add_argument("-l", "--loops", type=int, default=0, help="Times to play the animation, 0 for forever")
    parser.add_argument("--frame", type=int, default=None, help="Print this single frame and exit")
    parser.add_argument("--no-bg", action="store_true", default=False, help="Do not paint the background colour")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    columns, rows = get_terminal_size()
    columns = args.columns if args.columns is not None else columns
    # Leave the last line for the cursor
    rows = args.rows if args.rows is not None else rows - 1

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        image = build_from_file(
            image_path,
            rows,
            columns,
            background=args.background,
            scale_mode=args.scale,
            dithering=args.dithering,
            parallelism=args.jobs,
        )
        if args.frame is not None:
            print(image.render(args.frame % image.frame_count(), args.no_bg), end="")
            return
        play(image, sys.stdout, loops=args.loops, suppress_background=args.no_bg)
    except AnsiGifError as exc:
        print(f"ansigif: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass
