"""Resize, blur and/or colorize an image, then save it.

Steps run in this order: resize, blur, colorize.

  --resize WxH     resize to exactly WxH, or to fit inside it with --bestfit
  --filter NAME    resample filter (nearest, box, bilinear, hamming, bicubic, lanczos)
  --blur SPREAD    box blur; --gaussian for a gaussian blur with std dev SPREAD
  --colorize black|white
                   push every pixel towards black or white, alpha kept

Example:
    accent-tool transform logo.png -o thumb.png --resize 128x128 --bestfit
    accent-tool transform logo.png -o mono.png --colorize white
"""

import argparse
import sys

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.errors import ImageEncodeError
from accent_tools.core.types import Command, Report

command = Command(name='transform', help='Resize / blur / colorize the image and save the result.')


def _size(value: str) -> tuple[int, int]:
    w, sep, h = value.lower().partition('x')
    try:
        if not sep:
            raise ValueError
        return (int(w), int(h))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected WIDTHxHEIGHT, got {value!r}') from None


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to the image')
    parser.add_argument('-o', '--output', required=True, help='Where to write the result')
    parser.add_argument('--format', default='png', help='Output format (default: png)')
    parser.add_argument('--resize', type=_size, metavar='WxH', help='Target size')
    parser.add_argument('--bestfit', action='store_true', help='Keep aspect ratio when resizing')
    parser.add_argument('--filter', default='lanczos', help='Resample filter (default: lanczos)')
    parser.add_argument('--blur', type=float, metavar='SPREAD', help='Blur strength')
    parser.add_argument('--radius', type=float, default=0, help='Box blur radius (default: SPREAD)')
    parser.add_argument('--gaussian', action='store_true', help='Gaussian instead of box blur')
    parser.add_argument('--colorize', choices=['black', 'white'], help='Colorize towards black or white')


@command.run
def run(args, report: Report) -> None:
    with ImageAnalyzer(args.image) as analyzer:
        applied = []
        if args.resize:
            analyzer.resize(*args.resize, resample=args.filter, bestfit=args.bestfit)
            applied.append('resize')
        if args.blur is not None:
            analyzer.blur(args.blur, args.radius, gaussian=args.gaussian)
            applied.append('gaussian-blur' if args.gaussian else 'blur')
        if args.colorize:
            analyzer.colorize(black=args.colorize == 'black')
            applied.append(f'colorize-{args.colorize}')

        if not analyzer.save(args.output, args.format):
            raise ImageEncodeError(f'Could not write {args.output}')
        report.describe(analyzer)
        report.add('applied', ', '.join(applied) or '(none)')
        report.add('output', args.output)
    print(f'transform: wrote {args.output}', file=sys.stderr)
