"""Accent colours: the most used colours of an image, with an optional brightness ceiling.

Downsamples a copy of the image to fit in SAMPLE_SIZE x SAMPLE_SIZE
(default 500, aspect kept), writes it as a temporary PNG, and clusters it
with k-means into up to COUNT colours (default 5), most prevalent first.

With --max-brightness N, colours whose perceived brightness is N or more
are dropped; the ranking of the remaining colours is unchanged. An empty
result is not an error.

Example:
    accent-tool accents logo.png
    accent-tool accents photo.jpg -n 8 --max-brightness 200 --json
"""

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.types import Command, Report

command = Command(
    name='accents',
    help='Most used colours of the image (k-means), optionally below a brightness ceiling.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to the image')
    parser.add_argument('-n', '--count', type=int, default=5, help='Number of colours to extract (default: 5)')
    parser.add_argument(
        '-s',
        '--sample-size',
        type=int,
        default=500,
        help='Downsample to fit in this square before clustering (default: 500)',
    )
    parser.add_argument(
        '-m',
        '--max-brightness',
        type=float,
        default=-1,
        metavar='N',
        help='Drop colours with perceived brightness >= N (default: keep all)',
    )


@command.run
def run(args, report: Report) -> None:
    with ImageAnalyzer(args.image) as analyzer:
        report.describe(analyzer)
        colours = analyzer.accent_colours(
            count=args.count,
            sample_size=args.sample_size,
            max_brightness=args.max_brightness,
        )
    report.add('accents', colours)
