"""Trim the border around an image and report the new size.

The border colour is the top-left pixel. Pixels within FUZZ of it
(fraction of the largest RGBA distance, default 0.1) count as border.
A uniform image is left unchanged.

With -o the trimmed image is written out (PNG unless --format says otherwise).

Example:
    accent-tool trim scan.png -f 0.2 -o trimmed.png
"""

import sys

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.errors import ImageEncodeError
from accent_tools.core.types import Command, Report

command = Command(name='trim', help='Trim uniform border (whitespace) from the image.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to the image')
    parser.add_argument('-f', '--fuzz', type=float, default=0.1, help='Colour tolerance 0-1 (default: 0.1)')
    parser.add_argument('-o', '--output', help='Write the trimmed image here')
    parser.add_argument('--format', default='png', help='Output format (default: png)')


@command.run
def run(args, report: Report) -> None:
    with ImageAnalyzer(args.image) as analyzer:
        before = analyzer.get_image_size()
        width, height = analyzer.trim(args.fuzz)
        report.describe(analyzer)
        report.add('original', {'width': before[0], 'height': before[1]})
        report.add('trimmed', {'width': width, 'height': height})
        if args.output:
            if not analyzer.save(args.output, args.format):
                raise ImageEncodeError(f'Could not write {args.output}')
            print(f'trim: wrote {args.output}', file=sys.stderr)
            report.add('output', args.output)
