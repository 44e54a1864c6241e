"""Average colour of the whole image (area-averaged down to one pixel).

Works on a copy; the image itself is not modified.

Example:
    accent-tool average photo.jpg
"""

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.types import Command, Report

command = Command(name='average', help='Average colour of the image.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to the image')


@command.run
def run(args, report: Report) -> None:
    with ImageAnalyzer(args.image) as analyzer:
        report.describe(analyzer)
        report.add('average', analyzer.average_colour())
