"""Image format, size and whether it carries an alpha channel.

Transparency means the image has alpha data (an alpha band or a
transparency key); a fully opaque RGBA image still reports true.

Example:
    accent-tool info logo.png --json
"""

from accent_tools.core.analyzer import ImageAnalyzer
from accent_tools.core.types import Command, Report

command = Command(name='info', help='Format, size and transparency of the image.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to the image')


@command.run
def run(args, report: Report) -> None:
    with ImageAnalyzer(args.image) as analyzer:
        report.describe(analyzer)
        width, height = analyzer.get_image_size()
        report.add('format', analyzer.get_format())
        report.add('size', {'width': width, 'height': height})
        report.add('transparency', analyzer.has_transparency())
