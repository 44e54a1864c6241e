"""Parse hex colours and score their perceived brightness and saturation.

Accepts '#rgb', 'rgb', '#rrggbb' or 'rrggbb'. The short form doubles each
digit. Brightness is sqrt(0.241 R² + 0.691 G² + 0.068 B²); saturation is
(max - min) / max, with black scoring 0.

No image is needed.

Example:
    accent-tool colour '#0f0' 2563eb
"""

from accent_tools.core.colour_math import brightness, hex_to_rgb, rgb_to_hex, saturation
from accent_tools.core.types import Command, Report

command = Command(name='colour', help='RGB, brightness and saturation of hex colours.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('hex', nargs='+', help='Hex colour values')


@command.run
def run(args, report: Report) -> None:
    for value in args.hex:
        rgb = hex_to_rgb(value)
        report.add(
            value,
            {
                'hex': rgb_to_hex(rgb),
                'r': rgb[0],
                'g': rgb[1],
                'b': rgb[2],
                'brightness': round(brightness(rgb), 2),
                'saturation': round(saturation(rgb), 3),
            },
        )
