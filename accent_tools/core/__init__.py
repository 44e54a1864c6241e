"""accent_tools.core — Foundation layer.

Contains colour maths, the palette extractor, the image analyzer, settings,
type definitions and the report builder.
This module has NO dependencies on accent_tools.commands or accent_tools.registry.
"""
