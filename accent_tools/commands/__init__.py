"""CLI commands, one per module. See accent_tools.registry for discovery."""
