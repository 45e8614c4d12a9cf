"""Command line tools for inspecting picker geometry."""
