"""Command handlers for the blendlaunch CLI."""
