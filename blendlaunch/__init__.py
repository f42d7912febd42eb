"""blendlaunch - locate, validate and launch Blender for editor sessions."""

__version__ = "0.3.0"
