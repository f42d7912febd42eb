"""Argument parser builders for the blendlaunch CLI."""
