"""Run shell commands in CI and fail when they leave uncommitted changes."""

__version__ = "0.1.0"
