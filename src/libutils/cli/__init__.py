"""libutils command-line front-end."""

from libutils.cli.report import app

__all__ = ["app"]
