"""
libutils CLI entry point.

Usage:
    libutils [OPTIONS] COMMAND [ARGS]...
    python -m libutils [OPTIONS] COMMAND [ARGS]...
"""

from libutils.cli import app


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
