"""Entry point for the pomotree CLI.

Usage:
    python -m pomotree.interfaces.cli.main

Or via installed entry point:
    pomotree <command>
"""

from pomotree.interfaces.cli import app


def main() -> None:
    """Run the pomotree CLI application."""
    app()


if __name__ == "__main__":
    main()
