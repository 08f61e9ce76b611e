"""
Entry point for the `filedigest` command-line interface.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the filedigest CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
