"""Entry point for the Code Documenter."""

from code_documenter.cli.commands import doc


def main() -> None:
    """Launch the CLI."""
    doc()


if __name__ == "__main__":
    main()
