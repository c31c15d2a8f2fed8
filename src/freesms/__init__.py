"""freesms - send SMS through the Free Mobile API with emoji sanitization and smart chunking."""

__version__ = "0.1.0"

def main() -> None:
    """Run the CLI entry point with lazy import."""
    from freesms.cli.main import main as cli_main

    cli_main()

__all__ = ["main", "__version__"]
