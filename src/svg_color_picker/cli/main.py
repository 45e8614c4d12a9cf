"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    # Check for CLI dependencies
    try:
        from svg_color_picker.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Explain how to get the CLI when typer is not installed."""
    args = sys.argv[1:]

    print("svg-color-picker - color picker geometry toolkit")
    print()
    print("Install CLI extras for full functionality:")
    print("  uv pip install svg-color-picker[cli]")
    print()
    print("Library usage:")
    print("  python -c \"import svg_color_picker as scp; print(scp.kelvin_to_rgb(6500))\"")

    if args and args[0] not in ("-h", "--help"):
        sys.exit(1)


if __name__ == "__main__":
    main()
