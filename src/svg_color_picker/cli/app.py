"""Typer CLI for inspecting picker geometry."""

import logging
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install svg-color-picker[cli]")

    app = typer.Typer(
        name="svg-color-picker",
        help="Inspect color picker wheel and slider geometry.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Inspect color picker wheel and slider geometry."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def wheel(
        x: Annotated[float, typer.Argument(help="Pointer x in wheel coordinates")],
        y: Annotated[float, typer.Argument(help="Pointer y in wheel coordinates")],
        width: Annotated[float, typer.Option("--width", "-w", help="Wheel width in pixels")] = 300,
        direction: Annotated[str, typer.Option("--direction", "-d", help="clockwise or anticlockwise")] = "anticlockwise",
        angle: Annotated[float, typer.Option("--angle", "-a", help="Hue offset in degrees")] = 0,
        color: Annotated[str, typer.Option("--color", "-c", help="Starting color")] = "#ffffff",
    ) -> None:
        """Show the color picked at a pointer position and where its handle lands."""
        from svg_color_picker.geometry.params import WidgetGeometryParams
        from svg_color_picker.input.events import InputEvent
        from svg_color_picker.picker import ColorPicker
        from svg_color_picker.widgets.wheel import WheelWidget

        try:
            params = WidgetGeometryParams(width=width).with_wheel(direction, angle)
            picker = ColorPicker([color])
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        widget = WheelWidget(picker, params)
        widget.handle_input(InputEvent.start(x, y))
        widget.handle_input(InputEvent.end(x, y))
        active = picker.color
        handle = widget.frame().active_handle.position

        h, s, v = active.hsv
        console.print(f"[bold]Hue:[/]        {h:.2f}°")
        console.print(f"[bold]Saturation:[/] {s:.2f}%")
        console.print(f"[bold]Value:[/]      {v:.2f}%")
        console.print(f"[bold]Color:[/]      {active.hex_string}")
        console.print(f"[bold]Handle:[/]     ({handle.x:.2f}, {handle.y:.2f})")

    @app.command()
    def slider(
        slider_type: Annotated[str, typer.Argument(help="red, green, blue, alpha, hue, saturation, value or kelvin")],
        color: Annotated[str, typer.Argument(help="Color to inspect, e.g. '#ff8800'")],
        width: Annotated[float, typer.Option("--width", "-w", help="Track length in pixels")] = 300,
        layout: Annotated[str, typer.Option("--layout", "-l", help="vertical or horizontal picker layout")] = "vertical",
        min_temperature: Annotated[Optional[float], typer.Option("--min-temp", help="Kelvin slider minimum")] = None,
        max_temperature: Annotated[Optional[float], typer.Option("--max-temp", help="Kelvin slider maximum")] = None,
    ) -> None:
        """Show a slider's value, handle position and gradient for a color."""
        from svg_color_picker.geometry.params import WidgetGeometryParams
        from svg_color_picker.picker import ColorPicker
        from svg_color_picker.widgets.slider import SliderWidget

        try:
            params = WidgetGeometryParams(width=width).with_slider(slider_type, layout)
            if min_temperature is not None or max_temperature is not None:
                params = params.with_temperature_range(
                    min_temperature if min_temperature is not None else params.min_temperature,
                    max_temperature if max_temperature is not None else params.max_temperature,
                )
            picker = ColorPicker([color])
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        frame = SliderWidget(picker, params).frame()
        handle = frame.handle.position

        console.print(f"[bold cyan]{params.slider_type.value} slider[/] for {picker.color.hex_string}")
        console.print(f"  [bold]Value:[/]  {frame.value:.2f}%")
        console.print(f"  [bold]Handle:[/] ({handle.x:.2f}, {handle.y:.2f})")
        console.print(f"  [bold]Size:[/]   {frame.width:g}x{frame.height:g}")

        table = Table(title="Gradient stops")
        table.add_column("Offset", justify="right")
        table.add_column("Color")
        for offset, stop_color in frame.gradient:
            table.add_row(f"{offset:g}%", stop_color)
        console.print(table)

    @app.command()
    def kelvin(
        temperature: Annotated[float, typer.Argument(help="Color temperature in Kelvin")],
    ) -> None:
        """Convert a color temperature to RGB."""
        from svg_color_picker.core.constants import KELVIN_MAX, KELVIN_MIN
        from svg_color_picker.core.convert import kelvin_to_rgb

        r, g, b = kelvin_to_rgb(temperature)
        if not KELVIN_MIN <= temperature <= KELVIN_MAX:
            console.print(f"[yellow]{temperature:g}K is outside {KELVIN_MIN}-{KELVIN_MAX}K; result is approximate[/]")
        console.print(f"[bold]{temperature:g}K[/] → rgb({r}, {g}, {b}) #{r:02x}{g:02x}{b:02x}")

    return app
