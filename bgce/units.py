"""Interactive converter between metric and imperial units."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel

INVALID_OPTION = "Invalid option! Please select between 0 and 6."
INVALID_INPUT = "Invalid input! Please enter a numeric value."

MENU = (
    "1. Meters to Feet",
    "2. Feet to Meters",
    "3. Celsius to Fahrenheit",
    "4. Fahrenheit to Celsius",
    "5. Kilograms to Pounds",
    "6. Pounds to Kilograms",
    "0. Exit",
)

_CONVERSIONS = {
    1: ("meters", "feet", lambda v: v * 3.28084),
    2: ("feet", "meters", lambda v: v / 3.28084),
    3: ("°C", "°F", lambda v: v * 9 / 5 + 32),
    4: ("°F", "°C", lambda v: (v - 32) * 5 / 9),
    5: ("kg", "lbs", lambda v: v * 2.20462),
    6: ("lbs", "kg", lambda v: v / 2.20462),
}


def format_conversion(option: int, value: float) -> str:
    """Convert ``value`` with menu entry ``option`` and describe the result."""
    if option not in _CONVERSIONS:
        raise ValueError(INVALID_OPTION)
    source, target, convert = _CONVERSIONS[option]
    return f"{value:.2f} {source} = {convert(value):.2f} {target}"


def _read_word(console: Console, prompt: str) -> str:
    try:
        words = console.input(prompt).split()
    except EOFError:
        return ""
    return words[0] if words else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive converter until the user chooses to exit."""
    console = Console(highlight=False)
    console.print(
        Panel(
            "Convert Meters ⇌ Feet | Celsius ⇌ Fahrenheit | Kilograms ⇌ Pounds",
            title="UNIT CONVERTER",
            box=box.DOUBLE,
            border_style="cyan",
            padding=(1, 2),
            expand=False,
        )
    )
    while True:
        console.print("\nSelect conversion type:", style="bold green")
        for line in MENU:
            console.print(line, markup=False)

        try:
            choice = int(_read_word(console, "[yellow]Enter option: [/]"))
        except ValueError:
            choice = 0
        if choice == 0:
            console.print("Goodbye! 🌟", style="bright_magenta")
            return 0

        entry = _read_word(console, "[cyan]Enter value: [/]")
        try:
            value = float(entry)
        except ValueError:
            console.print(INVALID_INPUT, style="red", markup=False)
            continue
        try:
            console.print(format_conversion(choice, value), markup=False)
        except ValueError as exc:
            console.print(str(exc), style="red", markup=False)


if __name__ == "__main__":
    sys.exit(main())