import math

import click
from rich.text import Text


def human_format_to_float(num_str) -> float:
    num_str = str(num_str).strip().upper()
    num_str = num_str.replace("K", "e3").replace("M", "e6").replace("B", "e9").replace("T", "e12")
    return float(num_str)


def human_format(num) -> str:
    num = float(num)
    if not math.isfinite(num):
        return str(num)
    num = float("{:.3g}".format(num))
    magnitude = 0
    while abs(num) >= 1000 and magnitude < 4:
        magnitude += 1
        num /= 1000.0
    return "{}{}".format(
        "{:f}".format(num).rstrip("0").rstrip("."), ["", "K", "M", "B", "T"][magnitude]
    )


def cost_format(cost) -> Text:
    """Formats a path cost using Rich; None means no path."""
    if cost is None:
        return Text("N/A", style="dim")
    if isinstance(cost, float):
        return Text(f"{cost:.2f}", style="green")
    return Text(str(cost), style="green")


class HumanIntParamType(click.ParamType):
    """Click parameter accepting plain integers or human notation such as 1.5K."""

    name = "human_int"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            number = human_format_to_float(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid number", param, ctx)
        if not number.is_integer():
            self.fail(f"{value!r} is not a whole number", param, ctx)
        return int(number)


HUMAN_INT = HumanIntParamType()
