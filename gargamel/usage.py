import sys
from typing import Iterable, Optional, TextIO

from .options import ArgumentStyle, OptionSpec

ARGUMENT_HINTS = {
    ArgumentStyle.NO_ARGUMENT: "",
    ArgumentStyle.OPTIONAL_ARGUMENT: " [Argument]",
    ArgumentStyle.REQUIRED_ARGUMENT: " Argument",
}


def format_names(spec: OptionSpec) -> str:
    result = ""
    if spec.has_short():
        result += f"-{spec.short_name}"
        if spec.has_long():
            result += ", "
    if spec.has_long():
        result += f"--{spec.long_name}" + ARGUMENT_HINTS[spec.style]
    return result


def render_usage(table: Optional[Iterable[OptionSpec]]) -> str:
    if table is None:
        return ""

    result = ""
    for spec in table:
        names = format_names(spec)
        if names:
            result += names + "\n\t"
        result += spec.help_text + "\n"
    return result


def show_usage(table: Optional[Iterable[OptionSpec]], file: Optional[TextIO] = None) -> None:
    print(render_usage(table), end="", file=file if file is not None else sys.stdout)
