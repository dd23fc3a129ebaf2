from .exceptions import (
    ArgumentIncorrectType,
    InvalidOptionFormatError,
    MissingArgumentException,
    OptionException,
    OptionExistsError,
    OptionNotExistsException,
    OptionParseException,
    OptionSpecException,
)
from .options import (
    ArgumentStyle,
    DuplicatePolicy,
    OptionSpec,
    OptionTable,
    describe_arg,
    describe_arg_array,
    describe_arg_default,
)
from .parser import ArgumentParser, ErrorKind, ParseError
from .usage import render_usage, show_usage
from .values import ArgumentValue

__all__ = [
    "ArgumentIncorrectType",
    "ArgumentParser",
    "ArgumentStyle",
    "ArgumentValue",
    "DuplicatePolicy",
    "ErrorKind",
    "InvalidOptionFormatError",
    "MissingArgumentException",
    "OptionException",
    "OptionExistsError",
    "OptionNotExistsException",
    "OptionParseException",
    "OptionSpec",
    "OptionSpecException",
    "OptionTable",
    "ParseError",
    "describe_arg",
    "describe_arg_array",
    "describe_arg_default",
    "process",
    "render_usage",
    "show_usage",
]


def process(table: OptionTable, argv, positional_count: int = 0) -> ArgumentParser:
    """One-shot helper: parse argv against table and hand back the parser."""
    parser = ArgumentParser(table, positional_count)
    parser.process(argv)
    return parser
