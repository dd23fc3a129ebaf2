import logging
import sys
from enum import Enum
from typing import Dict, Hashable, List, NamedTuple, Optional, Sequence, TextIO, Tuple

from .exceptions import MissingArgumentException, OptionNotExistsException
from .options import ArgumentStyle, OptionTable, index_by_id
from .usage import show_usage
from .values import ArgumentValue

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    UNRECOGNIZED_TOKEN = 0      # positional-looking token or a lone "-"
    UNKNOWN_SHORT_FLAG = 1
    UNKNOWN_LONG_OPTION = 2
    MISSING_REQUIRED_VALUE = 3


class ParseError(NamedTuple):
    kind: ErrorKind
    token: str
    index: int


class ArgumentParser:
    def __init__(self, table: OptionTable, positional_count: int = 0):
        if positional_count < 0:
            raise ValueError(f"positional_count must not be negative, got {positional_count}")
        self.table = table
        self.positional_count = positional_count
        self.results: Dict[Hashable, ArgumentValue] = {}
        self.errors: List[ParseError] = []
        self.positionals: List[str] = []
        self.reset()

    def __getitem__(self, id: Hashable) -> ArgumentValue:
        if id not in self.results:
            raise OptionNotExistsException(str(id))
        return self.results[id]

    def reset(self) -> None:
        self.results = {id: ArgumentValue(spec.default_value, spec.is_array)
                        for id, spec in index_by_id(self.table).items()}
        self.errors = []
        self.positionals = []

    def process(self, argv: Sequence[str]) -> bool:
        """
        Walk argv (argv[0] is the program name) and fill in the results.
        Returns True if any token was malformed; parsing never stops early.
        """
        self.reset()
        end = len(argv) - self.positional_count
        if self.positional_count > 0:
            self.positionals = list(argv[max(end, 1):])

        bad_command_line = False
        current = 1
        while current < end:
            arg = argv[current]
            if not arg.startswith("-"):
                bad_command_line = True
                self._error(ErrorKind.UNRECOGNIZED_TOKEN, arg, current)
            elif arg == "-":
                bad_command_line = True
                self._error(ErrorKind.UNRECOGNIZED_TOKEN, arg, current)
            elif arg.startswith("--"):
                consumed, ok = self.process_long_argument(current, argv)
                bad_command_line |= not ok
                current += consumed
            else:
                bad_command_line |= not self.process_flag_list(arg[1:], current)
            current += 1
        return bad_command_line

    def process_long_argument(self, current: int, argv: Sequence[str]) -> Tuple[int, bool]:
        """
        Match argv[current] against every long name. Returns the number of
        following tokens consumed as a value (0 or 1) and whether the option
        resolved. The value may come from the positional tail. Aliased specs
        sharing a long name all see the same value.
        """
        token = argv[current]
        name = token[2:]
        following = argv[current + 1] if current + 1 < len(argv) else None
        matched = False
        missing = False
        consumed = 0
        for spec in self.table:
            if not spec.has_long() or spec.long_name != name:
                continue
            matched = True
            record = self.results[spec.id]
            # set even when the required value turns out to be missing
            record.present = True

            if spec.style == ArgumentStyle.OPTIONAL_ARGUMENT:
                if following is not None and not following.startswith("-"):
                    record.store(following)
                    consumed = 1
            elif spec.style == ArgumentStyle.REQUIRED_ARGUMENT:
                if following is None:
                    missing = True
                    continue
                record.store(following)
                consumed = 1

        if not matched:
            self._error(ErrorKind.UNKNOWN_LONG_OPTION, token, current)
        elif missing:
            self._error(ErrorKind.MISSING_REQUIRED_VALUE, token, current)
        elif consumed:
            logger.debug("--%s took value %r", name, following)
        return consumed, matched and not missing

    def process_flag_list(self, flags: str, index: int = 0) -> bool:
        """Set every spec whose short name is in the cluster; never consumes a value."""
        flag_not_understood = False
        for flag in flags:
            flag_used = False
            for spec in self.table:
                if spec.has_short() and spec.short_name == flag:
                    self.results[spec.id].present = True
                    flag_used = True
            if not flag_used:
                flag_not_understood = True
                self._error(ErrorKind.UNKNOWN_SHORT_FLAG, "-" + flag, index)
        return not flag_not_understood

    def raise_for_errors(self) -> None:
        if not self.errors:
            return
        error = self.errors[0]
        if error.kind == ErrorKind.MISSING_REQUIRED_VALUE:
            raise MissingArgumentException(error.token)
        raise OptionNotExistsException(error.token)

    def show_usage(self, file: Optional[TextIO] = None) -> None:
        show_usage(self.table, file)

    def _error(self, kind: ErrorKind, token: str, index: int) -> None:
        logger.debug("%s at argv[%d]: %r", kind.name, index, token)
        self.errors.append(ParseError(kind, token, index))


# Example usage: python -m gargamel.parser -v --name you --tag a --tag b
if __name__ == "__main__":
    from .options import describe_arg, describe_arg_array, describe_arg_default

    class Args(Enum):
        HELP = 1
        VERBOSE = 2
        NAME = 3
        TAG = 4

    table = OptionTable([
        describe_arg(Args.HELP, "h", "help", ArgumentStyle.NO_ARGUMENT, "Print help text"),
        describe_arg(Args.VERBOSE, "v", "verbose", ArgumentStyle.NO_ARGUMENT, "Enable verbose logging"),
        describe_arg_default(Args.NAME, "n", "name", ArgumentStyle.REQUIRED_ARGUMENT, "anon", "Name to greet"),
        describe_arg_array(Args.TAG, "tag", "Tag to attach, may be repeated"),
    ])
    parser = ArgumentParser(table)
    if parser.process(sys.argv) or parser[Args.HELP].present:
        parser.show_usage()
    else:
        print(f"Hello {parser[Args.NAME].value} {parser[Args.TAG].values}")
