"""
 *options.py*
 option declarations: the style of an option, the immutable spec for one
 option and the ordered table a program declares once at startup.
"""
import logging
import re
from enum import Enum
from typing import Dict, Hashable, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .exceptions import InvalidOptionFormatError, OptionExistsError, OptionSpecException

logger = logging.getLogger(__name__)

NO_SHORT_NAME = "\0"

# "h,help", "h" or "help"
OPTION_FORMAT = re.compile(
    r"([a-zA-Z0-9]),([a-zA-Z0-9][-_a-zA-Z0-9]*)|([a-zA-Z0-9])|([a-zA-Z0-9][-_a-zA-Z0-9]+)"
)


class ArgumentStyle(Enum):
    NO_ARGUMENT = 0
    OPTIONAL_ARGUMENT = 1
    REQUIRED_ARGUMENT = 2


class DuplicatePolicy(Enum):
    ALLOW = 0   # aliasing, every matching spec is triggered
    WARN = 1
    REJECT = 2


class OptionSpec(NamedTuple):
    id: Hashable
    short_name: str = ""
    long_name: str = ""
    style: ArgumentStyle = ArgumentStyle.NO_ARGUMENT
    is_array: bool = False
    default_value: str = ""
    help_text: str = ""

    def has_short(self) -> bool:
        return bool(self.short_name) and self.short_name != NO_SHORT_NAME

    def has_long(self) -> bool:
        return bool(self.long_name)

    def takes_argument(self) -> bool:
        return self.style != ArgumentStyle.NO_ARGUMENT


def absent_short(short_name: Optional[str]) -> str:
    return "" if not short_name or short_name == NO_SHORT_NAME else short_name


def describe_arg(id: Hashable, short_name: str, long_name: str, style: ArgumentStyle, help_text: str = "") -> OptionSpec:
    return OptionSpec(id, absent_short(short_name), long_name or "", style, False, "", help_text)


def describe_arg_default(id: Hashable, short_name: str, long_name: str, style: ArgumentStyle,
                         default_value: str, help_text: str = "") -> OptionSpec:
    return OptionSpec(id, absent_short(short_name), long_name or "", style, False, default_value, help_text)


def describe_arg_array(id: Hashable, long_name: str, help_text: str = "") -> OptionSpec:
    """Array options are long-only and always need a value."""
    return OptionSpec(id, "", long_name, ArgumentStyle.REQUIRED_ARGUMENT, True, "", help_text)


def parse_option_format(opts: str) -> Tuple[str, str]:
    match = OPTION_FORMAT.fullmatch(opts)
    if not match:
        raise InvalidOptionFormatError(opts)
    if match.group(1):
        return match.group(1), match.group(2)
    if match.group(3):
        return match.group(3), ""
    return "", match.group(4)


def check_spec(spec: OptionSpec) -> None:
    if len(spec.short_name) > 1:
        raise OptionSpecException(f"Short name ‘{spec.short_name}’ of option {spec.id!r} is not a single character")
    if spec.is_array and spec.style == ArgumentStyle.NO_ARGUMENT:
        raise OptionSpecException(f"Option {spec.id!r} is an array but takes no argument")


class OptionTable:
    def __init__(self, specs: Iterable[OptionSpec] = (), policy: DuplicatePolicy = DuplicatePolicy.WARN):
        self.policy = policy
        self._specs: List[OptionSpec] = []
        for spec in specs:
            self.add(spec)

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __getitem__(self, index: int) -> OptionSpec:
        return self._specs[index]

    def __repr__(self):
        return f"OptionTable({self._specs!r})"

    def add(self, spec: OptionSpec) -> OptionSpec:
        check_spec(spec)
        for name in self._collisions(spec, self._specs):
            self._report(name)
        self._specs.append(spec)
        return spec

    def add_options(self) -> 'OptionAdder':
        return OptionAdder(self)

    def find_short(self, short_name: str) -> List[OptionSpec]:
        return [spec for spec in self._specs if spec.has_short() and spec.short_name == short_name]

    def find_long(self, long_name: str) -> List[OptionSpec]:
        return [spec for spec in self._specs if spec.has_long() and spec.long_name == long_name]

    def ids(self) -> List[Hashable]:
        return list(dict.fromkeys(spec.id for spec in self._specs))

    def validate(self, policy: Optional[DuplicatePolicy] = None) -> List[str]:
        """
        Check the whole table for duplicate ids, short names and long names.
        Returns the colliding names; raises OptionExistsError under REJECT.
        """
        policy = self.policy if policy is None else policy
        found = []
        for i, spec in enumerate(self._specs):
            check_spec(spec)
            for name in self._collisions(spec, self._specs[:i]):
                self._report(name, policy)
                found.append(name)
        return found

    def _collisions(self, spec: OptionSpec, existing: List[OptionSpec]) -> List[str]:
        names = []
        ids = {other.id for other in existing}
        shorts = {other.short_name for other in existing if other.has_short()}
        longs = {other.long_name for other in existing if other.has_long()}
        if spec.id in ids:
            names.append(f"id {spec.id!r}")
        if spec.has_short() and spec.short_name in shorts:
            names.append(f"-{spec.short_name}")
        if spec.has_long() and spec.long_name in longs:
            names.append(f"--{spec.long_name}")
        return names

    def _report(self, name: str, policy: Optional[DuplicatePolicy] = None) -> None:
        policy = self.policy if policy is None else policy
        if policy == DuplicatePolicy.REJECT:
            raise OptionExistsError(name)
        if policy == DuplicatePolicy.WARN:
            logger.warning("Option ‘%s’ already exists; every matching option will be set", name)


class OptionAdder:
    def __init__(self, table: OptionTable):
        self.table = table

    def __call__(self, id: Hashable, opts: str, desc: str = "",
                 style: ArgumentStyle = ArgumentStyle.NO_ARGUMENT,
                 default_value: str = "", is_array: bool = False) -> 'OptionAdder':
        short_name, long_name = parse_option_format(opts)
        self.table.add(OptionSpec(id, short_name, long_name, style, is_array, default_value, desc))
        return self


def index_by_id(table: Iterable[OptionSpec]) -> Dict[Hashable, OptionSpec]:
    # later specs win on duplicate ids
    return {spec.id: spec for spec in table}
