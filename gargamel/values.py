from typing import Any, Callable, List, Optional

from .exceptions import ArgumentIncorrectType

TRUE_STRINGS = ("1", "y", "yes", "on", "true", "enable")
FALSE_STRINGS = ("0", "n", "no", "off", "false", "disable")


def boolify(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    raise ValueError(text)


class ArgumentValue:
    def __init__(self, default: str = "", is_array: bool = False):
        self.present = False
        self.value = default
        self.values: List[str] = []
        self.is_array = is_array

    def __repr__(self):
        return f"ArgumentValue(present={self.present!r}, value={self.value!r}, values={self.values!r})"

    def __eq__(self, other):
        if not isinstance(other, ArgumentValue):
            return NotImplemented
        return (self.present, self.value, self.values) == (other.present, other.value, other.values)

    def store(self, text: str) -> None:
        if self.is_array:
            self.values.append(text)
        else:
            self.value = text

    def count(self) -> int:
        return len(self.values) if self.is_array else int(self.present)

    def int_value(self, index: Optional[int] = None) -> int:
        return self._convert(int, index)

    def float_value(self, index: Optional[int] = None) -> float:
        return self._convert(float, index)

    def bool_value(self, index: Optional[int] = None) -> bool:
        return self._convert(boolify, index)

    def _convert(self, convert: Callable[[str], Any], index: Optional[int]) -> Any:
        text = self.value if index is None else self.values[index]
        try:
            return convert(text)
        except ValueError:
            raise ArgumentIncorrectType(text)
