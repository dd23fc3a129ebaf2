"""
 *exceptions.py*
 errors raised while declaring an option table (OptionSpecException) and
 while reading parse results back (OptionParseException). Parsing argv
 itself only records problems, it never raises.
"""


class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class OptionParseException(OptionException):
    pass

class OptionExistsError(OptionSpecException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ already exists")
        self.option = option

class InvalidOptionFormatError(OptionSpecException):
    def __init__(self, format: str):
        super().__init__(f"Invalid option format ‘{format}’")
        self.format = format

class OptionNotExistsException(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ does not exist")
        self.option = option

class MissingArgumentException(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ is missing an argument")
        self.option = option

class ArgumentIncorrectType(OptionParseException):
    def __init__(self, arg: str):
        super().__init__(f"Argument ‘{arg}’ failed to parse")
        self.arg = arg
