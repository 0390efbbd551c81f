## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class FormatError(Exception):
    def __init__(self, message: str = "", *, fmt_code=None, fmt_spec=None, fmt_token=None, line=None, column=None):
        """Base class for all errors raised while formatting a template."""
        super().__init__(message)
        self.fmt_code: str = fmt_code
        self.fmt_spec: str = fmt_spec
        self.fmt_token: str = fmt_token
        self.line: int = line
        self.column: int = column

class FormatSyntaxError(FormatError, ValueError):
    pass

class FormatAddressError(FormatError, LookupError):
    pass

class FormatTypeError(FormatError, TypeError):
    pass

class FormatValueError(FormatError, ValueError):
    pass

class FormatSignError(FormatError, ValueError):
    pass

class FormatCodeError(FormatError, ValueError):
    pass


class FormatArityError(FormatError, TypeError):
    """Anonymous placeholders and supplied arguments do not pair up one-to-one."""
    def __init__(self, message: str = "", *, placeholders: int = 0, arguments: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.placeholders = placeholders
        self.arguments = arguments

class FormatMissingArguments(FormatArityError):
    pass

class FormatExtraArguments(FormatArityError):
    pass
