class JSDevError(Exception):
    """Base class for every fatal jsdev error."""


class ConfigurationError(JSDevError):
    """A tag token on the command line is malformed."""

    def __init__(self, token, reason=None):
        self.token = token
        self.reason = reason
        message = f"JSDev: bad method line {token}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseError(JSDevError):
    """
    Raised when the input cannot be scanned.

    Args:
        message: description of the problem
        line_no: 1-based line where the offending construct began
    """

    def __init__(self, message, line_no):
        self.message = message
        self.line_no = line_no
        super().__init__(f"JSDev: {line_no}. {message}")


class UnterminatedLiteral(ParseError):
    pass


class UnterminatedComment(ParseError):
    pass


class IllegalCommentInLiteral(ParseError):
    pass


class UnbalancedBrackets(ParseError):
    pass


class NestedComment(ParseError):
    pass


class WriteError(JSDevError):
    """The output stream rejected a write."""

    def __init__(self, line_no=None):
        self.line_no = line_no
        if line_no:
            super().__init__(f"JSDev: {line_no}. write error.")
        else:
            super().__init__("JSDev: write error.")
