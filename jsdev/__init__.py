from .core import Expander, expand, process
from .exceptions import (
    ConfigurationError,
    IllegalCommentInLiteral,
    JSDevError,
    NestedComment,
    ParseError,
    UnbalancedBrackets,
    UnterminatedComment,
    UnterminatedLiteral,
    WriteError,
)
from .tags import Tag, build_tag_table, parse_tag

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "Expander",
    "IllegalCommentInLiteral",
    "JSDevError",
    "NestedComment",
    "ParseError",
    "Tag",
    "UnbalancedBrackets",
    "UnterminatedComment",
    "UnterminatedLiteral",
    "WriteError",
    "build_tag_table",
    "expand",
    "parse_tag",
    "process",
]
