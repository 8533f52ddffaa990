"""
Scanner that expands tagged comments in JavaScript source.

A tagged comment has the form ``/*tag stuff*/`` or ``/*tag(condition)
stuff*/`` with no space between the opening marker and the tag. When the
tag is active the comment is replaced with ``{stuff}`` or
``if (condition) {stuff}``, or, if the tag carries a method, with
``{method(stuff);}`` and ``if (condition) {method(stuff);}``. Everything
else, inactive tagged comments included, is copied through verbatim.
"""
import io

from .exceptions import (
    IllegalCommentInLiteral,
    NestedComment,
    UnbalancedBrackets,
    UnterminatedComment,
    UnterminatedLiteral,
    WriteError,
)
from .log import get_logger
from .stream import CharStream
from .tags import MAX_TAG_LENGTH, build_tag_table, find_tag
from .tokens import (
    BODY_START,
    CLOSERS,
    COMMENT_START,
    LINE_ENDINGS,
    OPENERS,
    QUOTES,
    is_significant,
    is_tag_char,
    may_precede_regex,
)

logger = get_logger(__name__)


def _is_comment_start(c, lookahead):
    return lookahead is not None and c + lookahead in COMMENT_START


class Expander:
    """
    Single pass over one input stream.

    Args:
        f_obj: iterable of text chunks to read from
        out: object with a ``write`` method receiving the output
        tags: ordered tag table, as built by ``build_tag_table``
    """

    def __init__(self, f_obj, out, tags=()):
        self.stream = CharStream(f_obj, out)
        self.tags = list(tags)

    @property
    def line_no(self):
        return self.stream.line_no

    def process(self):
        stream = self.stream
        left = None
        while True:
            c = stream.get()
            if c is None:
                break
            if c in QUOTES:
                stream.emit(c)
                self.scan_string(c)
            elif c == "/":
                lookahead = stream.peek()
                if lookahead == "/":
                    self.scan_line_comment()
                elif lookahead == "*":
                    stream.get()
                    self.scan_block_comment()
                else:
                    stream.emit(c)
                    if may_precede_regex(left):
                        self.scan_regex()
                    left = c
            else:
                stream.emit(c)
                if is_significant(c):
                    left = c

    def scan_line_comment(self):
        self.stream.emit("/")
        while True:
            c = self.stream.get(echo=True)
            if c is None or c in LINE_ENDINGS:
                return

    def scan_tag_name(self):
        """
        Read the tag right after ``/*``. Returns the name and whether it
        ended within MAX_TAG_LENGTH characters.
        """
        chars = []
        while True:
            c = self.stream.get()
            if not is_tag_char(c) or len(chars) == MAX_TAG_LENGTH:
                break
            chars.append(c)
        self.stream.pushback(c)
        return "".join(chars), not is_tag_char(c)

    def scan_block_comment(self):
        start = self.line_no
        name, complete = self.scan_tag_name()
        tag = find_tag(self.tags, name) if name and complete else None
        if tag is None:
            self.echo_comment(name, start)
        else:
            logger.debug("Expanding /*%s on line %d", name, start)
            self.expand(tag)

    def echo_comment(self, name, start):
        stream = self.stream
        stream.emit("/*" + name)
        while True:
            c = stream.get(echo=True)
            if c is None:
                raise UnterminatedComment("unterminated comment.", start)
            lookahead = stream.peek()
            if c == "*" and lookahead == "/":
                stream.get(echo=True)
                return
            if c == "/" and _is_comment_start(c, lookahead):
                raise NestedComment(
                    f"nested comment on line {self.line_no}.", start
                )

    def expand(self, tag):
        stream = self.stream
        if stream.peek() == "(":
            stream.emit("if ")
            self.scan_condition()
            stream.emit(" ")
        stream.emit("{")
        if tag.method:
            stream.emit(tag.method + "(")
            self.scan_stuff()
            stream.emit(");}")
        else:
            self.scan_stuff()
            stream.emit("}")

    def scan_string(self, quote, in_comment=False):
        stream = self.stream
        start = self.line_no
        while True:
            c = stream.get(echo=True)
            if c == quote:
                return
            if c == "\\":
                c = stream.get(echo=True)
            elif in_comment and c == "*" and stream.peek() == "/":
                raise IllegalCommentInLiteral(
                    "unexpected close comment in string.", start
                )
            if c is None:
                raise UnterminatedLiteral("unterminated string literal.", start)

    def scan_regex(self, in_comment=False):
        stream = self.stream
        start = self.line_no
        while True:
            c = stream.get(echo=True)
            if c == "[":
                self._scan_regex_class(in_comment, start)
            elif c == "/":
                if in_comment and stream.peek() in ("/", "*"):
                    raise IllegalCommentInLiteral("unexpected comment.", start)
                return
            elif c == "\\":
                c = stream.get(echo=True)
            elif in_comment and c == "*" and stream.peek() == "/":
                raise IllegalCommentInLiteral(
                    "unexpected close comment in regexp.", start
                )
            if c is None:
                raise UnterminatedLiteral("unterminated regexp literal.", start)

    def _scan_regex_class(self, in_comment, start):
        stream = self.stream
        while True:
            c = stream.get(echo=True)
            if c == "]":
                return
            if c == "\\":
                c = stream.get(echo=True)
            elif in_comment and c == "*" and stream.peek() == "/":
                raise IllegalCommentInLiteral(
                    "unexpected close comment in regexp.", start
                )
            if c is None:
                raise UnterminatedLiteral(
                    "unterminated set in regexp literal.", start
                )

    def _scan_slash(self, left):
        # A slash inside a condition or stuff body.
        if _is_comment_start("/", self.stream.peek()):
            raise NestedComment("unexpected comment.", self.line_no)
        if may_precede_regex(left):
            self.scan_regex(in_comment=True)

    def scan_condition(self):
        stream = self.stream
        start = self.line_no
        left = BODY_START
        depth = 0
        while True:
            c = stream.get(echo=True)
            if c is None:
                raise UnbalancedBrackets("unterminated condition.", start)
            if c in OPENERS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
                if depth == 0:
                    return
            elif c in QUOTES:
                self.scan_string(c, in_comment=True)
            elif c == "/":
                self._scan_slash(left)
            elif c == "*" and stream.peek() == "/":
                raise UnbalancedBrackets("unclosed condition.", start)
            if is_significant(c):
                left = c

    def scan_stuff(self):
        stream = self.stream
        while stream.peek() == " ":
            stream.get()
        start = self.line_no
        left = BODY_START
        depth = 0
        while True:
            while stream.peek() == "*":
                stream.get()
                if stream.peek() == "/":
                    stream.get()
                    if depth > 0:
                        raise UnbalancedBrackets("unbalanced stuff.", start)
                    return
                stream.emit("*")
            c = stream.get(echo=True)
            if c is None:
                raise UnterminatedComment("unterminated stuff.", start)
            if c in QUOTES:
                self.scan_string(c, in_comment=True)
            elif c in OPENERS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
                if depth < 0:
                    raise UnbalancedBrackets("unbalanced stuff.", start)
            elif c == "/":
                self._scan_slash(left)
            if is_significant(c):
                left = c


def write_comments(out, comments):
    for text in comments:
        try:
            out.write(f"// {text}\n")
        except OSError as exc:
            raise WriteError() from exc


def process(f_obj, out, tags=(), comments=()):
    """
    Expand the tagged comments of ``f_obj`` into ``out``.

    Args:
        f_obj: iterable of text chunks (file object, list of lines, string)
        out: object with a ``write`` method
        tags: Tag objects or ``tag[:method]`` strings, highest priority first
        comments: strings written as ``// text`` lines before the program
    """
    table = build_tag_table(tags)
    write_comments(out, comments)
    expander = Expander(f_obj, out, table)
    expander.process()
    logger.debug("Processed %d lines", expander.line_no)


def expand(f_obj, tags=(), comment=None):
    """Run a pass over ``f_obj`` and return the output as a string."""
    if comment is None:
        comments = ()
    elif isinstance(comment, str):
        comments = (comment,)
    else:
        comments = comment
    out = io.StringIO()
    process(f_obj, out, tags, comments)
    return out.getvalue()
