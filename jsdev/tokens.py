import string

QUOTES = frozenset("'\"`")
OPENERS = frozenset("([{")
CLOSERS = frozenset(")]}")
LINE_ENDINGS = ("\n", "\r")
COMMENT_START = ("/*", "//")

TAG_CHARS = frozenset(string.ascii_letters + string.digits + "_$.")

# A regexp literal may only follow one of these. Anything else before a
# slash (an identifier, a number, a closing paren) makes it a division.
REGEX_PRECEDERS = frozenset("(,=:[!&|?{};")

# Context value used at the start of a condition or stuff body.
BODY_START = "{"


def is_tag_char(c):
    return c is not None and c in TAG_CHARS


def is_significant(c):
    """
    Return True if the character counts as the left context of the next
    one, i.e. it is neither whitespace nor a control character.
    """
    return c is not None and c > " "


def may_precede_regex(left):
    """
    Decide whether a slash following ``left`` starts a regexp literal.

    This is a purely syntactic guess based on the last significant
    character emitted; it does not parse expressions. ``(a+b)/2`` is a
    division, and so is ``)/re/`` even where a regexp would be legal.
    """
    return left in REGEX_PRECEDERS
