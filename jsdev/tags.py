import collections
import re

from .exceptions import ConfigurationError

MAX_NR_TAGS = 100
MAX_TAG_LENGTH = 80

_NAME = r"[A-Za-z0-9_$.]+"
_NAME_RE = re.compile(_NAME)
_TOKEN_RE = re.compile(rf"({_NAME})(?::({_NAME}))?")

Tag = collections.namedtuple("Tag", ["name", "method"], defaults=(None,))


def _check_name(token, name, kind):
    if not name or _NAME_RE.fullmatch(name) is None:
        raise ConfigurationError(token, f"invalid {kind}")
    if len(name) > MAX_TAG_LENGTH:
        raise ConfigurationError(
            token, f"{kind} longer than {MAX_TAG_LENGTH} characters"
        )


def parse_tag(token):
    """
    Parse a ``tag`` or ``tag:method`` token into a Tag.

    There must be no whitespace around the colon, and both names may only
    use letters, digits, underscore, dollar and period.
    """
    match = _TOKEN_RE.fullmatch(token)
    if match is None:
        raise ConfigurationError(token)
    name, method = match.groups()
    _check_name(token, name, "tag")
    if method is not None:
        _check_name(token, method, "method")
    return Tag(name, method)


def build_tag_table(tokens):
    """
    Build the ordered tag table from Tag objects or token strings.

    Order is kept: on duplicate names the first entry wins.
    """
    table = []
    for token in tokens:
        if isinstance(token, Tag):
            _check_name(token.name, token.name, "tag")
            if token.method:
                _check_name(token.name, token.method, "method")
            else:
                token = Tag(token.name)
        else:
            token = parse_tag(token)
        table.append(token)
        if len(table) > MAX_NR_TAGS:
            raise ConfigurationError(
                token.name, f"more than {MAX_NR_TAGS} tags"
            )
    return table


def find_tag(table, name):
    for tag in table:
        if tag.name == name:
            return tag
    return None
