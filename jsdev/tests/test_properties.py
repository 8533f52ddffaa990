"""Property-based tests for the pass-through guarantees."""
from hypothesis import given, settings
from hypothesis import strategies as st

from jsdev import expand
from jsdev.exceptions import ParseError

TAGS = ["debug", "log:console.log"]

# Code that never opens a comment, string or regexp.
plain_code = st.text(
    alphabet=st.characters(blacklist_characters="/'\"`"), max_size=300
)
# Raw comment bodies: no nested comment markers, no terminator.
comment_body = st.text(
    alphabet=st.characters(blacklist_characters="/*"), max_size=60
)
inactive_tag = st.sampled_from(["", "trace", "Debug", "debugger", "log2"])


@given(plain_code)
@settings(max_examples=200)
def test_plain_code_is_unchanged(source):
    assert expand(source, TAGS) == source


@given(st.lists(st.tuples(plain_code, inactive_tag, comment_body),
                max_size=5))
@settings(max_examples=100)
def test_inactive_comments_are_unchanged(parts):
    source = "".join(f"{code}/*{tag} {body}*/" for code, tag, body in parts)
    assert expand(source, TAGS) == source


@given(st.text(alphabet="/*'\"`[]()\\{} \nab=", max_size=80))
@settings(max_examples=300)
def test_untagged_input_round_trips_or_fails_cleanly(source):
    try:
        output = expand(source, [])
    except ParseError:
        return
    assert output == source


@given(st.text(alphabet="ab+=(), \n", max_size=40))
def test_active_comment_stuff(stuff):
    if stuff.count("(") != stuff.count(")"):
        return
    balance = 0
    for c in stuff:
        balance += {"(": 1, ")": -1}.get(c, 0)
        if balance < 0:
            return
    output = expand(f"/*debug {stuff}*/", TAGS)
    assert output == "{" + stuff.lstrip(" ") + "}"
