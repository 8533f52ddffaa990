import pytest

from jsdev import expand

# Tags active unless a test passes its own table.
DEFAULT_TAGS = ("debug", "log:console.log", "alarm:alert")


@pytest.fixture
def tags():
    return list(DEFAULT_TAGS)


@pytest.fixture
def run_case(tags):
    """Expand the input and compare the output with ``expected``."""
    def _run_case(input_list, expected, tags=tags):
        output = expand(input_list, tags)
        assert output == expected
    return _run_case


@pytest.fixture
def run_error(tags):
    """Expand the input, expecting ``error``; returns the exception."""
    def _run_error(input_list, error, tags=tags):
        with pytest.raises(error) as excinfo:
            expand(input_list, tags)
        return excinfo.value
    return _run_error
