import pytest
import typer

from itdepends.core.decorators import handle_errors
from itdepends.core.errors import InputError
from itdepends.core.errors import NetworkError
from itdepends.core.errors import OutputError
from itdepends.core.errors import ParseError
from itdepends.core.errors import ResponseFormatError


@pytest.mark.parametrize(
    'error, stage', [
        (InputError('x'), 'open input file'),
        (ParseError('x'), 'parse dependency tree'),
        (NetworkError('x'), 'call registry API'),
        (ResponseFormatError('x'), 'decode registry response'),
        (OutputError('x'), 'write report'),
    ],
)
def test_pipeline_errors_exit_with_1(error, stage):
    @handle_errors
    def command():
        raise error

    assert error.describe() == f'Failed to {stage}: x'
    with pytest.raises(typer.Exit) as exc_info:
        command()
    assert exc_info.value.exit_code == 1


def test_keyboard_interrupt_exits_130():
    @handle_errors
    def command():
        raise KeyboardInterrupt

    with pytest.raises(typer.Exit) as exc_info:
        command()
    assert exc_info.value.exit_code == 130


def test_success_passes_through():
    @handle_errors
    def command(x):
        return x * 2

    assert command(21) == 42


def test_response_format_error_is_network_error():
    assert issubclass(ResponseFormatError, NetworkError)
