import pytest
from unittest.mock import patch

from helpers import FakeTerminal


@pytest.fixture
def fake_termios():
    termios = pytest.importorskip("termios")
    fake = FakeTerminal(termios)
    with patch("termios.tcgetattr", fake.tcgetattr), \
            patch("termios.tcsetattr", fake.tcsetattr):
        yield fake


@pytest.fixture(autouse=True)
def installed_version():
    """Reports a fixed version so the parser builds without installed metadata."""
    with patch("pw_tester.cli.metadata.version", return_value="0.1.0") as version:
        yield version
