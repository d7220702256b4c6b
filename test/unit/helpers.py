import io
from unittest.mock import patch
from contextlib import redirect_stdout, redirect_stderr

from pw_tester.cli import main as cli
from pw_tester.terminal import StreamMaskedReader

BACKSPACE = "\x7f"


def run_pw_tester_command(keys="", args=""):
    """Helper function to run pw-tester with a scripted key stream.

    Returns a tuple of (stdout, stderr, exit_code)."""
    stdout_buffer = io.StringIO()
    stderr_buffer = io.StringIO()
    reader = StreamMaskedReader(io.StringIO(keys))
    exit_code = 0

    with redirect_stdout(stdout_buffer), redirect_stderr(stderr_buffer):
        argv_patch = patch("sys.argv", ["pw-tester"] + args.split())
        reader_patch = patch("pw_tester.cli.get_masked_reader", return_value=reader)

        with argv_patch, reader_patch:
            try:
                cli()
            except SystemExit as e:
                exit_code = e.code

    return stdout_buffer.getvalue(), stderr_buffer.getvalue(), exit_code


def read_masked(keys):
    """Reads one masked line from 'keys'. Returns (line, echoed_output, reader)."""
    output = io.StringIO()
    reader = StreamMaskedReader(io.StringIO(keys), output)
    line = reader.read_line()
    return line, output.getvalue(), reader


class FakeTerminal:
    """Stands in for the termios calls, recording every attribute change."""

    def __init__(self, termios):
        self.termios = termios
        self.lflag = termios.ECHO | termios.ICANON | termios.ISIG
        self.calls = []

    def tcgetattr(self, fd):
        return [0, 0, 0, self.lflag, 0, 0, [0] * 32]

    def tcsetattr(self, fd, when, attrs):
        self.calls.append((when, attrs[3]))
        self.lflag = attrs[3]

    @property
    def echo_enabled(self):
        return bool(self.lflag & self.termios.ECHO)

    @property
    def canonical(self):
        return bool(self.lflag & self.termios.ICANON)


class FakeTTYStream(io.StringIO):
    def fileno(self):
        return 42

    def isatty(self):
        return True
