class PwTesterError(Exception):
    """Base exception for pw-tester errors."""
    pass


class TerminalError(PwTesterError):
    """Raised when the terminal mode cannot be read, changed or shared."""
    pass


class InputClosedError(PwTesterError):
    """Raised when input ends before a strong password was entered."""

    def __init__(self, message="Input closed before a strong password was entered."):
        super().__init__(message)
