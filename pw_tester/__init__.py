from .errors import PwTesterError, TerminalError, InputClosedError
from .const import *
from .rules import RuleResult, evaluate
from .terminal import (
    MaskedLineReader,
    StreamMaskedReader,
    PosixMaskedReader,
    WindowsMaskedReader,
    get_masked_reader,
)
