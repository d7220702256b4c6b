import logging
import re
from typing import List, NamedTuple

from .const import (
    MIN_LENGTH,
    SPECIAL_CHARACTERS,
    REASON_TOO_SHORT,
    REASON_NO_UPPERCASE,
    REASON_NO_LOWERCASE,
    REASON_NO_DIGIT,
    REASON_NO_SPECIAL,
)

log = logging.getLogger(__name__)

_SPECIAL_RE = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


class RuleResult(NamedTuple):
    is_strong: bool
    reasons: List[str]


def is_length_valid(password: str) -> bool:
    return len(password) >= MIN_LENGTH


def has_uppercase(password: str) -> bool:
    return re.search(r"[A-Z]", password) is not None


def has_lowercase(password: str) -> bool:
    return re.search(r"[a-z]", password) is not None


def has_digit(password: str) -> bool:
    return re.search(r"[0-9]", password) is not None


def has_special_char(password: str) -> bool:
    return _SPECIAL_RE.search(password) is not None


RULES = [
    (is_length_valid, REASON_TOO_SHORT),
    (has_uppercase, REASON_NO_UPPERCASE),
    (has_lowercase, REASON_NO_LOWERCASE),
    (has_digit, REASON_NO_DIGIT),
    (has_special_char, REASON_NO_SPECIAL),
]


def evaluate(password: str) -> RuleResult:
    """
    Verify the strength of 'password'.
    Returns a RuleResult with the verdict and the reasons it failed.
    A password is considered strong if it has:
        8 characters or more
        1 uppercase letter or more
        1 lowercase letter or more
        1 digit or more
        1 special character from !@#$%^&*()-_+=<>?/ or more
    Every rule is checked; reasons keep the order above.
    """
    reasons = [reason for check, reason in RULES if not check(password)]
    log.debug("Password evaluated with %d violation(s).", len(reasons))
    return RuleResult(not reasons, reasons)
