"""
Field rules for the registration form.

Each rule is a predicate over one raw value that returns a Violation when
the value is not acceptable, or None when it is.
"""
import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Violation(str, Enum):
    MISSING = "missing"
    INVALID_TYPE = "invalid_type"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    NOT_ACCEPTED = "not_accepted"
    CUSTOM = "custom"


Rule = Callable[[Any], Optional[Violation]]

GENDERS: Tuple[str, ...] = ("male", "female", "other")

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    rule: Rule
    message: str = Field(..., description="Default message for any violation")
    messages: Dict[Violation, str] = Field(default_factory=dict)
    label: str = ""
    input_type: str = "text"
    choices: Tuple[str, ...] = ()

    @property
    def error_id(self) -> str:
        return f"{self.name}-error"

    def check(self, value: Any) -> Optional[Violation]:
        try:
            return self.rule(value)
        except Exception:
            logger.debug("rule for field %s raised", self.name, exc_info=True)
            return Violation.CUSTOM

    def message_for(self, violation: Violation) -> str:
        return self.messages.get(violation, self.message)


def _string(value: Any) -> Optional[Violation]:
    if value is None:
        return Violation.MISSING
    if not isinstance(value, str):
        return Violation.INVALID_TYPE
    return None


def non_empty(value: Any) -> Optional[Violation]:
    violation = _string(value)
    if violation is not None:
        return violation
    return Violation.TOO_SHORT if len(value) < 1 else None


def min_length(n: int) -> Rule:
    def check(value: Any) -> Optional[Violation]:
        violation = _string(value)
        if violation is not None:
            return violation
        return Violation.TOO_SHORT if len(value) < n else None

    return check


def max_length(n: int) -> Rule:
    def check(value: Any) -> Optional[Violation]:
        violation = _string(value)
        if violation is not None:
            return violation
        return Violation.TOO_LONG if len(value) > n else None

    return check


def email_address(value: Any) -> Optional[Violation]:
    violation = _string(value)
    if violation is not None:
        return violation
    try:
        # shape only: no DNS lookups, special-use domains allowed, ASCII local part
        info = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            allow_smtputf8=False,
        )
    except EmailNotValidError:
        return Violation.INVALID_FORMAT
    # a dotted domain is still required
    return None if "." in info.ascii_domain else Violation.INVALID_FORMAT


def iso_date(value: Any) -> Optional[Violation]:
    violation = _string(value)
    if violation is not None:
        return violation
    return None if _DATE_RE.fullmatch(value) else Violation.INVALID_FORMAT


def one_of(*choices: str) -> Rule:
    allowed = frozenset(choices)

    def check(value: Any) -> Optional[Violation]:
        violation = _string(value)
        if violation is not None:
            return violation
        return None if value in allowed else Violation.INVALID_ENUM_VALUE

    return check


def accepted(value: Any) -> Optional[Violation]:
    if value is None:
        return Violation.MISSING
    if not isinstance(value, bool):
        return Violation.INVALID_TYPE
    return None if value is True else Violation.NOT_ACCEPTED
