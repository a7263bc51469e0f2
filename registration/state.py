from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# raw input keyed by form field name, in the order fields were first set
FormRecord = Dict[str, Any]

# failing field name -> display message, in field declaration order
ErrorSet = Dict[str, str]


class FormStatus(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


class ValidatedRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    username: str = Field(..., description="Non-empty user name")
    email: str = Field(..., description="Email address")
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")
    date_of_birth: str = Field(..., alias="dateOfBirth", description="YYYY-MM-DD")
    bio: str = Field(..., description="At most 100 characters")
    gender: Literal["male", "female", "other"]
    terms_and_conditions: bool = Field(..., alias="termsAndConditions")


class ValidationResult(BaseModel):
    """
    Outcome of one validation pass. Exactly one of ``record`` and ``errors``
    is populated; the result is falsy when any field failed.
    """

    model_config = ConfigDict(frozen=True)

    record: Optional[ValidatedRecord] = None
    errors: ErrorSet = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid


class FormSnapshot(BaseModel):
    """What a rendering layer needs after each set_field/submit/reset call."""

    model_config = ConfigDict(frozen=True)

    status: FormStatus = FormStatus.EDITING
    record: FormRecord = Field(default_factory=dict)
    errors: ErrorSet = Field(default_factory=dict)
    notice: Optional[str] = None


class SubmitState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    record: FormRecord = Field(default_factory=dict)
    validated: Optional[ValidatedRecord] = None
    errors: ErrorSet = Field(default_factory=dict)
    status: FormStatus = FormStatus.EDITING
    notice: Optional[str] = None
