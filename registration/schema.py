from typing import Dict, Iterator, Sequence

from registration.fields import (
    GENDERS,
    FieldSpec,
    Violation,
    accepted,
    email_address,
    iso_date,
    max_length,
    min_length,
    non_empty,
    one_of,
)
from registration.state import ErrorSet, FormRecord, ValidatedRecord, ValidationResult

GENDER_CHOICE_MESSAGE = "Gender must be one of 'male', 'female', or 'other'"

REGISTRATION_FIELDS: Sequence[FieldSpec] = (
    FieldSpec(
        name="username",
        rule=non_empty,
        message="Username is required",
        label="Username",
    ),
    FieldSpec(
        name="email",
        rule=email_address,
        message="Email is invalid",
        label="Email address",
        input_type="email",
    ),
    FieldSpec(
        name="password",
        rule=min_length(8),
        message="Password must be at least 8 characters long",
        label="Password",
        input_type="password",
    ),
    FieldSpec(
        name="confirmPassword",
        rule=min_length(8),
        message="Confirm password must be at least 8 characters long",
        label="Confirm password",
        input_type="password",
    ),
    FieldSpec(
        name="dateOfBirth",
        rule=iso_date,
        message="Date of birth must be in the format yyyy-mm-dd",
        label="Date of birth",
        input_type="date",
    ),
    FieldSpec(
        name="bio",
        rule=max_length(100),
        message="Bio must be less than 100 characters",
        label="Bio",
        input_type="textarea",
    ),
    FieldSpec(
        name="gender",
        rule=one_of(*GENDERS),
        message="Gender is invalid",
        messages={
            Violation.MISSING: GENDER_CHOICE_MESSAGE,
            Violation.INVALID_TYPE: GENDER_CHOICE_MESSAGE,
            Violation.INVALID_ENUM_VALUE: GENDER_CHOICE_MESSAGE,
        },
        label="Gender",
        input_type="select",
        choices=GENDERS,
    ),
    FieldSpec(
        name="termsAndConditions",
        rule=accepted,
        message="You must accept the terms and conditions",
        label="I agree to the terms and conditions",
        input_type="checkbox",
    ),
)


class RegistrationSchema:
    """
    Declarative rule set for the registration form.

    Every field is checked on every pass. Note that password and
    confirmPassword are only length-checked; they are not compared.
    """

    def __init__(self):
        self.fields = tuple(REGISTRATION_FIELDS)
        self._by_name: Dict[str, FieldSpec] = {f.name: f for f in self.fields}
        if len(self._by_name) != len(self.fields):
            raise ValueError("Field names must be unique")

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self.fields)

    def field(self, name: str) -> FieldSpec:
        return self._by_name[name]

    def check(self, record: FormRecord) -> ErrorSet:
        errors: ErrorSet = {}
        for spec in self.fields:
            violation = spec.check(record.get(spec.name))
            if violation is not None:
                errors[spec.name] = spec.message_for(violation)
        return errors

    def validate(self, record: FormRecord) -> ValidationResult:
        errors = self.check(record)
        if errors:
            return ValidationResult(errors=errors)
        return ValidationResult(record=ValidatedRecord.model_validate(record))
