"""
Field validation for inbound contact data.

Each field is checked independently and every violation is reported,
so a client that sends three bad fields gets three messages back.
A blank field only reports ``REQUIRED``; the length and format rules
apply to non-blank values.

* ``name``  - required, 3 to 100 characters once surrounding
  whitespace is stripped;
* ``email`` - required, syntactically valid address (checked with
  ``email-validator``, no DNS lookups);
* ``phone`` - required, ``(DD) DDDD-DDDD`` or ``(DD) DDDDD-DDDD``.

The functions here are pure: they never touch the store.
"""

import re
from enum import Enum
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, model_validator

from contact_book_api.app.core.errors import ContactValidationError
from contact_book_api.app.schemas.contact import ContactRequest

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
PHONE_PATTERN = re.compile(r"\([0-9]{2}\) [0-9]{4,5}-[0-9]{4}")


class ViolationCode(str, Enum):
    REQUIRED = "REQUIRED"
    LENGTH = "LENGTH"
    FORMAT = "FORMAT"


MESSAGES: Dict[str, Dict[ViolationCode, str]] = {
    "name": {
        ViolationCode.REQUIRED: "Name is required",
        ViolationCode.LENGTH: (
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        ),
    },
    "email": {
        ViolationCode.REQUIRED: "Email is required",
        ViolationCode.FORMAT: "Invalid email",
    },
    "phone": {
        ViolationCode.REQUIRED: "Phone is required",
        ViolationCode.FORMAT: "Phone must be in the format (XX) XXXXX-XXXX or (XX) XXXX-XXXX",
    },
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_name(value: Optional[str]) -> Optional[ViolationCode]:
    if _is_blank(value):
        return ViolationCode.REQUIRED
    if not NAME_MIN_LENGTH <= len(value.strip()) <= NAME_MAX_LENGTH:
        return ViolationCode.LENGTH
    return None


def _check_email(value: Optional[str]) -> Optional[ViolationCode]:
    if _is_blank(value):
        return ViolationCode.REQUIRED
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ViolationCode.FORMAT
    return None


def _check_phone(value: Optional[str]) -> Optional[ViolationCode]:
    if _is_blank(value):
        return ViolationCode.REQUIRED
    if PHONE_PATTERN.fullmatch(value) is None:
        return ViolationCode.FORMAT
    return None


_CHECKS = {
    "name": _check_name,
    "email": _check_email,
    "phone": _check_phone,
}


def collect_violations(data: BaseModel) -> Dict[str, ViolationCode]:
    """Return the violated rule for every failing field of ``data``."""
    violations: Dict[str, ViolationCode] = {}
    for field_name, check in _CHECKS.items():
        code = check(getattr(data, field_name))
        if code is not None:
            violations[field_name] = code
    return violations


def validate_contact(data: BaseModel) -> Dict[str, str]:
    """Return a field -> message mapping; empty when ``data`` is acceptable."""
    return {
        field_name: MESSAGES[field_name][code]
        for field_name, code in collect_violations(data).items()
    }


class ContactData(BaseModel):
    """Contact fields that satisfy every rule above.

    Constructing one runs the rules, so an instance can only hold
    acceptable values.  ``ContactService`` only accepts this type.
    """

    name: str
    email: str
    phone: str

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def check_rules(self) -> "ContactData":
        errors = validate_contact(self)
        if errors:
            raise ContactValidationError(errors)
        return self


def ensure_valid(data: ContactRequest) -> ContactData:
    """Return the validated fields of ``data`` or raise ``ContactValidationError``."""
    errors = validate_contact(data)
    if errors:
        raise ContactValidationError(errors)
    return ContactData(name=data.name, email=data.email, phone=data.phone)
