"""
Contact record model.

File: models/contact.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..validation.rules import FIELD_NAMES, get_rule


class Contact(BaseModel):
    """One address-book entry. Every field is checked on creation and assignment."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    name: str = Field(..., description="Full name, letters and spaces")
    phone: str = Field(..., description="Local mobile number, 11 digits starting with '09'")
    email: str = Field(..., description="Email address")
    address: str = Field(..., description="Physical address")
    birthdate: str = Field(..., description="Birthdate as DD/MM/YYYY")

    @field_validator("name", "phone", "email", "address", "birthdate")
    @classmethod
    def _check_rule(cls, value: str, info: ValidationInfo) -> str:
        rule = get_rule(info.field_name)
        if not rule.predicate(value):
            raise ValueError(rule.error_message)
        return value

    def fields(self) -> List[str]:
        """Field values in table column order."""
        return [getattr(self, name) for name in FIELD_NAMES]
