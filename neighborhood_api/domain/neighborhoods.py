"""Neighborhood record plus the field rules applied before every write."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional
from uuid import UUID

from neighborhood_api.domain.errors import (
    EmptyNameError,
    MissingValueError,
    NameTooLongError,
    NonPositiveValueError,
    ValueTooLongError,
)

NAME_MAX_LENGTH = 45
VALUE_MAX_DIGITS = 13

EMPTY_NAME_MESSAGE = "O bairro não pode ficar vazio!"
NAME_TOO_LONG_MESSAGE = f"O comprimento do bairro não pode exceder {NAME_MAX_LENGTH} caracteres!"
MISSING_VALUE_MESSAGE = "O valor do metro quadrado do bairro não pode ficar vazio!"
NON_POSITIVE_VALUE_MESSAGE = "O valor do metro quadrado do bairro não pode ser menor ou igual a zero!"
VALUE_TOO_LONG_MESSAGE = f"O valor do metro quadrado não pode exceder {VALUE_MAX_DIGITS} digitos!"


@dataclass
class Neighborhood:
    id: Optional[UUID]
    name_district: Optional[str]
    value_district_m2: Optional[Decimal]

    def to_record(self) -> dict:
        """Shape persisted in the JSON table (and returned by the API)."""
        return {
            "id": str(self.id) if self.id else None,
            "nameDistrict": self.name_district,
            "valueDistrictM2": self.value_district_m2,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Neighborhood":
        """Build from a stored record; raises ValueError/TypeError/KeyError on bad shape."""
        if not isinstance(record, Mapping):
            raise TypeError(f"expected object, got {type(record).__name__}")
        raw_value = record["valueDistrictM2"]
        value = None if raw_value is None else to_decimal(raw_value)
        return cls(
            id=UUID(str(record["id"])),
            name_district=record["nameDistrict"],
            value_district_m2=value,
        )


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("boolean is not a decimal amount")
    try:
        # str() keeps float literals such as 2000.0 exact
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal amount: {value!r}") from exc


def count_digits(value: Decimal) -> int:
    """Integer plus fractional digits, ignoring trailing fractional zeros."""
    _sign, digits, exponent = value.as_tuple()
    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    integer_digits = max(len(digits) + exponent, 0)
    fraction_digits = max(-exponent, 0)
    return integer_digits + fraction_digits


def validate_neighborhood(name: Optional[str], value: Optional[Decimal]) -> None:
    """Check the field rules in order; the first broken rule is raised."""
    if not name:
        raise EmptyNameError(EMPTY_NAME_MESSAGE)
    if len(name) > NAME_MAX_LENGTH:
        raise NameTooLongError(NAME_TOO_LONG_MESSAGE)
    if value is None or value.is_nan():
        raise MissingValueError(MISSING_VALUE_MESSAGE)
    if value <= 0:
        raise NonPositiveValueError(NON_POSITIVE_VALUE_MESSAGE)
    if value.is_infinite() or count_digits(value) > VALUE_MAX_DIGITS:
        raise ValueTooLongError(VALUE_TOO_LONG_MESSAGE)
