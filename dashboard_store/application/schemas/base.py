"""Shared pieces for the record schemas — camelCase JSON keys, ISO dates and form numbers."""

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel

from dashboard_store.domain.rules import parse_number


def _check_iso_date(value: str) -> str:
    date.fromisoformat(value)
    return value


IsoDate = Annotated[str, AfterValidator(_check_iso_date)]
"""An ISO calendar date kept as its string form (``YYYY-MM-DD``)."""

Number = Annotated[int | float, BeforeValidator(parse_number)]
"""A numeric field; non-numeric input is kept as NaN instead of rejected."""


def today_iso() -> str:
    return date.today().isoformat()


class RecordSchema(BaseModel):
    """Base for persisted record shapes.

    Dumps with camelCase keys (``by_alias=True``) and accepts either
    camelCase or snake_case keys on input.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "use_enum_values": True,
    }
