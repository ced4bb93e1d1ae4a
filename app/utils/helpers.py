from bson.objectid import ObjectId
from datetime import datetime, date, timezone
from typing import Any
from pydantic_core import core_schema
from pydantic import TypeAdapter, ValidationError
from pydantic.json_schema import JsonSchemaValue


class PyObjectId:
    @classmethod
    def validate_object_id(cls, v: Any, handler) -> ObjectId:
        if isinstance(v, ObjectId):
            return v

        s = handler(v)
        if ObjectId.is_valid(s):
            return ObjectId(s)
        else:
            raise ValueError("Invalid ObjectId")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, _handler) -> core_schema.CoreSchema:
        return core_schema.no_info_wrap_validator_function(
            cls.validate_object_id,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, _core_schema, handler) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


_datetime_adapter = TypeAdapter(datetime)


def to_utc_naive(value: datetime) -> datetime:
    # pymongo hands back naive datetimes in UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_date(value) -> datetime:
    """Parse a date the same way request bodies parse ``weigh_date``.

    Anything pydantic accepts for a datetime field works here (ISO-8601 dates and
    datetimes, unix timestamps). The result is a naive UTC datetime.

    Raises ValueError if the value is missing or cannot be parsed.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("A date is required")
    if isinstance(value, str):
        value = value.strip()
    try:
        parsed = _datetime_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f"Invalid date: {value}")
    return to_utc_naive(parsed)
