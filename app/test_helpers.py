import json
from datetime import date, datetime, timedelta, timezone

import pytest
from bson.objectid import ObjectId
from pydantic import BaseModel, Field, ValidationError

from app.utils.helpers import PyObjectId, parse_date
from app.utils.json_encoder import JSONEncoder


class Doc(BaseModel):
    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")


def test_parse_date_only():
    assert parse_date("2020-01-05") == datetime(2020, 1, 5)


def test_parse_datetime_with_zulu_and_offset():
    assert parse_date("2020-01-05T12:30:00Z") == datetime(2020, 1, 5, 12, 30)
    assert parse_date("2020-01-05T12:30:00+02:00") == datetime(2020, 1, 5, 10, 30)


def test_parse_date_accepts_what_weigh_in_bodies_accept():
    assert parse_date("1578182400") == datetime(2020, 1, 5)
    assert parse_date("2020-01-05T00:00:00.5Z") == datetime(2020, 1, 5, 0, 0, 0, 500000)
    assert parse_date("  2020-01-05  ") == datetime(2020, 1, 5)


def test_parse_date_objects():
    assert parse_date(date(2020, 1, 5)) == datetime(2020, 1, 5)
    aware = datetime(2020, 1, 5, 1, 0, tzinfo=timezone(timedelta(hours=1)))
    assert parse_date(aware) == datetime(2020, 1, 5)


@pytest.mark.parametrize("value", [None, "", "yesterday", "2020-13-01", "Mon Jan 06 2020"])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_py_object_id_accepts_strings_and_object_ids():
    oid = ObjectId()
    assert Doc.model_validate({"_id": str(oid)}).id == oid
    assert Doc.model_validate({"_id": oid}).id == oid
    assert isinstance(Doc().model_dump(by_alias=True)["_id"], ObjectId)


def test_py_object_id_rejects_invalid():
    with pytest.raises(ValidationError):
        Doc.model_validate({"_id": "not-an-id"})


def test_json_encoder():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "when": datetime(2020, 1, 5, 12, 0),
        "aware": datetime(2020, 1, 5, 14, 0, tzinfo=timezone(timedelta(hours=2))),
    }
    assert json.loads(json.dumps(doc, cls=JSONEncoder)) == {
        "_id": str(oid),
        "when": "2020-01-05T12:00:00.000Z",
        "aware": "2020-01-05T12:00:00.000Z",
    }


def test_json_encoder_unknown_type():
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=JSONEncoder)
