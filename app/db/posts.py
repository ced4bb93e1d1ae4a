from bson.objectid import ObjectId
from pydantic import BaseModel, Field
from pymongo import ReturnDocument, DESCENDING
from datetime import datetime, timezone
from app.db.connection import get_database
from app.internal import config
from app.utils.helpers import PyObjectId


def _now():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Author(BaseModel):
    firstName: str
    lastName: str


class PostSchema(BaseModel):
    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")
    title: str
    content: str
    author: Author
    created: datetime = Field(default_factory=_now)


class PostDBManager:

    def __init__(self, client=None) -> None:
        self.client = client

    @property
    def col(self):
        # resolved per call so a reconnect is picked up
        return get_database(self.client)[config.POST_COLLNAME]

    def get(self):
        return list(self.col.find().sort("created", DESCENDING))

    def get_single(self, post_id):
        return self.col.find_one({"_id": ObjectId(post_id)})

    def create(self, post):
        post = PostSchema.model_validate(post).model_dump(by_alias=True)
        self.col.insert_one(post)
        return post

    def update(self, post_id, fields):
        if not fields:
            return self.get_single(post_id)
        return self.col.find_one_and_update(
            {"_id": ObjectId(post_id)},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, post_id):
        res = self.col.delete_one({"_id": ObjectId(post_id)})
        return res.deleted_count
