from bson.objectid import ObjectId
from pydantic import BaseModel, Field
from pymongo import ReturnDocument
from datetime import datetime
from typing import List
from app.db.connection import get_database
from app.internal import config
from app.utils.helpers import PyObjectId


class WeighIn(BaseModel):
    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")
    weight: float = Field(allow_inf_nan=False)
    weigh_date: datetime


class AnimalSchema(BaseModel):
    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")
    weights: List[WeighIn] = Field(default=[])


class AnimalDBManager:

    def __init__(self, client=None) -> None:
        self.client = client

    @property
    def col(self):
        # resolved per call so a reconnect is picked up
        return get_database(self.client)[config.ANIMAL_COLLNAME]

    def get(self):
        return list(self.col.find())

    def get_single(self, animal_id):
        return self.col.find_one({"_id": ObjectId(animal_id)})

    def create(self, animal=None):
        animal = AnimalSchema.model_validate(animal or {}).model_dump(by_alias=True)
        self.col.insert_one(animal)
        return animal

    def add_weight(self, animal_id, weigh_in):
        weigh_in = WeighIn.model_validate(weigh_in).model_dump(by_alias=True)
        return self.col.find_one_and_update(
            {"_id": ObjectId(animal_id)},
            {"$push": {"weights": weigh_in}},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, animal_id):
        res = self.col.delete_one({"_id": ObjectId(animal_id)})
        return res.deleted_count
