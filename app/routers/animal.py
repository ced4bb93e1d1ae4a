from fastapi import APIRouter, Response, status
from fastapi.param_functions import Query
from app.controller import AnimalController
from app.routers.schema import WeighInBody
from app.utils.json_encoder import JSONEncoder
import json

router = APIRouter()

ctrl = AnimalController()


def _json(data, status_code=status.HTTP_200_OK):
    return Response(json.dumps(data, cls=JSONEncoder), status_code=status_code, media_type="application/json")


@router.get("")
def get_animals():
    return _json(ctrl.getAnimals())

# must stay above /{id}
@router.get("/estimated_weight")
def get_estimated_total_weight(date: str = Query(None)):
    return _json(ctrl.estimatedTotalWeight(date))

@router.get("/{id}")
def get_animal(id):
    return _json(ctrl.getAnimalById(id))

@router.get("/{id}/estimated_weight")
def get_estimated_weight(id, date: str = Query(None)):
    return _json(ctrl.estimatedWeight(id, date))

@router.post("")
def create_animal():
    return _json(ctrl.createAnimal(), status.HTTP_201_CREATED)

@router.post("/{id}/weight")
def add_weight(id, body: WeighInBody):
    animal = ctrl.addWeight(id, body.model_dump())
    return _json(animal, status.HTTP_201_CREATED)

@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_animal(id):
    ctrl.deleteAnimal(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
