import logging
from fastapi import HTTPException, status
from app.db.animals import AnimalDBManager
from app.utils.estimator import Sample, estimate, estimate_total
from app.utils.helpers import parse_date, to_utc_naive

logger = logging.getLogger(__name__)


def animalSamples(animal):
    return [Sample(to_utc_naive(w["weigh_date"]), w["weight"]) for w in animal.get("weights", [])]


class AnimalController():

    def __init__(self):
        self.dbm = AnimalDBManager()

    def _getOr404(self, animal_id):
        animal = self.dbm.get_single(animal_id)
        if animal is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Animal not found")
        return animal

    def getAnimals(self):
        return self.dbm.get()

    def getAnimalById(self, animal_id):
        return self._getOr404(animal_id)

    def createAnimal(self):
        return self.dbm.create()

    def addWeight(self, animal_id, weigh_in):
        animal = self.dbm.add_weight(animal_id, weigh_in)
        if animal is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Animal not found")
        return animal

    def deleteAnimal(self, animal_id):
        if not self.dbm.delete(animal_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Animal not found")

    def estimatedWeight(self, animal_id, date):
        query = parse_date(date)
        animal = self._getOr404(animal_id)
        return estimate(animalSamples(animal), query)

    def estimatedTotalWeight(self, date):
        query = parse_date(date)
        series = []
        for animal in self.dbm.get():
            samples = animalSamples(animal)
            if not samples:
                logger.debug("Animal %s has no weigh-ins, left out of the total", animal["_id"])
                continue
            series.append(samples)
        return estimate_total(series, query)
