from .animal_controller import AnimalController
