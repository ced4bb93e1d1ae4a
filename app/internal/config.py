import os
from starlette.config import Config


default_values = {
    "DATABASE_URL": "mongodb://127.0.0.1:27017",
    "DATABASE_NAME": "animal-weights",
    "ANIMAL_COLLNAME": "animals",
    "POST_COLLNAME": "posts",
    "PORT": 8080,
    "LOG_LEVEL": "INFO",
}

casts = {
    "PORT": int,
}

ENV = os.environ.get("APP_ENV", "dev")


def loadConfig(fileName):
    global ENV
    ENV = fileName
    config = Config(f"envs/{fileName}.env")
    for variable, default_value in default_values.items():
        globals()[variable] = config(variable, cast=casts.get(variable), default=default_value)


loadConfig(ENV)
