import os
import uvicorn
import argparse
parser = argparse.ArgumentParser(description="Run the animal weights API")
parser.add_argument('--env', default="dev", choices=["dev", "docker", "test"])
args = parser.parse_args()
env = args.env
# reload and worker processes re-import app.internal.config, which reads APP_ENV
os.environ["APP_ENV"] = env

from app.internal import config
from app.main import configureLogging

configureLogging()


if __name__ == "__main__":
    if env == "docker":
        uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT, workers=4, log_config=None)
    else:
        uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT, reload=(env == "dev"), log_config=None)
