import logging
import threading
import time

import uvicorn

from app.db import connection
from app.internal import config

logger = logging.getLogger(__name__)


class ServerError(RuntimeError):
    pass


class Server:
    """Handle on a running uvicorn server and its database connection.

    Created by runServer; the caller owns it and must call stop().
    """

    def __init__(self, app, databaseUrl=None, host="127.0.0.1", port=None, startup_timeout=10.0):
        self.app = app
        self.databaseUrl = databaseUrl or config.DATABASE_URL
        self.host = host
        self.port = port or config.PORT
        self.startup_timeout = startup_timeout
        self._server = None
        self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return self
        connection.connect(self.databaseUrl)

        uv_config = uvicorn.Config(self.app, host=self.host, port=self.port, log_config=None)
        self._server = uvicorn.Server(uv_config)
        self._thread = threading.Thread(target=self._server.run, name="uvicorn", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                connection.disconnect()
                self._thread = None
                raise ServerError(f"Server failed to start on port {self.port}")
            time.sleep(0.05)
        logger.info("Your app is listening on port %s", self.port)
        return self

    def stop(self):
        connection.disconnect()
        if self._server is None:
            return
        logger.info("Closing server")
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(self.startup_timeout)
        self._server = None
        self._thread = None

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()


def runServer(databaseUrl=None, port=None, app=None):
    if app is None:
        from app.main import app
    return Server(app, databaseUrl=databaseUrl, port=port).start()


def closeServer(server):
    server.stop()
