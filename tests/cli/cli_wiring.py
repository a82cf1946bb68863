"""Importable wiring used by the CLI tests."""

from fish_di.config import ContainerConfig
from fish_di.di import ClassProvider, Container, Scope, ValueProvider, injectable


class Logger:
    pass


@injectable(Logger, "cfg")
class ApiClient:
    def __init__(self, logger, cfg):
        self.logger = logger
        self.cfg = cfg


@injectable(Logger)
class Standalone:
    def __init__(self, logger):
        self.logger = logger


class Ping:
    pass


@injectable(Ping)
class Pong:
    def __init__(self, ping):
        self.ping = ping


injectable(Pong)(Ping)

container = Container(config=ContainerConfig(name="cli-test", metrics_enabled=False))
container.register(Logger, ClassProvider(Logger, Scope.SINGLETON))
container.register("cfg", ValueProvider({"apiKey": "X"}))

not_a_container = object()
