import json
from pathlib import Path

from generator.suid import SUIDGenerator
from utils.network import obtain_instance_id

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("landmark_year", "instance_id", "last_timestamp")

    def __init__(self, landmark_year=2022, instance_id=None, last_timestamp=0):
        self.landmark_year = landmark_year
        # None: derive from the private IPv4 address
        self.instance_id = instance_id
        self.last_timestamp = last_timestamp


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("generator", "server", "logging")

    def __init__(self, generator=None, server=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))


def build_generator(config=None, clock=None):
    """SUIDGenerator from a GeneratorConfig, deriving the instance id when unset."""
    config = config or GeneratorConfig()
    instance_id = config.instance_id if config.instance_id is not None else obtain_instance_id()
    return SUIDGenerator(config.landmark_year, instance_id, config.last_timestamp, clock=clock)
