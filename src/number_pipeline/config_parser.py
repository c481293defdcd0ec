from .logger import logger
import json

REQUIRED_KEYS = ("log_file", "default_sink")


class LogDemoConfig(dict):
    """Settings for the log demo, read from a json file."""

    def __init__(self, config_file):
        super().__init__()
        logger.info(f"Reading log demo config from {config_file}")
        with open(config_file, "rt") as f:
            self.update(json.load(f))

        missing = [key for key in REQUIRED_KEYS if key not in self]
        if missing:
            raise KeyError(f"Missing keys {missing} in {config_file}")
        logger.debug(f"Log demo config: {dict(self)}")

    @property
    def log_file(self):
        return self["log_file"]

    @property
    def default_sink(self):
        return self["default_sink"]
