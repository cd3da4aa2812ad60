import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from weather_widget.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerConfig:
    """
    One named logger for the whole widget, written to the console and a rotating file.
    Each service logs under its own child (WEATHER-WIDGET.location, WEATHER-WIDGET.weather, ...)
    so a single pipeline step can be filtered out of the shared output.
    """
    def __init__(
        self, env=20, logger_name="WEATHER-WIDGET", log_directory="logs", log_file="app.log"
    ):
        self.logger_name = logger_name
        self.log_directory = os.path.abspath(log_directory)
        self.log_file_path = os.path.join(self.log_directory, log_file)
        self.env = env

        self.logger = logging.getLogger(self.logger_name)
        self.setup_logger()

    def setup_logger(self):
        self.logger.setLevel(self.env)
        # Re-imports must not stack handlers
        if self.logger.handlers:
            return

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in self._handlers():
            handler.setLevel(self.env)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _handlers(self):
        handlers = [logging.StreamHandler()]
        try:
            os.makedirs(self.log_directory, exist_ok=True)
            handlers.append(RotatingFileHandler(
                self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            ))
        except OSError as e:
            # Read-only deployments still get console output
            print(f"File logging disabled, {self.log_file_path} is not writable: {str(e)}")
        return handlers

    def for_component(self, component: Optional[str] = None) -> logging.Logger:
        return self.logger.getChild(component) if component else self.logger

    def log(self, level: int, message: str, extra: dict = None, component: str = None):
        """Log under the component's child logger; extra is appended as key=value pairs."""
        if extra:
            fields = ", ".join(f"{key}={value}" for key, value in extra.items())
            message = f"{message} | {fields}"
        self.for_component(component).log(level, message)


logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="WEATHER-WIDGET",
    log_directory=settings.LOG_DIRECTORY,
    log_file="app.log"
)
