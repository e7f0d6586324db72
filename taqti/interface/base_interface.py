# taqti/interface/base_interface.py

from abc import ABC, abstractmethod
import logging

from config.config_manager import ConfigManager
from taqti.utils.logging_config import configure_logging


class BaseInterface(ABC):
    """Base class for user-facing front ends of the analyzer."""

    def __init__(self, config: ConfigManager):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging from the logging section of the configuration."""
        logging_config = self.config.get_logging_config()
        configure_logging(
            level=logging_config.level,
            log_format=logging_config.format,
            log_file=logging_config.file
        )

    @abstractmethod
    def run(self) -> int:
        """
        Run the command selected by the user.

        Returns:
            Process exit code
        """
        pass

    def cleanup(self) -> None:
        """Release anything the interface holds open."""
        pass

    def __enter__(self):
        """Enter the interface context."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Leave the interface context, cleaning up."""
        self.cleanup()
