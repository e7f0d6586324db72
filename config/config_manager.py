# config/config_manager.py

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AnalysisConfig:
    """Poem analysis configuration"""
    max_alternatives: int = 3


@dataclass
class StorageConfig:
    """Analysis store configuration"""
    enabled: bool = True
    path: str = "data/analyses.jsonl"


@dataclass
class EnrichmentConfig:
    """External meter-match enrichment configuration"""
    enabled: bool = False
    provider: str = "taqti_api"
    endpoint: Optional[str] = None
    timeout: int = 5
    max_retries: int = 2
    language: str = "urdu"

    def to_provider_config(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "language": self.language
        }


@dataclass
class LoggingConfig:
    """Log level, record format and optional log file"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[str] = None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigManager:
    """
    Configuration of the Taqti analyzer.

    Reads a YAML file (falling back to built-in defaults when it is missing or
    invalid), applies TAQTI_* environment overrides and returns typed sections.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self.logger = logging.getLogger(__name__)

        self._config: Dict[str, Any] = {}
        self._load_config()

    def _get_default_config_path(self) -> Path:
        """Path of the bundled default_config.yaml"""
        current_dir = Path(__file__).parent
        return current_dir / "default_config.yaml"

    def _load_config(self):
        """Read the YAML file, then apply environment overrides"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            self.logger.info(f"Loaded configuration from {self.config_path}")

        except FileNotFoundError:
            self.logger.warning(f"No configuration file at {self.config_path}, using defaults")
            self._config = {}
        except yaml.YAMLError as e:
            self.logger.error(f"Invalid YAML in {self.config_path}: {e}")
            self._config = {}

        # Environment overrides apply even without a config file
        self._apply_env_overrides()

    def _section(self, name: str) -> Dict[str, Any]:
        """Writable config section; an empty YAML section loads as None"""
        if not isinstance(self._config.get(name), dict):
            self._config[name] = {}
        return self._config[name]

    def _apply_env_overrides(self):
        """Override settings from TAQTI_* environment variables"""
        if os.getenv("TAQTI_STORE_PATH"):
            self._section("storage")["path"] = os.getenv("TAQTI_STORE_PATH")

        if os.getenv("TAQTI_ENRICHMENT_URL"):
            self._section("enrichment")["endpoint"] = os.getenv("TAQTI_ENRICHMENT_URL")

        if os.getenv("TAQTI_ENRICHMENT_ENABLED"):
            self._section("enrichment")["enabled"] = _parse_bool(os.getenv("TAQTI_ENRICHMENT_ENABLED"))

        if os.getenv("TAQTI_LOG_LEVEL"):
            self._section("logging")["level"] = os.getenv("TAQTI_LOG_LEVEL").upper()

    def get_analysis_config(self) -> AnalysisConfig:
        """Get poem analysis configuration"""
        analysis_config = self._config.get("analysis") or {}

        return AnalysisConfig(
            max_alternatives=analysis_config.get("max_alternatives", 3)
        )

    def get_storage_config(self) -> StorageConfig:
        """Get analysis store configuration"""
        storage_config = self._config.get("storage") or {}

        return StorageConfig(
            enabled=storage_config.get("enabled", True),
            path=storage_config.get("path", "data/analyses.jsonl")
        )

    def get_enrichment_config(self) -> EnrichmentConfig:
        """Get enrichment configuration"""
        enrichment_config = self._config.get("enrichment") or {}

        return EnrichmentConfig(
            enabled=enrichment_config.get("enabled", False),
            provider=enrichment_config.get("provider", "taqti_api"),
            endpoint=enrichment_config.get("endpoint"),
            timeout=enrichment_config.get("timeout", 5),
            max_retries=enrichment_config.get("max_retries", 2),
            language=enrichment_config.get("language", "urdu")
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration"""
        log_config = self._config.get("logging") or {}

        return LoggingConfig(
            level=log_config.get("level", "INFO"),
            format=log_config.get("format", DEFAULT_LOG_FORMAT),
            file=log_config.get("file")
        )

    def is_storage_enabled(self) -> bool:
        """Check if analyses are persisted (convenience method)"""
        return self.get_storage_config().enabled

    def is_enrichment_enabled(self) -> bool:
        """Check if external enrichment is enabled (convenience method)"""
        return self.get_enrichment_config().enabled

    def get_raw_config(self) -> Dict[str, Any]:
        """Copy of the merged configuration dictionary"""
        return self._config.copy()

    def reload_config(self):
        """Re-read the configuration file and environment"""
        self._load_config()

    def validate_config(self) -> bool:
        """Check that the configured values are usable"""
        analysis_config = self.get_analysis_config()
        if analysis_config.max_alternatives < 0:
            self.logger.warning(f"max_alternatives must not be negative: {analysis_config.max_alternatives}")
            return False

        enrichment_config = self.get_enrichment_config()
        if enrichment_config.enabled and enrichment_config.timeout <= 0:
            self.logger.warning(f"Enrichment timeout must be positive: {enrichment_config.timeout}")
            return False

        storage_config = self.get_storage_config()
        if storage_config.enabled and not storage_config.path:
            self.logger.warning("Storage is enabled but no path is configured")
            return False

        return True


# Shared instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Shared ConfigManager; passing a path replaces the shared instance"""
    global _config_manager

    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)

    return _config_manager
