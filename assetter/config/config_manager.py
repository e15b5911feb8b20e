"""
Configuration management for the asset manager
Centralised configuration loading and validation
"""

import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional
from dataclasses import dataclass

from ..utils.exceptions import ConfigurationError
from ..utils.logging_config import get_logger

logger = get_logger('config')


@dataclass
class AssetterSettings:
    """Runtime settings for registry and renderer"""
    default_group: str = 'def'
    document_root: str = '.'
    hash_algorithm: str = 'md5'
    missing_file_token: str = '0'
    strict: bool = False
    revision: Optional[str] = None


@dataclass
class NamespaceEntry:
    """A namespace token with its public URL and optional filesystem route"""
    token: str
    url: str
    path: Optional[str] = None


class ConfigManager:
    """
    Manages configuration loading and validation
    Single responsibility: Configuration management only
    """

    def __init__(self, config_path: str):
        """
        Initialise with path to YAML config file

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._validate_config()
        logger.info(f"Configuration loaded successfully from {self.config_path}")

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file {self.config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config from {self.config_path}: {e}")

        if not config:
            raise ConfigurationError(f"Configuration file is empty: {self.config_path}")

        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {self.config_path}")

        logger.info(f"Loaded configuration from {self.config_path}")
        return config

    def _validate_config(self) -> None:
        """Validate required configuration sections exist and have the right shape"""
        required_sections = [
            'collection'
        ]

        for section in required_sections:
            if section not in self.config:
                raise ConfigurationError(f"Missing required config section: {section}")

        if not isinstance(self.config['collection'], list):
            raise ConfigurationError("collection must be a list of asset definitions")

        for section in ['assetter', 'namespaces', 'logging']:
            value = self.config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(f"Config section '{section}' must be a mapping")

        logger.info("Configuration validation passed")

    def get_settings(self) -> AssetterSettings:
        """Get registry and renderer settings"""
        settings_config = self.config.get('assetter') or {}
        defaults = AssetterSettings()

        return AssetterSettings(
            default_group=settings_config.get('default_group', defaults.default_group),
            document_root=str(settings_config.get('document_root', defaults.document_root)),
            hash_algorithm=settings_config.get('hash_algorithm', defaults.hash_algorithm),
            missing_file_token=str(settings_config.get('missing_file_token', defaults.missing_file_token)),
            strict=bool(settings_config.get('strict', defaults.strict)),
            revision=settings_config.get('revision', defaults.revision)
        )

    def get_namespaces(self) -> List[NamespaceEntry]:
        """
        Get namespace entries in declaration order

        A namespace may be declared as a plain URL string, or as a mapping
        with 'url' and an optional filesystem 'path'.

        Returns:
            List of NamespaceEntry
        """
        entries = []

        for token, value in (self.config.get('namespaces') or {}).items():
            if isinstance(value, dict):
                if 'url' not in value:
                    raise ConfigurationError(f"Namespace '{token}' is missing 'url'")
                entries.append(NamespaceEntry(token=str(token), url=str(value['url']), path=value.get('path')))
            else:
                entries.append(NamespaceEntry(token=str(token), url=str(value)))

        return entries

    def get_collection(self) -> List[Dict[str, Any]]:
        """Get raw asset definitions"""
        return self.config['collection']

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.config.get('logging') or {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'log_to_file': False
        }

    def get_config_summary(self) -> Dict[str, Any]:
        """
        Get summary of configuration for logging/debugging

        Returns:
            Summary dictionary
        """
        settings = self.get_settings()

        return {
            'config_file': str(self.config_path),
            'default_group': settings.default_group,
            'document_root': settings.document_root,
            'hash_algorithm': settings.hash_algorithm,
            'strict': settings.strict,
            'namespaces': [entry.token for entry in self.get_namespaces()],
            'asset_count': len(self.get_collection())
        }
