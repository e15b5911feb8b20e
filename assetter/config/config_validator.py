"""
Configuration validation for the asset manager
Reports catalog problems that the registry itself tolerates silently
"""

import hashlib
from collections import Counter
from pathlib import Path
from typing import Dict, Any

from ..registry.models import ASSET_KINDS
from ..utils.common import is_file_list, is_fixed_length_hash, get_first_present
from ..utils.logging_config import get_logger, log_validation_result
from .config_manager import ConfigManager

logger = get_logger('config_validator')


class ConfigValidator:
    """
    Comprehensive configuration validator
    Single responsibility: Configuration validation only
    """

    def __init__(self, config_manager: ConfigManager):
        """
        Initialise with config manager

        Args:
            config_manager: ConfigManager instance to validate
        """
        self.config = config_manager
        self.validation_results = {
            'passed': [],
            'warnings': [],
            'errors': []
        }

    def validate_all(self) -> Dict[str, Any]:
        """
        Run all validation checks

        Returns:
            Dictionary with validation results
        """
        logger.info("Starting asset configuration validation")

        self.validation_results = {
            'passed': [],
            'warnings': [],
            'errors': []
        }

        self._validate_settings()
        self._validate_document_root()
        self._validate_namespaces()
        self._validate_asset_names()
        self._validate_file_lists()
        self._validate_requirements()

        total_checks = len(self.validation_results['passed']) + len(self.validation_results['warnings']) + len(self.validation_results['errors'])

        results = {
            'total_checks': total_checks,
            'passed': len(self.validation_results['passed']),
            'warnings': len(self.validation_results['warnings']),
            'errors': len(self.validation_results['errors']),
            'is_valid': len(self.validation_results['errors']) == 0,
            'details': self.validation_results
        }

        log_validation_result(
            logger,
            'asset_configuration',
            results['is_valid'],
            f"{results['passed']} passed, {results['warnings']} warnings, {results['errors']} errors"
        )

        return results

    def _add_result(self, category: str, check_name: str, message: str) -> None:
        """Add validation result"""
        self.validation_results[category].append({
            'check': check_name,
            'message': message
        })

    def _validate_settings(self) -> None:
        """Validate hash algorithm and group settings"""
        check_name = "settings"
        settings = self.config.get_settings()

        if settings.hash_algorithm not in hashlib.algorithms_available:
            self._add_result('errors', check_name, f"Unknown hash algorithm: {settings.hash_algorithm}")
        elif not is_fixed_length_hash(settings.hash_algorithm):
            self._add_result('errors', check_name,
                             f"Variable-length hash algorithm not supported: {settings.hash_algorithm}")
        elif not settings.default_group or settings.default_group == '*':
            self._add_result('errors', check_name, f"Invalid default group: {settings.default_group!r}")
        else:
            self._add_result('passed', check_name, "Settings are valid")

    def _validate_document_root(self) -> None:
        """Validate document root directory exists"""
        check_name = "document_root"
        document_root = Path(self.config.get_settings().document_root)

        if not document_root.is_dir():
            self._add_result('warnings', check_name, f"Document root does not exist: {document_root}")
        else:
            self._add_result('passed', check_name, f"Document root found: {document_root}")

    def _validate_namespaces(self) -> None:
        """Validate namespace tokens are non-empty"""
        check_name = "namespaces"
        empty_tokens = [entry for entry in self.config.get_namespaces() if not entry.token]

        if empty_tokens:
            self._add_result('errors', check_name, "Namespace tokens must not be empty")
        else:
            self._add_result('passed', check_name, "Namespace tokens are valid")

    def _validate_asset_names(self) -> None:
        """Report duplicate and missing asset names"""
        check_name = "asset_names"
        collection = self.config.get_collection()

        names = [item.get('name') for item in collection if isinstance(item, dict)]
        duplicates = sorted(name for name, count in Counter(n for n in names if n).items() if count > 1)
        unnamed = sum(1 for name in names if not name)
        not_mappings = len(collection) - len(names)

        if not_mappings:
            self._add_result('errors', check_name, f"{not_mappings} collection entries are not mappings")
        if duplicates:
            self._add_result('warnings', check_name, f"Duplicate asset names (all variants load together): {duplicates}")
        if unnamed:
            self._add_result('warnings', check_name, f"{unnamed} assets have no name and cannot be required")
        if not (not_mappings or duplicates or unnamed):
            self._add_result('passed', check_name, f"{len(names)} asset names are unique")

    def _validate_file_lists(self) -> None:
        """Report files entries that will be skipped at render time"""
        check_name = "file_lists"
        skipped = []

        for item in self.config.get_collection():
            if not isinstance(item, dict):
                continue
            files = item.get('files')
            if files is None:
                continue
            if not isinstance(files, dict):
                skipped.append(f"{item.get('name')}: files")
                continue
            for kind in ASSET_KINDS:
                if kind in files and not is_file_list(files[kind]):
                    skipped.append(f"{item.get('name')}: files.{kind}")

        if skipped:
            self._add_result('warnings', check_name, f"Malformed file lists will be skipped: {skipped}")
        else:
            self._add_result('passed', check_name, "All file lists are well formed")

    def _validate_requirements(self) -> None:
        """Report requirements that reference unregistered asset names"""
        check_name = "requirements"
        collection = [item for item in self.config.get_collection() if isinstance(item, dict)]
        known_names = {item.get('name') for item in collection}
        missing = []

        for item in collection:
            requires = get_first_present(item, ('requires', 'require'), default=[])
            if not isinstance(requires, (list, tuple)):
                continue
            for name in requires:
                if name not in known_names:
                    missing.append(f"{item.get('name')} -> {name}")

        if missing:
            self._add_result('warnings', check_name, f"Unknown requirements will be ignored: {missing}")
        else:
            self._add_result('passed', check_name, "All requirements are registered")
