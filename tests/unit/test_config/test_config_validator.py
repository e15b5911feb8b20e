"""
Unit tests for ConfigValidator
Tests reporting of catalog problems as passed/warnings/errors
"""
import pytest

from assetter.config.config_manager import ConfigManager
from assetter.config.config_validator import ConfigValidator
from tests.fixtures.config_fixtures import write_config


def validate(config_dir, name, config):
    config_file = write_config(config_dir, name, config)
    return ConfigValidator(ConfigManager(str(config_file))).validate_all()


def messages(results, category):
    return [item['message'] for item in results['details'][category]]


class TestConfigValidator:
    """Test suite for configuration validation"""

    def test_valid_config_with_existing_document_root_passes(self, document_root_config_file):
        # Act
        results = ConfigValidator(ConfigManager(str(document_root_config_file))).validate_all()

        # Assert
        assert results['is_valid'] is True
        assert results['errors'] == 0
        assert results['warnings'] == 0
        assert results['total_checks'] == results['passed']

    def test_missing_document_root_is_warning(self, temp_config_dir, config_factory):
        config = config_factory.create_valid_config(document_root='/definitely/not/here')
        results = validate(temp_config_dir, "missing_root.yaml", config)

        assert results['is_valid'] is True
        assert any('Document root does not exist' in m for m in messages(results, 'warnings'))

    def test_unknown_hash_algorithm_is_error(self, temp_config_dir, valid_config):
        valid_config['assetter']['hash_algorithm'] = 'crc-nope'
        results = validate(temp_config_dir, "bad_hash.yaml", valid_config)

        assert results['is_valid'] is False
        assert any('Unknown hash algorithm' in m for m in messages(results, 'errors'))

    @pytest.mark.parametrize("algorithm", ['shake_128', 'shake_256'])
    def test_variable_length_hash_algorithm_is_error(self, temp_config_dir, valid_config, algorithm):
        valid_config['assetter']['hash_algorithm'] = algorithm
        results = validate(temp_config_dir, f"{algorithm}.yaml", valid_config)

        assert results['is_valid'] is False
        assert any('Variable-length hash algorithm' in m for m in messages(results, 'errors'))

    def test_wildcard_default_group_is_error(self, temp_config_dir, valid_config):
        valid_config['assetter']['default_group'] = '*'
        results = validate(temp_config_dir, "star_group.yaml", valid_config)

        assert any('Invalid default group' in m for m in messages(results, 'errors'))

    def test_duplicate_and_unnamed_assets_are_warnings(self, temp_config_dir, minimal_config):
        # Arrange
        minimal_config['collection'] += [
            {'name': 'app', 'files': {'js': ['/other.js']}},
            {'files': {'css': ['/anon.css']}}
        ]

        # Act
        results = validate(temp_config_dir, "dupes.yaml", minimal_config)

        # Assert
        warnings = messages(results, 'warnings')
        assert any("Duplicate asset names" in m and "app" in m for m in warnings)
        assert any("1 assets have no name" in m for m in warnings)

    def test_non_mapping_collection_entry_is_error(self, temp_config_dir, minimal_config):
        minimal_config['collection'].append('just-a-string')
        results = validate(temp_config_dir, "string_entry.yaml", minimal_config)

        assert any('not mappings' in m for m in messages(results, 'errors'))

    def test_malformed_file_lists_are_warnings(self, temp_config_dir, minimal_config):
        minimal_config['collection'] = [
            {'name': 'a', 'files': {'css': '/a.css'}},
            {'name': 'b', 'files': ['/b.js']}
        ]
        results = validate(temp_config_dir, "bad_files.yaml", minimal_config)

        warning = next(m for m in messages(results, 'warnings') if 'Malformed file lists' in m)
        assert 'a: files.css' in warning
        assert 'b: files' in warning

    def test_unknown_requirements_are_warnings(self, temp_config_dir, minimal_config):
        minimal_config['collection'][0]['require'] = ['jquery']
        results = validate(temp_config_dir, "unknown_req.yaml", minimal_config)

        assert any('app -> jquery' in m for m in messages(results, 'warnings'))
