"""
Unit tests for cache-busting token computation
"""
import hashlib
import pytest
from unittest.mock import Mock, patch

from assetter.renderers.cache_buster import CacheBuster
from assetter.renderers.file_reader import InMemoryFileReader
from tests.fixtures.registry_fixtures import md5_of


class TestCacheBuster:
    """Test suite for per-file cache tokens"""

    def test_local_file_token_is_md5_of_content(self, memory_reader):
        buster = CacheBuster(memory_reader)
        assert buster.token_for('/assets/lib/jquery.js', '/lib/jquery.js') == md5_of(b'/* jquery */')

    @pytest.mark.parametrize("url", [
        'https://cdn.example.com/a.js',
        'HTTPS://CDN.EXAMPLE.COM/a.js',
        '/proxy?u=https://cdn.example.com/a.js'
    ])
    def test_remote_url_token_is_one_without_reading(self, url):
        """Test that https URLs never touch the file reader"""
        # Arrange
        reader = Mock()
        buster = CacheBuster(reader)

        # Act
        token = buster.token_for(url, '/irrelevant.js')

        # Assert
        assert token == 1
        reader.read.assert_not_called()

    def test_plain_http_url_is_hashed(self):
        reader = InMemoryFileReader({'/x.js': b'x'})
        assert CacheBuster(reader).token_for('http://example.com/x.js', '/x.js') == md5_of(b'x')

    def test_configurable_hash_algorithm(self, memory_reader):
        buster = CacheBuster(memory_reader, hash_algorithm='sha256')
        expected = hashlib.sha256(b'a').hexdigest()
        assert buster.token_for('/a.js', '/a.js') == expected

    def test_unknown_hash_algorithm_raises_value_error(self, memory_reader):
        with pytest.raises(ValueError):
            CacheBuster(memory_reader, hash_algorithm='not-a-hash')

    @pytest.mark.parametrize("algorithm", ['shake_128', 'shake_256'])
    def test_variable_length_hash_algorithm_raises_value_error(self, memory_reader, algorithm):
        """Test that algorithms needing a digest length are rejected up front"""
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            CacheBuster(memory_reader, hash_algorithm=algorithm)

    def test_missing_file_uses_fallback_token_and_warns(self, mock_logger):
        """Test that an unreadable file degrades to the fallback token"""
        # Arrange
        buster = CacheBuster(InMemoryFileReader(), missing_file_token='missing')

        # Act
        with patch('assetter.renderers.cache_buster.logger', mock_logger):
            token = buster.token_for('/gone.js', '/gone.js')

        # Assert
        assert token == 'missing'
        assert mock_logger.has_logged('warning', '/gone.js')

    def test_reader_raising_os_error_uses_fallback_token(self, failing_reader_factory):
        reader = failing_reader_factory(failing_paths={'/broken.css'})
        assert CacheBuster(reader).token_for('/broken.css', '/broken.css') == '0'
