"""
Unit tests for logging configuration
"""
import logging
import logging.handlers
import pytest

from assetter.utils.logging_config import (
    setup_logging,
    get_logger,
    log_render_summary,
    log_validation_result
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by setup_logging"""
    logger = logging.getLogger('assetter')
    level, propagate = logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Test suite for logger setup"""

    def test_setup_logging_console_only(self):
        # Act
        logger = setup_logging({'level': 'debug', 'log_to_file': False})

        # Assert
        assert logger.name == 'assetter'
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logging_with_rotating_file(self, tmp_path):
        # Arrange
        log_file = tmp_path / "logs" / "assetter.log"

        # Act
        logger = setup_logging({'log_to_file': True, 'log_file_path': str(log_file)})

        # Assert
        assert log_file.parent.exists()
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)


class TestGetLogger:
    """Test suite for module logger naming"""

    def test_get_logger_with_name_is_child_of_package_logger(self):
        assert get_logger('registry').name == 'assetter.registry'

    def test_get_logger_without_name_is_package_logger(self):
        assert get_logger().name == 'assetter'


class TestLogHelpers:
    """Test suite for formatting helpers"""

    def test_log_render_summary(self, mock_logger):
        log_render_summary(mock_logger, 'json', 'head', 3)
        assert mock_logger.has_logged('debug', "Rendered 3 json entries for group 'head'")

    def test_log_validation_result_failed_logs_at_error(self, mock_logger):
        log_validation_result(mock_logger, 'asset_configuration', False, '2 errors')

        level, message, _, _ = mock_logger.log_calls[0]
        assert level == logging.ERROR
        assert message == "Validation 'asset_configuration': FAILED - 2 errors"
