"""
Centralised logging configuration for the asset manager
Single source of truth for all logging setup
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Any

ROOT_LOGGER_NAME = 'assetter'


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Set up logging configuration based on config settings

    Args:
        config: Logging configuration dictionary

    Returns:
        Configured logger instance
    """
    # Get logging configuration with defaults
    log_level = config.get('level', 'INFO').upper()
    log_format = config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_to_file = config.get('log_to_file', False)
    log_file_path = config.get('log_file_path', 'assetter.log')
    max_file_size_mb = config.get('max_file_size_mb', 10)
    backup_count = config.get('backup_count', 5)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level))

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            max_bytes = max_file_size_mb * 1024 * 1024
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(getattr(logging, log_level))
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file_path}")

        except OSError as e:
            logger.warning(f"Failed to set up file logging: {e}")

    logger.propagate = False

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get logger instance for a specific module

    Args:
        name: Module name (optional)

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
    else:
        return logging.getLogger(ROOT_LOGGER_NAME)


def log_render_summary(logger: logging.Logger, output_format: str, group: str,
                       tag_count: int) -> None:
    """
    Log a one-line summary of a render call

    Args:
        logger: Logger instance
        output_format: Output format name (html or json)
        group: Group filter that was applied
        tag_count: Number of file references emitted
    """
    logger.debug(f"Rendered {tag_count} {output_format} entries for group '{group}'")


def log_validation_result(logger: logging.Logger, validation_name: str,
                         passed: bool, details: str = None) -> None:
    """
    Log validation result with consistent formatting

    Args:
        logger: Logger instance
        validation_name: Name of validation
        passed: Whether validation passed
        details: Additional details (optional)
    """
    status = "PASSED" if passed else "FAILED"
    level = logging.INFO if passed else logging.ERROR

    message = f"Validation '{validation_name}': {status}"
    if details:
        message += f" - {details}"

    logger.log(level, message)
