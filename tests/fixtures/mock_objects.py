"""
Mock objects for testing external dependencies
Provides mocks for logging and file reading
"""
import pytest


class MockLogger:
    """Mock logger for testing logging functionality"""

    def __init__(self):
        self.debug_calls = []
        self.info_calls = []
        self.warning_calls = []
        self.error_calls = []
        self.log_calls = []

    def debug(self, message, *args, **kwargs):
        self.debug_calls.append((message, args, kwargs))

    def info(self, message, *args, **kwargs):
        self.info_calls.append((message, args, kwargs))

    def warning(self, message, *args, **kwargs):
        self.warning_calls.append((message, args, kwargs))

    def error(self, message, *args, **kwargs):
        self.error_calls.append((message, args, kwargs))

    def log(self, level, message, *args, **kwargs):
        self.log_calls.append((level, message, args, kwargs))

    def has_logged(self, level, message_substring):
        """Check if a message containing substring was logged at level"""
        calls = getattr(self, f'{level}_calls', [])
        if level == 'log':
            return any(message_substring in str(call[1]) for call in calls)
        return any(message_substring in str(call[0]) for call in calls)


class FailingFileReader:
    """File reader that raises OSError for selected paths"""

    def __init__(self, contents=None, failing_paths=()):
        self.contents = dict(contents or {})
        self.failing_paths = set(failing_paths)
        self.reads = []

    def read(self, path):
        self.reads.append(path)
        if path in self.failing_paths or path not in self.contents:
            raise OSError(f"cannot read {path}")
        return self.contents[path]


@pytest.fixture
def mock_logger():
    """Provide mock logger for testing"""
    return MockLogger()

@pytest.fixture
def failing_reader_factory():
    """Provide the failing file reader class"""
    return FailingFileReader
