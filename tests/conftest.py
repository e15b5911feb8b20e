"""
Global test configuration and fixtures
"""
import sys
from pathlib import Path
import pytest
import tempfile
import shutil

# Add project root to Python path so we can import assetter without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import fixtures from fixtures module
from tests.fixtures.config_fixtures import *
from tests.fixtures.registry_fixtures import *
from tests.fixtures.mock_objects import *

@pytest.fixture(scope="session")
def test_temp_dir():
    """Create a temporary directory for the test session"""
    temp_dir = tempfile.mkdtemp(prefix="assetter_tests_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)

@pytest.fixture
def temp_config_dir(test_temp_dir):
    """Create temporary directory for configuration files"""
    config_dir = test_temp_dir / "config"
    config_dir.mkdir(exist_ok=True)
    return config_dir

@pytest.fixture
def document_root(tmp_path):
    """Create a document root holding a few real asset files"""
    root = tmp_path / "public"
    (root / "lib").mkdir(parents=True)
    (root / "theme").mkdir(parents=True)

    (root / "lib" / "jquery.js").write_bytes(b"/* jquery */")
    (root / "lib" / "bootstrap.js").write_bytes(b"/* bootstrap js */")
    (root / "lib" / "bootstrap.css").write_bytes(b"/* bootstrap css */")
    (root / "theme" / "site.css").write_bytes(b"body { margin: 0; }")
    (root / "app.js").write_bytes(b"console.log('app');")

    return root
