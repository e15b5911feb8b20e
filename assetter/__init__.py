"""
Assetter Package
Registers CSS/JS asset bundles, resolves their requirements and renders
cache-busted HTML tags or a JSON manifest
"""

# Package metadata
__version__ = "1.0.0"
__description__ = "CSS/JS asset registry with requirement resolution and cache-busted output"

from .asset_manager import AssetManager
from .config.config_manager import ConfigManager, AssetterSettings
from .config.config_validator import ConfigValidator
from .registry import AssetRegistry, AssetDefinition, LoadedAsset, Named, Inline
from .renderers import AssetRenderer, DocumentRootFileReader, InMemoryFileReader, FormatterFactory
from .utils.exceptions import (
    AssetterError,
    ConfigurationError,
    UnknownAssetError,
    FileAccessError,
    RenderingError
)
from .utils.logging_config import setup_logging, get_logger

__all__ = [
    'AssetManager',
    'ConfigManager',
    'AssetterSettings',
    'ConfigValidator',
    'AssetRegistry',
    'AssetDefinition',
    'LoadedAsset',
    'Named',
    'Inline',
    'AssetRenderer',
    'DocumentRootFileReader',
    'InMemoryFileReader',
    'FormatterFactory',
    'AssetterError',
    'ConfigurationError',
    'UnknownAssetError',
    'FileAccessError',
    'RenderingError',
    'setup_logging',
    'get_logger'
]
