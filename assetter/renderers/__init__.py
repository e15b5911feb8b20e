"""
Renderers Module
Handles cache-busting and HTML/JSON output of loaded assets
"""

from .asset_renderer import AssetRenderer
from .cache_buster import CacheBuster
from .file_reader import FileReader, DocumentRootFileReader, InMemoryFileReader
from .formatters import FormatterFactory, BaseFormatter, HtmlTagFormatter, JsonManifestFormatter

__all__ = [
    'AssetRenderer',
    'CacheBuster',
    'FileReader',
    'DocumentRootFileReader',
    'InMemoryFileReader',
    'FormatterFactory',
    'BaseFormatter',
    'HtmlTagFormatter',
    'JsonManifestFormatter'
]
