"""
Registry Module
Asset catalog, requirement resolution and namespace substitution
"""

from .asset_registry import AssetRegistry, DEFAULT_GROUP
from .models import AssetDefinition, Inline, LoadedAsset, Named, ResolvedFiles
from .namespaces import SubstitutionTable

__all__ = [
    'AssetRegistry',
    'DEFAULT_GROUP',
    'AssetDefinition',
    'Inline',
    'LoadedAsset',
    'Named',
    'ResolvedFiles',
    'SubstitutionTable'
]
