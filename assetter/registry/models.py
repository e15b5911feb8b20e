"""
Asset data model
Declarative asset definitions, their loaded (path-resolved) form and load requests
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..utils.common import generate_unique_name, get_first_present
from ..utils.logging_config import get_logger

logger = get_logger('registry.models')

ASSET_KINDS = ('css', 'js')


@dataclass(frozen=True)
class AssetDefinition:
    """
    A named bundle of CSS/JS files as registered in the catalog

    Attributes:
        name: Identifier, expected to be unique within a registry
        order: Output ordering key (lower renders first)
        group: Output group used for filtering
        files: Asset kind ('css' or 'js') to ordered list of file paths
        requires: Names of other definitions loaded alongside this one
        revision: Explicit revision token, kept for callers; never hashed
    """
    name: str
    order: int = 0
    group: str = 'def'
    files: Mapping[str, Any] = field(default_factory=dict)
    requires: Tuple[str, ...] = ()
    revision: Optional[str] = None


@dataclass(frozen=True)
class ResolvedFiles:
    """Public URLs and filesystem paths for one asset kind, index-aligned"""
    file: Tuple[str, ...] = ()
    path: Tuple[str, ...] = ()

    def pairs(self):
        return zip(self.file, self.path)


@dataclass(frozen=True)
class LoadedAsset:
    """An asset definition materialised into the loaded set with resolved paths"""
    name: str
    order: int
    group: str
    files: Dict[str, ResolvedFiles]
    requires: Tuple[str, ...] = ()
    revision: Optional[str] = None


@dataclass(frozen=True)
class Named:
    """Load request for a catalog entry by name"""
    name: str


@dataclass(frozen=True)
class Inline:
    """Load request for an ad-hoc definition that is not in the catalog"""
    definition: Mapping[str, Any]


LoadRequest = Union[Named, Inline]


def normalise_definition(data: Union[Mapping[str, Any], AssetDefinition],
                         default_group: str,
                         default_revision: Optional[str] = None) -> AssetDefinition:
    """
    Fill in defaults for a raw asset record

    Missing fields never raise: a record without a name gets a fresh generated
    one, a non-mapping files value becomes empty and a non-list requires value
    is dropped. Both 'requires' and the older 'require' key are accepted.

    Args:
        data: Raw record (for example parsed from YAML) or a definition
        default_group: Group used when the record has none
        default_revision: Revision used when the record has none

    Returns:
        Normalised AssetDefinition
    """
    if isinstance(data, AssetDefinition):
        return data

    files = data.get('files')
    if not isinstance(files, Mapping):
        files = {}

    requires = get_first_present(data, ('requires', 'require'), default=())
    if not isinstance(requires, (list, tuple)):
        requires = ()

    name = data.get('name')
    revision = data.get('revision')
    group = data.get('group')

    return AssetDefinition(
        name=name if name is not None else generate_unique_name(),
        order=normalise_order(data.get('order'), name),
        group=group if group is not None else default_group,
        files=dict(files),
        requires=tuple(requires),
        revision=revision if revision is not None else default_revision,
    )


def normalise_order(order: Any, name: Any) -> int:
    """Coerce an order value to int, falling back to 0 when it is not numeric"""
    if order is None:
        return 0
    try:
        return int(order)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Ignoring non-numeric order {order!r} for asset '{name}'")
        return 0
