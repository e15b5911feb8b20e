"""
Asset Registry
Catalog of asset definitions, namespace/route tables and the loaded set
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .models import (
    ASSET_KINDS,
    AssetDefinition,
    Inline,
    LoadedAsset,
    LoadRequest,
    Named,
    ResolvedFiles,
    normalise_definition,
    normalise_order,
)
from .namespaces import SubstitutionTable
from ..utils.common import is_file_list
from ..utils.exceptions import UnknownAssetError
from ..utils.logging_config import get_logger

logger = get_logger('registry')

DEFAULT_GROUP = 'def'

DefinitionInput = Union[Mapping[str, Any], AssetDefinition]


class AssetRegistry:
    """
    Registry of asset definitions and the assets loaded for one render pass

    Loading resolves requirements depth-first: an asset enters the loaded set
    before its requirements are visited, so requirement cycles terminate.
    Unknown names are ignored unless the registry is strict.
    """

    def __init__(self, collection: Iterable[DefinitionInput] = (),
                 default_group: str = DEFAULT_GROUP,
                 default_revision: Optional[str] = None,
                 strict: bool = False):
        """
        Initialise registry

        Args:
            collection: Asset records to register
            default_group: Group assigned to records without one
            default_revision: Revision assigned to records without one
            strict: Raise UnknownAssetError for unregistered names
        """
        self.default_revision = default_revision
        self.strict = strict
        self._default_group = default_group
        self._collection: List[AssetDefinition] = []
        self._loaded: List[LoadedAsset] = []
        self.namespaces = SubstitutionTable()
        self.routes = SubstitutionTable()

        self.set_collection(collection)

    def with_fresh_load_state(self) -> 'AssetRegistry':
        """
        Return a registry with the same catalog, tables and defaults but
        nothing loaded

        Definitions are immutable and shared. The catalog list and both
        tables are copied, so registering on the new registry leaves this
        one untouched.
        """
        fresh = AssetRegistry(
            default_group=self._default_group,
            default_revision=self.default_revision,
            strict=self.strict
        )
        fresh._collection = list(self._collection)
        fresh.namespaces = self.namespaces.copy()
        fresh.routes = self.routes.copy()
        return fresh

    def reset_loaded(self) -> 'AssetRegistry':
        return self.with_fresh_load_state()

    # ========================================
    # Namespaces
    # ========================================

    def register_namespace(self, token: str, ns_replacement: str,
                           route_replacement: Optional[str] = None) -> 'AssetRegistry':
        """
        Register a namespace token, and optionally a route for the same token

        Args:
            token: Placeholder substring used in declared file paths
            ns_replacement: Public URL prefix substituted for the token
            route_replacement: Filesystem prefix substituted when hashing;
                only stored when non-empty

        Returns:
            self
        """
        self.namespaces.set(token, ns_replacement)
        if route_replacement:
            self.routes.set(token, route_replacement)
        return self

    def unregister_namespace(self, token: str) -> 'AssetRegistry':
        self.namespaces.remove(token)
        self.routes.remove(token)
        return self

    def apply_namespaces(self, files: Iterable[str]) -> Tuple[str, ...]:
        return self.namespaces.apply(files)

    def apply_routes(self, files: Iterable[str]) -> Tuple[str, ...]:
        return self.routes.apply(files)

    # ========================================
    # Catalog
    # ========================================

    def get_default_group(self) -> str:
        return self._default_group

    def set_default_group(self, default_group: str) -> 'AssetRegistry':
        self._default_group = default_group
        return self

    def get_collection(self) -> Tuple[AssetDefinition, ...]:
        return tuple(self._collection)

    def set_collection(self, collection: Iterable[DefinitionInput]) -> 'AssetRegistry':
        for definition in collection:
            self.append_to_collection(definition)
        return self

    def append_to_collection(self, definition: DefinitionInput) -> 'AssetRegistry':
        """Normalise a record and append it to the catalog; non-mapping records are skipped"""
        if not self._is_record(definition):
            return self

        self._collection.append(self._normalise(definition))
        return self

    def find(self, name: str) -> Optional[AssetDefinition]:
        """Return the first registered definition with this name"""
        for definition in self._collection:
            if definition.name == name:
                return definition
        return None

    # ========================================
    # Loading
    # ========================================

    def load(self, request: LoadRequest) -> 'AssetRegistry':
        """
        Load a catalog entry by name or an inline definition

        Args:
            request: Named(name) or Inline(definition)

        Returns:
            self
        """
        match request:
            case Named(name=name):
                return self.load_from_collection(name)
            case Inline(definition=definition):
                return self.load_from_array(definition)
            case _:
                raise TypeError(f"Unsupported load request: {request!r}")

    def load_from_collection(self, name: str, required_by: str = None) -> 'AssetRegistry':
        """
        Load every catalog entry with the given name

        No-op when an entry with that name is already loaded.

        Args:
            name: Asset name
            required_by: Name of the asset that requires this one (for reporting)

        Returns:
            self
        """
        if self.already_loaded(name):
            return self

        matches = [definition for definition in self._collection if definition.name == name]

        if not matches:
            self._report_unknown(name, required_by)
            return self

        for definition in matches:
            self.load_from_array(definition)

        return self

    def load_from_array(self, definition: DefinitionInput) -> 'AssetRegistry':
        """
        Load a definition, resolving its file paths, then load its requirements

        The entry is appended without a duplicate check. Non-mapping records
        are skipped.
        """
        if not self._is_record(definition):
            return self

        item = self._normalise(definition)

        files: Dict[str, ResolvedFiles] = {}
        for kind in ASSET_KINDS:
            raw_files = item.files.get(kind)
            if not is_file_list(raw_files):
                continue
            files[kind] = ResolvedFiles(
                file=self.apply_namespaces(raw_files),
                path=self.apply_routes(raw_files)
            )

        self._loaded.append(LoadedAsset(
            name=item.name,
            order=normalise_order(item.order, item.name),
            group=item.group,
            files=files,
            requires=item.requires,
            revision=item.revision
        ))
        logger.debug(f"Loaded asset '{item.name}' (group={item.group}, order={item.order})")

        for required_name in item.requires:
            self.load_from_collection(required_name, required_by=item.name)

        return self

    def already_loaded(self, name: str) -> bool:
        return any(item.name == name for item in self._loaded)

    def get_loaded(self) -> Tuple[LoadedAsset, ...]:
        return tuple(self._loaded)

    def _is_record(self, definition: Any) -> bool:
        if isinstance(definition, (Mapping, AssetDefinition)):
            return True

        logger.warning(f"Skipping asset record that is not a mapping: {definition!r}")
        return False

    def _normalise(self, definition: DefinitionInput) -> AssetDefinition:
        return normalise_definition(definition, self._default_group, self.default_revision)

    def _report_unknown(self, name: str, required_by: Optional[str]) -> None:
        source = f" (required by '{required_by}')" if required_by else ""
        message = f"Unknown asset '{name}'{source}"

        if self.strict:
            logger.warning(message)
            raise UnknownAssetError(message, name=name, required_by=required_by)

        logger.debug(f"{message}, skipping")

    def __repr__(self) -> str:
        return (f"AssetRegistry(registered={len(self._collection)}, "
                f"loaded={len(self._loaded)}, default_group={self._default_group!r})")
