"""
Asset Manager
Single entry point combining the asset registry and the renderer
"""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .config.config_manager import ConfigManager
from .registry.asset_registry import AssetRegistry, DEFAULT_GROUP
from .registry.models import AssetDefinition, LoadRequest
from .renderers.asset_renderer import AssetRenderer, ALL_GROUPS
from .renderers.file_reader import FileReader, DocumentRootFileReader
from .utils.logging_config import get_logger

logger = get_logger('asset_manager')


class AssetManager:
    """
    Manages CSS and JavaScript assets for one page render

    Register definitions and namespaces once, load what a page needs, then
    render tags. Use with_fresh_load_state() to start the next page from the
    same configuration with nothing loaded.
    """

    def __init__(self, collection: Iterable[Union[Mapping[str, Any], AssetDefinition]] = (),
                 default_group: str = DEFAULT_GROUP,
                 file_reader: FileReader = None,
                 hash_algorithm: str = 'md5',
                 missing_file_token: str = '0',
                 strict: bool = False,
                 revision: Optional[str] = None,
                 registry: AssetRegistry = None):
        """
        Initialise asset manager

        Args:
            collection: Asset records to register
            default_group: Group for records without one
            file_reader: Source of file bytes for hashing
            hash_algorithm: hashlib algorithm for cache tokens
            missing_file_token: Token for local files that cannot be read
            strict: Raise UnknownAssetError for unregistered names
            revision: Default revision for records without one
            registry: Existing registry to wrap (collection and defaults are then ignored)
        """
        if registry is None:
            registry = AssetRegistry(collection, default_group, default_revision=revision, strict=strict)

        self.registry = registry
        self.file_reader = file_reader if file_reader is not None else DocumentRootFileReader()
        self.hash_algorithm = hash_algorithm
        self.missing_file_token = missing_file_token
        self.renderer = AssetRenderer(
            registry,
            self.file_reader,
            hash_algorithm=hash_algorithm,
            missing_file_token=missing_file_token
        )

    @classmethod
    def from_config(cls, config: Union[ConfigManager, str]) -> 'AssetManager':
        """
        Build an asset manager from a YAML configuration

        Args:
            config: ConfigManager instance or path to a YAML file

        Returns:
            Configured AssetManager with namespaces and catalog registered
        """
        if not isinstance(config, ConfigManager):
            config = ConfigManager(config)

        settings = config.get_settings()
        manager = cls(
            config.get_collection(),
            default_group=settings.default_group,
            file_reader=DocumentRootFileReader(settings.document_root),
            hash_algorithm=settings.hash_algorithm,
            missing_file_token=settings.missing_file_token,
            strict=settings.strict,
            revision=settings.revision
        )

        for entry in config.get_namespaces():
            manager.register_namespace(entry.token, entry.url, entry.path)

        logger.info(f"Asset manager configured with {len(manager.get_collection())} assets "
                    f"and {len(manager.registry.namespaces)} namespaces")
        return manager

    def with_fresh_load_state(self) -> 'AssetManager':
        """Return a manager sharing this configuration with an empty loaded set"""
        return AssetManager(
            file_reader=self.file_reader,
            hash_algorithm=self.hash_algorithm,
            missing_file_token=self.missing_file_token,
            registry=self.registry.with_fresh_load_state()
        )

    def reset_loaded(self) -> 'AssetManager':
        return self.with_fresh_load_state()

    def register_namespace(self, token: str, ns_replacement: str,
                           route_replacement: Optional[str] = None) -> 'AssetManager':
        self.registry.register_namespace(token, ns_replacement, route_replacement)
        return self

    def unregister_namespace(self, token: str) -> 'AssetManager':
        self.registry.unregister_namespace(token)
        return self

    def get_default_group(self) -> str:
        return self.registry.get_default_group()

    def set_default_group(self, default_group: str) -> 'AssetManager':
        self.registry.set_default_group(default_group)
        return self

    def get_collection(self) -> Tuple[AssetDefinition, ...]:
        return self.registry.get_collection()

    def set_collection(self, collection) -> 'AssetManager':
        self.registry.set_collection(collection)
        return self

    def append_to_collection(self, definition) -> 'AssetManager':
        self.registry.append_to_collection(definition)
        return self

    def load(self, request: LoadRequest) -> 'AssetManager':
        self.registry.load(request)
        return self

    def load_from_collection(self, name: str) -> 'AssetManager':
        self.registry.load_from_collection(name)
        return self

    def load_from_array(self, definition) -> 'AssetManager':
        self.registry.load_from_array(definition)
        return self

    def already_loaded(self, name: str) -> bool:
        return self.registry.already_loaded(name)

    def all(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.renderer.all(group)

    def css(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.renderer.css(group)

    def js(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.renderer.js(group)

    def all_as_json(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.renderer.all_as_json(group)
