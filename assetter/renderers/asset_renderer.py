"""
Asset Renderer
Turns the loaded set of a registry into HTML tags or a JSON manifest
"""

from typing import List, Optional, Tuple

from .cache_buster import CacheBuster
from .file_reader import FileReader, DocumentRootFileReader
from .formatters import FormatterFactory, HtmlTagFormatter, RenderedFile
from ..registry.asset_registry import AssetRegistry
from ..registry.models import LoadedAsset
from ..utils.logging_config import get_logger, log_render_summary

logger = get_logger('renderers.asset_renderer')

ALL_GROUPS = '*'


class AssetRenderer:
    """
    Renders loaded assets, filtered by group and ordered by their order field
    Single responsibility: output generation only, the registry is never mutated
    """

    def __init__(self, registry: AssetRegistry, file_reader: FileReader = None,
                 hash_algorithm: str = 'md5', missing_file_token: str = '0'):
        """
        Initialise asset renderer

        Args:
            registry: Registry whose loaded set is rendered
            file_reader: Source of file bytes (defaults to the current directory)
            hash_algorithm: hashlib algorithm for content tokens
            missing_file_token: Token used for local files that cannot be read
        """
        self.registry = registry
        self.cache_buster = CacheBuster(
            file_reader if file_reader is not None else DocumentRootFileReader(),
            hash_algorithm=hash_algorithm,
            missing_file_token=missing_file_token
        )
        self.html_formatter = HtmlTagFormatter()

    def all(self, group: Optional[str] = ALL_GROUPS) -> str:
        css_files, js_files = self.collect(group)
        return self.html_formatter.format(css_files, js_files)

    def css(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.html_formatter.block(self._collect_kind('css', group))

    def js(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.html_formatter.block(self._collect_kind('js', group))

    def all_as_json(self, group: Optional[str] = ALL_GROUPS) -> str:
        return self.render('json', group)

    def render(self, output_format: str, group: Optional[str] = ALL_GROUPS) -> str:
        """
        Render CSS then JS references with a named formatter

        Args:
            output_format: Name registered with FormatterFactory
            group: Group filter, '*' for all, None for the default group

        Returns:
            Formatted output
        """
        formatter = FormatterFactory.create_formatter(output_format)
        css_files, js_files = self.collect(group)
        log_render_summary(logger, output_format, str(group), len(css_files) + len(js_files))
        return formatter.format(css_files, js_files)

    def collect(self, group: Optional[str] = ALL_GROUPS) -> Tuple[List[RenderedFile], List[RenderedFile]]:
        return self._collect_kind('css', group), self._collect_kind('js', group)

    def sorted_assets(self) -> List[LoadedAsset]:
        """Loaded assets by order ascending; equal orders keep loaded sequence"""
        return sorted(self.registry.get_loaded(), key=lambda item: item.order)

    def resolve_group(self, group: Optional[str]) -> str:
        if group is None:
            return self.registry.get_default_group()
        return group

    def _collect_kind(self, kind: str, group: Optional[str]) -> List[RenderedFile]:
        group = self.resolve_group(group)
        result = []

        for item in self.sorted_assets():
            if group != ALL_GROUPS and item.group != group:
                continue

            resolved = item.files.get(kind)
            if resolved is None:
                continue

            for url, path in resolved.pairs():
                result.append(RenderedFile(
                    kind=kind,
                    url=url,
                    token=self.cache_buster.token_for(url, path)
                ))

        return result
