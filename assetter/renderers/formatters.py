"""
Output formatters for rendered asset references
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Union

from ..utils.exceptions import RenderingError
from ..utils.logging_config import get_logger

logger = get_logger('renderers.formatters')

CSS_TAG = '<link rel="stylesheet" type="text/css" href="{url}?{token}" />'
JS_TAG = '<script src="{url}?{token}"></script>'


@dataclass(frozen=True)
class RenderedFile:
    """One file reference ready for output"""
    kind: str
    url: str
    token: Union[int, str]


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters
    Turns CSS and JS file references into a single output string
    """

    name = 'base'

    @abstractmethod
    def format(self, css_files: List[RenderedFile], js_files: List[RenderedFile]) -> str:
        """
        Format file references

        Args:
            css_files: CSS references in output order
            js_files: JS references in output order

        Returns:
            Output document as string
        """
        pass


class HtmlTagFormatter(BaseFormatter):
    """Emits one <link> or <script> tag per line"""

    name = 'html'

    def tag(self, rendered: RenderedFile) -> str:
        template = CSS_TAG if rendered.kind == 'css' else JS_TAG
        return template.format(url=rendered.url, token=rendered.token)

    def block(self, files: List[RenderedFile]) -> str:
        return "\n".join(self.tag(rendered) for rendered in files)

    def format(self, css_files: List[RenderedFile], js_files: List[RenderedFile]) -> str:
        return self.block(css_files) + "\n" + self.block(js_files)


class JsonManifestFormatter(BaseFormatter):
    """Emits a JSON array of {"data": url, "v": token} objects"""

    name = 'json'

    def format(self, css_files: List[RenderedFile], js_files: List[RenderedFile]) -> str:
        manifest = [
            {'data': rendered.url, 'v': rendered.token}
            for rendered in list(css_files) + list(js_files)
        ]
        return json.dumps(manifest)


class FormatterFactory:
    """Factory for creating formatter instances by output format name"""

    _formatters: Dict[str, type] = {
        'html': HtmlTagFormatter,
        'json': JsonManifestFormatter,
    }

    @classmethod
    def create_formatter(cls, output_format: str) -> BaseFormatter:
        """
        Create formatter instance

        Args:
            output_format: Name of the output format

        Returns:
            Formatter instance
        """
        if output_format not in cls._formatters:
            available_formats = list(cls._formatters.keys())
            raise RenderingError(
                f"Unknown output format: {output_format}. Available formats: {available_formats}",
                output_format=output_format
            )

        return cls._formatters[output_format]()

    @classmethod
    def get_available_formats(cls) -> List[str]:
        return list(cls._formatters.keys())

    @classmethod
    def register_formatter(cls, name: str, formatter_class: type) -> None:
        """
        Register a new formatter class

        Args:
            name: Output format name
            formatter_class: Formatter class (must inherit from BaseFormatter)
        """
        if not isinstance(formatter_class, type) or not issubclass(formatter_class, BaseFormatter):
            raise RenderingError("Formatter class must inherit from BaseFormatter", output_format=name)

        cls._formatters[name] = formatter_class
        logger.info(f"Registered new output format: {name}")
