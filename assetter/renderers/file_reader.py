"""
File readers used to fetch asset bytes for cache-busting
"""

from pathlib import Path
from typing import Dict, Protocol, Union

from ..utils.exceptions import FileAccessError


class FileReader(Protocol):
    """Anything that can return the bytes stored at a route-resolved path"""

    def read(self, path: str) -> bytes:
        ...


class DocumentRootFileReader:
    """
    Reads asset files relative to a document root directory

    Paths that resolve outside the document root raise FileAccessError.
    """

    def __init__(self, document_root: Union[str, Path] = '.'):
        """
        Initialise reader

        Args:
            document_root: Directory that route-resolved paths are relative to
        """
        self.document_root = Path(document_root)

    def resolve(self, path: str) -> Path:
        """Join a route-resolved path under the document root"""
        return self.document_root / str(path).lstrip('/\\')

    def read(self, path: str) -> bytes:
        full_path = self.resolve(path)
        if not full_path.resolve().is_relative_to(self.document_root.resolve()):
            raise FileAccessError(
                f"Asset file {full_path} is outside document root {self.document_root}",
                path=str(full_path)
            )

        try:
            with open(full_path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise FileAccessError(
                f"Could not read asset file {full_path}: {e}",
                path=str(full_path),
                original_error=e
            )


class InMemoryFileReader:
    """Serves file contents from a dictionary keyed by route-resolved path"""

    def __init__(self, files: Dict[str, Union[str, bytes]] = None):
        self.files = dict(files or {})
        self.reads = []

    def read(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise FileAccessError(f"No in-memory content for {path}", path=path)

        content = self.files[path]
        if isinstance(content, str):
            return content.encode('utf-8')
        return content
