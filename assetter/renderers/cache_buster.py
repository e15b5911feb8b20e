"""
Cache-busting tokens for rendered asset references
"""

import hashlib
from typing import Union

from .file_reader import FileReader
from ..utils.common import is_fixed_length_hash, is_remote_url
from ..utils.exceptions import FileAccessError
from ..utils.logging_config import get_logger

logger = get_logger('renderers.cache_buster')

REMOTE_TOKEN = 1
DEFAULT_MISSING_FILE_TOKEN = '0'


class CacheBuster:
    """
    Computes the query token appended to each asset URL

    Remote https URLs get the constant token 1 and are never read. Local
    files get a hex digest of their content; a file that cannot be read
    gets the configured fallback token and a warning.
    """

    def __init__(self, file_reader: FileReader, hash_algorithm: str = 'md5',
                 missing_file_token: str = DEFAULT_MISSING_FILE_TOKEN):
        """
        Initialise cache buster

        Args:
            file_reader: Source of file bytes for route-resolved paths
            hash_algorithm: Fixed-length algorithm name accepted by hashlib.new
            missing_file_token: Token used when a local file cannot be read
        """
        if not is_fixed_length_hash(hash_algorithm):
            raise ValueError(f"Unsupported hash algorithm: {hash_algorithm!r}")

        self.file_reader = file_reader
        self.hash_algorithm = hash_algorithm
        self.missing_file_token = missing_file_token

    def token_for(self, url: str, path: str) -> Union[int, str]:
        """
        Get the cache-busting token for one file

        Args:
            url: Namespace-resolved public URL
            path: Route-resolved filesystem path

        Returns:
            1 for remote URLs, content digest for local files, or the
            fallback token when the file cannot be read
        """
        if is_remote_url(url):
            return REMOTE_TOKEN

        try:
            content = self.file_reader.read(path)
        except (FileAccessError, OSError) as e:
            logger.warning(f"Using fallback cache token for {url}: {e}")
            return self.missing_file_token

        return self._digest(content)

    def _digest(self, content: bytes) -> str:
        hasher = hashlib.new(self.hash_algorithm)
        hasher.update(content)
        return hasher.hexdigest()
