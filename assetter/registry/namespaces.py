"""
Namespace and route substitution for asset file paths
"""

from typing import Dict, Iterable, Iterator, List, Tuple


class SubstitutionTable:
    """
    Ordered token to replacement mapping applied to file paths

    Replacement is sequential: each token is replaced across the whole string
    in registration order, so a later token sees the output of earlier ones.
    Re-registering a token overwrites its value but keeps its position.
    """

    def __init__(self, entries: Dict[str, str] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    def set(self, token: str, replacement: str) -> None:
        self._entries[token] = replacement

    def remove(self, token: str) -> None:
        self._entries.pop(token, None)

    def get(self, token: str, default: str = None) -> str:
        return self._entries.get(token, default)

    def copy(self) -> 'SubstitutionTable':
        return SubstitutionTable(self._entries)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._entries.items())

    def resolve(self, file_path: str) -> str:
        """Apply every token to a single path"""
        resolved = str(file_path)
        for token, replacement in self._entries.items():
            if not token:
                continue
            resolved = resolved.replace(token, replacement)
        return resolved

    def apply(self, files: Iterable[str]) -> Tuple[str, ...]:
        """Apply every token to each path, preserving order"""
        return tuple(self.resolve(file_path) for file_path in files)

    def __contains__(self, token: str) -> bool:
        return token in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubstitutionTable):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"SubstitutionTable({self._entries!r})"
