from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Dict, Optional

from vfsname.core.component import VfsComponent
from vfsname.core.models import CacheSettings
from vfsname.core.name import FileName


class FilesCache(VfsComponent, ABC):
    """
    Keeps resolved file objects keyed by their name so repeated lookups of the
    same name reuse one object.
    """

    @abstractmethod
    def put_file(self, name: FileName, file: Any) -> None:
        ...

    @abstractmethod
    def get_file(self, name: FileName) -> Optional[Any]:
        ...

    @abstractmethod
    def remove_file(self, name: FileName) -> None:
        ...

    @abstractmethod
    def clear_file_system(self, root_uri: str) -> None:
        """Drop every entry whose name belongs to the file system at `root_uri`."""
        ...

    def __len__(self) -> int:
        return 0


class DefaultFilesCache(FilesCache):
    """Unbounded in-memory cache."""

    def __init__(self) -> None:
        super().__init__()
        self._files: Dict[FileName, Any] = {}

    def put_file(self, name: FileName, file: Any) -> None:
        self._files[name] = file

    def get_file(self, name: FileName) -> Optional[Any]:
        return self._files.get(name)

    def remove_file(self, name: FileName) -> None:
        self._files.pop(name, None)

    def clear_file_system(self, root_uri: str) -> None:
        for name in [name for name in self._files if name.root_uri == root_uri]:
            del self._files[name]

    def close(self) -> None:
        self.logger.debug("Closing files cache with %d entries", len(self._files))
        self._files.clear()

    def __len__(self) -> int:
        return len(self._files)


class LRUFilesCache(DefaultFilesCache):
    """In-memory cache that evicts the least recently used entry once full."""

    def __init__(self, max_entries: int = 256) -> None:
        super().__init__()
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self.max_entries = max_entries
        self._files: "OrderedDict[FileName, Any]" = OrderedDict()

    def put_file(self, name: FileName, file: Any) -> None:
        self._files[name] = file
        self._files.move_to_end(name)
        while len(self._files) > self.max_entries:
            evicted, _ = self._files.popitem(last=False)
            self.logger.debug("Evicted %s from files cache", evicted)

    def get_file(self, name: FileName) -> Optional[Any]:
        if name not in self._files:
            return None
        self._files.move_to_end(name)
        return self._files[name]


class NullFilesCache(FilesCache):
    """Cache that never keeps anything."""

    def put_file(self, name: FileName, file: Any) -> None:
        pass

    def get_file(self, name: FileName) -> Optional[Any]:
        return None

    def remove_file(self, name: FileName) -> None:
        pass

    def clear_file_system(self, root_uri: str) -> None:
        pass


def build_files_cache(settings: CacheSettings) -> FilesCache:
    """Create the cache implementation selected by `settings.kind`."""
    if settings.kind == "lru":
        return LRUFilesCache(max_entries=settings.max_entries)
    if settings.kind == "null":
        return NullFilesCache()
    return DefaultFilesCache()
