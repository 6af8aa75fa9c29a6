from __future__ import annotations

from typing import Optional

from vfsname.core.component import VfsComponent
from vfsname.core.files_cache import DefaultFilesCache, FilesCache, build_files_cache
from vfsname.core.models import VfsContext
from vfsname.utils.errors import ConfigurationInUseError


class GlobalConfiguration(VfsComponent):
    """
    Global parameters of the naming layer.

    The files cache can be swapped until `init()` runs; after that the
    configuration is in use and changes are rejected.
    """

    def __init__(self, files_cache: Optional[FilesCache] = None) -> None:
        super().__init__()
        self._in_use = False
        self._files_cache: FilesCache = files_cache if files_cache is not None else DefaultFilesCache()

    @classmethod
    def from_context(cls, context: VfsContext) -> GlobalConfiguration:
        """Build a configuration whose cache follows `context.cache`."""
        configuration = cls(files_cache=build_files_cache(context.cache))
        configuration.set_context(context)
        return configuration

    @property
    def in_use(self) -> bool:
        return self._in_use

    @property
    def files_cache(self) -> FilesCache:
        return self._files_cache

    def set_files_cache(self, files_cache: FilesCache) -> None:
        """Replace the cache. Raises ConfigurationInUseError once initialised."""
        self._assert_not_in_use()
        self._files_cache = files_cache

    def get_files_cache(self) -> FilesCache:
        return self._files_cache

    def init(self) -> None:
        super().init()
        self._setup_component(self._files_cache)
        self._in_use = True
        self.logger.debug("Configuration initialised with %s", type(self._files_cache).__name__)

    def close(self) -> None:
        super().close()
        self._files_cache.close()

    def _setup_component(self, component: object) -> None:
        if isinstance(component, VfsComponent):
            component.set_logger(self.logger)
            component.set_context(self.context)
            component.init()

    def _assert_not_in_use(self) -> None:
        if self._in_use:
            raise ConfigurationInUseError()
