from __future__ import annotations

import logging
from functools import cached_property
from typing import List, Optional, Protocol

from vfsname.core.scope import NameScope, check_name
from vfsname.core.uri_parser import SEPARATOR, fix_separators, normalise_path
from vfsname.utils.errors import InvalidDescendentNameError

logger = logging.getLogger(__name__)


class RootUriBuilder(Protocol):
    """Supplies the scheme-specific prefix shared by every name of a file system."""

    def build_root_uri(self, scheme: str) -> str:
        """Return the root URI. A single trailing separator is stripped by the caller."""
        ...


class NameFactory(Protocol):
    """Builds a name of the right concrete kind from a normalised absolute path."""

    def create_name(self, scheme: str, absolute_path: str) -> FileName:
        ...


def _segments(path: str) -> List[str]:
    return [segment for segment in path.split(SEPARATOR) if segment]


class FileName:
    """
    Identity of a file within one virtual file system.

    The absolute path must already be normalised: it starts with the separator,
    has no `.`/`..` segments and no trailing separator unless it is the root.
    Derived attributes are computed on first access and then kept.
    """

    def __init__(
        self,
        scheme: str,
        absolute_path: str,
        root_uri_builder: RootUriBuilder,
        name_factory: NameFactory,
    ) -> None:
        self._scheme = scheme
        self._path = absolute_path
        self._root_uri_builder = root_uri_builder
        self._name_factory = name_factory

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def path(self) -> str:
        """Absolute path relative to the root of the file system."""
        return self._path

    @cached_property
    def base_name(self) -> str:
        idx = self._path.rfind(SEPARATOR)
        if idx == -1:
            return self._path
        return self._path[idx + 1:]

    @cached_property
    def extension(self) -> str:
        """
        Part of the base name before its last dot, or "" when the base name
        has no dot or ends with one. `archive.tar.gz` gives `archive.tar`.
        """
        base_name = self.base_name
        pos = base_name.rfind(".")
        if pos == -1 or pos == len(base_name) - 1:
            return ""
        return base_name[:pos]

    @cached_property
    def root_uri(self) -> str:
        root_uri = self._root_uri_builder.build_root_uri(self._scheme)
        if root_uri.endswith(SEPARATOR):
            root_uri = root_uri[:-1]
        return root_uri

    @cached_property
    def uri(self) -> str:
        return self.root_uri + self._path

    @property
    def depth(self) -> int:
        if self._path in {"", SEPARATOR}:
            return 0
        return len(_segments(self._path))

    @property
    def parent(self) -> Optional[FileName]:
        """Name of the parent, or None for the root."""
        idx = self._path.rfind(SEPARATOR)
        if idx == -1 or idx == len(self._path) - 1:
            return None
        if idx == 0:
            return self._create_name(SEPARATOR)
        return self._create_name(self._path[:idx])

    def resolve_name(self, name: str, scope: NameScope = NameScope.FILE_SYSTEM) -> FileName:
        """
        Resolve `name` against this name.

        Absolute names are taken from the root of this file system, relative
        names from this name. Raises InvalidDescendentNameError when the
        result is not within `scope` and EscapesRootError when it would climb
        above the root.
        """
        buffer = fix_separators(name)
        if not name.startswith(SEPARATOR):
            buffer = self._path + SEPARATOR + buffer

        resolved_path = normalise_path(buffer)

        if not check_name(self._path, resolved_path, scope):
            logger.debug("Rejected %r against %s in scope %s", name, self.uri, scope.value)
            raise InvalidDescendentNameError(name)

        return self._create_name(resolved_path)

    def relative_name(self, name: FileName) -> str:
        """Return the path of `name` relative to this name, e.g. `../../share`."""
        base = _segments(self._path)
        target = _segments(name.path)

        common = 0
        for base_segment, target_segment in zip(base, target):
            if base_segment != target_segment:
                break
            common += 1

        if common == len(base) and common == len(target):
            return "."

        ascent = [".."] * (len(base) - common)
        return SEPARATOR.join(ascent + target[common:])

    def is_ancestor(self, ancestor: FileName) -> bool:
        """Determine whether `ancestor` is an ancestor of this name."""
        if ancestor.root_uri != self.root_uri:
            return False
        return check_name(ancestor.path, self._path, NameScope.DESCENDENT)

    def is_descendent(self, descendent: FileName, scope: NameScope = NameScope.DESCENDENT) -> bool:
        """Determine whether `descendent` lies within `scope` of this name."""
        if descendent.root_uri != self.root_uri:
            return False
        return check_name(self._path, descendent.path, scope)

    def _create_name(self, absolute_path: str) -> FileName:
        return self._name_factory.create_name(self._scheme, absolute_path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileName):
            return NotImplemented
        return self.root_uri == other.root_uri and self._path == other.path

    def __hash__(self) -> int:
        return hash((self.root_uri, self._path))

    def __str__(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.uri!r})"
