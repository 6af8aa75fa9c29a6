from __future__ import annotations

from enum import Enum
from typing import Any

from vfsname.core.uri_parser import SEPARATOR
from vfsname.utils.errors import UnsupportedScopeError


class NameScope(str, Enum):
    """Relationship a path must have with a base path to be in scope."""

    FILE_SYSTEM = "file_system"
    CHILD = "child"
    DESCENDENT = "descendent"
    DESCENDENT_OR_SELF = "descendent_or_self"

    @classmethod
    def parse(cls, value: Any) -> NameScope:
        """Accept a member, its value or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower().replace("-", "_")
            for member in cls:
                if lowered in {member.value, member.name.lower()}:
                    return member
        raise UnsupportedScopeError(value)


def check_name(base_path: str, path: str, scope: NameScope) -> bool:
    """Check whether `path` fits in `scope` relative to `base_path`.

    Both paths must be absolute and normalised. Scopes:
    - FILE_SYSTEM: anything on the same file system.
    - CHILD: exactly one segment below `base_path`.
    - DESCENDENT: any depth below `base_path`.
    - DESCENDENT_OR_SELF: `base_path` itself or any depth below it.
    """
    if not isinstance(scope, NameScope):
        raise UnsupportedScopeError(scope)

    if scope == NameScope.FILE_SYSTEM:
        return True

    if not path.startswith(base_path):
        return False

    base_len = len(base_path)
    # The root path already ends with the separator, so no boundary check.
    on_boundary = base_len == 1 or path[base_len:base_len + 1] == SEPARATOR

    if scope == NameScope.CHILD:
        return (
            len(path) != base_len
            and on_boundary
            and path.find(SEPARATOR, base_len + 1) == -1
        )

    if scope == NameScope.DESCENDENT:
        return len(path) != base_len and on_boundary

    if scope == NameScope.DESCENDENT_OR_SELF:
        return len(path) == base_len or on_boundary

    raise UnsupportedScopeError(scope)
