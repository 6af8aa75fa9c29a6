import re
from typing import List, Optional, Tuple

from vfsname.utils.errors import EscapesRootError

SEPARATOR = "/"
SEPARATOR_CHARS: Tuple[str, ...] = ("/", "\\")

_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def fix_separators(path: str) -> str:
    """Rewrite every recognised separator variant to the canonical one."""
    for variant in SEPARATOR_CHARS:
        if variant != SEPARATOR:
            path = path.replace(variant, SEPARATOR)
    return path


def normalise_path(path: str) -> str:
    """
    Collapse empty, `.` and `..` segments and drop any trailing separator.

    Raises EscapesRootError when a `..` has nothing left to climb out of.
    """
    if not path:
        return path

    absolute = path.startswith(SEPARATOR)
    segments: List[str] = []
    for element in path.split(SEPARATOR):
        if element in {"", "."}:
            continue
        if element == "..":
            if not segments:
                raise EscapesRootError(path)
            segments.pop()
            continue
        segments.append(element)

    joined = SEPARATOR.join(segments)
    return SEPARATOR + joined if absolute else joined


def extract_scheme(uri: str) -> Tuple[Optional[str], str]:
    """Split `uri` into its lower-cased scheme and the remainder."""
    match = _SCHEME_PATTERN.match(uri)
    if match is None:
        return None, uri
    return match.group(1).lower(), uri[match.end():]
