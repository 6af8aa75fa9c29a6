from typing import Any, Tuple


class FileSystemException(Exception):
    """
    Base error raised by the naming layer. Carries a message key and the
    offending values so callers can report exactly which input was rejected.
    """
    def __init__(self, code: str, *info: Any):
        self.code = code
        self.info: Tuple[Any, ...] = info
        detail = f": {', '.join(repr(item) for item in info)}" if info else ""
        super().__init__(f"{code}{detail}")


class InvalidDescendentNameError(FileSystemException):
    """Raised when a resolved name falls outside the requested scope."""
    def __init__(self, name: str):
        self.name = name
        super().__init__("vfs.provider/invalid-descendent-name.error", name)


class EscapesRootError(FileSystemException):
    """Raised when a `..` segment would climb above the file system root."""
    def __init__(self, path: str):
        self.path = path
        super().__init__("vfs.provider/invalid-relative-path.error", path)


class InvalidUriError(FileSystemException):
    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__("vfs.provider/invalid-absolute-uri.error", uri, reason)


class ConfigurationInUseError(FileSystemException):
    def __init__(self):
        super().__init__("vfs.impl/configuration-already-in-use.error")


class UnsupportedScopeError(ValueError):
    """
    Raised for a scope value the classifier does not know. This is a defect in
    the caller, not bad user input.
    """
    def __init__(self, scope: Any):
        self.scope = scope
        super().__init__(f"Unsupported name scope: {scope!r}")
