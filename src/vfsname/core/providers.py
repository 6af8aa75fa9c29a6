from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import quote, unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from vfsname.core.name import FileName
from vfsname.core.uri_parser import SEPARATOR, SEPARATOR_CHARS, extract_scheme, fix_separators, normalise_path
from vfsname.utils.errors import InvalidUriError

DEFAULT_PORTS: Dict[str, int] = {
    "ftp": 21,
    "sftp": 22,
    "http": 80,
    "https": 443,
    "webdav": 80,
    "smb": 139,
}


def _absolute(path: str) -> str:
    path = fix_separators(path)
    if not path.startswith(SEPARATOR):
        path = SEPARATOR + path
    return normalise_path(path)


def _decode_path(uri: str, path: str) -> str:
    """Percent-decode each segment; an encoded separator is rejected."""
    segments = []
    for segment in fix_separators(path).split(SEPARATOR):
        decoded = unquote(segment)
        if any(variant in decoded for variant in SEPARATOR_CHARS):
            raise InvalidUriError(uri, "encoded separator in path")
        segments.append(decoded)
    return SEPARATOR.join(segments)


class LocalFileName(FileName):
    """A name on the local file system."""

    @property
    def root_file(self) -> str:
        return self._root_uri_builder.root_file


class LocalNameProvider:
    """Root URI and name factory for `file:` names."""

    def __init__(self, root_file: str = SEPARATOR, scheme: str = "file") -> None:
        self.root_file = root_file
        self.scheme = scheme

    def build_root_uri(self, scheme: str) -> str:
        return f"{scheme}://{self.root_file}"

    def create_name(self, scheme: str, absolute_path: str) -> LocalFileName:
        return LocalFileName(scheme, absolute_path, self, self)

    def name(self, path: str = SEPARATOR) -> LocalFileName:
        return self.create_name(self.scheme, _absolute(path))


class HostAuthority(BaseModel):
    """Authority part shared by every name on one host-based file system."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hostname: str
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    default_port: Optional[int] = Field(default=None, ge=0, le=65535)
    user_name: Optional[str] = None
    password: Optional[str] = None

    @property
    def effective_port(self) -> Optional[int]:
        return self.port if self.port is not None else self.default_port


class GenericFileName(FileName):
    """A name on a host-based file system such as ftp or sftp."""

    @property
    def authority(self) -> HostAuthority:
        return self._root_uri_builder.authority

    @property
    def hostname(self) -> str:
        return self.authority.hostname

    @property
    def port(self) -> Optional[int]:
        return self.authority.effective_port

    @property
    def user_name(self) -> Optional[str]:
        return self.authority.user_name

    @property
    def password(self) -> Optional[str]:
        return self.authority.password


class GenericNameProvider:
    """Root URI and name factory for `scheme://[user[:password]@]host[:port]` names."""

    def __init__(self, scheme: str, authority: HostAuthority) -> None:
        self.scheme = scheme
        self.authority = authority

    def build_root_uri(self, scheme: str) -> str:
        parts = [scheme, "://"]
        if self.authority.user_name is not None:
            parts.append(quote(self.authority.user_name, safe=""))
            if self.authority.password is not None:
                parts.append(":")
                parts.append(quote(self.authority.password, safe=""))
            parts.append("@")
        parts.append(self.authority.hostname)
        port = self.authority.port
        if port is not None and port != self.authority.default_port:
            parts.append(f":{port}")
        parts.append(SEPARATOR)
        return "".join(parts)

    def create_name(self, scheme: str, absolute_path: str) -> GenericFileName:
        return GenericFileName(scheme, absolute_path, self, self)

    def name(self, path: str = SEPARATOR) -> GenericFileName:
        return self.create_name(self.scheme, _absolute(path))


def parse_uri(uri: str) -> FileName:
    """
    Build the initial name for an absolute URI.

    `file:` URIs map to the local file system; any other scheme needs a
    `//host` authority.
    """
    scheme, rest = extract_scheme(uri)
    if scheme is None:
        raise InvalidUriError(uri, "missing scheme")

    if scheme == "file":
        if rest.startswith("//"):
            rest = rest[2:]
        return LocalNameProvider(scheme=scheme).name(_decode_path(uri, rest))

    if not rest.startswith("//"):
        raise InvalidUriError(uri, "missing authority")

    try:
        parts = urlsplit(f"{scheme}:{rest}")
        port = parts.port
    except ValueError as exc:
        raise InvalidUriError(uri, str(exc)) from exc

    if not parts.hostname:
        raise InvalidUriError(uri, "missing host name")

    authority = HostAuthority(
        hostname=parts.hostname,
        port=port,
        default_port=DEFAULT_PORTS.get(scheme),
        user_name=unquote(parts.username) if parts.username is not None else None,
        password=unquote(parts.password) if parts.password is not None else None,
    )
    return GenericNameProvider(scheme, authority).name(_decode_path(uri, parts.path))
