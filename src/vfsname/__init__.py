from __future__ import annotations

from vfsname.core.configuration import GlobalConfiguration
from vfsname.core.files_cache import DefaultFilesCache, FilesCache, LRUFilesCache, NullFilesCache
from vfsname.core.name import FileName, NameFactory, RootUriBuilder
from vfsname.core.providers import (
	GenericFileName,
	GenericNameProvider,
	HostAuthority,
	LocalFileName,
	LocalNameProvider,
	parse_uri,
)
from vfsname.core.scope import NameScope, check_name
from vfsname.utils.errors import (
	ConfigurationInUseError,
	EscapesRootError,
	FileSystemException,
	InvalidDescendentNameError,
	InvalidUriError,
	UnsupportedScopeError,
)

__all__ = [
	"ConfigurationInUseError",
	"DefaultFilesCache",
	"EscapesRootError",
	"FileName",
	"FileSystemException",
	"FilesCache",
	"GenericFileName",
	"GenericNameProvider",
	"GlobalConfiguration",
	"HostAuthority",
	"InvalidDescendentNameError",
	"InvalidUriError",
	"LRUFilesCache",
	"LocalFileName",
	"LocalNameProvider",
	"NameFactory",
	"NameScope",
	"NullFilesCache",
	"RootUriBuilder",
	"UnsupportedScopeError",
	"check_name",
	"parse_uri",
]
