from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vfsname.core.scope import NameScope


class VfsSettings(BaseSettings):
    """
    Library-level settings (the 'vfs' section in vfsname.yaml).
    """
    model_config = SettingsConfigDict(env_prefix='VFSNAME_', extra='ignore')

    log_level: str = "INFO"
    default_scope: NameScope = NameScope.FILE_SYSTEM

    @field_validator("default_scope", mode="before")
    @classmethod
    def parse_scope(cls, value: Any) -> NameScope:
        return NameScope.parse(value)


class CacheSettings(BaseModel):
    """
    Files cache settings (the 'cache' section in vfsname.yaml).
    """
    model_config = ConfigDict(extra='ignore')

    kind: Literal["default", "lru", "null"] = "default"
    max_entries: int = Field(default=256, ge=1)


class VfsContext(BaseModel):
    """
    Settings handed to every component when a configuration is initialised.
    """
    model_config = ConfigDict(extra="forbid")

    settings: VfsSettings = Field(default_factory=VfsSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None, **data: Any):
        """
        Initialize the context, optionally with a configuration dictionary.
        """
        if config_dict:
            if 'settings' not in data:
                data['settings'] = VfsSettings(**config_dict.get('vfs', {}))
            if 'cache' not in data:
                data['cache'] = CacheSettings(**config_dict.get('cache', {}))

        super().__init__(**data)


class FileNameInfo(BaseModel):
    """Derived attributes of one name, as reported by the CLI."""

    scheme: str
    path: str
    uri: str
    root_uri: str
    base_name: str
    extension: str
    depth: int
    parent: Optional[str] = None
