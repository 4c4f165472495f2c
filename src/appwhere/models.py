"""Models describing an application and the platforms it runs on."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import APP_NAME


class AppInfo(BaseModel):
    """Metadata of the appwhere tool itself, reported by CLI logging."""

    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class Platform(str, Enum):
    """Platform identifiers with their own directory conventions.

    Any other identifier (``"linux"``, ``"freebsd"``, ...) is treated as UNIX-like.
    """

    WINDOWS = "windows"
    MACOSX = "macosx"


class PlatformFamily(str, Enum):
    WINDOWS = "windows"
    MACOSX = "macosx"
    UNIX = "unix"


class DirectoryKind(str, Enum):
    """Kinds of per-user directories an application can ask for."""

    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    LOGS = "logs"


def platform_family(platform: str) -> PlatformFamily:
    if platform == Platform.WINDOWS.value:
        return PlatformFamily.WINDOWS
    if platform == Platform.MACOSX.value:
        return PlatformFamily.MACOSX
    return PlatformFamily.UNIX


class Application(BaseModel):
    """Identity of an application.

    Attributes:
        name: Application name, used as the innermost directory name
        author: Vendor directory on Windows; defaults to ``name``
        version: Appended as the last segment of every directory when set
        use_roaming: Windows only, whether data and config may roam across machines
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    author: str
    version: str | None = None
    use_roaming: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def _default_author_to_name(cls, data: Any) -> Any:  # noqa: ANN401
        if isinstance(data, dict) and data.get("author") is None:
            return {**data, "author": data.get("name")}
        return data


def application(
    name: str,
    author: str | None = None,
    version: str | None = None,
    roaming: bool = False,
) -> Application:
    """Build an :class:`Application`.

    ``author`` falls back to ``name``. Nothing is validated, an empty name yields
    a syntactically valid but meaningless directory.
    """
    return Application(name=name, author=author, version=version, use_roaming=roaming)
