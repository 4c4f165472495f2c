"""Generic per-user base directories, not yet specific to an application.

Every function accepts an explicit ``platform`` and falls back to the ambient one.
Paths are joined with the separator of the resolved platform family, so asking
for ``"windows"`` on Linux still yields backslash-separated paths.
"""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath, PureWindowsPath

from .environment import EnvironmentProvider, default_environment, get_platform, is_set
from .logging import create_logger
from .models import PlatformFamily, platform_family

logger = create_logger("base")

HOME = "HOME"
APPDATA = "APPDATA"
LOCALAPPDATA = "LOCALAPPDATA"
XDG_DATA_HOME = "XDG_DATA_HOME"
XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
XDG_CACHE_HOME = "XDG_CACHE_HOME"


def join_path(platform: str, base: str, *segments: str) -> str:
    """Join ``segments`` onto ``base`` using the path flavour of ``platform``.

    Segments always nest under ``base``: a leading separator or drive on a
    segment is dropped rather than replacing everything before it.
    """
    flavour: type[PurePath] = (
        PureWindowsPath if platform_family(platform) is PlatformFamily.WINDOWS else PurePosixPath
    )
    relative: list[str] = []
    for segment in segments:
        path = flavour(segment)
        relative.extend(path.parts[1:] if path.anchor else path.parts)
    return str(flavour(base, *relative))


def user_data_base(
    roaming: bool = False,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the generic user data directory.

    On Windows, ``LOCALAPPDATA`` is used for non-roaming data when it is defined,
    ``APPDATA`` otherwise, following the usual Windows meaning of the two
    variables: ``LOCALAPPDATA`` stays on this machine, ``APPDATA`` roams.
    UNIX-like systems honour a non-blank ``XDG_DATA_HOME``.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)

    match platform_family(plat):
        case PlatformFamily.MACOSX:
            path = join_path(plat, env.get(HOME), "Library", "Application Support")
        case PlatformFamily.WINDOWS:
            if not roaming and env.exists(LOCALAPPDATA):
                path = env.get(LOCALAPPDATA)
            else:
                path = env.get(APPDATA)
        case _:
            if is_set(XDG_DATA_HOME, env):
                path = env.get(XDG_DATA_HOME)
            else:
                path = join_path(plat, env.get(HOME), ".local", "share")

    logger.trace("Resolved base directory", kind="data", platform=plat, roaming=roaming, path=path)
    return path


def user_config_base(
    roaming: bool = False,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the generic user config directory.

    Windows and macOS have no separate config location and share the data directory.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)

    if platform_family(plat) is not PlatformFamily.UNIX:
        return user_data_base(roaming, plat, environment=env)

    if is_set(XDG_CONFIG_HOME, env):
        path = env.get(XDG_CONFIG_HOME)
    else:
        path = join_path(plat, env.get(HOME), ".config")

    logger.trace("Resolved base directory", kind="config", platform=plat, path=path)
    return path


def user_cache_base(
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the generic user cache directory.

    Windows has no official cache directory, so the local (non-roaming) data
    directory is returned instead. ``user_cache`` adds a ``Cache`` subdirectory
    for a specific application.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)

    match platform_family(plat):
        case PlatformFamily.WINDOWS:
            return user_data_base(False, plat, environment=env)
        case PlatformFamily.MACOSX:
            path = join_path(plat, env.get(HOME), "Library", "Caches")
        case _:
            if is_set(XDG_CACHE_HOME, env):
                path = env.get(XDG_CACHE_HOME)
            else:
                path = join_path(plat, env.get(HOME), ".cache")

    logger.trace("Resolved base directory", kind="cache", platform=plat, path=path)
    return path


def user_logs_base(
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the generic user logs directory.

    Only macOS has an official logs directory. Windows falls back to the local
    data directory and UNIX-like systems to the cache directory.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)

    match platform_family(plat):
        case PlatformFamily.WINDOWS:
            return user_data_base(False, plat, environment=env)
        case PlatformFamily.MACOSX:
            path = join_path(plat, env.get(HOME), "Library", "Logs")
        case _:
            return user_cache_base(plat, environment=env)

    logger.trace("Resolved base directory", kind="logs", platform=plat, path=path)
    return path
