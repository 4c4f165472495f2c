"""Per-application user directories.

Each resolver starts from the generic base directory of its kind and layers the
application identity on top:

- Windows: ``<base>/<author>/<name>``
- everything else: ``<base>/<name>``

followed by the application version when one is set.
"""

from __future__ import annotations

from .base import join_path, user_cache_base, user_config_base, user_data_base, user_logs_base
from .environment import EnvironmentProvider, default_environment, get_platform
from .logging import create_logger
from .models import Application, DirectoryKind, PlatformFamily, application, platform_family

logger = create_logger("resolver")


def _app_segments(appl: Application, platform: str) -> list[str]:
    if platform_family(platform) is PlatformFamily.WINDOWS:
        return [appl.author, appl.name]
    return [appl.name]


def _compose(kind: DirectoryKind, platform: str, base: str, segments: list[str], appl: Application) -> str:
    if appl.version is not None:
        segments = [*segments, appl.version]
    path = join_path(platform, base, *segments)
    logger.debug("Resolved user directory", kind=kind.value, platform=platform, app=appl.name, path=path)
    return path


def user_data(
    appl: Application,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the data directory of ``appl``, honouring its roaming preference."""
    env = environment or default_environment()
    plat = get_platform(platform, env)
    base = user_data_base(appl.use_roaming, plat, environment=env)
    return _compose(DirectoryKind.DATA, plat, base, _app_segments(appl, plat), appl)


def user_config(
    appl: Application,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the config directory of ``appl``, honouring its roaming preference."""
    env = environment or default_environment()
    plat = get_platform(platform, env)
    base = user_config_base(appl.use_roaming, plat, environment=env)
    return _compose(DirectoryKind.CONFIG, plat, base, _app_segments(appl, plat), appl)


def user_cache(
    appl: Application,
    force_cache: bool = True,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the cache directory of ``appl``.

    Windows has no official cache directory, so this is the application's local
    data directory. With ``force_cache`` (the default) an artificial ``Cache``
    directory is added inside it. Other platforms ignore ``force_cache``.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)
    segments = _app_segments(appl, plat)
    if platform_family(plat) is PlatformFamily.WINDOWS and force_cache:
        segments.append("Cache")
    return _compose(DirectoryKind.CACHE, plat, user_cache_base(plat, environment=env), segments, appl)


def user_logs(
    appl: Application,
    force_logs: bool = True,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Return the logs directory of ``appl``.

    Only macOS has an official logs directory. Elsewhere this is the local data
    directory (Windows) or the cache directory (UNIX-like), with a ``Logs`` or
    ``logs`` directory appended unless ``force_logs`` is false.
    """
    env = environment or default_environment()
    plat = get_platform(platform, env)
    segments = _app_segments(appl, plat)
    if force_logs:
        match platform_family(plat):
            case PlatformFamily.WINDOWS:
                segments.append("Logs")
            case PlatformFamily.UNIX:
                segments.append("logs")
    return _compose(DirectoryKind.LOGS, plat, user_logs_base(plat, environment=env), segments, appl)


def resolve_directory(
    kind: DirectoryKind,
    appl: Application,
    platform: str | None = None,
    *,
    force: bool = True,
    environment: EnvironmentProvider | None = None,
) -> str:
    """Resolve a directory of the given kind.

    ``force`` is passed as ``force_cache``/``force_logs`` and has no effect on
    data and config directories.
    """
    match DirectoryKind(kind):
        case DirectoryKind.DATA:
            return user_data(appl, platform, environment=environment)
        case DirectoryKind.CONFIG:
            return user_config(appl, platform, environment=environment)
        case DirectoryKind.CACHE:
            return user_cache(appl, force, platform, environment=environment)
        case DirectoryKind.LOGS:
            return user_logs(appl, force, platform, environment=environment)


def resolve_all(
    appl: Application,
    platform: str | None = None,
    *,
    force: bool = True,
    environment: EnvironmentProvider | None = None,
) -> dict[DirectoryKind, str]:
    env = environment or default_environment()
    plat = get_platform(platform, env)
    return {kind: resolve_directory(kind, appl, plat, force=force, environment=env) for kind in DirectoryKind}


# Convenience variants building the application from its fields.


def user_data_dir(
    name: str,
    author: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    return user_data(application(name, author, version, roaming), platform, environment=environment)


def user_config_dir(
    name: str,
    author: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    return user_config(application(name, author, version, roaming), platform, environment=environment)


def user_cache_dir(
    name: str,
    author: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    force_cache: bool = True,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    return user_cache(application(name, author, version, roaming), force_cache, platform, environment=environment)


def user_logs_dir(
    name: str,
    author: str | None = None,
    version: str | None = None,
    roaming: bool = False,
    force_logs: bool = True,
    platform: str | None = None,
    *,
    environment: EnvironmentProvider | None = None,
) -> str:
    return user_logs(application(name, author, version, roaming), force_logs, platform, environment=environment)
