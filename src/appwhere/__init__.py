"""appwhere - per-user application directories for Windows, macOS and UNIX-like systems.

By default, appwhere's internal logging is disabled when used as a library.
Library users can enable logging by calling appwhere.enable_logging().
"""

from .base import user_cache_base, user_config_base, user_data_base, user_logs_base
from .environment import EnvironmentProvider, OsEnvironment, StaticEnvironment, get_platform
from .logging import disable_library_logging, enable_library_logging
from .models import Application, DirectoryKind, Platform, PlatformFamily, application, platform_family
from .resolver import (
    resolve_all,
    resolve_directory,
    user_cache,
    user_cache_dir,
    user_config,
    user_config_dir,
    user_data,
    user_data_dir,
    user_logs,
    user_logs_dir,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "Application",
    "DirectoryKind",
    "EnvironmentProvider",
    "OsEnvironment",
    "Platform",
    "PlatformFamily",
    "StaticEnvironment",
    "application",
    "enable_logging",
    "get_platform",
    "platform_family",
    "resolve_all",
    "resolve_directory",
    "user_cache",
    "user_cache_base",
    "user_cache_dir",
    "user_config",
    "user_config_base",
    "user_config_dir",
    "user_data",
    "user_data_base",
    "user_data_dir",
    "user_logs",
    "user_logs_base",
    "user_logs_dir",
]
