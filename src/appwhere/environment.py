"""Access to the process environment and the host platform.

Resolvers never touch ``os.environ`` or ``sys.platform`` directly; they go through
an :class:`EnvironmentProvider`, so a query can be answered "as if" it ran on a
different machine.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .models import Platform


class EnvironmentProvider(Protocol):
    """Protocol for reading environment variables and the host platform."""

    def get(self, name: str) -> str:
        """Return the variable's value, or an empty string when it is not defined."""
        ...

    def exists(self, name: str) -> bool:
        """Return whether the variable is defined, even with an empty value."""
        ...

    def host_os(self) -> str:
        """Return the identifier of the platform the process runs on."""
        ...


class OsEnvironment:
    """Environment provider backed by the running process.

    Values are read at call time, nothing is cached.
    """

    def get(self, name: str) -> str:
        return os.environ.get(name, "")

    def exists(self, name: str) -> bool:
        return name in os.environ

    def host_os(self) -> str:
        return host_os_from_sys_platform(sys.platform)


@dataclass(frozen=True)
class StaticEnvironment:
    """Environment provider over a fixed mapping."""

    variables: Mapping[str, str] = field(default_factory=dict)
    host: str = "linux"

    def get(self, name: str) -> str:
        return self.variables.get(name, "")

    def exists(self, name: str) -> bool:
        return name in self.variables

    def host_os(self) -> str:
        return self.host


def host_os_from_sys_platform(value: str) -> str:
    if value in ("win32", "cygwin", "msys"):
        return Platform.WINDOWS.value
    if value == "darwin":
        return Platform.MACOSX.value
    if value.startswith("linux"):
        return "linux"
    return value


def default_environment() -> EnvironmentProvider:
    return OsEnvironment()


def get_platform(platform: str | None = None, environment: EnvironmentProvider | None = None) -> str:
    """Return ``platform`` when given, otherwise the ambient platform identifier."""
    if platform is not None:
        return platform.value if isinstance(platform, Platform) else str(platform)
    return (environment or default_environment()).host_os()


def is_set(name: str, environment: EnvironmentProvider) -> bool:
    """Check that a variable is defined and not blank."""
    return environment.exists(name) and environment.get(name).strip() != ""
