from __future__ import annotations

import ntpath
import posixpath

import pytest

from appwhere.environment import StaticEnvironment
from appwhere.models import Application, DirectoryKind, application
from appwhere.resolver import (
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

PLATFORMS = ["windows", "macosx", "linux"]


@pytest.fixture
def environment() -> StaticEnvironment:
    return StaticEnvironment(
        {
            "HOME": "/home/user",
            "APPDATA": r"C:\Users\u\AppData\Roaming",
            "LOCALAPPDATA": r"C:\Users\u\AppData\Local",
        }
    )


def _tail(path: str, platform: str, count: int) -> list[str]:
    module = ntpath if platform == "windows" else posixpath
    parts: list[str] = []
    for _ in range(count):
        path, last = module.split(path)
        parts.insert(0, last)
    return parts


@pytest.mark.parametrize("platform", PLATFORMS)
@pytest.mark.parametrize("version", [None, "2.0"])
def test_every_directory_ends_with_application_segments(
    environment: StaticEnvironment, platform: str, version: str | None
) -> None:
    appl = application("App", "Auth", version)
    expected = ["Auth", "App"] if platform == "windows" else ["App"]
    if version is not None:
        expected.append(version)

    for path in (
        user_data(appl, platform, environment=environment),
        user_config(appl, platform, environment=environment),
        user_cache(appl, False, platform, environment=environment),
        user_logs(appl, False, platform, environment=environment),
    ):
        assert path
        assert _tail(path, platform, len(expected)) == expected


@pytest.mark.parametrize("platform", PLATFORMS)
def test_resolvers_are_idempotent(environment: StaticEnvironment, platform: str) -> None:
    appl = application("App", "Auth", "1.0")

    for kind in DirectoryKind:
        first = resolve_directory(kind, appl, platform, environment=environment)
        second = resolve_directory(kind, appl, platform, environment=environment)
        assert first == second


def test_unix_config_example() -> None:
    environment = StaticEnvironment({"HOME": "/home/user"})

    assert user_config(application("App"), platform="linux", environment=environment) == "/home/user/.config/App"


def test_windows_data_example() -> None:
    environment = StaticEnvironment({"APPDATA": r"C:\Users\u\AppData\Roaming"})

    path = user_data(application("App", "Auth"), platform="windows", environment=environment)

    assert path == r"C:\Users\u\AppData\Roaming\Auth\App"


def test_macos_cache_example() -> None:
    environment = StaticEnvironment({"HOME": "/Users/u"})

    assert user_cache(application("App"), platform="macosx", environment=environment) == "/Users/u/Library/Caches/App"


def test_xdg_data_home_overrides_default() -> None:
    environment = StaticEnvironment({"HOME": "/home/user", "XDG_DATA_HOME": "/xdg/data"})

    assert user_data(application("App"), platform="linux", environment=environment) == "/xdg/data/App"


def test_empty_xdg_data_home_uses_default() -> None:
    environment = StaticEnvironment({"HOME": "/home/user", "XDG_DATA_HOME": ""})

    assert user_data(application("App"), platform="linux", environment=environment) == "/home/user/.local/share/App"


def test_xdg_config_home_overrides_config() -> None:
    environment = StaticEnvironment({"HOME": "/home/user", "XDG_CONFIG_HOME": "/xdg/config"})

    assert user_config(application("App"), platform="freebsd", environment=environment) == "/xdg/config/App"


def test_windows_data_roaming_rule(environment: StaticEnvironment) -> None:
    local = user_data(application("App", "Auth"), "windows", environment=environment)
    roaming = user_data(application("App", "Auth", roaming=True), "windows", environment=environment)

    assert local == r"C:\Users\u\AppData\Local\Auth\App"
    assert roaming == r"C:\Users\u\AppData\Roaming\Auth\App"


def test_windows_config_honours_roaming(environment: StaticEnvironment) -> None:
    roaming = user_config(application("App", "Auth", roaming=True), "windows", environment=environment)

    assert roaming == r"C:\Users\u\AppData\Roaming\Auth\App"


def test_windows_cache_and_logs_ignore_roaming(environment: StaticEnvironment) -> None:
    appl = application("App", "Auth", roaming=True)

    assert user_cache(appl, platform="windows", environment=environment) == r"C:\Users\u\AppData\Local\Auth\App\Cache"
    assert user_logs(appl, platform="windows", environment=environment) == r"C:\Users\u\AppData\Local\Auth\App\Logs"


def test_windows_force_flags_can_be_disabled(environment: StaticEnvironment) -> None:
    appl = application("App", "Auth")

    assert user_cache(appl, False, "windows", environment=environment) == r"C:\Users\u\AppData\Local\Auth\App"
    assert user_logs(appl, False, "windows", environment=environment) == r"C:\Users\u\AppData\Local\Auth\App"


def test_unix_cache_ignores_force_cache() -> None:
    environment = StaticEnvironment({"HOME": "/home/user", "XDG_CACHE_HOME": "/xdg/cache"})
    appl = application("App")

    assert user_cache(appl, True, "linux", environment=environment) == "/xdg/cache/App"
    assert user_cache(appl, False, "linux", environment=environment) == "/xdg/cache/App"


def test_unix_logs_live_in_cache(environment: StaticEnvironment) -> None:
    appl = application("App")

    assert user_logs(appl, platform="linux", environment=environment) == "/home/user/.cache/App/logs"
    assert user_logs(appl, False, "linux", environment=environment) == "/home/user/.cache/App"


def test_macos_logs_never_add_segment(environment: StaticEnvironment) -> None:
    appl = application("App")

    assert user_logs(appl, True, "macosx", environment=environment) == "/home/user/Library/Logs/App"
    assert user_logs(appl, False, "macosx", environment=environment) == "/home/user/Library/Logs/App"


def test_version_is_last_segment_everywhere(environment: StaticEnvironment) -> None:
    appl = application("App", "Auth", "2.0")

    assert user_cache(appl, platform="windows", environment=environment) == (
        r"C:\Users\u\AppData\Local\Auth\App\Cache\2.0"
    )
    assert user_logs(appl, platform="linux", environment=environment) == "/home/user/.cache/App/logs/2.0"
    assert user_data(appl, platform="macosx", environment=environment) == (
        "/home/user/Library/Application Support/App/2.0"
    )


def test_author_is_ignored_outside_windows(environment: StaticEnvironment) -> None:
    appl = application("App", "Auth")

    assert user_data(appl, "linux", environment=environment) == "/home/user/.local/share/App"


def test_ambient_platform_is_used_when_not_given() -> None:
    environment = StaticEnvironment({"HOME": "/Users/u"}, host="macosx")

    assert user_data(application("App"), environment=environment) == "/Users/u/Library/Application Support/App"


@pytest.mark.parametrize("platform", PLATFORMS)
def test_convenience_variants_match_application_variants(environment: StaticEnvironment, platform: str) -> None:
    appl = Application(name="App", author="Auth", version="3", use_roaming=True)

    assert user_data_dir("App", "Auth", "3", True, platform, environment=environment) == user_data(
        appl, platform, environment=environment
    )
    assert user_config_dir("App", "Auth", "3", True, platform, environment=environment) == user_config(
        appl, platform, environment=environment
    )
    assert user_cache_dir("App", "Auth", "3", True, False, platform, environment=environment) == user_cache(
        appl, False, platform, environment=environment
    )
    assert user_logs_dir("App", "Auth", "3", True, False, platform, environment=environment) == user_logs(
        appl, False, platform, environment=environment
    )


def test_convenience_author_defaults_to_name(environment: StaticEnvironment) -> None:
    assert user_data_dir("App", platform="windows", environment=environment) == r"C:\Users\u\AppData\Local\App\App"


def test_resolve_all_returns_every_kind(environment: StaticEnvironment) -> None:
    directories = resolve_all(application("App"), "linux", environment=environment)

    assert directories == {
        DirectoryKind.DATA: "/home/user/.local/share/App",
        DirectoryKind.CONFIG: "/home/user/.config/App",
        DirectoryKind.CACHE: "/home/user/.cache/App",
        DirectoryKind.LOGS: "/home/user/.cache/App/logs",
    }


def test_resolve_directory_accepts_kind_value(environment: StaticEnvironment) -> None:
    path = resolve_directory("cache", application("App"), "windows", force=False, environment=environment)  # type: ignore[arg-type]

    assert path == r"C:\Users\u\AppData\Local\App\App"


def test_absolute_version_stays_under_base_directory() -> None:
    environment = StaticEnvironment({"HOME": "/home/user"})

    path = user_data(application("App", version="/2.0"), "linux", environment=environment)

    assert path == "/home/user/.local/share/App/2.0"


def test_author_with_drive_stays_under_base_directory() -> None:
    environment = StaticEnvironment({"APPDATA": r"C:\R"})

    path = user_data(application("App", "C:\\Evil"), "windows", environment=environment)

    assert path == r"C:\R\Evil\App"
