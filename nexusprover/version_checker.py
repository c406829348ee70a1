"""Periodic checks for newer releases of the command-line client."""

from __future__ import annotations

import asyncio
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from time import monotonic
from typing import Any, Mapping

import requests
import semver

VERSION_CHECK_INTERVAL = 24 * 60 * 60.0
"""Seconds between release checks."""

_POLL_SECONDS = 60.0
_REQUEST_TIMEOUT = 10.0
_RELEASES_REPOSITORY = "nexus-xyz/nexus-cli"
GITHUB_RELEASES_URL = (
    f"https://api.github.com/repos/{_RELEASES_REPOSITORY}/releases/latest"
)


class LogLevel(enum.IntEnum):
    """Severity of an event, in increasing order."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


class EventType(enum.Enum):
    """Kind of an event reported to the user interface."""

    SUCCESS = "success"
    ERROR = "error"
    REFRESH = "refresh"
    SHUTDOWN = "shutdown"


def _now_stamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class VersionEvent:
    """An event emitted by the version checker."""

    msg: str
    event_type: EventType
    log_level: LogLevel = LogLevel.INFO
    timestamp: str = field(default_factory=_now_stamp)


_RELEASE_TEXT_FIELDS = ("tag_name", "name", "published_at", "html_url")


@dataclass(frozen=True)
class GitHubRelease:
    """The fields of a release that the checker uses."""

    tag_name: str
    name: str
    published_at: str
    html_url: str
    prerelease: bool

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "GitHubRelease":
        """Build a release from decoded JSON; raise ValueError on missing or bad fields."""
        if not isinstance(data, Mapping):
            raise ValueError("release data must be a JSON object")
        values: dict[str, Any] = {}
        for name in _RELEASE_TEXT_FIELDS:
            value = data.get(name)
            if not isinstance(value, str):
                raise ValueError(f"release field {name!r} is missing or not a string")
            values[name] = value
        prerelease = data.get("prerelease")
        if not isinstance(prerelease, bool):
            raise ValueError("release field 'prerelease' is missing or not a boolean")
        return cls(prerelease=prerelease, **values)


def parse_version(version: str) -> semver.Version:
    """Parse a semantic version, accepting an optional leading 'v'."""
    clean = version[1:] if version.startswith("v") else version
    return semver.Version.parse(clean)


@dataclass
class VersionInfo:
    """What is known about the running version and the latest release."""

    current_version: str
    latest_version: str | None = None
    update_available: bool = False
    release_url: str | None = None
    last_check: float | None = None

    def update_from_release(self, release: GitHubRelease) -> None:
        """Record a release and whether it is newer than the running version."""
        self.latest_version = release.tag_name
        self.release_url = release.html_url
        self.update_available = self.is_newer_version(release.tag_name)
        self.last_check = monotonic()

    def is_newer_version(self, latest: str) -> bool:
        """True if `latest` is a strictly newer version; False if either fails to parse."""
        try:
            current = parse_version(self.current_version)
            candidate = parse_version(latest)
        except (ValueError, TypeError):
            return False
        return candidate > current


class VersionCheckable(ABC):
    """Source of the latest release, with the running version in `current_version`."""

    current_version: str

    @abstractmethod
    async def check_latest_version(self) -> GitHubRelease:
        """Return the latest release, raising on failure."""


class VersionChecker(VersionCheckable):
    """Queries the GitHub API for the latest release."""

    def __init__(self, current_version: str) -> None:
        self.current_version = current_version
        self._session = requests.Session()
        self._session.headers["User-Agent"] = f"nexus-cli/{current_version}"

    def _fetch(self) -> GitHubRelease:
        response = self._session.get(GITHUB_RELEASES_URL, timeout=_REQUEST_TIMEOUT)
        if not 200 <= response.status_code < 300:
            raise RuntimeError(
                f"GitHub API returned status: {response.status_code} {response.reason}"
            )
        return GitHubRelease.from_json(response.json())

    async def check_latest_version(self) -> GitHubRelease:
        return await asyncio.to_thread(self._fetch)


def _update_message(release: GitHubRelease, info: VersionInfo) -> str:
    return (
        f"🚀 New version {release.tag_name} available! "
        f"Current: {info.current_version} → Release: {release.html_url}"
    )


async def _shutdown_within(shutdown: asyncio.Event, seconds: float) -> bool:
    try:
        await asyncio.wait_for(shutdown.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        return False
    return True


async def version_checker_task(
    checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Check for updates now and then once a day until shutdown is set."""
    await version_checker_task_with_interval(
        checker, events, shutdown, VERSION_CHECK_INTERVAL
    )


async def version_checker_task_with_interval(
    checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
    check_interval: float,
) -> None:
    """Check for updates now and then every `check_interval` seconds until shutdown."""
    info = VersionInfo(checker.current_version)

    try:
        release = await checker.check_latest_version()
    except Exception as exc:  # noqa: BLE001 - any failure is reported as an event
        await events.put(
            VersionEvent(
                f"Failed to check for updates: {exc}", EventType.ERROR, LogLevel.DEBUG
            )
        )
    else:
        info.update_from_release(release)
        if info.update_available:
            event = VersionEvent(
                _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
            )
        else:
            event = VersionEvent(
                f"✅ Version {info.current_version} is up to date\n",
                EventType.REFRESH,
                LogLevel.DEBUG,
            )
        await events.put(event)

    last_check = monotonic()
    while not await _shutdown_within(shutdown, _POLL_SECONDS):
        if monotonic() - last_check < check_interval:
            continue
        last_check = monotonic()
        try:
            release = await checker.check_latest_version()
        except Exception as exc:  # noqa: BLE001
            await events.put(
                VersionEvent(
                    f"Failed to check for updates: {exc}",
                    EventType.ERROR,
                    LogLevel.DEBUG,
                )
            )
            continue
        was_available = info.update_available
        info.update_from_release(release)
        if info.update_available and not was_available:
            await events.put(
                VersionEvent(
                    _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
                )
            )


async def start_version_checker_task(
    current_version: str,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Run the periodic check against the real GitHub API."""
    await version_checker_task(VersionChecker(current_version), events, shutdown)