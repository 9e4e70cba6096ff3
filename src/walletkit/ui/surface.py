"""UI surface detection.

The wallet extension renders the same bundle into three pages: a full
browser tab, the toolbar popup, and the notification window opened for
dApp approval requests. The surface is derived from the location pathname
on every query and never cached, since the same process can be asked from
different windows.

The location is injected through LocationProvider rather than read from a
global, so detection runs without a browser host.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import structlog

from walletkit.config.settings import Settings, get_settings
from walletkit.core.exceptions import ConfigurationError

log = structlog.get_logger(__name__)


class UiSurface(Enum):
    """Rendering surface of the extension UI."""

    TAB = "tab"
    POPUP = "popup"
    NOTIFICATION = "notification"
    UNKNOWN = ""


class LocationProvider(Protocol):
    """Source of the current location pathname."""

    @property
    def pathname(self) -> str: ...


@dataclass(frozen=True)
class StaticLocation:
    """Fixed pathname, for tests and server-side rendering."""

    pathname: str


class CallableLocation:
    """Location whose pathname is read through a callable on every access.

    Example:
        location = CallableLocation(lambda: window.location.pathname)
    """

    def __init__(self, read_pathname: Callable[[], str]) -> None:
        self._read_pathname = read_pathname

    @property
    def pathname(self) -> str:
        return self._read_pathname()


@dataclass(frozen=True)
class UiPages:
    """Page filenames served for each surface."""

    tab: str = "index.html"
    popup: str = "popup.html"
    notification: str = "notification.html"

    def __post_init__(self) -> None:
        if len({self.tab, self.popup, self.notification}) != 3:
            raise ConfigurationError(
                f"UI page filenames must be distinct: "
                f"{self.tab}, {self.popup}, {self.notification}"
            )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "UiPages":
        settings = settings or get_settings()
        return cls(
            tab=settings.tab_page,
            popup=settings.popup_page,
            notification=settings.notification_page,
        )


@dataclass(frozen=True)
class UiTypeCheck:
    """Per-surface flags. At most one is True."""

    is_tab: bool
    is_pop: bool
    is_notification: bool


class UiSurfaceDetector:
    """Classifies the current rendering surface.

    Attributes:
        pages: Page filenames compared against the location pathname.

    Example:
        detector = UiSurfaceDetector(StaticLocation("/popup.html"))
        if detector.surface() is UiSurface.POPUP:
            close_after_approval()
    """

    def __init__(self, location: LocationProvider, pages: UiPages | None = None) -> None:
        self._location = location
        self.pages = pages or UiPages()

    def check(self) -> UiTypeCheck:
        """Compare the current pathname against each page filename."""
        return self._check_pathname(self._location.pathname)

    def _check_pathname(self, pathname: str) -> UiTypeCheck:
        return UiTypeCheck(
            is_tab=pathname == f"/{self.pages.tab}",
            is_pop=pathname == f"/{self.pages.popup}",
            is_notification=pathname == f"/{self.pages.notification}",
        )

    def surface(self) -> UiSurface:
        pathname = self._location.pathname
        check = self._check_pathname(pathname)
        if check.is_pop:
            return UiSurface.POPUP
        if check.is_notification:
            return UiSurface.NOTIFICATION
        if check.is_tab:
            return UiSurface.TAB

        log.debug("ui_surface_unknown", pathname=pathname)
        return UiSurface.UNKNOWN

    def name(self) -> str:
        """Surface name: "popup", "notification", "tab", or "" when unknown."""
        return self.surface().value


def get_ui_type(location: LocationProvider, pages: UiPages | None = None) -> UiTypeCheck:
    """Return surface flags for location."""
    return UiSurfaceDetector(location, pages).check()


def get_ui_type_name(location: LocationProvider, pages: UiPages | None = None) -> str:
    """Return the surface name for location, "" when it matches no page."""
    return UiSurfaceDetector(location, pages).name()
