"""Extension UI surface helpers."""

from walletkit.ui.surface import (
    CallableLocation,
    LocationProvider,
    StaticLocation,
    UiPages,
    UiSurface,
    UiSurfaceDetector,
    UiTypeCheck,
    get_ui_type,
    get_ui_type_name,
)

__all__ = [
    "CallableLocation",
    "LocationProvider",
    "StaticLocation",
    "UiPages",
    "UiSurface",
    "UiSurfaceDetector",
    "UiTypeCheck",
    "get_ui_type",
    "get_ui_type_name",
]
