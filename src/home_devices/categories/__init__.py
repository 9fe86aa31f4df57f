"""
Category layer for home-devices.

Groups devices by kind (lights, thermostats, cameras) through adapters.
Group operations are unconditional: every adapter is invoked on every call,
whatever the current device state.
"""

from .adapter import (
    DeviceAdapter,
    CategoryAdapter,
    LightAdapter,
    ThermostatAdapter,
    CameraAdapter,
)
from .group import (
    DeviceGroup,
    CategoryGroup,
    LightType,
    ThermostatType,
    CameraType,
)

__all__ = [
    "DeviceAdapter",
    "CategoryAdapter",
    "LightAdapter",
    "ThermostatAdapter",
    "CameraAdapter",
    "DeviceGroup",
    "CategoryGroup",
    "LightType",
    "ThermostatType",
    "CameraType",
]
