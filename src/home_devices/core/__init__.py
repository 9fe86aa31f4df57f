"""
Core components of home-devices.

This package contains:
- output: ordered record sink (the console boundary)
- device: Device, its category and read-only view
- listeners: listener interface and the stock listeners
- room: Room grouping
- manager: HomeManager room registry
"""

from home_devices.core.output import OutputSink, Record, RecordFilter
from home_devices.core.device import Device, DeviceCategory, DeviceView
from home_devices.core.listeners import (
    DeviceListener,
    LabelledListener,
    Logger,
    SecurityNotifier,
    UserNotifier,
)
from home_devices.core.room import Room
from home_devices.core.manager import HomeManager

__all__ = [
    "OutputSink",
    "Record",
    "RecordFilter",
    "Device",
    "DeviceCategory",
    "DeviceView",
    "DeviceListener",
    "LabelledListener",
    "Logger",
    "SecurityNotifier",
    "UserNotifier",
    "Room",
    "HomeManager",
]
