"""
Demonstration script.

Builds a living room with a light, a thermostat and a camera, attaches the
three stock listeners to each device, then drives the devices one by one,
as a room, and finally as category groups.

Run with: python -m home_devices
Or set PYTHONPATH: PYTHONPATH=src python3 -m home_devices
"""

import logging
from typing import Optional

from home_devices.core.device import Device, DeviceCategory
from home_devices.core.listeners import Logger, SecurityNotifier, UserNotifier
from home_devices.core.output import OutputSink
from home_devices.core.room import Room
from home_devices.categories import (
    CameraAdapter,
    CameraType,
    LightAdapter,
    LightType,
    ThermostatAdapter,
    ThermostatType,
)

logger = logging.getLogger(__name__)


def run_demo(sink: Optional[OutputSink] = None) -> OutputSink:
    """
    Run the fixed demonstration against a sink.

    Args:
        sink: Where records go (None = a new stdout sink)

    Returns:
        The sink, holding every record emitted
    """
    if sink is None:
        sink = OutputSink()

    # Devices
    light = Device("Living Room Light", DeviceCategory.LIGHT, sink=sink)
    thermostat = Device("Living Room Thermostat", DeviceCategory.THERMOSTAT, sink=sink)
    camera = Device("Living Camera", DeviceCategory.CAMERA, sink=sink)

    # Listeners, shared by every device
    listeners = [Logger(sink), SecurityNotifier(sink), UserNotifier(sink)]
    for device in (light, thermostat, camera):
        for listener in listeners:
            device.attach(listener)

    living_room = Room("Living Room", sink=sink)
    living_room.add_device(light)
    living_room.add_device(camera)
    living_room.add_device(thermostat)

    # Individual devices
    light.turn_on()
    thermostat.turn_off()

    # Room: only the devices that are still off
    living_room.perform_bulk_operation(True)

    # Category groups: every device, whatever its state
    light_type = LightType()
    light_type.attach_adapter(LightAdapter(light))

    thermostat_type = ThermostatType()
    thermostat_type.attach_adapter(ThermostatAdapter(thermostat))

    camera_type = CameraType()
    camera_type.attach_adapter(CameraAdapter(camera))

    for group in (light_type, thermostat_type, camera_type):
        group.perform_group_operation(True)

    logger.debug(f"Demo emitted {len(sink.records)} records")
    return sink


def main() -> int:
    """Entry point for python -m home_devices."""
    logging.basicConfig(
        level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
