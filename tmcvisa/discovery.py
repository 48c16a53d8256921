# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Discovery of the USBTMC instruments attached to the machine.

"""
from .common import logger
from .errors import UsbTransportError, UsbBackendUnavailable
from .rname import assemble_resource_name
from .backends.usb import UsbContext
from .backends.tmc import is_instrument_capable


def list_resources(backend=None):
    """List the resource names of the attached USBTMC instruments.

    Devices whose serial number or active configuration cannot be read (most
    of the time because of missing permissions) are skipped. If the bus fails
    during the scan, the names collected so far are returned. A resource name
    is produced for every alternate setting of every interface implementing
    USBTMC.

    Parameters
    ----------
    backend : usb.backend.IBackend, optional
        pyusb backend to use instead of the one configured for tmcvisa.

    Returns
    -------
    resources : list[str]
        Resource names on board 0, in enumeration order.

    """
    resources = []
    with UsbContext(backend) as context:
        try:
            for device in context.iter_devices():
                resources.extend(_device_resources(device))
        except UsbBackendUnavailable:
            raise
        except UsbTransportError as e:
            # Keep the devices examined before the bus stopped answering.
            logger.debug('Enumeration interrupted: %s', e)

    logger.debug('Found %d USBTMC resources', len(resources))
    return resources


def _device_resources(device):
    """Resource names of the USBTMC interfaces of a device.

    """
    try:
        serial_number = device.read_serial_number()
        configuration = device.read_active_configuration()
    except UsbTransportError as e:
        logger.debug('Skipping %s: %s', device, e)
        return []

    return [assemble_resource_name(device.vendor_id, device.product_id,
                                   serial_number, number)
            for number, alt_setting in device.iter_alt_settings(configuration)
            if is_instrument_capable(alt_setting)]
