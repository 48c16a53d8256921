# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Opening of an instrument from its resource name.

"""
from .rname import parse_resource_name
from .backends.usb import find_device
from .backends.tmc import new_device_handle


def open_resource(resource_name, term_char=None, backend=None):
    """Open a USBTMC instrument.

    The device is selected using the manufacturer ID, the model code and, if
    present, the serial number of the resource name. The board and interface
    number are not used to select the device.

    Parameters
    ----------
    resource_name : str
        USB INSTR resource name.

    term_char : int | str | bytes, optional
        Character terminating the messages of the instrument. None disables
        termination character detection.

    backend : usb.backend.IBackend, optional
        pyusb backend to use instead of the one configured for tmcvisa.

    Returns
    -------
    instrument : usbtmc.Instrument

    Raises
    ------
    InvalidResourceName
        Raised if the resource name is not a valid USB INSTR resource name.

    DeviceNotFound
        Raised if no attached device matches the resource name.

    """
    identifier = parse_resource_name(resource_name)
    device = find_device(identifier.manufacturer_id, identifier.model_code,
                         identifier.serial_number, backend)
    return new_device_handle(device, term_char)
