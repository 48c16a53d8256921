# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""USB Test & Measurement Class support provided by python-usbtmc.

"""
import usbtmc

from ..common import logger

#: bInterfaceClass of the application specific interfaces.
USBTMC_INTERFACE_CLASS = 0xFE

#: bInterfaceSubClass identifying a USBTMC interface.
USBTMC_INTERFACE_SUBCLASS = 0x03


def is_instrument_capable(alt_setting):
    """Check whether an interface alternate setting is a USBTMC interface.

    """
    return (alt_setting.bInterfaceClass == USBTMC_INTERFACE_CLASS and
            alt_setting.bInterfaceSubClass == USBTMC_INTERFACE_SUBCLASS)


def to_term_char(term_char):
    """Normalize a termination character to the integer expected by usbtmc.

    None disables the termination character.

    """
    if term_char is None:
        return term_char
    if isinstance(term_char, bool):
        raise ValueError('A termination character cannot be a bool')
    if isinstance(term_char, int):
        if not 0 <= term_char <= 0xFF:
            raise ValueError('A termination character is a byte value, got %d'
                             % term_char)
        return term_char
    if isinstance(term_char, str):
        term_char = term_char.encode('latin-1')
    if len(term_char) != 1:
        raise ValueError('A termination character is a single byte, got %r'
                         % term_char)
    return term_char[0]


def new_device_handle(device, term_char=None):
    """Create a USBTMC instrument communicating with a pyusb device.

    Parameters
    ----------
    device : usb.core.Device
        Device found by the USB transport.

    term_char : int | str | bytes, optional
        Character terminating the messages sent by the instrument.

    Returns
    -------
    instrument : usbtmc.Instrument

    """
    term_char = to_term_char(term_char)
    logger.debug('Opening USBTMC instrument on 0x%04x:0x%04x '
                 '(termination character: %r)',
                 device.idVendor, device.idProduct, term_char)
    return usbtmc.Instrument(device, term_char=term_char)
