# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Parsing and assembling of USB INSTR resource names.

A resource name has the following structure::

    USB[board]::manufacturer ID::model code[::serial number]::[USB interface number]::INSTR

The board index, manufacturer ID and model code are unsigned 16 bits integers
which can be written in decimal or prefixed by 0x, 0o or 0b. The USB interface
number is a decimal integer lower than 1024.

"""
import re
from typing import NamedTuple

from .common import logger
from .errors import (MalformedResourceName, UnsupportedInterfaceType,
                     UnsupportedResourceClass, InvalidBoardIndex,
                     InvalidManufacturerID, InvalidModelCode,
                     InvalidInterfaceIndex)

#: Sentinel used for the integer fields absent from a resource name.
NOT_SPECIFIED = -1

INTERFACE_TYPE = 'USB'

RESOURCE_CLASS = 'INSTR'

# Whitespace is limited to the ASCII characters the VISA syntax forbids, so
# vertical tabs and Unicode spaces are valid inside a token.
_RESOURCE_NAME = re.compile(
    r'(?P<interface_type>[A-Za-z]+)(?P<board>[0-9]*)::'
    r'(?P<manufacturer_id>[^\t\n\f\r :]+)::'
    r'(?P<model_code>[^\t\n\f\r :]+)'
    r'(::(?P<serial_number>[^\t\n\f\r :]+))?'
    r'::(?P<usb_interface_number>[0-9]*)'
    r'::(?P<resource_class>[^\t\n\f\r :]+)'
)

_PREFIXED_BASES = {'0x': 16, '0o': 8, '0b': 2}

_DIGITS = {
    2: re.compile('[01]+'),
    8: re.compile('[0-7]+'),
    10: re.compile('[0-9]+'),
    16: re.compile('[0-9a-fA-F]+'),
}


def parse_unsigned(text: str, bits: int, base: int = 0) -> int:
    """Parse an unsigned integer fitting in the specified number of bits.

    Parameters
    ----------
    text : str
        Text to parse. Signs, whitespace and digit separators are rejected.

    bits : int
        Number of bits available to store the value.

    base : int, optional
        Base in which the number is written. 0 means that the base is deduced
        from the prefix (0x, 0o, 0b) falling back to decimal.

    Raises
    ------
    ValueError
        Raised if the text is not a valid integer or does not fit.

    """
    digits = text
    if base == 0:
        base = _PREFIXED_BASES.get(text[:2].lower(), 10)
        if base != 10:
            digits = text[2:]

    if base not in _DIGITS or not _DIGITS[base].fullmatch(digits):
        raise ValueError('%r is not a base %d unsigned integer' % (text, base))

    value = int(digits, base)
    if value >= 1 << bits:
        raise ValueError('%r does not fit in %d bits' % (text, bits))
    return value


def assemble_resource_name(manufacturer_id, model_code, serial_number='',
                           usb_interface_number=NOT_SPECIFIED, board=0):
    """Build the normalized text of a USB INSTR resource name.

    A board or interface number set to NOT_SPECIFIED is left out, and so is
    an empty serial number.

    """
    parts = ['%s%s' % (INTERFACE_TYPE,
                       '' if board == NOT_SPECIFIED else board),
             '0x%04x' % manufacturer_id,
             '0x%04x' % model_code]
    if serial_number:
        parts.append(serial_number)
    parts.append('' if usb_interface_number == NOT_SPECIFIED
                 else str(usb_interface_number))
    parts.append(RESOURCE_CLASS)
    return '::'.join(parts)


class ResourceIdentifier(NamedTuple):
    """Validated content of a USB INSTR resource name.

    Instances are built by parse_resource_name. Integer fields absent from the
    text are set to NOT_SPECIFIED and a missing serial number to an empty
    string.

    """
    #: Text from which the identifier was parsed.
    resource_name: str

    #: Always 'USB'.
    interface_type: str

    board: int

    #: USB vendor ID of the device.
    manufacturer_id: int

    #: USB product ID of the device.
    model_code: int

    serial_number: str

    usb_interface_number: int

    #: Always 'INSTR'.
    resource_class: str

    @property
    def canonical_name(self) -> str:
        """Normalized text of the resource name.

        """
        return assemble_resource_name(self.manufacturer_id, self.model_code,
                                      self.serial_number,
                                      self.usb_interface_number, self.board)

    def __str__(self):
        return self.canonical_name


def _parse_field(resource_name, captured, bits, error, base=0):
    """Convert an optional numeric capture, raising the matching error.

    """
    if not captured:
        return NOT_SPECIFIED
    try:
        return parse_unsigned(captured, bits, base)
    except ValueError:
        raise error(resource_name, captured) from None


def parse_resource_name(resource_name: str) -> ResourceIdentifier:
    """Parse and validate a USB INSTR resource name.

    Parameters
    ----------
    resource_name : str
        Text of the resource name, such as
        USB0::0x1234::0x5678::A12345::0::INSTR

    Returns
    -------
    identifier : ResourceIdentifier
        Fully validated identifier.

    Raises
    ------
    InvalidResourceName
        One subclass per kind of failure, the first failing field in the
        order in which they appear in the name being reported.

    """
    match = _RESOURCE_NAME.fullmatch(resource_name)
    if match is None:
        raise MalformedResourceName(resource_name)
    parts = match.groupdict()

    if parts['interface_type'].upper() != INTERFACE_TYPE:
        raise UnsupportedInterfaceType(resource_name, parts['interface_type'])

    board = _parse_field(resource_name, parts['board'], 16,
                         InvalidBoardIndex)
    manufacturer_id = _parse_field(resource_name, parts['manufacturer_id'],
                                   16, InvalidManufacturerID)
    model_code = _parse_field(resource_name, parts['model_code'], 16,
                              InvalidModelCode)
    usb_interface_number = _parse_field(resource_name,
                                        parts['usb_interface_number'], 10,
                                        InvalidInterfaceIndex, base=10)

    if parts['resource_class'].upper() != RESOURCE_CLASS:
        raise UnsupportedResourceClass(resource_name, parts['resource_class'])

    identifier = ResourceIdentifier(resource_name, INTERFACE_TYPE, board,
                                    manufacturer_id, model_code,
                                    parts['serial_number'] or '',
                                    usb_interface_number, RESOURCE_CLASS)
    logger.debug('Parsed resource name %s as %r', resource_name, identifier)
    return identifier


def to_canonical_name(resource_name: str) -> str:
    """Parse a resource name and return its normalized text.

    """
    return parse_resource_name(resource_name).canonical_name
