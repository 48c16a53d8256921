# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Locate USB test and measurement instruments from VISA resource names.

Resource names follow the VISA USB INSTR syntax::

    USB[board]::manufacturer ID::model code[::serial number]::[USB interface number]::INSTR

The public functions are loaded on first access.

"""
import sys

from .version import __version__
from .lazy_package import LazyPackage

lazy_imports = {
    'ResourceIdentifier': 'rname.ResourceIdentifier',
    'parse_resource_name': 'rname.parse_resource_name',
    'assemble_resource_name': 'rname.assemble_resource_name',
    'to_canonical_name': 'rname.to_canonical_name',
    'list_resources': 'discovery.list_resources',
    'open_resource': 'resolver.open_resource',
    'get_usb_backend': 'backends.usb.get_usb_backend',
    'set_usb_backend': 'backends.usb.set_usb_backend',
    'TmcVisaError': 'errors.TmcVisaError',
    'InvalidResourceName': 'errors.InvalidResourceName',
    'DeviceNotFound': 'errors.DeviceNotFound',
}

sys.modules[__name__] = LazyPackage(lazy_imports, __name__, __doc__,
                                    locals())
