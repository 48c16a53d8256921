# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Exceptions raised when locating and opening USB instruments.

Parse errors derive from ValueError and lookup failures from LookupError so
that callers can catch them either through the builtin exceptions or through
TmcVisaError.

"""


class TmcVisaError(Exception):
    """Base class for all tmcvisa errors.

    """
    pass


class TmcVisaLazyImportFailed(TmcVisaError, ImportError):
    pass


class InvalidResourceName(TmcVisaError, ValueError):
    """Base class for the errors raised while parsing a resource name.

    Parameters
    ----------
    resource_name : str
        Text which failed to parse.

    field : str, optional
        Content of the faulty part of the resource name.

    """
    #: Human readable description of the failure, overridden by subclasses.
    reason = 'invalid resource name'

    def __init__(self, resource_name, field=None):
        self.resource_name = resource_name
        self.field = field
        if field is None:
            msg = '%s: %r' % (self.reason, resource_name)
        else:
            msg = '%s (%r) in %r' % (self.reason, field, resource_name)
        super(InvalidResourceName, self).__init__(msg)

    def __reduce__(self):
        return (type(self), (self.resource_name, self.field))


class MalformedResourceName(InvalidResourceName):
    reason = 'resource name does not follow the USB INSTR syntax'


class UnsupportedInterfaceType(InvalidResourceName):
    reason = 'interface type is not USB'


class UnsupportedResourceClass(InvalidResourceName):
    reason = 'resource class is not INSTR'


class InvalidBoardIndex(InvalidResourceName):
    reason = 'invalid board index'


class InvalidManufacturerID(InvalidResourceName):
    reason = 'invalid manufacturer ID'


class InvalidModelCode(InvalidResourceName):
    reason = 'invalid model code'


class InvalidInterfaceIndex(InvalidResourceName):
    reason = 'invalid USB interface number'


class UsbTransportError(TmcVisaError):
    """Error raised when the USB transport fails to answer a request.

    """
    pass


class UsbBackendUnavailable(UsbTransportError):
    """Error raised when no usable pyusb backend can be found.

    """
    pass


class DeviceNotFound(TmcVisaError, LookupError):
    """Error raised when no attached device matches a resource name.

    """
    pass
