# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Access to the USB devices through pyusb.

"""
import os
from importlib import import_module

import usb.core
import usb.util

from ..common import logger
from ..errors import UsbTransportError, UsbBackendUnavailable, DeviceNotFound

#: Name of the environment variable used to select the pyusb backend.
BACKEND_ENV_VAR = 'TMCVISA_USB_BACKEND'

#: pyusb backend modules which can be selected by name.
KNOWN_BACKENDS = ('libusb1', 'libusb0', 'openusb')

_UNSET = object()

_USB_BACKEND = _UNSET


def load_usb_backend(name):
    """Create a pyusb backend from the name of its module.

    """
    if name not in KNOWN_BACKENDS:
        msg = 'Unknown pyusb backend %r, expected one of %s'
        raise UsbBackendUnavailable(msg % (name, ', '.join(KNOWN_BACKENDS)))

    module = import_module('usb.backend.' + name)
    backend = module.get_backend()
    if backend is None:
        raise UsbBackendUnavailable('The pyusb backend %r cannot find its '
                                    'library' % name)
    return backend


def get_usb_backend():
    """Access the pyusb backend in use by tmcvisa.

    On first access the backend named by the TMCVISA_USB_BACKEND environment
    variable is created. When the variable is not set None is returned and
    pyusb picks the first backend available.

    """
    global _USB_BACKEND
    if _USB_BACKEND is _UNSET:
        name = os.environ.get(BACKEND_ENV_VAR)
        if name:
            logger.debug('Creating pyusb backend %s', name)
            _USB_BACKEND = load_usb_backend(name)
        else:
            _USB_BACKEND = None

    return _USB_BACKEND


def set_usb_backend(backend):
    """Set the pyusb backend in use by tmcvisa.

    This operation can only be performed once, and should be performed before
    any device is looked up.

    Parameters
    ----------
    backend : usb.backend.IBackend | str
        Backend instance or name of a backend module (libusb1, libusb0,
        openusb).

    """
    global _USB_BACKEND
    if _USB_BACKEND is not _UNSET:
        msg = 'Cannot set the pyusb backend once one is already in use.'
        raise ValueError(msg)

    if isinstance(backend, str):
        backend = load_usb_backend(backend)
    _USB_BACKEND = backend


def accept_all(device):
    return True


class UsbDevice(object):
    """Wrapper around a pyusb device turning its failures into tmcvisa errors.

    """
    __slots__ = ('device', '_released')

    def __init__(self, device):
        self.device = device
        self._released = False

    @property
    def vendor_id(self):
        return self.device.idVendor

    @property
    def product_id(self):
        return self.device.idProduct

    def read_serial_number(self):
        """Read the serial number string descriptor.

        Raises
        ------
        UsbTransportError
            Raised if the descriptor cannot be read or does not exist.

        """
        try:
            serial_number = self.device.serial_number
        except (usb.core.USBError, ValueError, NotImplementedError) as e:
            raise UsbTransportError('Failed to read the serial number of %s'
                                    % self) from e
        if not serial_number:
            raise UsbTransportError('%s has no serial number' % self)
        return serial_number

    def read_active_configuration(self):
        """Read the configuration currently selected on the device.

        """
        try:
            return self.device.get_active_configuration()
        except (usb.core.USBError, NotImplementedError) as e:
            raise UsbTransportError('Failed to read the active configuration '
                                    'of %s' % self) from e

    @staticmethod
    def iter_alt_settings(configuration):
        """Iterate over all the alternate settings of all interfaces.

        Yields
        ------
        interface_number : int

        alt_setting : usb.core.Interface

        """
        for interface in configuration:
            yield interface.bInterfaceNumber, interface

    def release(self):
        """Free the resources allocated by pyusb for this device.

        pyusb reallocates them on demand so the device remains usable.

        """
        if not self._released:
            self._released = True
            usb.util.dispose_resources(self.device)

    def __str__(self):
        return 'USB device 0x%04x:0x%04x' % (self.vendor_id, self.product_id)


class UsbContext(object):
    """Scope in which USB devices are enumerated.

    Every device yielded by iter_devices is released as soon as the iteration
    moves to the next one, and closing the context releases any device still
    held.

    Parameters
    ----------
    backend : usb.backend.IBackend, optional
        pyusb backend to use. Defaults to the one returned by get_usb_backend.

    """

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else get_usb_backend()
        self._held = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def iter_devices(self, match=None, **properties):
        """Iterate over the attached devices.

        Parameters
        ----------
        match : callable, optional
            Predicate receiving a pyusb device. All devices are accepted by
            default.

        properties :
            Descriptor values the devices must have (idVendor, idProduct...)

        """
        try:
            devices = usb.core.find(find_all=True, backend=self.backend,
                                    custom_match=match or accept_all,
                                    **properties)
        except usb.core.NoBackendError as e:
            raise UsbBackendUnavailable(str(e)) from e

        try:
            for device in devices:
                wrapper = UsbDevice(device)
                self._held.append(wrapper)
                try:
                    yield wrapper
                finally:
                    if wrapper in self._held:
                        self._held.remove(wrapper)
                    wrapper.release()
        except usb.core.USBError as e:
            raise UsbTransportError('Failed to enumerate USB devices') from e

    def close(self):
        """Release every device still held.

        """
        while self._held:
            self._held.pop().release()


def find_device(vendor_id, product_id, serial_number='', backend=None):
    """Find the first device with the given IDs.

    Parameters
    ----------
    vendor_id : int

    product_id : int

    serial_number : str, optional
        When empty, the first device matching the IDs is returned.

    backend : usb.backend.IBackend, optional

    Returns
    -------
    device : usb.core.Device

    Raises
    ------
    DeviceNotFound
        Raised if no attached device matches.

    """
    logger.debug('Looking for USB device 0x%04x:0x%04x (serial number: %r)',
                 vendor_id, product_id, serial_number)
    with UsbContext(backend) as context:
        for candidate in context.iter_devices(idVendor=vendor_id,
                                              idProduct=product_id):
            if serial_number:
                try:
                    candidate_serial = candidate.read_serial_number()
                except UsbTransportError as e:
                    logger.debug('Ignoring %s: %s', candidate, e)
                    continue
                if candidate_serial != serial_number:
                    continue
            return candidate.device

    msg = 'No USB device 0x%04x:0x%04x' % (vendor_id, product_id)
    if serial_number:
        msg += ' with serial number %s' % serial_number
    raise DeviceNotFound(msg)
