# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Fixtures replacing the USB stack.

"""
import pytest
import usb.core
import usb.util
import usbtmc

from tmcvisa.backends import usb as usb_backend

from .testing_tools import FakeBus, FakeInstrument


@pytest.fixture
def no_backend_configured(monkeypatch):
    """Start from a process in which no pyusb backend was selected.

    """
    monkeypatch.delenv(usb_backend.BACKEND_ENV_VAR, raising=False)
    monkeypatch.setattr(usb_backend, '_USB_BACKEND', usb_backend._UNSET)


@pytest.fixture
def bus(monkeypatch, no_backend_configured):
    """Empty fake bus, devices can be appended to bus.devices.

    """
    fake = FakeBus()
    monkeypatch.setattr(usb.core, 'find', fake.find)
    monkeypatch.setattr(usb.util, 'dispose_resources',
                        fake.dispose_resources)
    return fake


@pytest.fixture
def instrument_class(monkeypatch):
    monkeypatch.setattr(usbtmc, 'Instrument', FakeInstrument)
    return FakeInstrument
