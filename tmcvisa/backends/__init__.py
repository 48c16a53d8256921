# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Adapters over the libraries doing the actual communication.

pyusb is used to enumerate and select the devices while python-usbtmc
implements the USBTMC protocol on top of the selected device.

"""
