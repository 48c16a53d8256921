# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Common functionalities.

"""
import logging

from pyvisa import logger

logger = logging.LoggerAdapter(logger, {'backend': 'tmcvisa'})
