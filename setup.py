#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

import os.path
import sys

sys.path.insert(0, os.path.abspath('.'))
from tmcvisa.version import __version__

setup(
    name='tmcvisa',
    description='Locate USB test and measurement instruments from VISA '
                'resource names',
    version=__version__,
    long_description='',
    author='Tmcvisa Developers (see AUTHORS)',
    keywords='instrument USBTMC VISA USB Python',
    license='BSD',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: Physics',
        'Programming Language :: Python :: 3',
        ],
    zip_safe=False,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=['pyvisa', 'pyusb', 'python-usbtmc'],
    extras_require={'test': ['pytest']},
)
