#!/usr/bin/env python

"""
    cssfold
    =======

    cssfold expands CSS shorthand properties and folds them back.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError('cssfold does not support Python 2.x.')

setup()
