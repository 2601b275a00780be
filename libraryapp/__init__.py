#!/usr/bin/env python

"""
    libraryapp
    ~~~~~~~~~~
    A small library management backend: books, users, loans & statistics.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

__version__ = '0.1.0'
