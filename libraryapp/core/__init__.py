#!/usr/bin/env python

"""
    Core module for libraryapp, db & models

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from libraryapp.core import db as database
from libraryapp.core import models

db = database.init()

__all__ = ["db", "models"]
