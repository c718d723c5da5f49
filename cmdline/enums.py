#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

import enum

class ParseState(enum.Enum):
    """ The two phases of a parse. PARAMETERS is terminal. """
    OPTIONS    = enum.auto()
    PARAMETERS = enum.auto()

class TokenKind(enum.Enum):
    LONG  = enum.auto()
    SHORT = enum.auto()
    PARAM = enum.auto()
