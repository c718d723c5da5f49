#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

from .base import CmdLineError

class ConfigError(CmdLineError):
    """ A setting given to the parser or a formatter is out of range """
    general_msg = "Config Error:"
    pass
