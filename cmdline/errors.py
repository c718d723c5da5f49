#!/usr/bin/env python3
"""
These are the cmdline specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from cmdline._errors.base import CmdLineError, ParseError, RegistryError
from cmdline._errors.config import ConfigError
from cmdline._errors.parse import (MissingRequiredOptionError,
                                   MissingRequiredParameterError,
                                   MissingValueError, NameNotFoundError,
                                   UnknownOptionError)
from cmdline._errors.registry import DuplicateNameError, OrderingError

# ##-- end 1st party imports

__all__ = (
    "CmdLineError",
    "ConfigError",
    "DuplicateNameError",
    "MissingRequiredOptionError",
    "MissingRequiredParameterError",
    "MissingValueError",
    "NameNotFoundError",
    "OrderingError",
    "ParseError",
    "RegistryError",
    "UnknownOptionError",
)
