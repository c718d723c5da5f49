#!/usr/bin/env python3
"""
Errors raised when the registry moves staged declarations into validated state,
and when the parser sees tokens out of order.
"""
# Imports:
from __future__ import annotations

from .base import CmdLineError, ParseError, RegistryError

class DuplicateNameError(RegistryError):
    """ A long name, short alias, or parameter name was declared twice """
    general_msg = "Duplicate Declaration:"
    pass

class OrderingError(RegistryError, ParseError):
    """
    Something appeared in the wrong order. Either:
    a required parameter was declared after an optional one,
    an option appeared after a positional argument,
    or a short option needing a value was bundled ahead of other flags.
    """
    general_msg = "Ordering Error:"
    pass
