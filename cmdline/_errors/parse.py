#!/usr/bin/env python3
"""
These are the parse time errors that can occur
"""
# Imports:
from __future__ import annotations

from .base import CmdLineError, ParseError

class UnknownOptionError(ParseError):
    """ An option token matched no declared option """
    general_msg = "Unknown Option:"
    pass

class MissingValueError(ParseError):
    """ An option that needs a following value did not get one """
    general_msg = "Missing Option Value:"
    pass

class MissingRequiredOptionError(ParseError):
    general_msg = "Missing Required Option:"
    pass

class MissingRequiredParameterError(ParseError):
    general_msg = "Missing Required Parameter:"
    pass

class NameNotFoundError(CmdLineError):
    """ A lookup by name matched neither an option nor a parameter """
    general_msg = "Name Not Found:"
    pass
