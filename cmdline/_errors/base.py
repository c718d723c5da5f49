#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class CmdLineError(Exception):
    """
      The base class for all cmdline errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Command Line Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class RegistryError(CmdLineError):
    """ The declared options and parameters are inconsistent """
    general_msg = "Invalid Option Declarations:"
    pass

class ParseError(CmdLineError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "Command Line Parsing Failure:"
    pass
