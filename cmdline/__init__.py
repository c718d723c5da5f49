#!/usr/bin/env python3
"""
cmdline : Declare options and positional parameters, then parse argv against them.

    registry = OptionRegistry().add_option(Option(name="name", requires_value=True))
    result   = cmdline.parse(registry, ["--name", "Rob"])
    result.get_value("name")
"""
# Imports:
from __future__ import annotations

import logging as logmod
from typing import Sequence

from ._interface import __version__
from .errors import CmdLineError
from .formatters.help import HelpFormatter
from .parsers.parser import CmdLineParser
from .parsers.result import ParseResult
from .registry import OptionRegistry
from .structs import Option, Parameter, ParserConfig

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def parse(registry:OptionRegistry, args:None|Sequence[str]=None, *, config:None|ParserConfig=None) -> ParseResult:
    """ Create a parser for the registry and parse the args (defaulting to sys.argv[1:]) """
    return CmdLineParser(registry, config=config).parse(args)
