#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from cmdline.parsers.result import ParseResult

class ArgParser_i(abc.ABC):
    """
    A Single standard process point for turning the list of passed in args
    into a queryable ParseResult
    """

    @abc.abstractmethod
    def parse(self, args:None|Sequence[str]=None) -> ParseResult:
        pass
