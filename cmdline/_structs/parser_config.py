#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, Field, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from cmdline._interface import (ASSIGN_SEP, HELP_WIDTH, HELP_WIDTH_MAX,
                                HELP_WIDTH_MIN, IGNORED_OPTIONS, VALUE_GUARDS)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParserConfig(BaseModel, frozen=True):
    """ Settings for the parser and help formatter.
      ignored      : long option names that are skipped entirely
      separator    : splits `--key=val` into `--key val`
      value_guards : a value token starting with one of these is treated as an option instead
      help_width   : the line width of generated help
    """

    ignored       : list[str] = Field(default_factory=lambda: list(IGNORED_OPTIONS))
    separator     : str       = Field(default=ASSIGN_SEP, min_length=1)
    value_guards  : list[str] = Field(default_factory=lambda: list(VALUE_GUARDS))
    help_width    : int       = Field(default=HELP_WIDTH, ge=HELP_WIDTH_MIN, le=HELP_WIDTH_MAX)

    @classmethod
    def build(cls, data:None|TomlGuard|dict=None, **kwargs:Any) -> ParserConfig:
        match data:
            case None:
                as_dict = {}
            case TomlGuard():
                as_dict = dict(data._table())
            case dict():
                as_dict = data.copy()
            case _:
                raise TypeError("Can't build a ParserConfig from", data)

        as_dict.update(kwargs)
        return cls.model_validate(as_dict)

    @field_validator("value_guards")
    @classmethod
    def _validate_guards(cls, val):
        if any(not bool(x) for x in val):
            raise ValueError("Value guards can't be empty strings", val)
        return val

    def is_ignored(self, name:str) -> bool:
        return name in self.ignored

    def looks_like_option(self, token:str) -> bool:
        return token.startswith(tuple(self.value_guards))
