#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from cmdline._errors.parse import NameNotFoundError, UnknownOptionError
from cmdline._interface import EXTRA_KEY

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from cmdline._structs.option_spec import Option
    from cmdline.registry import OptionRegistry

class ParseResult:
    """ The values captured by a single parse.

      Option values are held here, keyed by the option's long name,
      never on the Option itself, so each parse starts empty.
      Positional values are held in the order they were supplied,
      and map onto declared parameters by position.
    """

    def __init__(self, registry:OptionRegistry):
        self._registry          = registry
        self._values            : dict[str, list[str]] = {x : [] for x in registry.options}
        self._positional        : list[str]            = []

    def __repr__(self):
        found = [x for x,y in self._values.items() if bool(y)]
        return f"<ParseResult: options={found}, parameters={self._positional}>"

    ##-- recording, used by the parser
    def _record(self, option:Option, value:str) -> None:
        values = self._values.setdefault(option.name, [])
        if bool(values) and not option.multiple:
            logging.debug("Option %s given more than once, only the first value is used by single lookups", option.name)
        values.append(value)

    def _record_positional(self, value:str) -> None:
        self._positional.append(value)

    ##-- end recording, used by the parser

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    @property
    def parameter_values(self) -> list[str]:
        return self._positional[:]

    @property
    def option_values(self) -> Mapping[str, list[str]]:
        return MappingProxyType(self._values)

    ##-- by short name
    def _find_short(self, char:str) -> Option:
        match self._registry.short_options.get(char, None):
            case None:
                raise UnknownOptionError("-%s is not a valid option", char)
            case option:
                return option

    def has_short_value(self, char:str) -> bool:
        return bool(self.get_short_values(char))

    def get_short_value(self, char:str, default:None|str=None) -> None|str:
        match self.get_short_values(char):
            case [x, *_]:
                return x
            case _:
                return default

    def get_short_values(self, char:str) -> list[str]:
        option = self._find_short(char)
        return self._values.get(option.name, [])[:]

    ##-- end by short name

    ##-- by name
    def has_value(self, name:str) -> bool:
        return bool(self.get_values(name))

    def get_value(self, name:str, default:None|str=None) -> None|str:
        """ The first value of the named option,
          or the value supplied at the named parameter's position.
        """
        match self.get_values(name):
            case [x, *_]:
                return x
            case _:
                return default

    def get_values(self, name:str) -> list[str]:
        """ All values of the named option,
          or a list of the parameter value, or an empty list if that position wasn't supplied.
        """
        if name in self._registry.options:
            return self._values.get(name, [])[:]

        match self._registry.find_parameter(name):
            case None:
                raise NameNotFoundError("Option or parameter with name '%s' was not found", name)
            case (index, _) if index < len(self._positional):
                return [self._positional[index]]
            case _:
                return []

    ##-- end by name

    def as_guard(self) -> TomlGuard:
        """ A TomlGuard of the supplied values:
          { options : {name: [vals]}, parameters : {name: val}, extra : [vals] }
        """
        params   = self._registry.parameters
        declared = {x.name : y for x,y in zip(params, self._positional)}
        data     = {
            "options"    : {x : y[:] for x,y in self._values.items() if bool(y)},
            "parameters" : declared,
            EXTRA_KEY    : self._positional[len(params):],
        }
        return TomlGuard(data)
