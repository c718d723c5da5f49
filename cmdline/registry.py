#!/usr/bin/env python3
"""
The registry of declared options and parameters.

Declarations are staged without any checking, so a registry can be built
fluently. They are checked and moved into validated state when validate()
is called, which the parser does before each parse.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from types import MappingProxyType
from typing import Mapping

# ##-- end stdlib imports

# ##-- 1st party imports
from cmdline._errors.registry import DuplicateNameError, OrderingError
from cmdline._structs.option_spec import Option
from cmdline._structs.param_spec import Parameter

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionRegistry:
    """
      Staged : the options and parameters as added, in order, possibly conflicting.
      Validated :
      - options       : long name -> Option, sorted by name
      - short_options : short char -> Option
      - parameters    : name -> Parameter, in declaration order

      Invariants, checked only in validate():
      - no name is reused between options, short aliases, and parameters
      - no required parameter follows an optional one
    """

    def __init__(self, description:None|str=None):
        self._staged_options    : list[Option]         = []
        self._staged_params     : list[Parameter]      = []
        self._options           : dict[str, Option]    = {}
        self._short_options     : dict[str, Option]    = {}
        self._parameters        : dict[str, Parameter] = {}
        self._description       : None|str             = description

    def __repr__(self):
        return "<OptionRegistry: options=%s, parameters=%s, staged=%s>" % (
            len(self._options), len(self._parameters), len(self._staged_options) + len(self._staged_params))

    ##-- staging
    def add_option(self, option:Option) -> OptionRegistry:
        self._staged_options.append(option)
        return self

    def add_parameter(self, parameter:Parameter) -> OptionRegistry:
        self._staged_params.append(parameter)
        return self

    def add_options(self, *options:Option) -> OptionRegistry:
        for option in options:
            self.add_option(option)
        return self

    def add_parameters(self, *params:Parameter) -> OptionRegistry:
        for param in params:
            self.add_parameter(param)
        return self

    def set_description(self, text:None|str) -> OptionRegistry:
        self._description = text
        return self

    ##-- end staging

    @property
    def is_validated(self) -> bool:
        return not (bool(self._staged_options) or bool(self._staged_params))

    def validate(self) -> None:
        """ Move every staged option, then every staged parameter, into validated state.
          Staged items are removed as they pass, so calling this again is a no-op.
        """
        if self.is_validated:
            return

        logging.debug("Validating %s options, %s parameters", len(self._staged_options), len(self._staged_params))
        try:
            while bool(self._staged_options):
                self._store_option(self._staged_options.pop(0))
        finally:
            # in place, so existing views of the option map stay current
            ordered = sorted(self._options.items())
            self._options.clear()
            self._options.update(ordered)

        while bool(self._staged_params):
            self._store_parameter(self._staged_params.pop(0))

    def _store_option(self, option:Option) -> None:
        if not isinstance(option, Option):
            raise TypeError("Only Options can be stored as options", option)

        if option.name in self._options:
            raise DuplicateNameError("Duplicate option: --%s", option.name)
        if option.name in self._parameters:
            raise DuplicateNameError("Option %s is already in the parameter list", option.name)
        if option.short is not None and option.short in self._short_options:
            raise DuplicateNameError("Duplicate short option: -%s (%s and %s)",
                                     option.short, self._short_options[option.short].name, option.name)

        self._options[option.name] = option
        if option.short is not None:
            self._short_options[option.short] = option

        logging.debug("Stored: %r", option)

    def _store_parameter(self, param:Parameter) -> None:
        if not isinstance(param, Parameter):
            raise TypeError("Only Parameters can be stored as parameters", param)

        if param.name in self._parameters:
            raise DuplicateNameError("Duplicate parameter: %s", param.name)
        if param.name in self._options:
            raise DuplicateNameError("Parameter %s is already in the option list", param.name)

        match [x for x in self._parameters.values() if not x.required]:
            case [optional, *_] if param.required:
                raise OrderingError("Required parameters must come before non-required parameters. Parameter %s must come before %s",
                                    param.name, optional.name)
            case _:
                pass

        self._parameters[param.name] = param
        logging.debug("Stored: %r", param)

    ##-- queries
    @property
    def options(self) -> Mapping[str, Option]:
        return MappingProxyType(self._options)

    @property
    def short_options(self) -> Mapping[str, Option]:
        return MappingProxyType(self._short_options)

    @property
    def parameters(self) -> list[Parameter]:
        self.validate()
        return list(self._parameters.values())

    @property
    def description(self) -> None|str:
        return self._description

    def max_name_length(self) -> int:
        """ The longest validated option or parameter name, for laying out help """
        names = [*self._options.keys(), *self._parameters.keys()]
        return max((len(x) for x in names), default=0)

    def find_parameter(self, name:str) -> None|tuple[int, Parameter]:
        """ The declared position and parameter with the given name """
        for i, param in enumerate(self.parameters):
            if param.name == name:
                return i, param
        return None

    ##-- end queries
