#!/usr/bin/env python3
"""
Renders usage text from a validated OptionRegistry.

[description]

usage: {prog}

Options:
   --long     [Required] help text,
   -l         wrapped to fit.

Parameters:
   name       [Optional] help text
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import textwrap
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from cmdline._errors.config import ConfigError
from cmdline._interface import (HELP_WIDTH, HELP_WIDTH_MAX, HELP_WIDTH_MIN,
                                LONG_PREFIX, OPTIONAL_TAG, REQUIRED_TAG,
                                SPACE_LENGTH)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from cmdline.registry import OptionRegistry

class HelpFormatter:
    """
    Formats help for an OptionRegistry, with no line longer than max_width.

    Instance attributes:
      max_width : int
        total number of columns for output, between HELP_WIDTH_MIN and HELP_WIDTH_MAX
    """

    def __init__(self, max_width:int=HELP_WIDTH):
        self._max_width = HELP_WIDTH
        self.max_width  = max_width

    @property
    def max_width(self) -> int:
        return self._max_width

    @max_width.setter
    def max_width(self, value:int) -> None:
        if not (HELP_WIDTH_MIN <= value <= HELP_WIDTH_MAX):
            raise ConfigError("Max width must be between %s and %s characters in length, not: %s",
                              HELP_WIDTH_MIN, HELP_WIDTH_MAX, value)
        self._max_width = value

    def split(self, line:None|str, width:None|int=None) -> list[str]:
        """ Wrap a line on spaces, breaking words longer than the width """
        width = width or self._max_width
        match line:
            case None:
                return []
            case str() if not bool(line.strip()):
                return [""]
            case str():
                return textwrap.wrap(line, max(width, 1), break_on_hyphens=False)

    def format_help(self, prog:None|str, registry:OptionRegistry) -> str:
        registry.validate()
        # +2 for the "--" on option names
        column = registry.max_name_length() + len(LONG_PREFIX)
        lines  = []
        lines += self._format_description(registry.description)
        lines += self._format_usage(prog)
        lines += self._format_options(registry, column)
        lines += self._format_parameters(registry, column)

        split = []
        for line in lines:
            split += self.split(line.rstrip())

        return "\n".join(split)

    def _help_width(self, column:int) -> int:
        return self._max_width - column - SPACE_LENGTH * 2

    def _format_description(self, description:None|str) -> list[str]:
        if description and description.strip():
            return [description, ""]
        return []

    def _format_usage(self, prog:None|str) -> list[str]:
        if prog and prog.strip():
            return [f"usage: {prog.strip()}", ""]
        return []

    def _format_options(self, registry:OptionRegistry, column:int) -> list[str]:
        if not bool(registry.options):
            return []

        lines = ["Options:"]
        for option in registry.options.values():
            tag  = REQUIRED_TAG if option.required else OPTIONAL_TAG
            help = self.split(f"{tag}{option.help}", self._help_width(column))
            lines.append(self._format_line(option.key_str, column, help))
            lines.append(self._format_line(option.short_key_str, column, help))
            while bool(help):
                lines.append(self._format_line("", column, help))

            lines.append("")

        return lines

    def _format_parameters(self, registry:OptionRegistry, column:int) -> list[str]:
        if not bool(registry.parameters):
            return []

        lines = ["Parameters:"]
        for param in registry.parameters:
            tag  = REQUIRED_TAG if param.required else OPTIONAL_TAG
            help = self.split(f"{tag}{param.help}", self._help_width(column))
            lines.append(self._format_line(param.name, column, help))
            while bool(help):
                lines.append(self._format_line("", column, help))

            lines.append("")

        return lines

    def _format_line(self, name:str, column:int, help:list[str]) -> str:
        """ Place the name in the indented column, and pop the next line of help after it """
        head = " " * SPACE_LENGTH + f"{name:<{column + SPACE_LENGTH}}"
        if bool(help):
            return head + help.pop(0)
        return head
