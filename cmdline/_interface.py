#!/usr/bin/env python3
"""
Constants shared across cmdline.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
from importlib.metadata import PackageNotFoundError, version
from typing import Final

# ##-- end stdlib imports

try:
    __version__ : str = version("cmdline")
except PackageNotFoundError:
    __version__ = "0.0.0"

##-- prefixes
LONG_PREFIX        : Final[str]       = "--"
SHORT_PREFIX       : Final[str]       = "-"
ALT_SHORT_PREFIX   : Final[str]       = "/"
ASSIGN_SEP         : Final[str]       = "="
VALUE_GUARDS       : Final[list[str]] = ["-", "?"]
##-- end prefixes

# Injected by spring-boot launchers, never meaningful to the program itself
IGNORED_OPTIONS    : Final[list[str]] = ["spring.output.ansi.enabled"]

##-- help layout
HELP_WIDTH         : Final[int]       = 80
HELP_WIDTH_MIN     : Final[int]       = 40
HELP_WIDTH_MAX     : Final[int]       = 200
SPACE_LENGTH       : Final[int]       = 3
REQUIRED_TAG       : Final[str]       = "[Required] "
OPTIONAL_TAG       : Final[str]       = "[Optional] "
##-- end help layout

EXTRA_KEY          : Final[str]       = "extra"
