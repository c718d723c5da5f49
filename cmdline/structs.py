#!/usr/bin/env python3
"""
Public access point for the declaration and settings structs
"""
# Imports:
from __future__ import annotations

from cmdline._structs.option_spec import Option
from cmdline._structs.param_spec import Parameter
from cmdline._structs.parser_config import ParserConfig
