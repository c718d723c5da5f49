##-- imports
from __future__ import annotations

import logging as logmod
import sys
from typing import Sequence

import more_itertools as mitz

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from cmdline._abstract import ArgParser_i
from cmdline._errors.parse import (MissingRequiredOptionError,
                                   MissingRequiredParameterError,
                                   MissingValueError, UnknownOptionError)
from cmdline._errors.registry import OrderingError
from cmdline._interface import ALT_SHORT_PREFIX, LONG_PREFIX, SHORT_PREFIX
from cmdline._structs.option_spec import Option
from cmdline._structs.parser_config import ParserConfig
from cmdline.enums import ParseState, TokenKind
from cmdline.formatters.help import HelpFormatter
from cmdline.parsers.result import ParseResult
from cmdline.registry import OptionRegistry

class CmdLineParser(ArgParser_i):
    """
    Resolve argv against an OptionRegistry, as a state machine.

    # {prog} [--long [value]] [-abc [value]] ... [param] ...

    Starts in OPTIONS, moving to PARAMETERS on the first token with no prefix.
    Once in PARAMETERS every token is positional, and an option is an error.
    """

    def __init__(self, registry:None|OptionRegistry=None, *, config:None|ParserConfig=None):
        self._registry = registry or OptionRegistry()
        self._config   = config or ParserConfig()

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    @property
    def config(self) -> ParserConfig:
        return self._config

    def options(self, registry:OptionRegistry) -> CmdLineParser:
        self._registry = registry
        return self

    def parse(self, args:None|Sequence[str]=None) -> ParseResult:
        """
          Validates the registry, then parses the args against it.
          Returns a fresh ParseResult each call.
        """
        if args is None:
            args = sys.argv[1:]

        logging.debug("Parsing args: %s", args)
        self._registry.validate()

        result = ParseResult(self._registry)
        tokens = mitz.peekable(self.normalise(args))
        focus  = ParseState.OPTIONS

        for token in tokens:
            kind, body = self._classify(token)
            logging.debug("Handling: %s, State: %s, Kind: %s", token, focus.name, kind.name)
            match kind:
                case TokenKind.PARAM:
                    if focus is ParseState.OPTIONS:
                        logging.debug("Switching to PARAMETERS")
                        focus = ParseState.PARAMETERS
                    result._record_positional(token)
                case TokenKind.LONG if self._config.is_ignored(body.partition(self._config.separator)[0]):
                    logging.info("Ignoring option: %s", token)
                case _ if focus is ParseState.PARAMETERS:
                    raise OrderingError("Option %s found after reading a parameter. All options must come before any parameters", token)
                case TokenKind.LONG:
                    self._process_long(body, tokens, result)
                case TokenKind.SHORT:
                    self._process_short(body, tokens, result)

        self._check_required(result)
        return result

    def normalise(self, args:Sequence[str]) -> list[str]:
        """ Split `-key=val` into `-key`, `val`, at the first separator, trimming both.
          Ignored long options are kept whole, so their values are skipped with them.
        """
        sep    = self._config.separator
        tokens = []
        for arg in args:
            match arg.partition(sep):
                case _ if not arg.startswith(SHORT_PREFIX):
                    tokens.append(arg)
                case (_, "", _):
                    tokens.append(arg)
                case (head, _, _) if head.startswith(LONG_PREFIX) and self._config.is_ignored(head.removeprefix(LONG_PREFIX).strip()):
                    tokens.append(arg)
                case (head, _, tail):
                    tokens += [head.strip(), tail.strip()]

        return tokens

    def format_help(self, prog:None|str=None) -> str:
        return HelpFormatter(self._config.help_width).format_help(prog, self._registry)

    def _classify(self, token:str) -> tuple[TokenKind, str]:
        if token.startswith(LONG_PREFIX):
            return TokenKind.LONG, token.removeprefix(LONG_PREFIX)
        if token.startswith((SHORT_PREFIX, ALT_SHORT_PREFIX)):
            return TokenKind.SHORT, token[1:]

        return TokenKind.PARAM, token

    def _process_long(self, name:str, tokens:mitz.peekable, result:ParseResult) -> None:
        match self._registry.options.get(name, None):
            case None:
                raise UnknownOptionError("Unknown option --%s", name)
            case Option(requires_value=True) as option:
                self._consume_value(option, f"{LONG_PREFIX}{name}", tokens, result)
            case option:
                logging.debug("Setting: %s", option.name)
                result._record(option, name)

    def _process_short(self, chars:str, tokens:mitz.peekable, result:ParseResult) -> None:
        """ Resolve a bundle of short options, eg: -abc.
          An option that needs a value must be last in the bundle.
        """
        if not bool(chars):
            logging.debug("Empty short option, skipping")
            return

        for i, char in enumerate(chars):
            remaining = chars[i+1:]
            match self._registry.short_options.get(char, None):
                case None:
                    raise UnknownOptionError("Short option -%s not found", char)
                case Option(requires_value=True) if bool(remaining):
                    raise OrderingError("Short option '%s' is followed by short option(s) '%s' but requires a following value. It must be last in the short option list",
                                        char, remaining)
                case Option(requires_value=True) as option:
                    self._consume_value(option, f"{SHORT_PREFIX}{char}", tokens, result)
                case option:
                    logging.debug("Setting: %s", option.name)
                    result._record(option, char)

    def _consume_value(self, option:Option, given:str, tokens:mitz.peekable, result:ParseResult) -> None:
        match tokens.peek(None):
            case None:
                raise MissingValueError("Option %s requires a value but does not have one", given)
            case str() as value if self._config.looks_like_option(value):
                raise MissingValueError("Option %s is not followed by a value, found: %s", given, value)
            case str() as value:
                next(tokens)
                logging.debug("Setting: %s = %s", option.name, value)
                result._record(option, value)

    def _check_required(self, result:ParseResult) -> None:
        for option in self._registry.options.values():
            if option.required and not bool(result.option_values.get(option.name)):
                raise MissingRequiredOptionError("Required option %s is missing", option.name)

        supplied = len(result.parameter_values)
        for i, param in enumerate(self._registry.parameters):
            if param.required and supplied <= i:
                raise MissingRequiredParameterError("Required parameter %s is missing", param.name)
