#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import sys

##-- end imports
logging = logmod.root

import pytest
import cmdline.errors
from cmdline.parsers.parser import CmdLineParser
from cmdline.parsers.result import ParseResult
from cmdline.registry import OptionRegistry
from cmdline.structs import Option, Parameter, ParserConfig

def _parser(*decls) -> CmdLineParser:
    registry = OptionRegistry()
    for x in decls:
        match x:
            case Option():
                registry.add_option(x)
            case Parameter():
                registry.add_parameter(x)

    return CmdLineParser(registry)

class TestNormalise:

    def test_passthrough(self):
        parser = CmdLineParser()
        assert(parser.normalise(["--name", "Rob", "file"]) == ["--name", "Rob", "file"])

    def test_long_assignment(self):
        parser = CmdLineParser()
        assert(parser.normalise(["--name=Rob"]) == ["--name", "Rob"])

    def test_short_assignment(self):
        parser = CmdLineParser()
        assert(parser.normalise(["-n=Rob"]) == ["-n", "Rob"])

    def test_splits_at_first_separator(self):
        parser = CmdLineParser()
        assert(parser.normalise(["--expr=a=b"]) == ["--expr", "a=b"])

    def test_trims_both_sides(self):
        parser = CmdLineParser()
        assert(parser.normalise(["--name = Rob "]) == ["--name", "Rob"])

    def test_positional_not_split(self):
        parser = CmdLineParser()
        assert(parser.normalise(["key=val"]) == ["key=val"])

    def test_ignored_not_split(self):
        parser = CmdLineParser()
        assert(parser.normalise(["--spring.output.ansi.enabled=always"]) == ["--spring.output.ansi.enabled=always"])

    def test_custom_separator(self):
        parser = CmdLineParser(config=ParserConfig(separator=":"))
        assert(parser.normalise(["--name:Rob", "--other=val"]) == ["--name", "Rob", "--other=val"])

class TestLongOptions:

    def test_initial(self):
        parser = CmdLineParser()
        result = parser.parse([])
        assert(isinstance(result, ParseResult))
        assert(result.parameter_values == [])

    def test_long_with_value(self):
        parser = _parser(Option(name="name", requires_value=True, required=True))
        result = parser.parse(["--name", "Rob"])
        assert(result.has_value("name"))
        assert(result.get_value("name") == "Rob")
        assert(result.get_short_value("n") == "Rob")

    def test_long_assignment_matches_separate(self):
        first  = _parser(Option(name="name", requires_value=True)).parse(["--name=Rob"])
        second = _parser(Option(name="name", requires_value=True)).parse(["--name", "Rob"])
        assert(first.get_values("name") == second.get_values("name") == ["Rob"])
        assert(first.parameter_values == second.parameter_values == [])

    def test_long_missing_value(self):
        parser = _parser(Option(name="name", requires_value=True, required=True))
        with pytest.raises(cmdline.errors.MissingValueError):
            parser.parse(["--name"])

    def test_long_followed_by_option(self):
        parser = _parser(Option(name="name", requires_value=True, required=True))
        with pytest.raises(cmdline.errors.MissingValueError):
            parser.parse(["--name", "--Rob"])

    @pytest.mark.parametrize("value", ["-x", "?", "?help", "--"])
    def test_long_value_looks_like_option(self, value):
        parser = _parser(Option(name="name", requires_value=True))
        with pytest.raises(cmdline.errors.MissingValueError):
            parser.parse(["--name", value])

    def test_long_bool_records_own_name(self):
        parser = _parser(Option(name="name", required=True))
        result = parser.parse(["--name"])
        assert(result.has_value("name"))
        assert(result.get_value("name") == "name")

    def test_long_unknown(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.UnknownOptionError):
            parser.parse(["--blah"])

    def test_bare_double_dash_is_unknown(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.UnknownOptionError):
            parser.parse(["--"])

    def test_multiple_values(self):
        parser = _parser(Option(name="name", multiple=True, requires_value=True, required=True))
        result = parser.parse(["--name", "Rob", "--name", "Phil"])
        assert(result.get_values("name") == ["Rob", "Phil"])
        assert(result.get_value("name") == "Rob")

    def test_repeat_of_single_option_still_appends(self):
        parser = _parser(Option(name="name", requires_value=True))
        result = parser.parse(["--name", "Rob", "--name", "Phil"])
        assert(result.get_value("name") == "Rob")
        assert(result.get_values("name") == ["Rob", "Phil"])

    def test_value_with_slash_is_consumed(self):
        parser = _parser(Option(name="out", requires_value=True))
        result = parser.parse(["--out", "/tmp/blah"])
        assert(result.get_value("out") == "/tmp/blah")
        assert(result.parameter_values == [])

class TestShortOptions:

    def test_short_with_value(self):
        parser = _parser(Option(name="name", requires_value=True, required=True))
        result = parser.parse(["-n", "Rob"])
        assert(result.has_value("name"))
        assert(result.get_value("name") == "Rob")
        assert(result.has_short_value("n"))
        assert(result.get_short_value("n") == "Rob")

    def test_short_bool_records_char(self):
        parser = _parser(Option(name="name", required=True))
        result = parser.parse(["-n"])
        assert(result.get_value("name") == "n")

    @pytest.mark.parametrize("bundle", ["-ab", "-ba"])
    def test_bundle(self, bundle):
        parser = _parser(Option(name="airplane", required=True),
                         Option(name="building", required=True))
        result = parser.parse([bundle])
        assert(result.has_value("airplane"))
        assert(result.has_value("building"))
        assert(result.has_short_value("a"))
        assert(result.has_short_value("b"))
        assert(result.get_value("airplane") == "a")
        assert(result.get_value("building") == "b")

    def test_bundle_value_last(self):
        parser = _parser(Option(name="airplane", short="a", required=True),
                         Option(name="building", short="b", requires_value=True, required=True))
        result = parser.parse(["-ab", "bonzo"])
        assert(result.get_value("airplane") == "a")
        assert(result.get_value("building") == "bonzo")
        assert(result.get_short_value("b") == "bonzo")
        assert(result.parameter_values == [])

    def test_bundle_value_not_last(self):
        parser = _parser(Option(name="airplane", short="a", requires_value=True, required=True),
                         Option(name="building", short="b", required=True))
        with pytest.raises(cmdline.errors.OrderingError):
            parser.parse(["-ab", "bonzo"])

    def test_short_missing_value(self):
        parser = _parser(Option(name="name", requires_value=True))
        with pytest.raises(cmdline.errors.MissingValueError):
            parser.parse(["-n"])

    def test_short_unknown(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.UnknownOptionError, match="-x"):
            parser.parse(["-nx"])

    def test_slash_prefix(self):
        parser = _parser(Option(name="all"))
        result = parser.parse(["/a"])
        assert(result.get_value("all") == "a")

    def test_no_short_alias(self):
        parser = _parser(Option(name="name", short=None))
        with pytest.raises(cmdline.errors.UnknownOptionError):
            parser.parse(["-n"])

    def test_lone_dash_before_parameters(self):
        parser = _parser(Option(name="name"))
        result = parser.parse(["-", "blah"])
        assert(not result.has_value("name"))
        assert(result.parameter_values == ["blah"])

    def test_lone_dash_after_parameter(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.OrderingError):
            parser.parse(["blah", "-"])

class TestParameters:

    def test_unnamed_parameters(self):
        parser = CmdLineParser()
        result = parser.parse(["Big", "Bad", "Bug"])
        assert(result.parameter_values == ["Big", "Bad", "Bug"])

    def test_options_then_parameters(self):
        parser = _parser(Option(name="name", requires_value=True), Parameter(name="file"))
        result = parser.parse(["--name", "Rob", "blah.txt", "extra"])
        assert(result.get_value("name") == "Rob")
        assert(result.get_value("file") == "blah.txt")
        assert(result.parameter_values == ["blah.txt", "extra"])

    def test_option_after_parameter(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.OrderingError):
            parser.parse(["Rob", "-name"])

    def test_long_option_after_parameter(self):
        parser = _parser(Option(name="name"))
        with pytest.raises(cmdline.errors.OrderingError):
            parser.parse(["Rob", "--name"])

    def test_missing_required_parameter(self):
        parser = _parser(Parameter(name="parameter-1", required=True))
        with pytest.raises(cmdline.errors.MissingRequiredParameterError):
            parser.parse([])

    def test_first_missing_required_parameter_reported(self):
        parser = _parser(Parameter(name="first", required=True),
                         Parameter(name="second", required=True),
                         Parameter(name="third"))
        with pytest.raises(cmdline.errors.MissingRequiredParameterError, match="second"):
            parser.parse(["blah"])

    def test_optional_parameter_may_be_missing(self):
        parser = _parser(Parameter(name="first", required=True), Parameter(name="second"))
        result = parser.parse(["blah"])
        assert(result.get_value("first") == "blah")
        assert(not result.has_value("second"))

class TestParserChecks:

    def test_missing_required_option(self):
        parser = _parser(Option(name="name", requires_value=True, required=True))
        with pytest.raises(cmdline.errors.MissingRequiredOptionError, match="name"):
            parser.parse([])

    def test_duplicates_fail_at_parse(self):
        parser = _parser(Option(name="duplicate"), Option(name="duplicate"))
        with pytest.raises(cmdline.errors.DuplicateNameError):
            parser.parse([])

    def test_required_after_optional_fails_at_parse(self):
        parser = _parser(Parameter(name="parameter-1"), Parameter(name="parameter-2", required=True))
        with pytest.raises(cmdline.errors.OrderingError):
            parser.parse([])

    def test_ignored_assignment(self):
        parser = CmdLineParser()
        result = parser.parse(["--spring.output.ansi.enabled=always"])
        assert(result.parameter_values == [])

    def test_ignored_flag_consumes_nothing(self):
        parser = CmdLineParser()
        result = parser.parse(["--spring.output.ansi.enabled", "blah"])
        assert(result.parameter_values == ["blah"])

    def test_ignored_after_parameter(self):
        parser = CmdLineParser()
        result = parser.parse(["blah", "--spring.output.ansi.enabled=always"])
        assert(result.parameter_values == ["blah"])

    def test_custom_ignored(self):
        registry = OptionRegistry()
        parser   = CmdLineParser(registry, config=ParserConfig(ignored=["injected"]))
        result   = parser.parse(["--injected=val", "blah"])
        assert(result.parameter_values == ["blah"])

    def test_reparse_starts_empty(self):
        parser = _parser(Option(name="name", requires_value=True, multiple=True))
        first  = parser.parse(["--name", "Rob", "a"])
        second = parser.parse(["--name", "Phil"])
        assert(first.get_values("name") == ["Rob"])
        assert(second.get_values("name") == ["Phil"])
        assert(second.parameter_values == [])

    def test_defaults_to_sys_argv(self, mocker):
        mocker.patch.object(sys, "argv", ["prog", "--name", "Rob", "blah"])
        parser = _parser(Option(name="name", requires_value=True))
        result = parser.parse()
        assert(result.get_value("name") == "Rob")
        assert(result.parameter_values == ["blah"])

    def test_fluent_registry(self):
        registry = OptionRegistry().add_option(Option(name="name"))
        parser   = CmdLineParser().options(registry)
        assert(parser.registry is registry)
        assert(parser.parse(["-n"]).has_value("name"))

    def test_validates_registry(self, mocker):
        registry = OptionRegistry()
        spy      = mocker.spy(registry, "validate")
        CmdLineParser(registry).parse([])
        spy.assert_called()

    def test_format_help(self):
        parser = _parser(Option(name="name", help="a name"))
        text   = parser.format_help("prog")
        assert("usage: prog" in text)
        assert("--name" in text)
