"""
Unit tests for the template compiler.

Tests cover:
- Matcher construction (escaping, case rules, trailing slash)
- Parameter extraction and decoding
- Generation with diagnostics
- Serialization
"""

import json
import logging
import sys

import pytest

from pathwright.patterns import (
    RouteTemplate,
    TemplateCompiler,
    TypedValue,
    compile_template,
    parse_template,
)
from pathwright.faults import (
    InvalidParameterTypeFault,
    MissingParametersFault,
    ParameterParseFault,
    UnknownParameterFault,
)


class TestCompile:
    """Test compilation of templates."""

    def test_compile_from_ast(self):
        template = TemplateCompiler().compile(parse_template("/users/{i:id}"), endpoint="users.py", name="user")
        assert isinstance(template, RouteTemplate)
        assert template.name == "user"
        assert template.endpoint == "users.py"
        assert dict(template.parameters) == {"id": template.parameters["id"]}

    def test_name_defaults_to_raw(self):
        assert compile_template("/about").name == "/about"

    def test_parameters_are_read_only(self):
        template = compile_template("/users/{i:id}")
        with pytest.raises(TypeError):
            template.parameters["x"] = None

    def test_one_group_per_parameter(self):
        template = compile_template("/p/{f:price}/{b:on}/{s:slug}")
        assert template.pattern.groups == 3


class TestMatching:
    """Test matcher behaviour."""

    def test_literal_case_insensitive(self):
        template = compile_template("/users/{i:id}")
        assert template.matches("/Users/5")
        assert template.matches("/USERS/5")

    def test_boolean_fragment_case_sensitive(self):
        template = compile_template("/flag/{b:on}")
        assert template.matches("/flag/true")
        assert not template.matches("/flag/TRUE")

    def test_literal_metacharacters_escaped(self):
        template = compile_template("/robots.txt")
        assert template.matches("/robots.txt")
        assert not template.matches("/robotsXtxt")

    def test_trailing_slash_optional(self):
        with_slash = compile_template("/a/")
        without = compile_template("/a")
        assert with_slash.matches("/a")
        assert with_slash.matches("/a/")
        assert without.matches("/a")
        assert not without.matches("/a/")

    def test_anchored(self):
        template = compile_template("/users/{i:id}")
        assert not template.matches("/users/5/extra")
        assert not template.matches("/api/users/5")

    def test_type_mismatch_is_no_match(self):
        template = compile_template("/users/{i:id}")
        assert template.match("/users/abc") is None

    def test_float_fraction(self):
        template = compile_template("/prices/{f:amount}")
        assert template.extract_parameters("/prices/3.50") == {"amount": "3.50"}
        assert template.extract_parameters("/prices/3.") == {}

    def test_string_percent_escapes(self):
        template = compile_template("/posts/{s:slug}")
        assert template.matches("/posts/hello%20world")
        assert not template.matches("/posts/hello world")
        assert not template.matches("/posts/a/b")


class TestExtraction:
    """Test extract and decode."""

    def test_extract_keys_equal_parameters(self):
        template = compile_template("/u/{i:id}/p/{s:slug}")
        params = template.extract_parameters("/u/12/p/hello")
        assert params == {"id": "12", "slug": "hello"}
        assert set(params) == set(template.parameters)

    def test_extract_no_match_is_empty(self):
        assert compile_template("/u/{i:id}").extract_parameters("/x") == {}

    def test_decode(self):
        template = compile_template("/u/{i:id}/{b:on}/{f:w}/{s:q}")
        match = template.match("/u/7/true/1.5/a%2Fb")
        assert match.decode() == {"id": 7, "on": True, "w": 1.5, "q": "a/b"}

    def test_decode_failure_names_parameter(self):
        template = compile_template("/p/{f:amount}", name="price")
        raw = template.extract_parameters("/p/" + "9" * 400)
        with pytest.raises(ParameterParseFault) as exc_info:
            template.decode_parameters(raw)
        assert exc_info.value.metadata["param_name"] == "amount"
        assert exc_info.value.metadata["route"] == "price"

    def test_decode_missing_raw(self):
        template = compile_template("/p/{i:id}")
        with pytest.raises(MissingParametersFault):
            template.decode_parameters({})

    def test_match_to_dict(self):
        match = compile_template("/p/{i:id}", name="p").match("/p/3")
        assert match.to_dict() == {"route": "p", "template": "/p/{i:id}", "params": {"id": "3"}}


class TestGeneration:
    """Test reverse generation."""

    def test_generate(self):
        template = compile_template("/users/{i:id}/posts/{s:slug}")
        assert template.generate({"id": 5, "slug": "a b"}) == "/users/5/posts/a%20b"

    def test_generate_keeps_trailing_slash(self):
        assert compile_template("/posts/{s:slug}/").generate({"slug": "x"}) == "/posts/x/"

    def test_generate_root(self):
        assert compile_template("/").generate() == "/"

    def test_generate_typed_values(self):
        template = compile_template("/f/{b:on}/{f:w}")
        path = template.generate({"on": TypedValue.boolean(False), "w": TypedValue.floating(0.25)})
        assert path == "/f/false/0.25"

    def test_missing_parameters(self):
        template = compile_template("/users/{i:id}")
        with pytest.raises(MissingParametersFault) as exc_info:
            template.generate({})
        assert exc_info.value.missing == ["id"]

    def test_invalid_type_not_substituted(self):
        template = compile_template("/p/{i:n}")
        result = template.build({"n": 3.5})
        assert result.path is None
        assert isinstance(result.diagnostics[0], InvalidParameterTypeFault)
        assert result.missing.missing == ["n"]

    def test_unknown_parameter_reported_and_ignored(self):
        template = compile_template("/p/{i:n}")
        result = template.build({"n": 1, "extra": "x"})
        assert result.ok
        assert result.path == "/p/1"
        assert isinstance(result.diagnostics[0], UnknownParameterFault)

    def test_lenient_logs_warning(self, caplog):
        template = compile_template("/p/{i:n}")
        with caplog.at_level(logging.WARNING, logger="pathwright.patterns"):
            assert template.generate({"n": 1, "extra": "x"}) == "/p/1"
        assert "Unknown parameter 'extra'" in caplog.text

    def test_strict_raises_first_diagnostic(self):
        template = compile_template("/p/{i:n}")
        with pytest.raises(UnknownParameterFault):
            template.generate({"n": 1, "extra": "x"}, strict=True)

    def test_bool_is_not_an_integer(self):
        result = compile_template("/p/{i:n}").build({"n": True})
        assert not result.ok
        assert result.diagnostics[0].metadata["actual_type"] == "bool"

    @pytest.mark.parametrize("raw,values", [
        ("/p/{i:n}", {"n": -1}),
        ("/p/{f:n}", {"n": -2.5}),
        ("/p/{s:n}", {"n": ""}),
    ], ids=["negative-int", "negative-float", "empty-string"])
    def test_unmatchable_values_reported(self, raw, values):
        result = compile_template(raw).build(values)
        assert not result.ok
        assert isinstance(result.diagnostics[0], InvalidParameterTypeFault)
        assert "outside the matchable range" in result.diagnostics[0].message

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int conversion limit")
    def test_int_beyond_conversion_limit_reported(self):
        result = compile_template("/p/{i:n}").build({"n": 10 ** 5000})
        assert not result.ok
        assert isinstance(result.diagnostics[0], InvalidParameterTypeFault)


class TestSerialization:
    """Test dict/JSON export."""

    def test_to_dict(self):
        template = compile_template("/u/{i:id}", endpoint="u.py", name="user")
        data = template.to_dict()
        assert data["name"] == "user"
        assert data["endpoint"] == "u.py"
        assert data["parameters"] == {"id": "integer"}

    def test_callable_endpoint(self):
        def show_user():
            pass

        data = compile_template("/u", endpoint=show_user).to_dict()
        assert data["endpoint"].endswith("show_user")

    def test_to_json(self):
        payload = json.loads(compile_template("/u/{s:slug}").to_json())
        assert payload["raw"] == "/u/{s:slug}"
