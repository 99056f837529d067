"""
Tests for the route registry and route tables.
"""

import json

import pytest

from pathwright.routing import RouteRegistry, load_routes, read_route_table, normalize_methods
from pathwright.faults import (
    ConfigInvalidFault,
    DuplicateRouteNameFault,
    InvalidMethodFault,
    PatternInvalidFault,
    RegistryFrozenFault,
)


class TestNormalizeMethods:

    def test_pipe_separated(self):
        assert normalize_methods("get|Post") == ["GET", "POST"]

    def test_iterable_and_dedup(self):
        assert normalize_methods(["GET", "get", " HEAD "]) == ["GET", "HEAD"]

    def test_unsupported(self):
        with pytest.raises(InvalidMethodFault) as exc_info:
            normalize_methods("GET|FETCH")
        assert exc_info.value.metadata["method"] == "FETCH"

    def test_empty(self):
        with pytest.raises(InvalidMethodFault):
            normalize_methods([])


class TestRegister:
    """Test route registration."""

    def test_register_under_each_method(self, registry):
        assert "user_show" in registry.routes_for_method("GET")
        assert "user_show" in registry.routes_for_method("head")
        assert registry.methods_for("user_show") == ["GET", "HEAD"]

    def test_returns_compiled_template(self):
        reg = RouteRegistry()
        template = reg.register("GET", "/a/{i:id}", "a.py", "a")
        assert template.name == "a"
        assert reg.find("a") is template

    def test_duplicate_name_same_method(self, registry):
        with pytest.raises(DuplicateRouteNameFault):
            registry.register("GET", "/other", "o.py", "home")

    def test_duplicate_name_across_methods(self):
        reg = RouteRegistry()
        reg.register("GET", "/a", "a.py", "a")
        with pytest.raises(DuplicateRouteNameFault) as exc_info:
            reg.register("POST", "/b", "b.py", "a")
        assert exc_info.value.metadata["methods"] == ["GET"]

    def test_invalid_template_leaves_registry_unchanged(self):
        reg = RouteRegistry()
        with pytest.raises(PatternInvalidFault):
            reg.register("GET", "/{x:bad}", "x.py", "bad")
        assert len(reg) == 0
        assert reg.methods() == []

    def test_invalid_method(self):
        with pytest.raises(InvalidMethodFault):
            RouteRegistry().register("BREW", "/coffee", None, "coffee")

    def test_frozen_refuses(self, registry):
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenFault):
            registry.register("GET", "/late", "late.py", "late")

    def test_routes_for_unknown_method_is_empty(self, registry):
        assert len(registry.routes_for_method("DELETE")) == 0

    def test_routes_view_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.routes_for_method("GET")["x"] = None

    def test_registration_order_kept(self, registry):
        assert list(registry.routes_for_method("GET")) == ["home", "user_show", "post_show", "price", "flag"]
        assert registry.names() == ["home", "user_show", "post_show", "price", "flag"]

    def test_container_protocol(self, registry):
        assert len(registry) == 5
        assert "flag" in registry
        assert [t.name for t in registry][0] == "home"
        assert "routes=5" in repr(registry)


class TestRouteTables:
    """Test loading route tables from mappings and files."""

    def test_load_from_yaml_file(self, routes_file):
        reg = RouteRegistry()
        loaded = load_routes(reg, routes_file)
        assert [t.name for t in loaded] == ["home", "user_show", "post_show", "price"]
        assert reg.methods_for("user_show") == ["GET", "HEAD"]
        assert reg.methods_for("post_show") == ["GET"]

    def test_load_from_json_file(self, tmp_path):
        path = tmp_path / "routes.json"
        path.write_text(json.dumps({"routes": [{"name": "a", "template": "/a", "endpoint": "a.py"}]}))
        reg = RouteRegistry()
        load_routes(reg, str(path))
        assert reg.find("a").endpoint == "a.py"

    def test_load_from_mapping(self):
        reg = RouteRegistry()
        load_routes(reg, {"routes": [{"name": "a", "methods": "POST", "template": "/a"}]})
        assert reg.methods_for("a") == ["POST"]
        assert reg.find("a").endpoint is None

    def test_missing_key(self):
        with pytest.raises(ConfigInvalidFault, match=r"routes\[0\]\.template"):
            load_routes(RouteRegistry(), {"routes": [{"name": "a"}]})

    def test_routes_not_a_list(self):
        with pytest.raises(ConfigInvalidFault):
            load_routes(RouteRegistry(), {"routes": {"name": "a"}})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigInvalidFault):
            read_route_table(tmp_path / "nope.yaml")

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- name: a\n  template: /a\n")
        with pytest.raises(ConfigInvalidFault, match="must be a mapping"):
            load_routes(RouteRegistry(), path)

    def test_unparsable_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigInvalidFault, match="could not be parsed"):
            read_route_table(path)

    def test_null_methods(self):
        with pytest.raises(ConfigInvalidFault, match=r"routes\[0\]\.methods"):
            load_routes(RouteRegistry(), {"routes": [{"name": "a", "methods": None, "template": "/a"}]})

    def test_non_string_template(self):
        with pytest.raises(ConfigInvalidFault, match=r"routes\[0\]\.template"):
            load_routes(RouteRegistry(), {"routes": [{"name": "a", "template": 5}]})

    def test_non_string_method_token(self):
        with pytest.raises(InvalidMethodFault):
            load_routes(RouteRegistry(), {"routes": [{"name": "a", "methods": [1], "template": "/a"}]})

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_route_table(path) == {}
