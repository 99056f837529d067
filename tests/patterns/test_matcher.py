"""
Tests for ordered template matching.
"""

from pathwright.patterns import compile_template, match_first, match_all


class TestMatchFirst:
    """First-match-wins in the order templates are given."""

    def test_first_registered_wins(self):
        broad = compile_template("/items/{s:key}", name="broad")
        narrow = compile_template("/items/new", name="narrow")
        assert match_first([broad, narrow], "/items/new").template is broad
        assert match_first([narrow, broad], "/items/new").template is narrow

    def test_no_match(self):
        assert match_first([compile_template("/a")], "/b") is None

    def test_empty(self):
        assert match_first([], "/") is None


class TestMatchAll:

    def test_all_in_order(self):
        templates = [
            compile_template("/items/{s:key}", name="a"),
            compile_template("/items/{i:id}", name="b"),
            compile_template("/other", name="c"),
        ]
        names = [m.template.name for m in match_all(templates, "/items/42")]
        assert names == ["a", "b"]
