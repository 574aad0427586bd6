import logging

import pytest

from service_docs.docs.annotations import param, result
from service_docs.docs.introspection import MethodIntrospector, parse_summary
from service_docs.exceptions import MetadataParseError


class TestParseSummary:
    def test_single_line(self):
        assert parse_summary("Add two integers.") == "Add two integers."

    def test_stops_at_blank_line(self):
        doc = """
        Add two integers

        Both operands must be ints.
        """
        assert parse_summary(doc) == "Add two integers"

    def test_stops_at_line_ending_with_period(self):
        doc = """Add two integers.
        Both operands must be ints.
        """
        assert parse_summary(doc) == "Add two integers."

    def test_joins_wrapped_summary_lines(self):
        doc = """Add two integers
        and return their sum.

        Details.
        """
        assert parse_summary(doc) == "Add two integers and return their sum."

    def test_missing_docstring_is_none(self):
        assert parse_summary(None) is None

    def test_blank_docstring_is_none(self):
        assert parse_summary("   \n  ") is None

    def test_non_text_docstring_raises(self):
        with pytest.raises(MetadataParseError):
            parse_summary(42, "Service.method")


class TestMethodIntrospector:
    def test_reads_description_parameters_and_results(self):
        @param("a", "int")
        @param("b", "int", optional=True, default=0)
        @result("int", example=5)
        def method(self, a, b=0):
            """Add numbers."""

        info = MethodIntrospector().introspect(method)

        assert info.description == "Add numbers."
        assert [p.to_dict() for p in info.parameters] == [
            {"name": "a", "type": "int"},
            {"name": "b", "type": "int", "optional": True, "default": 0},
        ]
        assert [r.to_dict() for r in info.results] == [{"type": "int", "example": 5}]

    def test_method_without_metadata(self):
        def method(self):
            pass

        info = MethodIntrospector().introspect(method)

        assert info.description is None
        assert info.parameters == []
        assert info.results == []

    def test_unparseable_docstring_degrades_to_empty_description(self, caplog):
        def method(self):
            pass

        method.__doc__ = b"bytes are not text"

        with caplog.at_level(logging.WARNING, logger="service_docs.docs.introspection"):
            info = MethodIntrospector().introspect(method)

        assert info.description is None
        assert "Cannot parse documentation" in caplog.text

    def test_unwraps_staticmethod(self):
        @param("x", "int")
        def func(x):
            """Static helper."""

        info = MethodIntrospector().introspect(staticmethod(func))

        assert info.description == "Static helper."
        assert [p.name for p in info.parameters] == ["x"]
