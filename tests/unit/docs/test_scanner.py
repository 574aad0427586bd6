import pytest

from service_docs.docs.annotations import param, result
from service_docs.docs.scanner import (
    DEFAULT_DELIMITER,
    ProcedureSet,
    ServiceScanner,
    get_service_name,
    iter_public_methods,
)
from service_docs.exceptions import ConfigurationError


class MathService:
    name = "Math"

    def __init__(self, precision=2):
        self.precision = precision

    @param("a", "int")
    @param("b", "int")
    @result("int", example=5)
    def sum(self, a, b):
        """Add two integers."""
        return a + b

    def _round(self, value):
        return round(value, self.precision)

    @staticmethod
    def pi():
        return 3.14

    @classmethod
    def create(cls):
        return cls()

    @property
    def scale(self):
        return 10

    version = "1.0"


class ExtendedMath(MathService):
    name = "ExtMath"

    def product(self, a, b):
        return a * b


class EmptyService:
    name = "Empty"

    def __init__(self):
        pass


class UnnamedService:
    def method(self):
        pass


class TestGetServiceName:
    def test_reads_class_attribute(self):
        assert get_service_name(MathService) == "Math"

    def test_missing_name_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as excinfo:
            get_service_name(UnnamedService)

        assert "UnnamedService" in excinfo.value.message
        assert "'name'" in excinfo.value.message

    def test_non_string_name_is_configuration_error(self):
        class BadName:
            name = 42

        with pytest.raises(ConfigurationError):
            get_service_name(BadName)

    def test_empty_name_is_configuration_error(self):
        class BlankName:
            name = ""

        with pytest.raises(ConfigurationError):
            get_service_name(BlankName)

    def test_instance_is_rejected(self):
        with pytest.raises(ConfigurationError):
            get_service_name(MathService())


class TestIterPublicMethods:
    def test_declaration_order_without_private_or_constructor(self):
        names = [name for name, _ in iter_public_methods(MathService)]

        assert names == ["sum", "pi", "create"]

    def test_own_methods_before_inherited_ones(self):
        names = [name for name, _ in iter_public_methods(ExtendedMath)]

        assert names == ["product", "sum", "pi", "create"]

    def test_overridden_method_listed_once(self):
        class Override(MathService):
            def sum(self, a, b):
                return 0

        names = [name for name, _ in iter_public_methods(Override)]

        assert names.count("sum") == 1
        assert names[0] == "sum"

    def test_service_without_public_methods(self):
        assert list(iter_public_methods(EmptyService)) == []


class TestServiceScanner:
    def test_scans_in_registration_then_declaration_order(self):
        methods = ServiceScanner().scan(
            ProcedureSet(procedures=[ExtendedMath, MathService], delimiter=".")
        )

        assert [m.identifier for m in methods] == [
            "ExtMath.product",
            "ExtMath.sum",
            "ExtMath.pi",
            "ExtMath.create",
            "Math.sum",
            "Math.pi",
            "Math.create",
        ]

    def test_builds_method_metadata(self):
        (summed, *_rest) = ServiceScanner().scan(ProcedureSet(procedures=[MathService]))

        assert summed.service_name == "Math"
        assert summed.method_name == "sum"
        assert summed.delimiter == "@"
        assert summed.identifier == "Math@sum"
        assert summed.description == "Add two integers."
        assert [p.name for p in summed.parameters] == ["a", "b"]
        assert [r.example for r in summed.results] == [5]

    def test_delimiter_defaults_when_route_gives_none(self):
        procedure_set = ProcedureSet(procedures=[MathService], delimiter=None)

        assert procedure_set.delimiter == DEFAULT_DELIMITER

    def test_empty_service_contributes_nothing(self):
        methods = ServiceScanner().scan(ProcedureSet(procedures=[EmptyService]))

        assert methods == []

    def test_misconfigured_class_fails_the_whole_scan(self):
        with pytest.raises(ConfigurationError):
            ServiceScanner().scan(
                ProcedureSet(procedures=[MathService, UnnamedService])
            )

    def test_scanning_does_not_instantiate_services(self):
        class Exploding:
            name = "Boom"

            def __init__(self):
                raise AssertionError("service must not be instantiated")

            def method(self):
                raise AssertionError("method must not be called")

        methods = ServiceScanner().scan(ProcedureSet(procedures=[Exploding]))

        assert [m.identifier for m in methods] == ["Boom@method"]
