"""
Decorators that attach parameter and result metadata to RPC service methods.

The metadata is stored on the function object itself, so it can be read off
the class declaration without instantiating the service:

    class MathService:
        name = "Math"

        @param("a", "int")
        @param("b", "int")
        @result("int", example=5)
        def sum(self, a, b):
            \"\"\"Add two integers.\"\"\"
            return a + b

Stacked decorators keep the order in which they are written, top to bottom.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from fastapi.encoders import jsonable_encoder

PARAMS_ATTRIBUTE = "_rpc_params"
RESULTS_ATTRIBUTE = "_rpc_results"


class _Missing:
    """Marker for a metadata field that was never declared."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def to_json_value(value: Any) -> Any:
    """Convert a declared default or example into a JSON-encodable value."""
    try:
        # dates become ISO strings, Decimals numbers, enums their values
        return jsonable_encoder(value)
    except (TypeError, ValueError):
        return str(value)


@dataclass(frozen=True)
class ParameterDescriptor:
    """Declared input parameter of an RPC method"""

    name: str
    type: str
    optional: bool = False
    default: Any = MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.optional:
            result["optional"] = True
        if self.has_default:
            result["default"] = to_json_value(self.default)
        return result


@dataclass(frozen=True)
class ResultDescriptor:
    """One declared facet of an RPC method's return value"""

    type: str
    example: Any = MISSING
    name: Optional[str] = None

    @property
    def has_example(self) -> bool:
        return self.example is not MISSING

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"type": self.type}
        if self.has_example:
            result["example"] = to_json_value(self.example)
        if self.name is not None:
            result["name"] = self.name
        return result


def _attach(func: Callable, attribute: str, descriptor: Any) -> None:
    # Decorators run bottom-up, so prepend to keep reading order.
    target = func.__func__ if isinstance(func, (staticmethod, classmethod)) else func
    existing: List[Any] = list(getattr(target, attribute, ()))
    setattr(target, attribute, [descriptor] + existing)


def param(
    name: str,
    type: str,
    *,
    optional: bool = False,
    default: Any = MISSING,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Declare one input parameter of an RPC method.

    Args:
        name: Parameter name. Dotted names (``filter.status``) describe nested
            fields, a trailing dot (``tags.``) describes a repeated value.
        type: Type label shown to clients (``int``, ``string``, ...)
        optional: Whether the caller may omit the parameter
        default: Default value; leave unset when there is none
    """
    descriptor = ParameterDescriptor(
        name=name, type=type, optional=optional, default=default
    )

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        _attach(func, PARAMS_ATTRIBUTE, descriptor)
        return func

    return decorator


def result(
    type: str,
    *,
    example: Any = MISSING,
    name: Optional[str] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Declare one facet of an RPC method's return value.

    Args:
        type: Type label of the returned value or field
        example: Example value; leave unset when there is none
        name: Dotted field name when describing a returned object field by field
    """
    descriptor = ResultDescriptor(type=type, example=example, name=name)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        _attach(func, RESULTS_ATTRIBUTE, descriptor)
        return func

    return decorator


def get_parameters(func: Callable[..., Any]) -> List[ParameterDescriptor]:
    return list(getattr(func, PARAMS_ATTRIBUTE, ()))


def get_results(func: Callable[..., Any]) -> List[ResultDescriptor]:
    return list(getattr(func, RESULTS_ATTRIBUTE, ()))
