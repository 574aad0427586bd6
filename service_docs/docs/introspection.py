"""
Read declared metadata off a single RPC method.
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from service_docs.docs.annotations import (
    ParameterDescriptor,
    ResultDescriptor,
    get_parameters,
    get_results,
)
from service_docs.exceptions import MetadataParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodIntrospection:
    """Metadata extracted from one method declaration"""

    description: Optional[str] = None
    parameters: List[ParameterDescriptor] = field(default_factory=list)
    results: List[ResultDescriptor] = field(default_factory=list)


def parse_summary(doc: Any, method_name: str = "<unknown>") -> Optional[str]:
    """
    Return the summary of a docstring.

    The summary runs until the first blank line or up to and including the
    first line that ends with a period. Lines are joined with single spaces.
    """
    if doc is None:
        return None
    if not isinstance(doc, str):
        raise MetadataParseError(method_name, data={"doc_type": type(doc).__name__})

    lines = []
    for line in inspect.cleandoc(doc).splitlines():
        line = line.strip()
        if not line:
            if lines:
                break
            continue
        lines.append(line)
        if line.endswith("."):
            break

    return " ".join(lines) or None


class MethodIntrospector:
    """Extracts description, parameters and results of one callable"""

    def introspect(self, func: Callable[..., Any]) -> MethodIntrospection:
        func = _unwrap(func)
        method_name = getattr(func, "__qualname__", repr(func))

        try:
            description = parse_summary(getattr(func, "__doc__", None), method_name)
        except MetadataParseError as exc:
            logger.warning("%s; description left empty", exc.message)
            description = None

        return MethodIntrospection(
            description=description,
            parameters=get_parameters(func),
            results=get_results(func),
        )


def _unwrap(func: Any) -> Any:
    if isinstance(func, (staticmethod, classmethod)):
        return func.__func__
    return func
