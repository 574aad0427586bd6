"""
Discover the remote-callable methods of registered RPC service classes.
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from service_docs.docs.annotations import ParameterDescriptor, ResultDescriptor
from service_docs.docs.introspection import MethodIntrospector
from service_docs.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "@"
SERVICE_NAME_ATTRIBUTE = "name"


@dataclass(frozen=True)
class ProcedureSet:
    """Service classes registered for one route"""

    procedures: Sequence[type]
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self):
        # Routes without an explicit delimiter pass None through
        if not self.delimiter:
            object.__setattr__(self, "delimiter", DEFAULT_DELIMITER)
        object.__setattr__(self, "procedures", tuple(self.procedures))


@dataclass(frozen=True)
class MethodMetadata:
    """Everything known about one public method of a service"""

    service_name: str
    delimiter: str
    method_name: str
    description: Optional[str] = None
    parameters: Tuple[ParameterDescriptor, ...] = field(default_factory=tuple)
    results: Tuple[ResultDescriptor, ...] = field(default_factory=tuple)

    @property
    def identifier(self) -> str:
        return f"{self.service_name}{self.delimiter}{self.method_name}"


def get_service_name(service: Any) -> str:
    """Read the exposed service name off a service class, not an instance."""
    if not inspect.isclass(service):
        raise ConfigurationError(service, "expected a class")

    name = getattr(service, SERVICE_NAME_ATTRIBUTE, None)
    if name is None:
        raise ConfigurationError(
            service, f"missing '{SERVICE_NAME_ATTRIBUTE}' class attribute"
        )
    if not isinstance(name, str) or not name:
        raise ConfigurationError(
            service,
            f"'{SERVICE_NAME_ATTRIBUTE}' must be a non-empty string",
            data={"value": repr(name)},
        )
    return name


def iter_public_methods(service: type) -> Iterator[Tuple[str, Any]]:
    """
    Yield ``(name, function)`` for every public method of a service class.

    The class's own methods come first in declaration order, followed by
    inherited ones. Private names, the constructor and dunders are skipped,
    and so are properties and plain data attributes.
    """
    seen = set()
    for klass in inspect.getmro(service):
        if klass is object:
            continue
        for attr_name, attr in vars(klass).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            if attr_name.startswith("_"):
                continue
            if isinstance(attr, (staticmethod, classmethod)):
                attr = attr.__func__
            if not inspect.isfunction(attr):
                continue
            yield attr_name, attr


class ServiceScanner:
    """Walks a procedure set and introspects every public method"""

    def __init__(self, introspector: Optional[MethodIntrospector] = None):
        self.introspector = introspector or MethodIntrospector()

    def scan(self, procedure_set: ProcedureSet) -> List[MethodMetadata]:
        # Resolve every name first so a misconfigured class fails the whole scan.
        services = [
            (get_service_name(service), service)
            for service in procedure_set.procedures
        ]

        methods: List[MethodMetadata] = []
        for service_name, service in services:
            found = 0
            for method_name, func in iter_public_methods(service):
                info = self.introspector.introspect(func)
                methods.append(
                    MethodMetadata(
                        service_name=service_name,
                        delimiter=procedure_set.delimiter,
                        method_name=method_name,
                        description=info.description,
                        parameters=tuple(info.parameters),
                        results=tuple(info.results),
                    )
                )
                found += 1
            logger.debug(
                "Scanned service %s (%s): %d public methods",
                service_name,
                service.__qualname__,
                found,
            )

        return methods
