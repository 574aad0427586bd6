from .annotations import MISSING, ParameterDescriptor, ResultDescriptor, param, result
from .assembler import DescriptorAssembler, assemble
from .generator import (
    DescriptorDocumentBuilder,
    DocumentationBuilder,
    MethodDocumentation,
    build_descriptor,
    render_documentation_page,
)
from .highlight import DEFAULT_COLORS, ExampleRenderer, RenderedText, Span, highlight
from .introspection import MethodIntrospector, parse_summary
from .scanner import MethodMetadata, ProcedureSet, ServiceScanner


__all__ = [
    "MISSING",
    "ParameterDescriptor",
    "ResultDescriptor",
    "param",
    "result",
    "DescriptorAssembler",
    "assemble",
    "DescriptorDocumentBuilder",
    "DocumentationBuilder",
    "MethodDocumentation",
    "build_descriptor",
    "render_documentation_page",
    "DEFAULT_COLORS",
    "ExampleRenderer",
    "RenderedText",
    "Span",
    "highlight",
    "MethodIntrospector",
    "parse_summary",
    "MethodMetadata",
    "ProcedureSet",
    "ServiceScanner",
]
