import html
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from service_docs.docs.highlight import DEFAULT_COLORS, ExampleRenderer, RenderedText
from service_docs.docs.scanner import MethodMetadata, ProcedureSet, ServiceScanner
from service_docs.models import JSONRPC_VERSION

logger = logging.getLogger(__name__)

TRANSPORT = "POST"
ENVELOPE = "JSON-RPC-2.0"
CONTENT_TYPE = "application/json"
SMD_VERSION = "2.0"


class DescriptorDocumentBuilder:
    """Folds scanned methods into a Service Mapping Description document"""

    def build_service(self, method: MethodMetadata) -> Dict[str, Any]:
        return {
            "envelope": ENVELOPE,
            "transport": TRANSPORT,
            "name": method.identifier,
            "parameters": [p.to_dict() for p in method.parameters],
            "returns": [r.to_dict() for r in method.results],
        }

    def build(
        self,
        methods: Sequence[MethodMetadata],
        target: str,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        services: Dict[str, Any] = {}
        for method in methods:
            if method.identifier in services:
                logger.warning(
                    "Duplicate RPC method %s, keeping the last declaration",
                    method.identifier,
                )
            services[method.identifier] = self.build_service(method)

        return {
            "transport": TRANSPORT,
            "envelope": ENVELOPE,
            "contentType": CONTENT_TYPE,
            "SMDVersion": SMD_VERSION,
            "description": description,
            "target": target,
            "services": services,
            # Older clients read "methods"; both keys carry the same mapping
            "methods": services,
        }


@dataclass(frozen=True)
class MethodDocumentation:
    """Documentation entry for a single method"""

    name: str
    delimiter: str
    method: str
    description: Optional[str]
    parameters: List[Dict[str, Any]]
    result: Any
    request: RenderedText
    response: RenderedText

    @property
    def identifier(self) -> str:
        return f"{self.name}{self.delimiter}{self.method}"

    def to_dict(self, colors: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        return {
            "name": self.name,
            "delimiter": self.delimiter,
            "method": self.method,
            "description": self.description or "",
            "parameters": self.parameters,
            "result": self.result,
            "request": self.request.to_html(colors),
            "response": self.response.to_html(colors),
        }


class DocumentationBuilder:
    """Builds the human-readable documentation entries for a route"""

    def __init__(
        self,
        scanner: Optional[ServiceScanner] = None,
        renderer: Optional[ExampleRenderer] = None,
    ):
        self.scanner = scanner or ServiceScanner()
        self.renderer = renderer or ExampleRenderer()

    def document(self, method: MethodMetadata) -> MethodDocumentation:
        example = self.renderer.render(method)
        return MethodDocumentation(
            name=method.service_name,
            delimiter=method.delimiter,
            method=method.method_name,
            description=method.description,
            parameters=[p.to_dict() for p in method.parameters],
            result=example.response["result"],
            request=example.request_text,
            response=example.response_text,
        )

    def build(self, procedure_set: ProcedureSet) -> List[MethodDocumentation]:
        return [self.document(method) for method in self.scanner.scan(procedure_set)]


def build_descriptor(
    procedure_set: ProcedureSet,
    target: str,
    merge_data: Optional[Mapping[str, Any]] = None,
    scanner: Optional[ServiceScanner] = None,
) -> Dict[str, Any]:
    """Scan a procedure set and return its descriptor document."""
    methods = (scanner or ServiceScanner()).scan(procedure_set)
    document = DescriptorDocumentBuilder().build(methods, target)
    if merge_data:
        document.update(merge_data)
    return document


def render_documentation_page(
    title: str,
    uri: str,
    entries: Sequence[MethodDocumentation],
    colors: Optional[Mapping[str, str]] = None,
    merge_data: Optional[Mapping[str, Any]] = None,
    template: Optional[str] = None,
) -> str:
    """
    Render the documentation entries into a standalone HTML page.

    ``merge_data`` fills template placeholders. The default template offers
    ``head`` (markup appended to ``<head>``) and ``footer`` (markup appended
    to ``<body>``) for extra content, and any built-in value such as
    ``title`` can be overridden. A custom ``template`` may use its own
    placeholders, filled from the same mapping. Values are inserted as-is.
    """
    from .templates import get_html_template, render_method_card
    from .styles import get_page_styles

    palette = dict(DEFAULT_COLORS)
    if colors:
        palette.update(colors)

    context = {
        "title": html.escape(title),
        "uri": html.escape(uri),
        "jsonrpc": JSONRPC_VERSION,
        "styles": get_page_styles(),
        "methods": "\n".join(render_method_card(entry, palette) for entry in entries),
        # Machine-readable copy for scripts embedded by callers
        "methods_json": json.dumps(
            [entry.to_dict(palette) for entry in entries]
        ).replace("</", "<\\/"),
        "head": "",
        "footer": "",
    }
    if merge_data:
        context.update(merge_data)

    return (template or get_html_template()).format(**context)
