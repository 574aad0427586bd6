"""
Example request/response rendering with syntax-highlighting spans.

Examples are serialized straight from the value tree into ``Span`` pairs of
``(text, token_class)``, so a token is classified by where it sits in the
structure and never by what its text looks like: the string ``"5"`` stays a
string. Joining the span texts gives exactly
``json.dumps(value, indent=2, ensure_ascii=False)``.
"""

import html
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from service_docs.docs.assembler import DescriptorAssembler
from service_docs.docs.scanner import MethodMetadata
from service_docs.exceptions import MergeAmbiguityError
from service_docs.models import JSONRPCRequest, JSONRPCResponse

logger = logging.getLogger(__name__)

KEY = "key"
STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
NULL = "null"

DEFAULT_COLORS: Dict[str, str] = {
    KEY: "#333333",
    STRING: "#dd1144",
    NUMBER: "#008080",
    BOOLEAN: "#999988",
    NULL: "#999988",
}

INDENT = 2
EXAMPLE_ID = 1


@dataclass(frozen=True)
class Span:
    text: str
    token_class: Optional[str] = None


@dataclass(frozen=True)
class RenderedText:
    """Serialized example as an ordered sequence of spans"""

    spans: Tuple[Span, ...]

    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    def to_html(self, colors: Optional[Mapping[str, str]] = None) -> str:
        """Escape the text and wrap classified tokens in colored spans."""
        palette = dict(DEFAULT_COLORS)
        if colors:
            palette.update(colors)

        parts = []
        for span in self.spans:
            text = html.escape(span.text)
            color = palette.get(span.token_class) if span.token_class else None
            if color:
                parts.append(f'<span style="color: {color}">{text}</span>')
            else:
                parts.append(text)
        return "".join(parts)

    def __str__(self) -> str:
        return self.plain()


def _scalar(value: Any, as_key: bool = False) -> Span:
    if as_key:
        return Span(json.dumps(str(value), ensure_ascii=False), KEY)
    if value is None:
        return Span("null", NULL)
    if isinstance(value, bool):
        return Span("true" if value else "false", BOOLEAN)
    if isinstance(value, (int, float)):
        return Span(json.dumps(value), NUMBER)
    if isinstance(value, str):
        return Span(json.dumps(value, ensure_ascii=False), STRING)
    # Anything else goes through its JSON form as an opaque string
    return Span(json.dumps(str(value), ensure_ascii=False), STRING)


def _spans(value: Any, level: int) -> Iterator[Span]:
    if isinstance(value, Mapping):
        if not value:
            yield Span("{}")
            return
        inner = "\n" + " " * (INDENT * (level + 1))
        yield Span("{")
        for position, (key, item) in enumerate(value.items()):
            yield Span(("," if position else "") + inner)
            yield _scalar(key, as_key=True)
            yield Span(": ")
            yield from _spans(item, level + 1)
        yield Span("\n" + " " * (INDENT * level) + "}")
        return

    if isinstance(value, (list, tuple)):
        if not value:
            yield Span("[]")
            return
        inner = "\n" + " " * (INDENT * (level + 1))
        yield Span("[")
        for position, item in enumerate(value):
            yield Span(("," if position else "") + inner)
            yield from _spans(item, level + 1)
        yield Span("\n" + " " * (INDENT * level) + "]")
        return

    yield _scalar(value)


def highlight(value: Any) -> RenderedText:
    """Serialize a JSON-compatible value into highlighted spans."""
    merged: List[Span] = []
    for span in _spans(value, 0):
        # Adjacent punctuation collapses into one span
        if merged and span.token_class is None and merged[-1].token_class is None:
            merged[-1] = Span(merged[-1].text + span.text)
        else:
            merged.append(span)
    return RenderedText(spans=tuple(merged))


def flatten(entries: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Map raw names to values without nesting.

    Repeated ``name.`` entries collect into a list under the raw name, so the
    fallback keeps every declared value.
    """
    flat: Dict[str, Any] = {}
    for name, value in entries:
        if name.endswith("."):
            flat.setdefault(name, []).append(value)
        else:
            flat[name] = value
    return flat


@dataclass(frozen=True)
class RenderedExample:
    request: Dict[str, Any]
    response: Dict[str, Any]
    request_text: RenderedText
    response_text: RenderedText


class ExampleRenderer:
    """Builds and highlights canonical JSON-RPC examples for a method"""

    def __init__(self, assembler: Optional[DescriptorAssembler] = None):
        self.assembler = assembler or DescriptorAssembler()

    def build_params(self, method: MethodMetadata) -> Dict[str, Any]:
        entries = [(p.name, p.type) for p in method.parameters]
        return self._assemble(method, entries)

    def build_result(self, method: MethodMetadata) -> Any:
        named = [(r.name, r.type) for r in method.results if r.name is not None]
        if named:
            return self._assemble(method, named)
        if method.results:
            return method.results[0].type
        return None

    def request_example(self, method: MethodMetadata) -> Dict[str, Any]:
        request = JSONRPCRequest(
            id=EXAMPLE_ID,
            method=method.identifier,
            params=self.build_params(method),
        )
        return request.model_dump()

    def response_example(self, method: MethodMetadata) -> Dict[str, Any]:
        response = JSONRPCResponse(id=EXAMPLE_ID, result=self.build_result(method))
        return response.model_dump()

    def render(self, method: MethodMetadata) -> RenderedExample:
        request = self.request_example(method)
        response = self.response_example(method)
        return RenderedExample(
            request=request,
            response=response,
            request_text=highlight(request),
            response_text=highlight(response),
        )

    def _assemble(self, method: MethodMetadata, entries: List[Tuple[str, Any]]):
        try:
            return self.assembler.assemble(entries)
        except MergeAmbiguityError as exc:
            logger.warning(
                "%s in %s; example falls back to flat names",
                exc.message,
                method.identifier,
            )
            return flatten(entries)
