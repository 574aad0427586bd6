"""
HTML templates for the documentation system.
"""

import html
from typing import Mapping

from service_docs.docs.generator import MethodDocumentation


def get_html_template() -> str:
    """Get the main HTML template structure"""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{styles}</style>
{head}
</head>
<body>
    <header class="header">
        <div class="header-content">
            <a href="#" class="logo">{title}</a>
            <div class="header-info">
                <span class="badge">JSON-RPC {jsonrpc}</span>
                <span class="base-url">{uri}</span>
            </div>
        </div>
    </header>

    <main class="methods-container">
{methods}
    </main>

    <script type="application/json" id="methodsData">{methods_json}</script>
{footer}
</body>
</html>"""


def get_method_card_template() -> str:
    """Get the template of a single method card"""
    return """        <section class="method-card" id="{anchor}">
            <h2 class="method-name">{identifier}</h2>
            <p class="method-description">{description}</p>
            <table class="params-table">
                <thead><tr><th>Name</th><th>Type</th><th>Required</th><th>Default</th></tr></thead>
                <tbody>{parameters}</tbody>
            </table>
            <div class="example-grid">
                <div class="example-code">
                    <div class="example-label">Request</div>
                    <pre>{request}</pre>
                </div>
                <div class="example-code">
                    <div class="example-label">Response</div>
                    <pre>{response}</pre>
                </div>
            </div>
        </section>"""


def render_parameter_rows(parameters) -> str:
    if not parameters:
        return '<tr><td colspan="4" class="no-params">No parameters</td></tr>'

    rows = []
    for parameter in parameters:
        default = parameter.get("default", "")
        rows.append(
            "<tr><td><code>{name}</code></td><td>{type}</td><td>{required}</td><td>{default}</td></tr>".format(
                name=html.escape(str(parameter["name"])),
                type=html.escape(str(parameter["type"])),
                required="no" if parameter.get("optional") else "yes",
                default=html.escape(str(default)) if "default" in parameter else "",
            )
        )
    return "".join(rows)


def render_method_card(entry: MethodDocumentation, colors: Mapping[str, str]) -> str:
    """Render one documented method as an HTML card"""
    return get_method_card_template().format(
        anchor=html.escape(entry.identifier, quote=True),
        identifier=html.escape(entry.identifier),
        description=html.escape(entry.description or ""),
        parameters=render_parameter_rows(entry.parameters),
        request=entry.request.to_html(colors),
        response=entry.response.to_html(colors),
    )
