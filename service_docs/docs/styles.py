"""
CSS styles for the documentation system.
"""


def get_page_styles() -> str:
    """Get the CSS styles of the documentation page"""
    return """
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        :root {
            --primary: #1a3851;
            --accent: #0ea5e9;
            --gray-50: #f9fafb;
            --gray-200: #e5e7eb;
            --gray-500: #6b7280;
            --gray-700: #374151;
            --radius: 8px;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            background: var(--gray-50);
            color: var(--gray-700);
            line-height: 1.5;
        }

        .header {
            background: var(--primary);
            color: #ffffff;
            padding: 1rem 2rem;
        }

        .header-content {
            display: flex;
            justify-content: space-between;
            align-items: center;
            max-width: 1200px;
            margin: 0 auto;
        }

        .logo {
            color: #ffffff;
            font-weight: 700;
            font-size: 1.25rem;
            text-decoration: none;
        }

        .badge {
            background: var(--accent);
            border-radius: var(--radius);
            padding: 0.125rem 0.5rem;
            margin-right: 0.75rem;
            font-size: 0.75rem;
        }

        .base-url {
            font-family: "SFMono-Regular", Consolas, monospace;
            font-size: 0.875rem;
        }

        .methods-container {
            max-width: 1200px;
            margin: 2rem auto;
            padding: 0 2rem;
        }

        .method-card {
            background: #ffffff;
            border: 1px solid var(--gray-200);
            border-radius: var(--radius);
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }

        .method-name {
            font-family: "SFMono-Regular", Consolas, monospace;
            font-size: 1.125rem;
            color: var(--primary);
        }

        .method-description {
            color: var(--gray-500);
            margin: 0.5rem 0 1rem;
        }

        .params-table {
            width: 100%;
            border-collapse: collapse;
            margin-bottom: 1rem;
        }

        .params-table th,
        .params-table td {
            text-align: left;
            padding: 0.5rem;
            border-bottom: 1px solid var(--gray-200);
            font-size: 0.875rem;
        }

        .no-params {
            color: var(--gray-500);
            font-style: italic;
        }

        .example-grid {
            display: grid;
            grid-template-columns: 1fr 1fr;
            gap: 1rem;
        }

        .example-label {
            font-size: 0.75rem;
            font-weight: 600;
            text-transform: uppercase;
            margin-bottom: 0.25rem;
        }

        .example-code pre {
            background: var(--gray-50);
            border: 1px solid var(--gray-200);
            border-radius: var(--radius);
            padding: 1rem;
            font-family: "SFMono-Regular", Consolas, monospace;
            font-size: 0.8125rem;
            white-space: pre-wrap;
            color: #000000;
        }

        @media (max-width: 768px) {
            .example-grid {
                grid-template-columns: 1fr;
            }
        }
    """
