"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, auth, transport and response decoding
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions take a client, return models from ``rollbar_cli.schemas``
and raise ``rollbar_cli.errors`` exceptions; they never print.
"""
