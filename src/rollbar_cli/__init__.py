"""rollbar-cli - query Rollbar error items and occurrences from the terminal.

Architecture::

    datasources/rollbar/   Rollbar read API (transport, endpoints, payload summary)
    services/              Shared utilities (HTTP session factory)
    schemas.py             Pydantic models the API responses are normalized to
    config.py              Settings from ROLLBAR_* environment variables
    cli.py                 argparse front end; every command prints JSON

Data flow: cli -> datasources (HTTP + envelope decoding) -> schemas -> JSON on stdout
"""

__version__ = "0.1.0"

from rollbar_cli.config import Settings  # noqa: E402
from rollbar_cli.schemas import Item, Occurrence, OccurrenceSummary  # noqa: E402

__all__ = ["Item", "Occurrence", "OccurrenceSummary", "Settings", "__version__"]
