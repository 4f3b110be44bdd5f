"""
Domain models for rollbar-cli.

Pydantic models for Rollbar API responses and the views the CLI prints.
Wire records (``*Record``) mirror the API; ``Item`` and ``Occurrence`` are
the canonical shapes the data sources normalize them to.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(ts: int) -> str:
    """Render epoch seconds as a UTC date-time string, e.g. ``2024-01-02 03:04:05``."""
    return datetime.fromtimestamp(ts, tz=UTC).strftime(TIMESTAMP_FORMAT)


def _coerce_id(value: Any) -> Any:
    """Accept ``12345`` and ``"12345"`` alike; the API uses both."""
    if isinstance(value, bool):
        raise ValueError("identifier must be a number or a string")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return value


#: Identifier that decodes from a JSON number or string into a string.
ItemId = Annotated[str, BeforeValidator(_coerce_id)]


def _check_epoch(value: int) -> int:
    try:
        format_timestamp(value)
    except (ValueError, OverflowError, OSError) as exc:
        raise ValueError(f"timestamp {value} is out of range") from exc
    return value


#: Epoch seconds that can be rendered as a UTC date-time.
EpochSeconds = Annotated[int, AfterValidator(_check_epoch)]


# =============================================================================
# Wire records
# =============================================================================


class Envelope(BaseModel):
    """Top-level shape of every response: ``{"err": 0, "result": ...}``.

    ``message`` accompanies a non-zero ``err`` and has no fixed type. Other
    top-level keys are kept so the raw envelope can be printed whole.
    """

    model_config = ConfigDict(extra="allow")

    err: int = 0
    message: Any = None
    result: Any = None


class _Record(BaseModel):
    """Base for API records: unknown keys ignored, ``null`` means zero value."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ItemRecord(_Record):
    """An item as returned by ``/items`` and ``/item/{id}``."""

    id: ItemId = ""
    counter: int = 0
    title: str = ""
    level: str = ""
    status: str = ""
    environment: str = ""
    total_occurrences: int = 0
    last_occurrence_timestamp: EpochSeconds = 0
    first_occurrence_timestamp: EpochSeconds = 0

    def to_item(self) -> Item:
        return Item(
            id=self.id,
            counter=self.counter,
            title=self.title,
            level=self.level,
            status=self.status,
            environment=self.environment,
            total_occurrences=self.total_occurrences,
            last_occurrence=format_timestamp(self.last_occurrence_timestamp),
            first_occurrence=format_timestamp(self.first_occurrence_timestamp),
        )


class ItemsResult(_Record):
    items: list[ItemRecord] = Field(default_factory=list)


class InstanceRecord(_Record):
    """An occurrence as returned by ``/item/{id}/instances`` and ``/instance/{id}``."""

    id: int = 0
    item_id: ItemId = ""
    timestamp: EpochSeconds = 0
    data: dict[str, Any] = Field(default_factory=dict)

    def to_occurrence(self) -> Occurrence:
        return Occurrence(
            id=self.id,
            item_id=self.item_id,
            timestamp=format_timestamp(self.timestamp),
            data=self.data,
        )


class InstancesResult(_Record):
    instances: list[InstanceRecord] = Field(default_factory=list)


# =============================================================================
# Items and occurrences
# =============================================================================


class Item(BaseModel):
    """A Rollbar item: one deduplicated error group."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Item ID (always a string)")
    counter: int = Field(..., description="Project-scoped item counter")
    title: str
    level: str
    status: str
    environment: str
    total_occurrences: int
    last_occurrence: str = Field(..., description="UTC, YYYY-MM-DD HH:MM:SS")
    first_occurrence: str = Field(..., description="UTC, YYYY-MM-DD HH:MM:SS")


class Occurrence(BaseModel):
    """One recorded instance of an item, with its free-form payload."""

    model_config = ConfigDict(frozen=True)

    id: int
    item_id: str
    timestamp: str
    data: dict[str, Any] = Field(default_factory=dict)

    def listing(self) -> dict[str, Any]:
        """The short form used by ``rollbar occurrences``."""
        return {"id": self.id, "item_id": self.item_id, "timestamp": self.timestamp}


# =============================================================================
# Occurrence summary
# =============================================================================
#
# Every field is optional and only assigned when the source has it, so
# ``model_dump(exclude_unset=True)`` reproduces exactly the keys present in
# the payload. Values are copied verbatim, hence ``Any``.


class ServerInfo(BaseModel):
    host: Any = None
    root: Any = None
    pid: Any = None


class RequestInfo(BaseModel):
    url: Any = None
    method: Any = None
    user_ip: Any = None
    params: Any = None
    headers: Any = None


class OccurrenceSummary(BaseModel):
    """Human-sized view of an occurrence payload."""

    environment: Any = None
    level: Any = None
    message: Any = None
    exception_class: Any = None
    exception_message: Any = None
    backtrace: list[str] | None = None
    server: ServerInfo | None = None
    request: RequestInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict containing only the fields found in the payload."""
        return self.model_dump(mode="json", exclude_unset=True)
