"""Occurrence summary extraction.

Projects the handful of fields worth reading out of an occurrence payload
(``data`` in the API response). Each step is independent and best-effort:
anything missing or of the wrong type is left out of the summary, never
reported as an error.
"""

from __future__ import annotations

from typing import Any

from rollbar_cli.datasources.rollbar.payload import Node
from rollbar_cli.schemas import OccurrenceSummary, RequestInfo, ServerInfo

SERVER_FIELDS = ("host", "root", "pid")
REQUEST_FIELDS = ("url", "method", "user_ip", "params", "headers")


def format_frame(frame: Node) -> str:
    """``"<filename>:<lineno> in <method>"``; missing parts render as ``None``."""
    filename, lineno, method = (frame.get(key).value for key in ("filename", "lineno", "method"))
    return f"{filename}:{lineno} in {method}"


def active_trace(body: Node) -> Node:
    """The trace to report: first of ``trace_chain`` (outermost exception), else ``trace``."""
    chained = body.get("trace_chain").first()
    if chained.mapping() is not None:
        return chained
    trace = body.get("trace")
    return trace if trace.mapping() is not None else Node()


def _copy_present(source: Node, fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: source.get(name).value for name in fields if source.get(name).present}


def summarize_occurrence(data: dict[str, Any]) -> OccurrenceSummary:
    """Build the summary view of an occurrence payload. Never raises."""
    root = Node(data)
    fields: dict[str, Any] = _copy_present(root, ("environment", "level"))

    body = root.get("body")
    message = body.get("message").get("body")
    if message.present:
        fields["message"] = message.value

    trace = active_trace(body)
    exception = trace.get("exception")
    for src, dest in (("class", "exception_class"), ("message", "exception_message")):
        if exception.get(src).present:
            fields[dest] = exception.get(src).value

    frames = trace.get("frames")
    if frames.sequence() is not None:
        fields["backtrace"] = [
            format_frame(frame) for frame in frames.children() if frame.mapping() is not None
        ]

    server = _copy_present(root.get("server"), SERVER_FIELDS)
    if server:
        fields["server"] = ServerInfo(**server)

    request = _copy_present(root.get("request"), REQUEST_FIELDS)
    if request:
        fields["request"] = RequestInfo(**request)

    return OccurrenceSummary(**fields)
