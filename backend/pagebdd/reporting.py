"""
Report Sink
Fire-and-forget side channel for step data, context snapshots and
screenshots. A failing sink never fails a test: the runner always goes
through safe_attach().
"""

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, List, Protocol, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
PNG_MIME = "image/png"
TEXT_MIME = "text/plain"

_EXTENSIONS = {JSON_MIME: ".json", PNG_MIME: ".png", TEXT_MIME: ".txt"}


class ReportSink(Protocol):
    def attach(self, name: str, content: Union[str, bytes], mime_type: str) -> None: ...


@dataclass
class Attachment:
    name: str
    content: Union[str, bytes]
    mime_type: str
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())


class MemoryReportSink:
    """Keeps attachments in order of arrival"""

    def __init__(self):
        self.attachments: List[Attachment] = []

    def attach(self, name: str, content: Union[str, bytes], mime_type: str):
        self.attachments.append(Attachment(name, content, mime_type))

    def find(self, name: str) -> List[Attachment]:
        return [a for a in self.attachments if a.name == name]


class DirectoryReportSink:
    """Writes every attachment as a file in a report directory"""

    def __init__(self, report_dir: Union[str, Path]):
        self.report_dir = Path(report_dir)
        self._counter = 0

    def attach(self, name: str, content: Union[str, bytes], mime_type: str):
        # Created on first attachment so an unusable directory only fails attach()
        self.report_dir.mkdir(parents=True, exist_ok=True)
        self._counter += 1
        safe_name = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_") or "attachment"
        path = self.report_dir / f"{self._counter:04d}_{safe_name}{_EXTENSIONS.get(mime_type, '.bin')}"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return str(value)


def to_json(data: Any) -> str:
    """Serialize step data for attachment; unknown objects fall back to str()"""
    return json.dumps(data, indent=2, default=_json_default)


def safe_attach(sink: ReportSink, name: str, content: Union[str, bytes], mime_type: str) -> bool:
    """Attach without ever raising. Returns whether the sink accepted it."""
    try:
        sink.attach(name, content, mime_type)
        return True
    except Exception as e:
        logger.warning(f"Report attachment '{name}' dropped: {e}")
        return False


def safe_attach_json(sink: ReportSink, name: str, data: Any) -> bool:
    """Serialize and attach without ever raising"""
    try:
        content = to_json(data)
    except Exception as e:
        logger.warning(f"Report attachment '{name}' could not be serialized: {e}")
        return False
    return safe_attach(sink, name, content, JSON_MIME)
