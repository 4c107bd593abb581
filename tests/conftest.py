from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from htmlspanner import HtmlSpanner


class RecordingEmitter:
    """Emitter collecting every diagnostic for assertions."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[tuple[str, BaseException | None]] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append((message, exc))

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


@pytest.fixture
def spanner() -> HtmlSpanner:
    return HtmlSpanner(parser="html.parser")


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()
