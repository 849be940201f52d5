# src/reader_kit/bridge/models.py

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ActionKind(str, Enum):
    """Text-processing actions offered on selections and chapters."""

    EXPLAIN = "explain"
    TRANSLATE = "translate"
    SUMMARIZE = "summarize"


@dataclass(frozen=True)
class Selection:
    """A live text selection, as reported by the rendering layer.

    Ephemeral: convert it into a bookmark or a payload before the view
    re-renders, since its node ids die with the rendered nodes.
    """

    text: str
    start_node: Hashable | None
    end_node: Hashable | None = None


@dataclass(frozen=True)
class ActionPayload:
    """Self-contained request for the external text service.

    Carries a snapshot of everything the prompt needs, so it can be
    submitted after the reader has navigated elsewhere.
    """

    action: ActionKind
    prompt: str
    source_text: str
    context: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))
