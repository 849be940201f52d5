from .models import ActionKind, ActionPayload, Selection
from .node_index import RenderedNodeIndex
from .selection import SelectionBridge, to_action_payload, to_bookmark

__all__ = [
    "ActionKind",
    "ActionPayload",
    "RenderedNodeIndex",
    "Selection",
    "SelectionBridge",
    "to_action_payload",
    "to_bookmark",
]
