from .assistant import ActionResult, ReadingAssistant

__all__ = [
    "ActionResult",
    "ReadingAssistant",
]
