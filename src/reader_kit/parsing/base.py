# parsing/base.py

from abc import ABC, abstractmethod

from .models import Document


class TextSegmenter(ABC):
    @abstractmethod
    def segment(self, raw_text: str) -> Document:
        """
        Split decoded text into chapters of paragraphs.

        Requirements:
        - Deterministic output for same input
        - Never returns an empty paragraph
        - Chapters appear in document order
        - Never raises on well-formed text
        """
        raise NotImplementedError
