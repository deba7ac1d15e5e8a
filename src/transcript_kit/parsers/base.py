# src/transcript_kit/parsers/base.py

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class TextParser(ABC, Generic[T]):
    @abstractmethod
    def parse(self, text: str) -> list[T]:
        """
        Parse raw text into an ordered list of structured results.

        Requirements:
        - Deterministic output for same input
        - Source order preserved
        - Total over any string: malformed markup degrades, never raises
        """
        raise NotImplementedError
