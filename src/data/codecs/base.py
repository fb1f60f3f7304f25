"""
Base interface for plant file codecs.
Allows adding file formats without touching the dispatcher.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.core.plants.models import Plant


class BaseCodec(ABC):
    """Abstract base class for plant file formats."""

    @abstractmethod
    def decode(self, payload: bytes) -> list[Plant]:
        """
        Decode uploaded file contents.

        Args:
            payload: Raw file bytes

        Returns:
            Plants in file order

        Raises:
            DecodeError: If payload is not a valid file of this format
        """
        pass

    @abstractmethod
    def encode(self, plants: Sequence[Plant]) -> bytes:
        """Encode plants to file contents. Must not modify plants."""
        pass

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension including the dot, e.g. '.csv'."""
        pass
