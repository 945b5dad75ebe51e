"""
Core interfaces for protockit.

This module defines the abstract collaborators the resolution core depends on.
Hosts and tests implement these to supply data without the core performing
any I/O itself.
"""

from abc import ABC, abstractmethod
from typing import List


class TagSource(ABC):
    """
    Abstract interface for components that list source-control tags.

    The version catalog consumes the tags as a plain, ordered sequence of
    strings; where they come from (a remote API, a sandboxed git call, a
    fixture) is up to the implementation.
    """

    @abstractmethod
    def fetch_tags(self) -> List[str]:
        """
        Fetch the raw tag names.

        Returns:
            Tag names as reported upstream (e.g., "v28.3", "v3.20.1")

        Raises:
            TagSourceError: If the tags cannot be retrieved
        """
        pass


__all__ = [
    "TagSource",
]
