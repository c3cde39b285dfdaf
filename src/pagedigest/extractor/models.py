"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ExtractResult:
    """Result of main-content extraction."""

    text: str
    rule: str | None  # winning selector, None when the fallback was used
    fallback: bool
    pruned: int  # number of subtrees removed before candidate search

    def __post_init__(self) -> None:
        """Validate the result."""
        if self.pruned < 0:
            raise ValueError("pruned must be non-negative")
        if self.fallback and self.rule is not None:
            raise ValueError("A fallback result cannot carry a winning rule")

    @property
    def is_empty(self) -> bool:
        return not self.text
