"""
Formatter configuration.

All run settings travel in a single immutable ``FormatterConfig`` that is
handed to the value source and the renderer. Nothing here is global.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Defaults used by the CLI
DEFAULT_RANGE = 50
DEFAULT_NODE_COUNT = 20


class ConfigError(ValueError):
    """Raised when a formatter setting is out of range."""


@dataclass(frozen=True)
class FormatterConfig:
    """Settings for one build-and-render run.

    Attributes
    ----------
    value_range: int
        Exclusive upper bound for node values (values are 0..value_range-1).
    node_count: int
        How many values get pushed into the heap.
    seed: Optional[int]
        Seed for the value source; None draws from system entropy.
    color: bool
        Allow bold/faint styling; the console still drops it when the
        output is not a terminal.
    annotate: bool
        Prefix each tree row with its row size and spacing unit.
    show_array: bool
        Print the ``Heap (N): [...]`` summary line before the tree.
    """

    value_range: int = DEFAULT_RANGE
    node_count: int = DEFAULT_NODE_COUNT
    seed: Optional[int] = None
    color: bool = True
    annotate: bool = False
    show_array: bool = True

    @property
    def node_width(self) -> int:
        """Digits needed for the largest possible node value."""
        return len(str(self.value_range - 1))

    def validate(self) -> "FormatterConfig":
        """Return self, or raise ConfigError if a setting is unusable."""
        if self.value_range < 1:
            raise ConfigError(f"range must be at least 1 (got {self.value_range})")
        if self.node_count < 0:
            raise ConfigError(f"node count must not be negative (got {self.node_count})")
        return self
