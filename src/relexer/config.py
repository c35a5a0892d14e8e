"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FsmConfig:
    """Configuration for :func:`relexer.pipeline.compile_postfix`.

    Attributes:
        minimize: Run Brzozowski minimization after determinization.
        max_dfa_states: Upper bound on states discovered by any single
            subset construction (``None`` = unbounded).
    """

    minimize: bool = True
    max_dfa_states: int | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate configuration values, raising ``ValueError`` on invalid settings."""
        if not isinstance(self.minimize, bool):
            raise ValueError(f"minimize must be a bool, got {self.minimize!r}")
        if self.max_dfa_states is not None and self.max_dfa_states < 1:
            raise ValueError(f"max_dfa_states must be >= 1 or None, got {self.max_dfa_states}")
