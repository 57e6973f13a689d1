"""Configuration for the completion (Groebner basis) procedures."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class _CompletionConfig:
    """Structural options and optional budget for ideal completion.

    The engine itself imposes no limit; the budget fields let a caller bound
    the work, checked between completion steps.

    Parameters
    ----------
    max_pairs : int or None, default=None
        Maximum number of reductions in one completion run. For two-sided
        ideals it counts every round together with the reductions of right
        multiples.
    max_basis_size : int or None, default=None
        Maximum size of the intermediate generating set.
    use_chain_criterion : bool, default=True
        Skip pairs made redundant by Buchberger's chain criterion.
    interreduce : bool, default=True
        Return the reduced (minimal, tail-reduced, monic) basis.
    """
    max_pairs: Optional[int] = None
    max_basis_size: Optional[int] = None
    use_chain_criterion: bool = True
    interreduce: bool = True

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate the configuration."""
        for name in ("max_pairs", "max_basis_size"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or value < 1):
                raise ValueError(f"{name} must be a positive integer or None, got {value!r}.")


DEFAULT_COMPLETION = _CompletionConfig()
CompletionConfig = _CompletionConfig
