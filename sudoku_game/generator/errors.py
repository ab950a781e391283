"""Exceptions raised while generating a puzzle."""


class GenerationError(RuntimeError):
    """Generation gave up, either after too many retries or on a bad random source."""


class SolverStepLimitExceeded(GenerationError):
    """The completion solver ran past its step bound."""

    def __init__(self, max_steps: int):
        super().__init__(f"Backtracking solver exceeded {max_steps:,} steps")
        self.max_steps = max_steps
