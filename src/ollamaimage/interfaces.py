"""Protocol interfaces for ollamaimage."""

from typing import Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class ProgressCallback(Protocol):
    """Observer called by the batch orchestrator after every finished image."""

    def __call__(self, completed: int, total: int) -> None:
        """
        Report batch progress.

        Args:
            completed: Number of images generated so far (1..total)
            total: Number of images the batch will generate
        """
        ...
