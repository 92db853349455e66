class WeighingError(Exception):
    """Base class for weighing schedule errors."""


class WeighingNotFoundError(WeighingError):
    """Raised when a batch has no weighing scheduled for the requested week."""

    def __init__(self, batch_id: str, week: int):
        self.batch_id = batch_id
        self.week = week
        super().__init__(f"No weighing scheduled for batch '{batch_id}' week {week}.")


class WeighingStoreError(WeighingError):
    """Raised when the backing store cannot be read or written."""
