class ResampleError(ValueError):
    """Base error for the day-grid resampler."""


class InvalidConfiguration(ResampleError):
    def __init__(self, field: str, message: str):  # noqa: D401
        super().__init__(f"[{field}] {message}")
        self.field = field
        self.message = message

__all__ = ["ResampleError", "InvalidConfiguration"]
