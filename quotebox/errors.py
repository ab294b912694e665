"""Base exception shared by quotebox modules."""


class QuoteboxError(RuntimeError):
    """Root exception for quotebox errors."""
