class SliceError(Exception):
    """Raised when a PDF cannot be opened, counted or sliced."""
