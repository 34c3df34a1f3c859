class ConversionError(Exception):
    """Raised when an office document cannot be converted to PDF."""
