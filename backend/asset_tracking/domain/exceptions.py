"""Domain-specific exceptions — framework-independent."""


class StorageError(Exception):
    """Raised by repositories when the underlying record store rejects a read or write."""

    def __init__(self, operation: str, cause: Exception | str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage failure during {operation}: {cause}")


class RateSourceError(Exception):
    """Raised when the exchange-rate provider cannot deliver a usable table.

    Covers network errors, timeouts, HTTP errors and malformed documents.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"[{source}] {message}")


class MissingRateError(Exception):
    """Raised when a conversion needs a currency that is absent from the rate table."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"No exchange rate available for '{currency}'")
