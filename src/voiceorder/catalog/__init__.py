class CatalogError(Exception):
    """Raised when the catalog listing service cannot be read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
