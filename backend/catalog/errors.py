"""Error kinds raised by the catalog service.

Controllers translate these into HTTP responses; the store and query
modules never raise them for well-typed input.
"""

from typing import List, Optional


class CatalogError(Exception):
    """Base class for recoverable catalog errors."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(CatalogError):
    """Unknown material id."""
    status_code = 404


class InvalidEnum(CatalogError, ValueError):
    """A category, subject or year level outside its fixed set."""
    status_code = 400

    def __init__(self, kind: str, value: str):
        super().__init__(f"Invalid {kind}")
        self.kind = kind
        self.value = value


class MalformedId(CatalogError, ValueError):
    """Non-numeric id in a request path."""
    status_code = 400

    def __init__(self, raw: str):
        super().__init__("Invalid ID format")
        self.raw = raw


class MaterialValidationError(CatalogError, ValueError):
    """Malformed creation payload.

    `errors` holds one `{field, message}` dict per offending field.
    """
    status_code = 400

    def __init__(self, errors: Optional[List[dict]] = None):
        super().__init__("Invalid material data")
        self.errors = errors or []
