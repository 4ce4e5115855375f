"""Domain-specific exceptions"""

from typing import Any, Dict, List, Sequence


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Debt fields or a strategy literal failed validation"""

    def __init__(self, message: str, fields: List[str] | None = None):
        super().__init__(message)
        self.fields = fields or []

    @classmethod
    def from_errors(cls, errors: Sequence[Dict[str, Any]], skip: Sequence[str] = ()) -> "ValidationError":
        """Build from pydantic error dicts, one entry per offending field in order"""
        fields: List[str] = []
        for error in errors:
            loc = [str(part) for part in error.get("loc", ()) if part not in skip]
            if loc and loc[0] not in fields:
                fields.append(loc[0])
        if not fields:
            return cls("Invalid request body.")
        return cls(f"Missing or invalid fields: {', '.join(fields)}.", fields=fields)


class EmptyStoreError(DomainException):
    """Operation needs at least one debt but the store is empty"""

    pass


class ContentBlockedError(DomainException):
    """Provider refused to complete because of its content-safety policy"""

    def __init__(self, reason: str):
        super().__init__(f"Content blocked: {reason}")
        self.reason = reason


class CoachProviderError(DomainException):
    """Provider returned an unusable reply"""

    pass
