from typing import Any, Dict, List, Optional


class AWDBTableError(Exception):
    """Base class for errors raised while turning AWDB documents into tables."""


class MalformedInput(AWDBTableError):
    """A document is not valid JSON or does not match its endpoint's schema."""

    def __init__(self, endpoint: str, document_index: int, errors: Optional[List[Dict[str, Any]]] = None):
        self.endpoint = endpoint
        self.document_index = document_index
        self.errors = errors or []
        super().__init__(self._summary())

    def _summary(self) -> str:
        msg = f"Malformed {self.endpoint} document at index {self.document_index}"
        if not self.errors:
            return msg
        first = self.errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        detail = f"{loc}: {first.get('msg', '')}" if loc else first.get("msg", "")
        more = f" (+{len(self.errors) - 1} more)" if len(self.errors) > 1 else ""
        return f"{msg}: {detail}{more}"


class UnknownReferenceType(AWDBTableError, KeyError):
    """The reference list tag is not one of the known AWDB vocabularies."""

    def __init__(self, reference_type: str):
        self.reference_type = reference_type
        super().__init__(f"Unknown reference type: {reference_type!r}")

    def __str__(self) -> str:
        return self.args[0]
