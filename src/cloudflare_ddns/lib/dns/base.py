"""
Base types for DNS providers
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

@dataclass(frozen=True)
class DNSRecord:
    """DNS record data"""
    id: str
    type: str
    name: str
    content: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DNSRecord':
        """Build a record from an API result item"""
        try:
            return cls(
                id=data['id'],
                type=data['type'],
                name=data['name'],
                content=data['content']
            )
        except (KeyError, TypeError) as e:
            raise ResponseDecodeError(f"Malformed DNS record in response: {data!r}") from e

@dataclass(frozen=True)
class ProviderErrorEntry:
    """Single entry of a provider error list"""
    code: Optional[int]
    message: str

    @classmethod
    def from_raw(cls, raw: Any) -> 'ProviderErrorEntry':
        """Accepts {"code": ..., "message": ...} objects as well as bare strings"""
        if isinstance(raw, dict):
            return cls(code=raw.get('code'), message=str(raw.get('message', '')))
        return cls(code=None, message=str(raw))

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"[{self.code}] {self.message}"

@dataclass
class ProviderResponse:
    """Provider API envelope"""
    success: bool
    errors: List[ProviderErrorEntry] = field(default_factory=list)
    result: Any = None

    @classmethod
    def from_json(cls, data: Any) -> 'ProviderResponse':
        """Build an envelope from decoded JSON"""
        if not isinstance(data, dict):
            raise ResponseDecodeError(f"Unexpected response payload: {data!r}")
        return cls(
            success=data.get('success') is True,
            errors=[ProviderErrorEntry.from_raw(e) for e in data.get('errors') or []],
            result=data.get('result')
        )

    @property
    def first_error(self) -> Optional[ProviderErrorEntry]:
        """First error entry, if the provider sent any"""
        return self.errors[0] if self.errors else None

class DNSProvider(ABC):
    """Abstract base class for DNS providers"""

    @abstractmethod
    def get_record(self, name: Optional[str] = None) -> DNSRecord:
        """
        Get the DNS record with the given name

        Args:
            name: Record name (defaults to the configured record)

        Returns:
            First matching DNSRecord

        Raises:
            RecordNotFoundError: If no record matches
            DNSError: If the lookup fails
        """
        pass

    @abstractmethod
    def update_record(self, record_id: str, content: str, name: Optional[str] = None) -> DNSRecord:
        """
        Replace the content of an A record

        Args:
            record_id: ID of record to update
            content: New IPv4 address
            name: Record name (defaults to the configured record)

        Returns:
            Updated DNSRecord

        Raises:
            DNSError: If the update fails
        """
        pass

class DNSError(Exception):
    """Base exception for DNS operations"""
    pass

class ResponseDecodeError(DNSError):
    """Provider response could not be decoded"""
    pass

class ProviderError(DNSError):
    """Provider reported a failure"""

    def __init__(self, message: str, status: str = "", errors: Optional[List[ProviderErrorEntry]] = None,
                 body: str = ""):
        super().__init__(message)
        self.status = status
        self.errors = errors or []
        self.body = body

class RecordNotFoundError(ProviderError):
    """No DNS record matched the lookup"""
    pass
