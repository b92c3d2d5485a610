"""
Address validation results

One VerificationResult is returned per address sent to
``POST /v1/addresses/validate``.
"""

from typing import List, Literal, Optional

from pydantic import Field

from ..address.address import ResponseAddress
from ..core.entity import ApiObject


class VerificationMessage(ApiObject):
    """A single message attached to a validation result."""
    code: Optional[str] = None
    message: str = ''
    type: Optional[str] = None
    detail_code: Optional[str] = None


class VerificationResult(ApiObject):
    """Outcome of validating one address."""

    status: Literal['unverified', 'verified', 'warning', 'error']
    original_address: ResponseAddress
    matched_address: Optional[ResponseAddress] = None
    messages: List[VerificationMessage] = Field(default_factory=list)

    @property
    def is_verified(self) -> bool:
        return self.status == 'verified'

    @property
    def errors(self) -> List[VerificationMessage]:
        return [m for m in self.messages if m.type == 'error']

    @property
    def warnings(self) -> List[VerificationMessage]:
        return [m for m in self.messages if m.type == 'warning']
