"""
Address value object

Mirrors the address shape accepted and returned by ShipEngine. Unlike the
response objects, an Address stays editable until it is serialised.
"""

from typing import List, Literal, Optional

from pydantic import ConfigDict, field_validator

from ..core.entity import ApiObject


class Address(ApiObject):
    """A postal address in ShipEngine wire format."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city_locality: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    address_residential_indicator: Literal['unknown', 'yes', 'no'] = 'unknown'

    @field_validator('country_code')
    @classmethod
    def validate_country_code(cls, v):
        """Country codes are two-letter ISO 3166-1 codes"""
        if v is None:
            return v
        v = v.strip().upper()
        if len(v) != 2 or not v.isalpha():
            raise ValueError(f"Country code must be a 2-letter ISO code, got '{v}'")
        return v

    @field_validator('postal_code', mode='before')
    @classmethod
    def coerce_postal_code(cls, v):
        # Zip codes typed as numbers in YAML/JSON sources
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def street_lines(self) -> List[str]:
        """Non-empty street lines in order"""
        lines = [self.address_line1, self.address_line2, self.address_line3]
        return [line for line in lines if line]

    def __str__(self) -> str:
        locality = ' '.join(
            part for part in (self.state_province, self.postal_code) if part
        )
        parts = self.street_lines + [
            part for part in (self.city_locality, locality, self.country_code) if part
        ]
        return ', '.join(parts)


class ResponseAddress(Address):
    """An Address returned by the API; read-only like other response objects."""

    model_config = ConfigDict(frozen=True)
