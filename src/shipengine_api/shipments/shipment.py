"""
Shipment building blocks shared by rating and label requests
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field

from ..address.address import Address
from ..core.entity import ApiObject
from ..core.error_handler import ArgumentError


class Weight(ApiObject):
    value: float = Field(gt=0)
    unit: Literal['pound', 'ounce', 'gram', 'kilogram'] = 'ounce'


class Dimensions(ApiObject):
    unit: Literal['inch', 'centimeter'] = 'inch'
    length: float = Field(default=0, ge=0)
    width: float = Field(default=0, ge=0)
    height: float = Field(default=0, ge=0)


class MonetaryValue(ApiObject):
    currency: str = 'usd'
    amount: float = 0.0


class Package(ApiObject):
    """One parcel in a shipment."""
    weight: Weight
    dimensions: Optional[Dimensions] = None
    insured_value: Optional[MonetaryValue] = None
    package_code: Optional[str] = None


class Shipment(ApiObject):
    """Origin, destination and parcels of a shipment.

    Packages can be added after construction; at least one is required
    before the shipment is serialised.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    ship_to: Address
    ship_from: Address
    packages: List[Package] = Field(default_factory=list)
    carrier_id: Optional[str] = None
    service_code: Optional[str] = None
    ship_date: Optional[date] = None
    confirmation: Optional[
        Literal['none', 'delivery', 'signature', 'adult_signature', 'direct_signature']
    ] = None
    validate_address: Optional[Literal['no_validation', 'validate_only', 'validate_and_clean']] = None
    external_shipment_id: Optional[str] = None

    def add_package(self, package: Package) -> 'Shipment':
        self.packages = self.packages + [package]
        return self

    def to_api(self):
        if not self.packages:
            raise ArgumentError("Shipment must include at least one package")
        return super().to_api()
