"""
Carrier accounts and their carrier-scoped resources

Returned by the ``/v1/carriers`` family of endpoints.
"""

from typing import List, Optional

from pydantic import Field

from ..core.entity import ApiObject
from ..shipments.shipment import Dimensions


class Service(ApiObject):
    """A shipping service offered by a carrier (e.g. ``usps_priority_mail``)."""
    carrier_id: Optional[str] = None
    carrier_code: Optional[str] = None
    service_code: str
    name: Optional[str] = None
    domestic: bool = False
    international: bool = False
    is_multi_package_supported: bool = False


class PackageType(ApiObject):
    """A carrier-specific package type (e.g. ``flat_rate_envelope``)."""
    package_id: Optional[str] = None
    package_code: str
    name: Optional[str] = None
    description: Optional[str] = None
    dimensions: Optional[Dimensions] = None


class Option(ApiObject):
    """An advanced option the carrier accepts on shipments."""
    name: str
    default_value: Optional[str] = None
    description: Optional[str] = None


class Carrier(ApiObject):
    """A carrier account connected to the ShipEngine account."""
    carrier_id: str
    carrier_code: Optional[str] = None
    account_number: Optional[str] = None
    requires_funded_amount: bool = False
    balance: Optional[float] = None
    nickname: Optional[str] = None
    friendly_name: Optional[str] = None
    primary: bool = False
    has_multi_package_supporting_services: bool = False
    supports_label_messages: bool = False
    services: List[Service] = Field(default_factory=list)
    packages: List[PackageType] = Field(default_factory=list)
    options: List[Option] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.nickname or self.friendly_name or self.carrier_id

    def get_service(self, service_code: str) -> Optional[Service]:
        for service in self.services:
            if service.service_code == service_code:
                return service
        return None
