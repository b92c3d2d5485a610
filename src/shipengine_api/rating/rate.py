"""
Rate quotes returned by ``POST /v1/rates``
"""

from typing import List, Optional

from pydantic import Field

from ..core.entity import ApiDateTime, ApiObject
from ..shipments.shipment import MonetaryValue


class Rate(ApiObject):
    """A priced shipping option for one carrier service."""
    rate_id: Optional[str] = None
    rate_type: Optional[str] = None
    carrier_id: str
    shipping_amount: MonetaryValue
    insurance_amount: Optional[MonetaryValue] = None
    confirmation_amount: Optional[MonetaryValue] = None
    other_amount: Optional[MonetaryValue] = None
    delivery_days: Optional[int] = None
    guaranteed_service: bool = False
    estimated_delivery_date: Optional[ApiDateTime] = None
    carrier_delivery_days: Optional[str] = None
    ship_date: Optional[ApiDateTime] = None
    negotiated_rate: bool = False
    service_type: Optional[str] = None
    service_code: Optional[str] = None
    trackable: bool = False
    carrier_code: Optional[str] = None
    carrier_nickname: Optional[str] = None
    carrier_friendly_name: Optional[str] = None
    validation_status: Optional[str] = None
    warning_messages: List[str] = Field(default_factory=list)
    error_messages: List[str] = Field(default_factory=list)

    @property
    def total_amount(self) -> MonetaryValue:
        """Shipping, insurance, confirmation and other charges added up"""
        charges = [
            self.shipping_amount,
            self.insurance_amount,
            self.confirmation_amount,
            self.other_amount,
        ]
        total = sum(charge.amount for charge in charges if charge is not None)
        return MonetaryValue(currency=self.shipping_amount.currency, amount=round(total, 2))


class RateError(ApiObject):
    error_source: Optional[str] = None
    error_type: Optional[str] = None
    error_code: Optional[str] = None
    message: str = ''


class RateResponse(ApiObject):
    """All rates quoted for a shipment."""
    rates: List[Rate] = Field(default_factory=list)
    invalid_rates: List[Rate] = Field(default_factory=list)
    rate_request_id: Optional[str] = None
    shipment_id: Optional[str] = None
    created_at: Optional[ApiDateTime] = None
    status: Optional[str] = None
    errors: List[RateError] = Field(default_factory=list)

    def cheapest(self) -> Optional[Rate]:
        if not self.rates:
            return None
        return min(self.rates, key=lambda rate: rate.total_amount.amount)

    def for_carrier(self, carrier_id: str) -> List[Rate]:
        return [rate for rate in self.rates if rate.carrier_id == carrier_id]
