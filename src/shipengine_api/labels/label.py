"""
Label purchase request and response

``POST /v1/labels`` buys a label for a shipment and returns its tracking
number and download links.
"""

from typing import Optional

from ..core.entity import ApiDateTime, ApiObject
from ..shipments.shipment import MonetaryValue, Shipment


class LabelShipment(Shipment):
    """Shipment to buy a label for; the service must be chosen up front."""
    service_code: str


class LabelDownload(ApiObject):
    href: Optional[str] = None
    pdf: Optional[str] = None
    png: Optional[str] = None
    zpl: Optional[str] = None


class LabelResponse(ApiObject):
    """A purchased label."""
    label_id: str
    status: Optional[str] = None
    shipment_id: Optional[str] = None
    ship_date: Optional[ApiDateTime] = None
    created_at: Optional[ApiDateTime] = None
    shipment_cost: Optional[MonetaryValue] = None
    insurance_cost: Optional[MonetaryValue] = None
    tracking_number: Optional[str] = None
    is_return_label: bool = False
    is_international: bool = False
    batch_id: Optional[str] = None
    carrier_id: Optional[str] = None
    service_code: Optional[str] = None
    package_code: Optional[str] = None
    voided: bool = False
    voided_at: Optional[ApiDateTime] = None
    label_format: Optional[str] = None
    label_layout: Optional[str] = None
    trackable: bool = False
    carrier_code: Optional[str] = None
    tracking_status: Optional[str] = None
    label_download: Optional[LabelDownload] = None
    form_download: Optional[LabelDownload] = None

    @property
    def download_url(self) -> Optional[str]:
        if self.label_download is None:
            return None
        return self.label_download.href or self.label_download.pdf
