"""
Request Factory for the ShipEngine API Client

Builds one request descriptor per API operation. Nothing here touches the
network; the descriptors are handed to a transport such as ``HTTPClient``.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Union
from urllib.parse import quote

from pydantic import SecretStr

from ..address.address import Address
from ..core.error_handler import ArgumentError
from ..labels.label import LabelShipment
from ..rating.options import RateOptions
from ..shipments.shipment import Shipment
from .authentication import ApiKeyAuthentication

API_VERSION_PREFIX = '/v1'
SENSITIVE_HEADERS = ('api-key', 'authorization', 'cookie')


@dataclass(frozen=True)
class ApiRequest:
    """A fully built request: method, path, serialised body and headers."""
    method: str
    path: str
    payload: Any = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def body(self) -> Optional[str]:
        """JSON body as sent on the wire, ``None`` for body-less requests"""
        if self.payload is None:
            return None
        return ContentTypeHandler.prepare_json_content(self.payload)


class ContentTypeHandler:
    """Handles JSON request bodies"""

    CONTENT_TYPE = 'application/json'

    @staticmethod
    def prepare_json_content(data: Any) -> str:
        """Serialise request data to compact JSON"""
        try:
            return json.dumps(data, separators=(',', ':'), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ArgumentError(f"Failed to serialize JSON data: {e}")


class RequestFactory:
    """
    Builds ShipEngine requests for every supported operation.

    The API key is fixed at construction and added to every request as the
    ``API-Key`` header.
    """

    def __init__(self, api_key: Union[str, SecretStr]):
        self.auth = ApiKeyAuthentication(api_key)
        self.logger = logging.getLogger(__name__)
        self.default_headers = {
            'Accept': ContentTypeHandler.CONTENT_TYPE,
            'Content-Type': ContentTypeHandler.CONTENT_TYPE
        }

    def _build(self, method: str, path: str, payload: Any = None) -> ApiRequest:
        headers = self.default_headers.copy()
        headers.update(self.auth.headers())

        request = ApiRequest(
            method=method,
            path=f"{API_VERSION_PREFIX}{path}",
            payload=payload,
            headers=headers
        )
        self.logger.debug(f"Built {request.method} {request.path}")
        return request

    @staticmethod
    def _carrier_path(carrier_id: str, resource: str = '') -> str:
        if not isinstance(carrier_id, str) or not carrier_id.strip():
            raise ArgumentError(f"Invalid carrier id: {carrier_id!r}")
        path = f"/carriers/{quote(carrier_id.strip(), safe='')}"
        return f"{path}/{resource}" if resource else path

    def validate_addresses(self, addresses: Iterable[Union[Address, Dict[str, Any]]]) -> ApiRequest:
        """POST /v1/addresses/validate with a list of addresses"""
        payload = [
            address.to_api() if isinstance(address, Address) else dict(address)
            for address in addresses
        ]
        return self._build('POST', '/addresses/validate', payload)

    def list_carriers(self) -> ApiRequest:
        return self._build('GET', '/carriers')

    def get_carrier(self, carrier_id: str) -> ApiRequest:
        return self._build('GET', self._carrier_path(carrier_id))

    def list_carrier_services(self, carrier_id: str) -> ApiRequest:
        return self._build('GET', self._carrier_path(carrier_id, 'services'))

    def list_carrier_package_types(self, carrier_id: str) -> ApiRequest:
        return self._build('GET', self._carrier_path(carrier_id, 'packages'))

    def get_carrier_options(self, carrier_id: str) -> ApiRequest:
        return self._build('GET', self._carrier_path(carrier_id, 'options'))

    def get_shipment_rates(self, shipment: Shipment, rate_options: RateOptions) -> ApiRequest:
        """POST /v1/rates for one shipment across the carriers in ``rate_options``"""
        payload = {
            'shipment': shipment.to_api(),
            'rate_options': rate_options.to_api()
        }
        return self._build('POST', '/rates', payload)

    def create_label(
        self,
        shipment: LabelShipment,
        test_mode: bool = False,
        label_format: Optional[str] = None,
        label_layout: Optional[str] = None
    ) -> ApiRequest:
        """POST /v1/labels; ``test_mode`` is sent as ``test_label``"""
        payload: Dict[str, Any] = {
            'shipment': shipment.to_api(),
            'test_label': test_mode
        }
        if label_format:
            payload['label_format'] = label_format
        if label_layout:
            payload['label_layout'] = label_layout
        return self._build('POST', '/labels', payload)


def sanitize_for_logging(request: ApiRequest) -> Dict[str, Any]:
    """Request details with credentials masked and long bodies truncated"""
    headers = request.headers.copy()
    for key in list(headers.keys()):
        if key.lower() in SENSITIVE_HEADERS:
            headers[key] = '[MASKED]'

    body = request.body
    if body and len(body) > 1000:
        body = body[:1000] + '... [TRUNCATED]'

    return {
        'method': request.method,
        'path': request.path,
        'headers': headers,
        'body': body
    }
