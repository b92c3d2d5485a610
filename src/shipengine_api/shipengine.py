"""
ShipEngine client facade

Each public method builds one request through ``RequestFactory``, sends it
through the transport and maps the JSON reply into domain objects.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

import requests
from pydantic import SecretStr

from .address.factory import AddressFactory, AddressInput
from .address_verification.verification_result import VerificationResult
from .api.client import HTTPClient, Transport
from .api.request_factory import RequestFactory
from .carriers.carrier import Carrier, Option, PackageType, Service
from .core.config_manager import ConfigManager, ShipEngineConfig
from .core.error_handler import (
    APIError,
    ArgumentError,
    ConfigurationError,
    ResponseProcessingError,
    ShipEngineError,
)
from .core.logging_manager import LoggingManager
from .labels.label import LabelResponse, LabelShipment
from .rating.options import CarrierRef, RateOptions
from .rating.rate import RateResponse
from .shipments.shipment import Package, Shipment


class ShipEngine:
    """
    Client for the ShipEngine REST API.

    Example:
        >>> client = ShipEngine("TEST_abc123")
        >>> carriers = client.list_carriers()
        >>> rates = client.get_rates(shipment, RateOptions([carriers[0]]))
    """

    def __init__(
        self,
        api_key: Union[str, SecretStr],
        address_factory: Optional[AddressFactory] = None,
        transport: Optional[Transport] = None
    ):
        """
        Args:
            api_key: ShipEngine API key, sent with every request
            address_factory: Converts non-Address input; defaults to the mapping formatter
            transport: Sends requests; defaults to a new ``HTTPClient``
        """
        self.request_factory = RequestFactory(api_key)
        self.address_factory = address_factory or AddressFactory()
        self._owns_transport = transport is None
        self.transport = transport or HTTPClient()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Optional[ShipEngineConfig] = None,
        address_factory: Optional[AddressFactory] = None,
        configure_logging: bool = False
    ) -> 'ShipEngine':
        """
        Build a client from configuration

        Args:
            config: Loaded configuration; read through ``ConfigManager`` when omitted
            address_factory: Optional custom address factory
            configure_logging: Install the SDK's log handlers from ``config.logging``

        Raises:
            ConfigurationError: If no API key is configured
        """
        config = config or ConfigManager().load_config()

        if configure_logging:
            LoggingManager.setup(config.logging)

        if config.api.api_key is None:
            raise ConfigurationError(
                "No API key configured; set SHIPENGINE_API_KEY or api.api_key"
            )

        client = cls(
            config.api.api_key,
            address_factory=address_factory,
            transport=HTTPClient.from_config(config.api)
        )
        client._owns_transport = True
        return client

    def _log_failure(self, error: Exception, operation: str, **context):
        if isinstance(error, APIError):
            self.logger.error(
                f"API error during {operation}: {error} (code: {error.error_code})",
                extra={'operation': operation, **context}
            )
        else:
            self.logger.error(
                f"{type(error).__name__} during {operation}: {error}",
                extra={'operation': operation, **context}
            )

    def _send(self, request, operation: str, **context):
        try:
            return self.transport.send(request)
        except (ShipEngineError, requests.RequestException) as e:
            self._log_failure(e, operation, **context)
            raise

    def validate_addresses(self, addresses: Iterable[AddressInput]) -> List[VerificationResult]:
        """
        Validate addresses with ShipEngine's address validator

        Args:
            addresses: ``Address`` objects or raw mappings; raw input is
                converted through the address factory

        Returns:
            One VerificationResult per address, in request order
        """
        prepared = self.address_factory.factory_many(addresses)
        request = self.request_factory.validate_addresses(prepared)
        response = self._send(request, 'validate_addresses', count=len(prepared))

        data = response.get_data()
        if not isinstance(data, list):
            raise ResponseProcessingError("Expected a list of address validation results")

        return [VerificationResult.from_api(item) for item in data]

    def list_carriers(self) -> List[Carrier]:
        """List all carriers connected to the account"""
        response = self._send(self.request_factory.list_carriers(), 'list_carriers')
        return [Carrier.from_api(item) for item in _as_list(response.get_data('carriers'), 'carriers')]

    def get_carrier(self, carrier_id: str) -> Carrier:
        request = self.request_factory.get_carrier(carrier_id)
        response = self._send(request, 'get_carrier', carrier_id=carrier_id)
        return Carrier.from_api(response.get_data())

    def list_carrier_services(self, carrier_id: str) -> List[Service]:
        """List the services offered by a carrier"""
        request = self.request_factory.list_carrier_services(carrier_id)
        response = self._send(request, 'list_carrier_services', carrier_id=carrier_id)
        return [Service.from_api(item) for item in _as_list(response.get_data('services'), 'services')]

    def list_carrier_package_types(self, carrier_id: str) -> List[PackageType]:
        """List the package types offered by a carrier"""
        request = self.request_factory.list_carrier_package_types(carrier_id)
        response = self._send(request, 'list_carrier_package_types', carrier_id=carrier_id)
        return [PackageType.from_api(item) for item in _as_list(response.get_data('packages'), 'packages')]

    def get_carrier_options(self, carrier_id: str) -> List[Option]:
        """List the advanced options a carrier accepts"""
        request = self.request_factory.get_carrier_options(carrier_id)
        response = self._send(request, 'get_carrier_options', carrier_id=carrier_id)
        return [Option.from_api(item) for item in _as_list(response.get_data('options'), 'options')]

    def get_rates(
        self,
        shipment: Shipment,
        rate_options: Union[RateOptions, CarrierRef, Iterable[CarrierRef]]
    ) -> RateResponse:
        """
        Quote rates for a shipment

        Args:
            shipment: Shipment to rate
            rate_options: Carriers to quote, as ``RateOptions``, a single carrier
                or carrier id, or an iterable of either

        Returns:
            RateResponse built from the ``rate_response`` field of the reply

        Raises:
            ArgumentError: If no carrier is given; nothing is sent in that case
        """
        if not isinstance(rate_options, RateOptions):
            rate_options = RateOptions(rate_options)

        if not len(rate_options):
            raise ArgumentError("rate_options must include at least one carrier")

        request = self.request_factory.get_shipment_rates(shipment, rate_options)
        response = self._send(request, 'get_rates', carrier_ids=rate_options.carrier_ids)
        return RateResponse.from_api(response.get_data('rate_response'))

    def create_label(
        self,
        shipment: LabelShipment,
        test_mode: bool = False,
        label_format: Optional[str] = None,
        label_layout: Optional[str] = None
    ) -> LabelResponse:
        """
        Purchase a label for a shipment

        Args:
            shipment: Shipment with a chosen service_code
            test_mode: Create a test label that is not charged
            label_format: Optional ``pdf``, ``png`` or ``zpl``
            label_layout: Optional ``4x6`` or ``letter``
        """
        request = self.request_factory.create_label(
            shipment, test_mode, label_format=label_format, label_layout=label_layout
        )
        response = self._send(request, 'create_label', test_mode=test_mode)
        return LabelResponse.from_api(response.get_data())

    def build_shipment(
        self,
        ship_to: AddressInput,
        ship_from: AddressInput,
        packages: Iterable[Union[Package, dict]],
        for_label: bool = False,
        **fields: Any
    ) -> Shipment:
        """
        Build a Shipment, converting raw addresses through the address factory

        Args:
            ship_to: Destination as ``Address`` or raw mapping
            ship_from: Origin as ``Address`` or raw mapping
            packages: Packages or package mappings
            for_label: Build a ``LabelShipment`` (requires ``service_code``)
            **fields: Other shipment fields (service_code, carrier_id, ship_date, ...)
        """
        shipment_cls = LabelShipment if for_label else Shipment
        try:
            return shipment_cls(
                ship_to=self.address_factory.factory(ship_to),
                ship_from=self.address_factory.factory(ship_from),
                packages=list(packages),
                **fields
            )
        except ValueError as e:
            if isinstance(e, ArgumentError):
                raise
            raise ArgumentError(f"Invalid shipment: {e}") from e

    def close(self):
        """Close the transport if this client created it"""
        if self._owns_transport and hasattr(self.transport, 'close'):
            self.transport.close()

    def __enter__(self) -> 'ShipEngine':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def _as_list(value: Any, field: str) -> list:
    if not isinstance(value, list):
        raise ResponseProcessingError(f"Expected '{field}' to be a list")
    return value
