"""shipengine_api - Python client for the ShipEngine shipping API

Address validation, carrier listing, rate quoting and label creation behind
typed domain objects.
"""

from .address import Address, AddressFactory, AddressFormatter, MappingAddressFormatter, ResponseAddress
from .address_verification import VerificationMessage, VerificationResult
from .carriers import Carrier, Option, PackageType, Service
from .core import (
    APIError,
    ArgumentError,
    ConfigManager,
    ConfigurationError,
    LoggingManager,
    ResponseProcessingError,
    ShipEngineConfig,
    ShipEngineError
)
from .labels import LabelResponse, LabelShipment
from .rating import Rate, RateOptions, RateResponse
from .shipengine import ShipEngine
from .shipments import Dimensions, MonetaryValue, Package, Shipment, Weight

__version__ = "1.0.0"

__all__ = [
    "ShipEngine",
    "Address",
    "AddressFactory",
    "AddressFormatter",
    "MappingAddressFormatter",
    "ResponseAddress",
    "VerificationMessage",
    "VerificationResult",
    "Carrier",
    "Option",
    "PackageType",
    "Service",
    "Dimensions",
    "MonetaryValue",
    "Package",
    "Shipment",
    "Weight",
    "Rate",
    "RateOptions",
    "RateResponse",
    "LabelResponse",
    "LabelShipment",
    "ConfigManager",
    "ShipEngineConfig",
    "LoggingManager",
    "ShipEngineError",
    "APIError",
    "ArgumentError",
    "ConfigurationError",
    "ResponseProcessingError"
]
