"""
ShipEngine API transport package

Request construction, the HTTP transport and response handling.
"""

from .client import HTTPClient, Transport
from .authentication import ApiKeyAuthentication
from .request_factory import ApiRequest, RequestFactory
from .response_handler import ApiResponse, ResponseHandler

__all__ = [
    'HTTPClient',
    'Transport',
    'ApiKeyAuthentication',
    'ApiRequest',
    'RequestFactory',
    'ApiResponse',
    'ResponseHandler'
]
