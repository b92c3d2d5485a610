"""
Response Handler for the ShipEngine API Client

Turns HTTP responses into ``ApiResponse`` objects, raising the matching
``APIError`` subclass for non-success status codes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import JSONDecodeError

from ..core.error_handler import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ResponseProcessingError,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
)


@dataclass(frozen=True)
class ApiResponse:
    """Parsed body of a successful response"""
    status_code: int
    data: Any
    request_id: Optional[str] = None

    def get_data(self, key: Optional[str] = None) -> Any:
        """
        Return the whole payload, or one top-level field of it

        Raises:
            ResponseProcessingError: If ``key`` is not present in the payload
        """
        if key is None:
            return self.data

        if not isinstance(self.data, dict) or key not in self.data:
            raise ResponseProcessingError(f"Response is missing the '{key}' field")
        return self.data[key]


class StatusCodeHandler:
    """Handles different HTTP status codes and their meanings"""

    # Status code mappings to exceptions
    ERROR_MAPPINGS = {
        400: ValidationError,
        401: AuthenticationError,
        403: AuthorizationError,
        404: NotFoundError,
        409: ConflictError,
        429: RateLimitError,
        503: ServiceUnavailableError,
    }

    @classmethod
    def handle_status_code(cls, response: requests.Response) -> bool:
        """
        Check response status code and raise appropriate exceptions

        Returns:
            True if status indicates success, raises exception otherwise
        """
        status_code = response.status_code

        if 200 <= status_code < 300:
            return True

        error_details = cls._extract_error_details(response)
        exception_class = cls.ERROR_MAPPINGS.get(status_code)
        if exception_class is None:
            exception_class = ServerError if status_code >= 500 else APIError

        raise exception_class(
            message=error_details.get('message') or f'HTTP {status_code} error',
            status_code=status_code,
            error_code=error_details.get('error_code'),
            request_id=error_details.get('request_id'),
            details=error_details.get('details'),
            errors=error_details.get('errors')
        )

    @staticmethod
    def _extract_error_details(response: requests.Response) -> Dict[str, Any]:
        """Extract error details from ShipEngine's error envelope"""
        try:
            error_data = response.json()
        except (JSONDecodeError, ValueError):
            return {
                'message': response.reason or response.text[:200] or f'HTTP {response.status_code} error',
                'details': {'response_text': response.text[:500]}
            }

        if not isinstance(error_data, dict):
            return {'message': str(error_data)}

        errors: List[Dict[str, Any]] = [
            error for error in error_data.get('errors') or [] if isinstance(error, dict)
        ]
        messages = [error['message'] for error in errors if error.get('message')]

        return {
            'message': '; '.join(messages) or error_data.get('message'),
            'error_code': errors[0].get('error_code') if errors else error_data.get('error_code'),
            'request_id': error_data.get('request_id'),
            'details': error_data,
            'errors': errors
        }


class ResponseParser:
    """Parses response bodies"""

    @staticmethod
    def parse_json_response(response: requests.Response) -> Any:
        """Parse JSON response with error handling"""
        if not response.content:
            return None
        try:
            return response.json()
        except (JSONDecodeError, ValueError) as e:
            raise ResponseProcessingError(f"Invalid JSON response: {e}")


class ResponseHandler:
    """
    Response handler for ShipEngine API responses.

    Checks the status code first, then parses the JSON body into an
    ``ApiResponse``.
    """

    def __init__(self):
        self.status_handler = StatusCodeHandler()
        self.parser = ResponseParser()
        self.logger = logging.getLogger(__name__)

    def handle_response(self, response: requests.Response) -> ApiResponse:
        """
        Process HTTP response

        Args:
            response: requests.Response object

        Returns:
            ApiResponse wrapping the parsed body

        Raises:
            APIError: Subclass matching the HTTP status on failure
            ResponseProcessingError: If a success body is not valid JSON
        """
        try:
            self.status_handler.handle_status_code(response)
        except APIError as e:
            self.logger.debug(
                f"API error {e.status_code} ({e.error_code}): {e.message}",
                extra={'request_id': e.request_id}
            )
            raise

        data = self.parser.parse_json_response(response)
        request_id = data.get('request_id') if isinstance(data, dict) else None

        self.logger.debug(f"Response {response.status_code} parsed ({len(response.content)} bytes)")
        return ApiResponse(status_code=response.status_code, data=data, request_id=request_id)
