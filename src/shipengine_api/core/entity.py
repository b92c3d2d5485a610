"""Base class for objects mapped to and from ShipEngine JSON."""

import logging
import re
from datetime import datetime
from typing import Annotated, Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .error_handler import ResponseProcessingError

T = TypeVar('T', bound='ApiObject')

logger = logging.getLogger(__name__)

_LONG_FRACTION = re.compile(r'(\.\d{6})\d+')


def _trim_fraction(value: Any) -> Any:
    # ShipEngine timestamps carry 7 fractional digits
    if isinstance(value, str):
        return _LONG_FRACTION.sub(r'\1', value, count=1)
    return value


ApiDateTime = Annotated[datetime, BeforeValidator(_trim_fraction)]


class ApiObject(BaseModel):
    """Value object whose field names match the ShipEngine wire format.

    Objects built from response data are frozen. Unknown response fields are
    dropped so that new API fields do not break older clients.
    """

    model_config = ConfigDict(extra='ignore', frozen=True)

    @classmethod
    def from_api(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Build an instance from a response payload.

        Raises:
            ResponseProcessingError: If the payload does not have the expected shape
        """
        if not isinstance(data, Mapping):
            raise ResponseProcessingError(
                f"Expected an object for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            logger.debug(f"Unexpected {cls.__name__} payload: {e}")
            raise ResponseProcessingError(f"Invalid {cls.__name__} in response: {e}") from e

    def to_api(self) -> Dict[str, Any]:
        """Serialise to the request body representation."""
        return self.model_dump(mode='json', exclude_none=True)
