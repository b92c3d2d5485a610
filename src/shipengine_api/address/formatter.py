"""
Address formatters

A formatter turns caller-side address data into an ``Address``. The default
implementation understands plain mappings using either ShipEngine field
names or the usual short aliases.
"""

import logging
from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from pydantic import ValidationError

from ..core.error_handler import ArgumentError
from .address import Address

logger = logging.getLogger(__name__)


@runtime_checkable
class AddressFormatter(Protocol):
    """Converts an application address representation into an ``Address``."""

    def format(self, raw: Any) -> Address:
        ...


class MappingAddressFormatter:
    """Formats dict-like address data into an ``Address``.

    Exact ShipEngine keys win over aliases when both are present.
    """

    ALIASES = {
        'street': 'address_line1',
        'street1': 'address_line1',
        'line1': 'address_line1',
        'address1': 'address_line1',
        'street2': 'address_line2',
        'line2': 'address_line2',
        'address2': 'address_line2',
        'street3': 'address_line3',
        'line3': 'address_line3',
        'address3': 'address_line3',
        'city': 'city_locality',
        'state': 'state_province',
        'province': 'state_province',
        'region': 'state_province',
        'zip': 'postal_code',
        'zip_code': 'postal_code',
        'postcode': 'postal_code',
        'country': 'country_code',
        'company': 'company_name',
        'residential': 'address_residential_indicator',
    }

    def format(self, raw: Any) -> Address:
        """
        Build an Address from a mapping

        Args:
            raw: Mapping of address fields

        Returns:
            The formatted Address

        Raises:
            ArgumentError: If the data is not a mapping or holds invalid values
        """
        if not isinstance(raw, Mapping):
            raise ArgumentError(
                f"Cannot format address from {type(raw).__name__}; expected a mapping or Address"
            )

        fields: Dict[str, Any] = {}
        aliased: Dict[str, Any] = {}

        for key, value in raw.items():
            normalized = str(key).strip().lower()
            if normalized in Address.model_fields:
                fields[normalized] = value
            elif normalized in self.ALIASES:
                aliased.update(self._expand_alias(normalized, value))
            else:
                logger.debug(f"Ignoring unknown address field '{key}'")

        for key, value in aliased.items():
            fields.setdefault(key, value)

        try:
            return Address(**fields)
        except ValidationError as e:
            raise ArgumentError(f"Invalid address data: {e}") from e

    def _expand_alias(self, key: str, value: Any) -> Dict[str, Any]:
        if key == 'street' and isinstance(value, (list, tuple)):
            lines = [line for line in value if line][:3]
            return {f'address_line{i}': line for i, line in enumerate(lines, start=1)}

        if key == 'residential' and isinstance(value, bool):
            return {'address_residential_indicator': 'yes' if value else 'no'}

        return {self.ALIASES[key]: value}
