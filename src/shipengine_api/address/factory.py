"""Address factory used at the facade boundary."""

from typing import Any, Iterable, List, Optional, Union

from .address import Address
from .formatter import AddressFormatter, MappingAddressFormatter

AddressInput = Union[Address, Any]


class AddressFactory:
    """Turns caller input into ``Address`` objects through a formatter.

    Pass a custom formatter to accept application-specific address types.
    """

    def __init__(self, formatter: Optional[AddressFormatter] = None):
        self.formatter = formatter or MappingAddressFormatter()

    def factory(self, address: AddressInput) -> Address:
        """Return ``address`` unchanged if it is already an Address, else format it."""
        if isinstance(address, Address):
            return address
        return self.formatter.format(address)

    def factory_many(self, addresses: Iterable[AddressInput]) -> List[Address]:
        """Convert each input, preserving order."""
        return [self.factory(address) for address in addresses]
