from .address import Address, ResponseAddress
from .factory import AddressFactory, AddressInput
from .formatter import AddressFormatter, MappingAddressFormatter

__all__ = [
    'Address',
    'AddressFactory',
    'AddressFormatter',
    'AddressInput',
    'MappingAddressFormatter',
    'ResponseAddress'
]
