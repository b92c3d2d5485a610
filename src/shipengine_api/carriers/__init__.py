from .carrier import Carrier, Option, PackageType, Service

__all__ = ['Carrier', 'Option', 'PackageType', 'Service']
