from .shipment import Dimensions, MonetaryValue, Package, Shipment, Weight

__all__ = ['Dimensions', 'MonetaryValue', 'Package', 'Shipment', 'Weight']
