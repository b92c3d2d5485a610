from .label import LabelDownload, LabelResponse, LabelShipment

__all__ = ['LabelDownload', 'LabelResponse', 'LabelShipment']
