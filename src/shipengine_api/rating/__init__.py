from .options import RateOptions
from .rate import Rate, RateError, RateResponse

__all__ = ['Rate', 'RateError', 'RateOptions', 'RateResponse']
