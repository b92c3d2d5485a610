"""Rate options: which carriers (and optionally services) to quote."""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..carriers.carrier import Carrier
from ..core.error_handler import ArgumentError

CarrierRef = Union[str, Carrier]


class RateOptions:
    """Ordered, de-duplicated set of carrier ids to request rates from.

    ``len()`` is the number of carriers; an empty set is rejected by
    ``ShipEngine.get_rates`` before anything is sent.
    """

    def __init__(
        self,
        carriers: Optional[Union[CarrierRef, Iterable[CarrierRef]]] = None,
        service_codes: Optional[Iterable[str]] = None,
        package_types: Optional[Iterable[str]] = None
    ):
        self._carrier_ids: List[str] = []
        self.service_codes = _as_codes(service_codes)
        self.package_types = _as_codes(package_types)

        if isinstance(carriers, (str, Carrier)):
            carriers = [carriers]
        for carrier in carriers or []:
            self.add_carrier(carrier)

    def add_carrier(self, carrier: CarrierRef) -> 'RateOptions':
        carrier_id = carrier.carrier_id if isinstance(carrier, Carrier) else carrier
        if not isinstance(carrier_id, str) or not carrier_id.strip():
            raise ArgumentError(f"Invalid carrier id: {carrier_id!r}")

        carrier_id = carrier_id.strip()
        if carrier_id not in self._carrier_ids:
            self._carrier_ids.append(carrier_id)
        return self

    @property
    def carrier_ids(self) -> List[str]:
        return list(self._carrier_ids)

    def to_api(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'carrier_ids': self.carrier_ids}
        if self.service_codes:
            data['service_codes'] = list(self.service_codes)
        if self.package_types:
            data['package_types'] = list(self.package_types)
        return data

    def __len__(self) -> int:
        return len(self._carrier_ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.carrier_ids)

    def __contains__(self, carrier_id: object) -> bool:
        return carrier_id in self._carrier_ids

    def __repr__(self) -> str:
        return f"RateOptions(carrier_ids={self._carrier_ids!r})"


def _as_codes(codes: Optional[Union[str, Iterable[str]]]) -> List[str]:
    if isinstance(codes, str):
        return [codes]
    return list(codes or [])
