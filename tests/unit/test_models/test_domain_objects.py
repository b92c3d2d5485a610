"""
Unit tests for response-mapped domain objects: verification results,
carriers, rates and labels.
"""

from datetime import datetime, timezone

import pytest

from shipengine_api.address_verification import VerificationResult
from shipengine_api.carriers import Carrier, PackageType, Service
from shipengine_api.core.error_handler import ArgumentError, ResponseProcessingError
from shipengine_api.labels import LabelResponse, LabelShipment
from shipengine_api.rating import RateOptions, RateResponse
from shipengine_api.shipments import Dimensions, Package, Shipment, Weight
from tests.fixtures.sample_data import (
    SAMPLE_CARRIER,
    SAMPLE_LABEL_RESPONSE,
    SAMPLE_PACKAGE_TYPES,
    SAMPLE_RATES_RESPONSE,
    SAMPLE_VALIDATION_RESPONSE,
)


class TestVerificationResult:
    """Test suite for VerificationResult mapping"""

    @pytest.mark.unit
    def test_verified_result(self):
        result = VerificationResult.from_api(SAMPLE_VALIDATION_RESPONSE[0])

        assert result.is_verified is True
        assert result.matched_address.postal_code == "78756-3717"
        assert result.original_address.city_locality == "Austin"
        assert result.messages == []

    @pytest.mark.unit
    def test_error_result_splits_messages(self):
        result = VerificationResult.from_api(SAMPLE_VALIDATION_RESPONSE[1])

        assert result.is_verified is False
        assert result.matched_address is None
        assert [m.code for m in result.errors] == ["a1004"]
        assert [m.code for m in result.warnings] == ["a1008"]

    @pytest.mark.unit
    def test_result_is_immutable(self):
        result = VerificationResult.from_api(SAMPLE_VALIDATION_RESPONSE[0])

        with pytest.raises(ValueError):
            result.status = "error"

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["original_address", "matched_address"])
    def test_result_addresses_are_immutable(self, field):
        result = VerificationResult.from_api(SAMPLE_VALIDATION_RESPONSE[0])

        with pytest.raises(ValueError):
            setattr(getattr(result, field), "city_locality", "Round Rock")

        assert getattr(result, field).city_locality in ("Austin", "AUSTIN")

    @pytest.mark.unit
    def test_matched_address_usable_as_shipment_input(self, warehouse_address):
        matched = VerificationResult.from_api(SAMPLE_VALIDATION_RESPONSE[0]).matched_address

        shipment = Shipment(
            ship_to=matched,
            ship_from=warehouse_address,
            packages=[Package(weight=Weight(value=1))]
        )

        assert shipment.to_api()["ship_to"]["postal_code"] == "78756-3717"

    @pytest.mark.unit
    def test_unknown_status_fails_fast(self):
        payload = dict(SAMPLE_VALIDATION_RESPONSE[0], status="maybe")

        with pytest.raises(ResponseProcessingError):
            VerificationResult.from_api(payload)


class TestCarrier:
    """Test suite for Carrier and its sub-resources"""

    @pytest.mark.unit
    def test_carrier_with_nested_resources(self):
        carrier = Carrier.from_api(SAMPLE_CARRIER)

        assert carrier.carrier_id == "se-123890"
        assert carrier.balance == pytest.approx(8.68)
        assert len(carrier.services) == 2
        assert isinstance(carrier.services[0], Service)
        assert carrier.packages[0].dimensions.length == pytest.approx(12.5)
        assert carrier.options[1].name == "bypass_address_validation"
        assert carrier.display_name == "ShipEngine Test Account - Stamps.com"

    @pytest.mark.unit
    def test_get_service(self):
        carrier = Carrier.from_api(SAMPLE_CARRIER)

        assert carrier.get_service("usps_priority_mail").is_multi_package_supported is True
        assert carrier.get_service("ups_ground") is None

    @pytest.mark.unit
    def test_package_type_without_dimensions(self):
        package_type = PackageType.from_api(SAMPLE_PACKAGE_TYPES[1])

        assert package_type.package_code == "package"
        assert package_type.dimensions is None

    @pytest.mark.unit
    def test_missing_required_field_fails_fast(self):
        with pytest.raises(ResponseProcessingError):
            Carrier.from_api({"carrier_code": "ups"})


class TestRateResponse:
    """Test suite for rate mapping"""

    @pytest.fixture
    def rate_response(self):
        return RateResponse.from_api(SAMPLE_RATES_RESPONSE["rate_response"])

    @pytest.mark.unit
    def test_rates_mapped_in_order(self, rate_response):
        assert [rate.rate_id for rate in rate_response.rates] == ["se-11111", "se-22222", "se-33333"]
        assert rate_response.status == "completed"
        assert rate_response.shipment_id == "se-141694059"

    @pytest.mark.unit
    def test_seven_digit_timestamps_parse(self, rate_response):
        assert rate_response.created_at == datetime(2024, 9, 20, 16, 21, 38, 901059, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_total_amount_and_cheapest(self, rate_response):
        ups = rate_response.rates[1]

        assert ups.total_amount.amount == pytest.approx(10.27)
        assert ups.total_amount.currency == "usd"
        assert rate_response.cheapest().rate_id == "se-33333"

    @pytest.mark.unit
    def test_for_carrier(self, rate_response):
        assert [r.service_code for r in rate_response.for_carrier("se-123890")] == [
            "usps_priority_mail",
            "usps_first_class_mail",
        ]

    @pytest.mark.unit
    def test_empty_rate_response(self):
        response = RateResponse.from_api({"rates": [], "status": "error"})
        assert response.cheapest() is None


class TestRateOptions:
    """Test suite for RateOptions"""

    @pytest.mark.unit
    def test_len_counts_unique_carriers(self):
        options = RateOptions(["se-1", "se-2", "se-1"])

        assert len(options) == 2
        assert list(options) == ["se-1", "se-2"]
        assert "se-2" in options

    @pytest.mark.unit
    def test_accepts_carrier_objects(self):
        options = RateOptions().add_carrier(Carrier.from_api(SAMPLE_CARRIER))
        assert options.carrier_ids == ["se-123890"]

    @pytest.mark.unit
    def test_empty_options(self):
        options = RateOptions()

        assert len(options) == 0
        assert not options

    @pytest.mark.unit
    def test_to_api_includes_optional_filters(self):
        options = RateOptions(["se-1"], service_codes=["usps_priority_mail"])

        assert options.to_api() == {
            "carrier_ids": ["se-1"],
            "service_codes": ["usps_priority_mail"],
        }

    @pytest.mark.unit
    def test_single_string_is_one_carrier(self):
        options = RateOptions("se-123890", service_codes="usps_priority_mail")

        assert options.carrier_ids == ["se-123890"]
        assert options.to_api()["service_codes"] == ["usps_priority_mail"]

    @pytest.mark.unit
    def test_blank_carrier_id_rejected(self):
        with pytest.raises(ArgumentError):
            RateOptions([" "])


class TestShipment:
    """Test suite for Shipment and LabelShipment"""

    @pytest.mark.unit
    def test_to_api(self, sample_shipment):
        data = sample_shipment.to_api()

        assert data["ship_to"]["city_locality"] == "Austin"
        assert data["packages"] == [{"weight": {"value": 20.0, "unit": "ounce"}}]
        assert "service_code" not in data

    @pytest.mark.unit
    def test_add_package(self, sample_shipment):
        sample_shipment.add_package(Package(
            weight=Weight(value=2, unit="pound"),
            dimensions=Dimensions(length=10, width=8, height=4)
        ))

        packages = sample_shipment.to_api()["packages"]
        assert len(packages) == 2
        assert packages[1]["dimensions"] == {"unit": "inch", "length": 10.0, "width": 8.0, "height": 4.0}

    @pytest.mark.unit
    def test_shipment_without_packages_cannot_be_serialised(self, austin_address, warehouse_address):
        shipment = Shipment(ship_to=austin_address, ship_from=warehouse_address)

        with pytest.raises(ArgumentError):
            shipment.to_api()

    @pytest.mark.unit
    def test_label_shipment_requires_service_code(self, austin_address, warehouse_address):
        with pytest.raises(ValueError):
            LabelShipment(ship_to=austin_address, ship_from=warehouse_address)

    @pytest.mark.unit
    def test_weight_must_be_positive(self):
        with pytest.raises(ValueError):
            Weight(value=0)


class TestLabelResponse:
    """Test suite for LabelResponse mapping"""

    @pytest.mark.unit
    def test_label_fields(self):
        label = LabelResponse.from_api(SAMPLE_LABEL_RESPONSE)

        assert label.tracking_number == "9999999999999"
        assert label.status == "completed"
        assert label.shipment_cost.amount == pytest.approx(7.58)
        assert label.download_url.endswith("label-28529731.pdf")
        assert label.form_download is None

    @pytest.mark.unit
    def test_download_url_falls_back_to_pdf(self):
        payload = dict(SAMPLE_LABEL_RESPONSE, label_download={"pdf": "https://example.test/l.pdf"})

        assert LabelResponse.from_api(payload).download_url == "https://example.test/l.pdf"
