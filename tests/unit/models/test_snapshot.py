"""Tests for snapshot JSON validation."""

import copy
import dataclasses

import pytest
from pydantic import ValidationError

from quoter.constants import U64_MAX
from quoter.models.snapshot import SnapshotModel, load_snapshot
from tests.helpers import SOL, USDC, make_snapshot


class TestLoadSnapshot:
    def test_fixture_matches_factory(self, balanced_snapshot_json):
        """The JSON fixture and make_snapshot() describe the same pool."""
        expected = dataclasses.replace(make_snapshot(), pool_id="sol-usdc-balanced")
        assert load_snapshot(balanced_snapshot_json) == expected

    def test_amounts_accept_strings_and_ints(self, balanced_snapshot_json):
        data = copy.deepcopy(balanced_snapshot_json)
        data["composition"]["amounts"] = [200_000_000_000, "10000000000000"]
        snapshot = load_snapshot(data)
        assert snapshot.composition.amounts == (200_000_000_000, 10_000_000_000_000)

    def test_defaults(self, balanced_snapshot_json):
        snapshot = load_snapshot(balanced_snapshot_json)
        assert snapshot.assets[0].use_curve_price is True
        assert snapshot.assets[0].lp_enabled is True
        assert snapshot.curves[0].sell.points == ()

    def test_curves(self, curved_snapshot_json):
        snapshot = load_snapshot(curved_snapshot_json)
        sell = snapshot.curves[1].sell
        assert len(sell.points) == 2
        assert sell.points[0].price == 19_950_000
        assert sell.thresholds == (250_000_000_000, 750_000_000_000)
        assert snapshot.prices[1].sell_price == 19_980_000
        assert snapshot.prices[1].is_live

    def test_camel_and_snake_case(self, balanced_snapshot_json):
        model = SnapshotModel.model_validate(balanced_snapshot_json)
        assert model.pool_id == "sol-usdc-balanced"
        assert model.assets[0].mint == USDC
        assert model.assets[1].mint == SOL


class TestValidationErrors:
    @pytest.fixture
    def data(self, balanced_snapshot_json):
        return copy.deepcopy(balanced_snapshot_json)

    def test_u64_overflow(self, data):
        data["composition"]["amounts"][0] = str(U64_MAX + 1)
        with pytest.raises(ValidationError, match="overflow"):
            load_snapshot(data)

    def test_negative_amount(self, data):
        data["composition"]["amounts"][0] = "-1"
        with pytest.raises(ValidationError, match="negative"):
            load_snapshot(data)

    def test_non_numeric_amount(self, data):
        data["composition"]["amounts"][0] = "lots"
        with pytest.raises(ValidationError):
            load_snapshot(data)

    def test_boolean_amount(self, data):
        data["composition"]["amounts"][0] = True
        with pytest.raises(ValidationError, match="boolean"):
            load_snapshot(data)

    def test_misaligned_composition(self, data):
        data["composition"]["targetWeights"] = [10_000]
        with pytest.raises(ValidationError, match="same length"):
            load_snapshot(data)

    def test_duplicate_composition_ids(self, data):
        data["composition"]["assetIds"] = [1, 1]
        with pytest.raises(ValidationError, match="unique"):
            load_snapshot(data)

    def test_unknown_asset_id(self, data):
        data["composition"]["assetIds"] = [0, 7]
        with pytest.raises(ValidationError, match="unknown asset id 7"):
            load_snapshot(data)

    def test_duplicate_mints(self, data):
        data["assets"][1]["mint"] = data["assets"][0]["mint"]
        with pytest.raises(ValidationError, match="mints must be unique"):
            load_snapshot(data)

    def test_fee_shares_over_100(self, data):
        data["feeRecipients"] = {"protocolBps": 50, "hostBps": 30, "managerBps": 21}
        with pytest.raises(ValidationError, match="at most 100"):
            load_snapshot(data)

    def test_fee_shares_summing_to_100(self, data):
        data["feeRecipients"] = {"protocolBps": 50, "hostBps": 30, "managerBps": 20}
        snapshot = load_snapshot(data)
        assert snapshot.fee_recipients.total_bps == 100

    def test_too_many_curve_points(self, data):
        data["assets"][0]["curves"] = {"sell": [{"amount": "1", "price": "1"}] * 11}
        with pytest.raises(ValidationError):
            load_snapshot(data)

    def test_decimals_out_of_range(self, data):
        data["assets"][0]["decimals"] = 20
        with pytest.raises(ValidationError):
            load_snapshot(data)

    def test_missing_oracle(self, data):
        del data["assets"][0]["oracle"]
        with pytest.raises(ValidationError):
            load_snapshot(data)
