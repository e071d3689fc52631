"""
Test suite for inflix.trades.credit.bond_engine
Tests discounting of bond cashflows on a linked discount curve
"""
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest
from inflix.utils.date import Date
from inflix.utils.currency import CurrencyTypes
from inflix.utils.error import LibError
from inflix.utils.observer import Handle, Observer
from inflix.market.curves.discount_curve import DiscountCurve
from inflix.trades.cashflows.cashflow import SimpleCashflow
from inflix.trades.credit.bond_engine import BondEngine


VALUE_DT = Date(15, 6, 2024)
RATE = 0.04


@pytest.fixture
def flat_curve():
    """Curve with a flat 4% continuously compounded ACT/365F zero rate"""
    return DiscountCurve(VALUE_DT, [VALUE_DT.add_days(365)], [np.exp(-RATE)])


@pytest.fixture
def bond_flows():
    return [SimpleCashflow(Date(15, 6, 2024), 2.5),
            SimpleCashflow(Date(15, 6, 2025), 2.5),
            SimpleCashflow(Date(15, 6, 2026), 102.5)]


def discount(dt, settlement_dt):
    return np.exp(-RATE * ((dt - VALUE_DT) - (settlement_dt - VALUE_DT)) / 365.0)


class CountingObserver(Observer):
    """Observer that counts its updates"""

    def __init__(self):
        Observer.__init__(self)
        self.count = 0

    def update(self):
        self.count += 1


class TestSimpleCashflow:
    """Test cases for SimpleCashflow"""

    def test_accessors(self):
        cf = SimpleCashflow(Date(15, 6, 2025), 2500.0, CurrencyTypes.EUR)
        assert cf.payment_dt() == Date(15, 6, 2025)
        assert cf.amount() == 2500.0
        assert cf.currency() == CurrencyTypes.EUR

    def test_has_occurred(self):
        cf = SimpleCashflow(Date(15, 6, 2025), 1.0)
        assert cf.has_occurred(Date(15, 6, 2025)) is True
        assert cf.has_occurred(Date(14, 6, 2025)) is False

    def test_argument_types(self):
        with pytest.raises(LibError):
            SimpleCashflow("15-JUN-2025", 1.0)


class TestBondEngine:
    """Test cases for BondEngine"""

    def test_empty_handle(self, bond_flows):
        engine = BondEngine()
        with pytest.raises(LibError, match="no discounting term structure set"):
            engine.calculate(bond_flows, VALUE_DT)

    def test_no_result_before_calculation(self, flat_curve):
        engine = BondEngine(Handle(flat_curve))
        with pytest.raises(LibError):
            engine.value()

    def test_npv_at_value_date(self, flat_curve, bond_flows):
        """Flows paid on the settlement date are excluded"""
        engine = BondEngine(Handle(flat_curve))
        npv = engine.calculate(bond_flows, VALUE_DT)

        expected = 2.5 * discount(Date(15, 6, 2025), VALUE_DT) + \
            102.5 * discount(Date(15, 6, 2026), VALUE_DT)
        assert npv == pytest.approx(expected)
        assert engine.value() == npv

    def test_npv_is_expressed_at_settlement(self, flat_curve, bond_flows):
        """Values are forwarded from the curve date to settlement"""
        engine = BondEngine(Handle(flat_curve))
        settlement_dt = Date(15, 12, 2024)
        npv = engine.calculate(bond_flows, settlement_dt)

        expected = 2.5 * discount(Date(15, 6, 2025), settlement_dt) + \
            102.5 * discount(Date(15, 6, 2026), settlement_dt)
        assert npv == pytest.approx(expected)

    def test_all_flows_paid(self, flat_curve, bond_flows):
        engine = BondEngine(Handle(flat_curve))
        assert engine.calculate(bond_flows, Date(15, 6, 2026)) == 0.0

    def test_relinking_invalidates_result(self, flat_curve, bond_flows):
        handle = Handle(flat_curve)
        engine = BondEngine(handle)
        observer = CountingObserver()
        observer.register_with(engine)

        engine.calculate(bond_flows, VALUE_DT)
        handle.link_to(DiscountCurve(VALUE_DT, [VALUE_DT.add_days(365)], [0.9]))

        assert observer.count == 1
        with pytest.raises(LibError):
            engine.value()

    def test_handle_required(self, flat_curve):
        with pytest.raises(LibError):
            BondEngine(flat_curve)

    def test_print_valuation(self, flat_curve, bond_flows, capsys):
        engine = BondEngine(Handle(flat_curve))
        engine.print_valuation(bond_flows, VALUE_DT)
        out = capsys.readouterr().out
        assert "SETTLEMENT DATE: 15-JUN-2024" in out
        assert "15-JUN-2026" in out
