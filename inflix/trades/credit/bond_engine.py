##############################################################################

##############################################################################

"""
Discounting engine for bond cashflow legs.

The BondEngine values a leg of cashflows as the net present value of the
flows paid after the settlement date, discounted on the curve linked to its
handle and expressed as of the settlement date. The engine observes the
handle and passes relinking notifications on to its own observers so that
cached prices can be invalidated.

Example:
    >>> discount_handle = Handle(discount_curve)
    >>> engine = BondEngine(discount_handle)
    >>> flows = [SimpleCashflow(Date(15, 6, 2025), 2.5),
    ...          SimpleCashflow(Date(15, 6, 2026), 102.5)]
    >>> engine.calculate(flows, Date(15, 6, 2024))
"""

import logging

from inflix.utils.date import Date
from inflix.utils.error import LibError
from inflix.utils.helpers import format_table, label_to_string
from inflix.utils.observer import Handle, Observable, Observer

logger = logging.getLogger(__name__)

###############################################################################


class BondEngine(Observable, Observer):
    """ Values bond cashflows on a discount curve. """

    def __init__(self,
                 discount_curve: Handle = None):

        Observable.__init__(self)
        Observer.__init__(self)

        if discount_curve is None:
            discount_curve = Handle()

        if isinstance(discount_curve, Handle) is False:
            raise LibError("Discount curve must be a Handle")

        self._discount_curve = discount_curve
        self._value = None
        self.register_with(self._discount_curve)

    ###########################################################################

    def discount_curve(self):
        return self._discount_curve

    def update(self):
        self._value = None
        self.notify_observers()

    ###########################################################################

    def calculate(self,
                  cashflows: list,
                  settlement_dt: Date):
        """ NPV at settlement_dt of the cashflows paid after it. """

        if self._discount_curve.empty():
            raise LibError("no discounting term structure set")

        curve = self._discount_curve.current_link()
        df_settle = curve.df(settlement_dt)

        npv = 0.0
        for cf in cashflows:
            if cf.has_occurred(settlement_dt):
                continue
            npv += cf.amount() * curve.df(cf.payment_dt()) / df_settle

        logger.debug("Bond NPV %f at %s from %d cashflows", npv,
                     settlement_dt, len(cashflows))

        self._value = npv
        return npv

    def value(self):
        """ Result of the last calculation. """
        if self._value is None:
            raise LibError("Bond engine has no valid result, call calculate()")
        return self._value

    ###########################################################################

    def print_valuation(self,
                        cashflows: list,
                        settlement_dt: Date):
        """ Print the discounting of each future cashflow. """

        curve = self._discount_curve.current_link()
        if curve is None:
            raise LibError("no discounting term structure set")

        df_settle = curve.df(settlement_dt)

        header = ["PAY_NUM", "PAY_DT", "AMOUNT", "DF", "PV", "CUM_PV"]
        rows = []
        cum_pv = 0.0
        num = 1
        for cf in cashflows:
            if cf.has_occurred(settlement_dt):
                continue
            df = curve.df(cf.payment_dt()) / df_settle
            pv = cf.amount() * df
            cum_pv += pv
            rows.append([num, cf.payment_dt(), round(cf.amount(), 2),
                         round(df, 6), round(pv, 2), round(cum_pv, 2)])
            num += 1

        print(f"SETTLEMENT DATE: {settlement_dt}")
        print(format_table(header, rows))

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("HAS CURVE", self._discount_curve.empty() is False)
        s += label_to_string("LAST VALUE", self._value, "")
        return s

###############################################################################
