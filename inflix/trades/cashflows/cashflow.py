##############################################################################

##############################################################################

"""
Single cashflow paid on a known date.

Used as the building block of the cashflow legs valued by the BondEngine.
"""

from inflix.utils.date import Date
from inflix.utils.currency import CurrencyTypes
from inflix.utils.helpers import check_argument_types, label_to_string

##########################################################################


class SimpleCashflow:
    """
    A fixed amount paid on a payment date.

    Attributes:
        _payment_dt (Date): Date the amount is paid
        _amount (float): Payment amount in currency units
        _currency (CurrencyTypes): Currency denomination

    Example:
        >>> cf = SimpleCashflow(Date(15, 6, 2025), 2_500.0)
        >>> cf.payment_dt()
        15-JUN-2025
    """

    def __init__(self,
                 payment_dt: Date,
                 amount: float,
                 currency: CurrencyTypes = CurrencyTypes.GBP):
        check_argument_types(self.__init__, locals())

        self._payment_dt = payment_dt
        self._amount = amount
        self._currency = currency

    def payment_dt(self):
        return self._payment_dt

    def amount(self):
        return self._amount

    def currency(self):
        return self._currency

    def has_occurred(self, ref_dt: Date):
        """ A cashflow paid on or before ref_dt has occurred. """
        return self._payment_dt <= ref_dt

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("PAYMENT DATE", self._payment_dt)
        s += label_to_string("AMOUNT", self._amount)
        s += label_to_string("CURRENCY", self._currency, "")
        return s

###########################################################################
