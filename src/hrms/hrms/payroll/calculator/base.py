from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace

from ..model import Payroll


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def gross_pay(self, payroll: Payroll) -> float:
        raise NotImplementedError

    @abstractmethod
    def total_deductions(self, payroll: Payroll) -> float:
        raise NotImplementedError

    def net_pay(self, gross_pay: float, total_deductions: float) -> float:
        return gross_pay - total_deductions

    def apply(self, payroll: Payroll) -> Payroll:
        """Return a copy with the derived totals recomputed."""
        gross = self.gross_pay(payroll)
        deductions = self.total_deductions(payroll)
        return replace(
            payroll,
            gross_pay=gross,
            total_deductions=deductions,
            net_pay=self.net_pay(gross, deductions),
        )
