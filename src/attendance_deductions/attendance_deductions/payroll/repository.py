from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_for_period(self, *, period: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def get_for_employee(self, *, employee_id: str, period: str) -> Optional[PayrollRecord]:
        raise NotImplementedError
