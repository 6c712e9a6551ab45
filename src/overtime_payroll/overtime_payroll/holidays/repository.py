from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayKind
from .model import Holiday


class HolidayRepository(Protocol):
    """Read/write access to the holiday table.

    The payroll core only ever sees the result of `list_all` / `list_for_year`.
    """

    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def list_for_year(self, year: int) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        raise NotImplementedError

    def add(self, *, holiday_date: date, name: str, kind: HolidayKind) -> int:
        raise NotImplementedError

    def delete_by_date(self, holiday_date: date) -> bool:
        raise NotImplementedError

    def replace_all(self, holidays: Sequence[Holiday]) -> int:
        """Delete every holiday and store `holidays` as one unit of work.

        Either the whole replacement is stored or the table is left as it was.
        Returns the number of deleted rows.
        """

        raise NotImplementedError
