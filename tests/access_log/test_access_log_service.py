from __future__ import annotations

from datetime import datetime

import pytest

from src.overtime_payroll.overtime_payroll.access_log.service import AccessLogService
from src.overtime_payroll.overtime_payroll.core.enums import Role
from src.overtime_payroll.overtime_payroll.core.exceptions import AuthorizationError, ValidationError
from tests.fakes import FakeAccessLogRepo


def test_register_and_list_recent_first():
    repo = FakeAccessLogRepo()
    svc = AccessLogService(repo)

    svc.register("10.0.0.1", now=datetime(2025, 3, 1, 8, 0))
    record = svc.register("10.0.0.2", now=datetime(2025, 3, 1, 9, 0))

    assert record.as_dict() == {"id": 2, "ip": "10.0.0.2", "fecha": "2025-03-01T09:00:00"}
    assert [r.ip for r in svc.list_recent(current_role=Role.ADMIN, limit=1)] == ["10.0.0.2"]


def test_register_requires_ip():
    with pytest.raises(ValidationError):
        AccessLogService(FakeAccessLogRepo()).register("")


def test_listing_and_clearing_require_admin():
    repo = FakeAccessLogRepo()
    svc = AccessLogService(repo)
    svc.register("10.0.0.1")

    with pytest.raises(AuthorizationError):
        svc.list_recent(current_role=Role.GUEST)
    with pytest.raises(AuthorizationError):
        svc.clear(current_role=Role.GUEST)

    assert svc.clear(current_role=Role.ADMIN) == 1
    assert repo.list_all() == []
