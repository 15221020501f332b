"""
测试配置文件
提供测试所需的fixtures和配置
"""

import pytest
from datetime import date, datetime
from fastapi.testclient import TestClient

from ..app import create_app
from ..core.clock import get_now
from ..core.session import SessionState, SessionStore, get_session_store
from ..models.ledger import ReservationLedger
from ..models.reservation import MealType
from ..services.reservation_service import ReservationService

# 固定的当前时间，所有时间相关断言都基于它
FIXED_NOW = datetime(2024, 1, 1, 0, 0)


@pytest.fixture
def now():
    """测试用当前时间"""
    return FIXED_NOW


@pytest.fixture
def ledger():
    """空台账"""
    return ReservationLedger()


@pytest.fixture
def booked_ledger(ledger, now):
    """已有两条预约的台账：2024-01-03、2024-01-05"""
    new_ledger, _ = ledger.create(
        [date(2024, 1, 3), date(2024, 1, 5)], MealType.NORMAL, now)
    return new_ledger


@pytest.fixture
def session():
    """测试会话"""
    return SessionState(session_id="test-session")


@pytest.fixture
def service():
    """48小时提前量的预约服务"""
    return ReservationService(lead_time_hours=48)


@pytest.fixture
def store():
    """独立的会话仓库"""
    return SessionStore()


@pytest.fixture
def app_instance(now, store):
    """测试应用，固定时钟并隔离会话仓库"""
    app = create_app()
    app.dependency_overrides[get_now] = lambda: now
    app.dependency_overrides[get_session_store] = lambda: store

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app_instance):
    """测试客户端"""
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def session_headers():
    """会话请求头"""
    return {"X-Session-Id": "test-session"}
