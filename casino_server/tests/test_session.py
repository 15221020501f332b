"""
会话仓库测试
"""

from collections import deque
from datetime import date

from ..config.settings import settings
from ..core.session import SessionState, SessionStore


class TestSessionStore:
    """会话仓库上限测试"""

    def test_get_or_create_returns_same_state(self):
        store = SessionStore()

        assert store.get_or_create("alice") is store.get_or_create("alice")
        assert len(store) == 1

    def test_evicts_least_recently_used(self):
        """超出上限时淘汰最久未访问的会话"""
        store = SessionStore(max_sessions=2)
        alice = store.get_or_create("alice")
        store.get_or_create("bob")
        store.get_or_create("alice")

        store.get_or_create("carol")

        assert len(store) == 2
        assert store.get_or_create("alice") is alice
        # bob 已被淘汰，再次访问得到新会话
        assert len(store) == 2
        assert store.get_or_create("bob").log_count == 0

    def test_many_distinct_ids_stay_bounded(self):
        """大量不同会话ID不会让仓库无限增长"""
        store = SessionStore(max_sessions=10)
        for i in range(500):
            store.get_or_create(f"session-{i}")

        assert len(store) == 10

    def test_discard_and_clear(self):
        store = SessionStore()
        store.get_or_create("alice")
        store.get_or_create("bob")

        store.discard("alice")
        store.discard("missing")
        assert len(store) == 1

        store.clear()
        assert len(store) == 0


class TestSessionLogs:
    """会话日志上限测试"""

    def test_logs_are_capped(self, now):
        """只保留最近的日志，log_id 继续递增"""
        session = SessionState(session_id="capped", logs=deque(maxlen=3))
        for i in range(5):
            session.record("selection_toggle", {"index": i}, now)

        assert [log.log_id for log in session.logs] == [3, 4, 5]
        assert session.log_count == 5

    def test_default_cap_from_settings(self, session):
        assert session.logs.maxlen == settings.max_session_logs

    def test_record_returns_entry(self, session, now):
        entry = session.record("selection_toggle", {"date": date(2024, 1, 3).isoformat()}, now)

        assert entry.log_id == 1
        assert session.logs[-1] is entry
