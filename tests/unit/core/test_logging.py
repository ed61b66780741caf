"""로깅 설정 테스트"""

import json
import logging

from app.core.logging import ColoredFormatter, JSONFormatter, RequestContextFilter
from app.core.middlewares.context import request_id_ctx


def _record(msg: str = "Notification delivered", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.test", level=logging.INFO, pathname=__file__, lineno=1,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestContextFilter:
    """요청 ID 필터 테스트"""

    def test_sets_request_id_from_context(self):
        token = request_id_ctx.set("req-123")
        try:
            record = _record()
            RequestContextFilter().filter(record)
        finally:
            request_id_ctx.reset(token)

        assert record.request_id == "req-123"

    def test_default_request_id(self):
        record = _record()
        RequestContextFilter().filter(record)

        assert record.request_id == "-"


class TestFormatters:
    """포맷터 테스트"""

    def test_json_formatter_includes_extra(self):
        record = _record(user="alice", mark_id="m1")
        RequestContextFilter().filter(record)

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "Notification delivered"
        assert payload["user"] == "alice"
        assert payload["mark_id"] == "m1"

    def test_colored_formatter_appends_extra(self):
        record = _record(user="alice")
        RequestContextFilter().filter(record)

        line = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "Notification delivered" in line
        assert "user=alice" in line
