"""FCM 푸시 클라이언트 테스트"""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import exceptions as firebase_exceptions

from app.core.push import PushClient, PushDeliveryException


class TestPushClient:
    """PushClient 테스트"""

    @pytest.mark.asyncio
    async def test_send_builds_message(self):
        # Given
        app = MagicMock()
        client = PushClient(app=app)

        # When
        with patch(
            "app.core.push.messaging.send", return_value="projects/p/messages/1"
        ) as send:
            message_id = await client.send(
                token="device", title="Hello", body="World", data={"kind": "test"}
            )

        # Then
        assert message_id == "projects/p/messages/1"
        message, dry_run, used_app = send.call_args.args
        assert message.token == "device"
        assert message.notification.title == "Hello"
        assert message.data == {"kind": "test"}
        assert dry_run is False
        assert used_app is app

    @pytest.mark.asyncio
    async def test_firebase_error_raises_delivery_exception(self):
        client = PushClient(app=MagicMock())
        error = firebase_exceptions.NotFoundError("Requested entity was not found.")

        with patch("app.core.push.messaging.send", side_effect=error):
            with pytest.raises(PushDeliveryException) as exc_info:
                await client.send(token="device", title="t", body="b")

        assert exc_info.value.status_code == 502
        assert exc_info.value.detail_info["service"] == "fcm"
