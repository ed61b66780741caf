"""User Service 단위 테스트"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.models import User
from app.domains.users.service import UserService


@pytest.fixture
def user_service():
    """UserService 인스턴스"""
    return UserService(MagicMock())


class TestGetUser:
    """사용자 조회 테스트"""

    @pytest.mark.asyncio
    async def test_get_user_success(self, user_service):
        user = User(username="alice")
        user_service.repository.get_by_username = AsyncMock(return_value=user)

        result = await user_service.get_user("alice")

        assert result is user

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, user_service):
        user_service.repository.get_by_username = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundException) as exc_info:
            await user_service.get_user("ghost")

        assert exc_info.value.detail_info == {"username": "ghost"}


class TestIterUsernames:
    """사용자 페이지 순회 테스트"""

    @pytest.mark.asyncio
    async def test_pages_until_short_page(self, user_service):
        # Given
        user_service.repository.list_usernames = AsyncMock(
            side_effect=[["a", "b"], ["c", "d"], ["e"]]
        )

        # When
        pages = [page async for page in user_service.iter_usernames(batch_size=2)]

        # Then
        assert pages == [["a", "b"], ["c", "d"], ["e"]]
        user_service.repository.list_usernames.assert_any_await(skip=4, limit=2)

    @pytest.mark.asyncio
    async def test_stops_on_empty_page(self, user_service):
        user_service.repository.list_usernames = AsyncMock(
            side_effect=[["a", "b"], []]
        )

        pages = [page async for page in user_service.iter_usernames(batch_size=2)]

        assert pages == [["a", "b"]]

    @pytest.mark.asyncio
    async def test_no_users(self, user_service):
        user_service.repository.list_usernames = AsyncMock(return_value=[])

        pages = [page async for page in user_service.iter_usernames()]

        assert pages == []


class TestRegisterDeviceToken:
    """기기 토큰 등록 테스트"""

    @pytest.mark.asyncio
    async def test_registers_token_for_new_user(self, user_service):
        # Given
        user = User(username="alice")
        user_service.repository.create_if_absent = AsyncMock(return_value=True)
        user_service.repository.get_by_username = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        # When
        result = await user_service.register_device_token("alice", "fcm-token")

        # Then
        assert result.fcm_token == "fcm-token"
        user_service.repository.create_if_absent.assert_awaited_once_with("alice")
