"""Place Service 단위 테스트"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domains.places.exceptions import PoiNotFoundException
from app.domains.places.models import PointOfInterest
from app.domains.places.schemas import PoiCreate, PoiResponse
from app.domains.places.service import PlaceService


@pytest.fixture
def place_service():
    """PlaceService 인스턴스"""
    service = PlaceService(MagicMock())
    service.user_repository.create_if_absent = AsyncMock(return_value=False)
    service.repository.create = AsyncMock(side_effect=lambda poi: poi)
    service.repository.delete = AsyncMock()
    return service


class TestAddPoi:
    """장소 등록 테스트"""

    @pytest.mark.asyncio
    async def test_generates_mark_id(self, place_service):
        # Given
        data = PoiCreate.model_validate(
            {
                "type": "museum",
                "latitude": 45.47,
                "longitude": 9.18,
                "name": "Brera",
                "phoneNumber": "+39 02 000",
            }
        )

        # When
        poi = await place_service.add_poi("alice", data)

        # Then
        assert poi.owner == "alice"
        assert len(poi.mark_id) == 32
        assert poi.phone_number == "+39 02 000"
        assert poi.visibility == "public"
        place_service.user_repository.create_if_absent.assert_awaited_once_with(
            "alice"
        )

    @pytest.mark.asyncio
    async def test_mark_ids_are_unique(self, place_service):
        data = PoiCreate(type="cafe", latitude=0, longitude=0, name="A")

        first = await place_service.add_poi("alice", data)
        second = await place_service.add_poi("alice", data)

        assert first.mark_id != second.mark_id


class TestDeletePoi:
    """장소 삭제 테스트"""

    @pytest.mark.asyncio
    async def test_deletes_own_poi(self, place_service):
        poi = PointOfInterest(mark_id="m1", owner="alice")
        place_service.repository.get_by_mark_id = AsyncMock(return_value=poi)

        await place_service.delete_poi("alice", "m1")

        place_service.repository.delete.assert_awaited_once_with(poi)

    @pytest.mark.asyncio
    async def test_other_users_poi_not_found(self, place_service):
        """다른 사용자의 장소는 없는 것으로 취급"""
        poi = PointOfInterest(mark_id="m1", owner="bob")
        place_service.repository.get_by_mark_id = AsyncMock(return_value=poi)

        with pytest.raises(PoiNotFoundException):
            await place_service.delete_poi("alice", "m1")

        place_service.repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_poi_not_found(self, place_service):
        place_service.repository.get_by_mark_id = AsyncMock(return_value=None)

        with pytest.raises(PoiNotFoundException):
            await place_service.delete_poi("alice", "m1")


def test_poi_response_uses_camel_case():
    poi = PointOfInterest(
        mark_id="m1", owner="alice", address="", type="cafe", latitude=1.0,
        longitude=2.0, name="A", phone_number="123", visibility="public", url="",
    )

    body = PoiResponse.model_validate(poi).model_dump(by_alias=True)

    assert body["markId"] == "m1"
    assert body["phoneNumber"] == "123"
    assert "owner" not in body
