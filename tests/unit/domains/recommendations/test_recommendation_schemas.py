"""Recommendations 스키마 테스트"""

import pytest
from pydantic import ValidationError

from app.domains.recommendations.schemas import (
    RecommendationRequest,
    ValidationRequest,
    ValidityResult,
)

BASE = {
    "user": "alice",
    "latitude": 45.0,
    "longitude": 9.0,
    "human_activity": "still",
    "seconds_in_day": 0,
    "week_day": 0,
}


class TestRecommendationRequest:
    """추천 요청 스키마 테스트"""

    def test_numeric_user_coerced_to_str(self):
        request = RecommendationRequest(**{**BASE, "user": 42})
        assert request.user == "42"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("latitude", 90.5),
            ("longitude", -181),
            ("seconds_in_day", 86401),
            ("week_day", 8),
            ("user", ""),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            RecommendationRequest(**{**BASE, field: value})

    def test_missing_field_rejected(self):
        data = dict(BASE)
        del data["human_activity"]

        with pytest.raises(ValidationError):
            RecommendationRequest(**data)


class TestValidationRequest:
    """유효성 요청 스키마 테스트"""

    def test_to_recommendation_request_drops_category(self):
        request = ValidationRequest(**BASE, place_category="museum")

        converted = request.to_recommendation_request()

        assert type(converted) is RecommendationRequest
        assert converted.model_dump() == BASE

    def test_place_category_required(self):
        with pytest.raises(ValidationError):
            ValidationRequest(**BASE)


def test_validity_result_accepts_any_number():
    assert ValidityResult(result=1).result == 1
    assert ValidityResult(result=1.0).result == 1
    assert ValidityResult(result=0.0).result == 0


@pytest.mark.parametrize("value", ["1", True])
def test_validity_result_rejects_non_numbers(value):
    with pytest.raises(ValidationError):
        ValidityResult(result=value)
