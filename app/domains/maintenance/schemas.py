"""Maintenance 도메인 스키마 정의"""

from typing import Literal

from pydantic import BaseModel, Field

from app.core.schemas import SweepReport


class SweepRunResponse(BaseModel):
    """정리 작업 실행 결과"""

    status: Literal["completed", "skipped"]
    reports: list[SweepReport] = Field(default_factory=list)
