"""Listing API schemas."""

from pydantic import BaseModel, Field

from src.modules.listings.application.fetch_service import ListingOutcome
from src.modules.listings.application.layout import GridColumns
from src.modules.listings.domain.entities import ListingStatus, VideoRecord


class VideoRecordResponse(BaseModel):
    """Video record response."""

    vod_id: str = Field(..., description="源内唯一 ID")
    source_id: str = Field(..., description="来源 ID")
    source_name: str = Field(..., description="来源名称")
    source_url: str = Field(..., description="来源接口地址")
    name: str = Field(..., description="片名")
    picture_url: str | None = Field(None, description="封面")
    year: str | None = Field(None, description="年份")
    area: str | None = Field(None, description="地区")
    type_name: str | None = Field(None, description="类型名称")
    director: str | None = Field(None, description="导演")
    actor: str | None = Field(None, description="演员")
    remarks: str | None = Field(None, description="备注")
    content: str | None = Field(None, description="简介（原始 HTML）")
    plain_content: str | None = Field(None, description="简介（纯文本）")
    play_urls: list[str] = Field(default_factory=list, description="播放地址分组")
    play_sources: list[str] = Field(default_factory=list, description="播放分组标识")

    @classmethod
    def from_record(cls, record: VideoRecord) -> "VideoRecordResponse":
        return cls(
            vod_id=record.vod_id,
            source_id=record.source_id,
            source_name=record.source_name,
            source_url=record.source_url,
            name=record.name,
            picture_url=record.picture_url,
            year=record.year,
            area=record.area,
            type_name=record.type_name,
            director=record.director,
            actor=record.actor,
            remarks=record.remarks,
            content=record.content,
            plain_content=record.plain_content,
            play_urls=list(record.play_urls),
            play_sources=list(record.play_sources),
        )


class GridColumnsResponse(BaseModel):
    """Grid columns per breakpoint."""

    base: int
    sm: int
    md: int
    lg: int
    xl: int
    token: str = Field(..., description="前端网格 class")

    @classmethod
    def from_columns(cls, columns: GridColumns) -> "GridColumnsResponse":
        return cls(
            base=columns.base,
            sm=columns.sm,
            md=columns.md,
            lg=columns.lg,
            xl=columns.xl,
            token=columns.token,
        )


class ListingResponse(BaseModel):
    """Category listing response."""

    request_key: str = Field(..., description="请求键 type_id:source_id:page")
    status: ListingStatus = Field(..., description="请求状态")
    records: list[VideoRecordResponse] = Field(default_factory=list)
    page: int = Field(..., ge=1, description="当前页")
    page_count: int = Field(..., ge=1, description="总页数")
    previous_page: int = Field(..., ge=1, description="上一页")
    next_page: int = Field(..., ge=1, description="下一页")
    columns: GridColumnsResponse
    error_message: str | None = Field(None, description="失败原因")
    duration_ms: int = Field(0, description="耗时（毫秒）")

    @classmethod
    def from_outcome(
        cls,
        outcome: ListingOutcome,
        page: int,
        page_count: int,
        previous_page: int,
        next_page: int,
    ) -> "ListingResponse":
        return cls(
            request_key=outcome.request_key,
            status=outcome.status,
            records=[VideoRecordResponse.from_record(r) for r in outcome.records],
            page=page,
            page_count=page_count,
            previous_page=previous_page,
            next_page=next_page,
            columns=GridColumnsResponse.from_columns(outcome.columns),
            error_message=outcome.error_message,
            duration_ms=outcome.duration_ms,
        )
