"""Listing domain entities."""

import re
from enum import Enum, StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from src.modules.sources.domain.entities import SourceDescriptor

_MARKUP_RE = re.compile(r"<[^>]*>")


class ListingFormat(StrEnum):
    """上游响应格式。"""

    JSON = "json"
    XML = "xml"


class ListingStatus(str, Enum):
    """单次分类列表请求的状态。

    Idle -> Loading -> {Success, Empty, Failed}
    """

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"  # 包含 0 条记录的正常页
    EMPTY = "empty"  # 非成功状态码 / list 不是数组
    FAILED = "failed"  # 解析失败或网络异常

    @property
    def is_terminal(self) -> bool:
        return self in (ListingStatus.SUCCESS, ListingStatus.EMPTY, ListingStatus.FAILED)


class CategoryDescriptor(BaseModel):
    """分类描述，由调用方按请求提供。"""

    model_config = ConfigDict(frozen=True)

    type_id: int = Field(..., description="上游分类 ID")
    type_parent_id: int = Field(default=0, description="上游父分类 ID")
    name: str = Field(default="", description="分类名称")


class VideoRecord(BaseModel):
    """归一化后的视频记录。"""

    model_config = ConfigDict(frozen=True)

    vod_id: str = Field(..., min_length=1, description="源内唯一 ID")
    source_id: str = Field(..., description="来源 ID")
    source_name: str = Field(..., description="来源名称")
    source_url: str = Field(..., description="来源接口地址")

    name: str = Field(default="", description="片名")
    picture_url: str | None = Field(default=None, description="封面")
    year: str | None = Field(default=None, description="年份")
    area: str | None = Field(default=None, description="地区")
    type_name: str | None = Field(default=None, description="类型名称")
    director: str | None = Field(default=None, description="导演")
    actor: str | None = Field(default=None, description="演员")
    remarks: str | None = Field(default=None, description="备注（更新至 / HD 等）")
    content: str | None = Field(default=None, description="简介，可能包含 HTML")

    play_urls: tuple[str, ...] = Field(default=(), description="播放地址分组")
    play_sources: tuple[str, ...] = Field(default=(), description="播放分组标识")

    @model_validator(mode="after")
    def _check_play_alignment(self) -> "VideoRecord":
        if len(self.play_urls) != len(self.play_sources):
            raise ValueError(
                "play_urls and play_sources must have the same length "
                f"({len(self.play_urls)} != {len(self.play_sources)})"
            )
        return self

    @computed_field
    @property
    def plain_content(self) -> str | None:
        """去除标签后的简介文本。"""
        if self.content is None:
            return None
        return _MARKUP_RE.sub("", self.content)


class ListingPage(BaseModel):
    """一次 (source, category, page) 请求的结果页。"""

    model_config = ConfigDict(frozen=True)

    records: tuple[VideoRecord, ...] = Field(default=())
    page: int = Field(default=1, ge=1)
    page_count: int = Field(default=1, ge=1)

    @classmethod
    def empty(cls) -> "ListingPage":
        return cls()

    @property
    def count(self) -> int:
        return len(self.records)


class ListingRequest(BaseModel):
    """分类列表请求。"""

    model_config = ConfigDict(frozen=True)

    source: SourceDescriptor
    category: CategoryDescriptor
    page: int = Field(default=1, ge=1)

    @property
    def key(self) -> str:
        """请求键：调用方据此丢弃过期结果。"""
        return f"{self.category.type_id}:{self.source.id}:{self.page}"
