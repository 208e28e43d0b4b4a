"""Source API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from src.modules.sources.domain.entities import SourceDescriptor


class SourceRequest(BaseModel):
    """Create or replace a single video source."""

    id: str = Field(..., min_length=1, description="源ID")
    name: str = Field("", max_length=100, description="源名称")
    url: str = Field(..., min_length=1, description="列表接口地址")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "s1",
                "name": "Example Source",
                "url": "https://vod.example.com/api.php/provide/vod/at/xml",
            }
        }
    )

    def to_descriptor(self) -> SourceDescriptor:
        return SourceDescriptor(id=self.id, name=self.name, url=self.url)


class ReplaceSourcesRequest(BaseModel):
    """Replace the whole source list."""

    sources: list[SourceRequest] = Field(default_factory=list, description="视频源列表")


class SourceResponse(BaseModel):
    """Source response."""

    id: str = Field(..., description="源ID")
    name: str = Field(..., description="源名称")
    url: str = Field(..., description="列表接口地址")

    @classmethod
    def from_descriptor(cls, source: SourceDescriptor) -> "SourceResponse":
        return cls(id=source.id, name=source.name, url=source.url)
