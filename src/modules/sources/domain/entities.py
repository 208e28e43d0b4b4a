"""Source domain entities."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceDescriptor(BaseModel):
    """视频源（第三方采集接口）描述。

    对应用户视频源列表中的一项，一旦读取即不可变。
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="源唯一标识")
    name: str = Field(..., description="显示名称")
    url: str = Field(..., description="接口基础地址")

    @field_validator("id", "url")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value
