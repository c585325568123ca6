"""Common HTTP schema base."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase JSON 필드를 사용하는 스키마 베이스.

    요청은 camelCase와 snake_case 모두 허용하며, 응답은 camelCase로 직렬화됩니다.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(CamelModel):
    """에러 응답 스키마."""

    success: bool = False
    error: str
    code: str
