"""Request identity."""

from __future__ import annotations

import hmac
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from apps.skyparty.application.common.exceptions import (
    InvalidUserIdFormatError,
    MissingUserIdError,
    UnauthorizedInternalCallError,
)
from apps.skyparty.setup.config import Settings, get_settings


def get_auth_user_id(
    x_user_id: Annotated[str | None, Header(alias="X-User-Id")] = None,
) -> UUID:
    """게이트웨이에서 전달된 사용자 ID를 추출합니다."""
    if not x_user_id:
        raise MissingUserIdError()
    try:
        return UUID(x_user_id)
    except ValueError:
        raise InvalidUserIdFormatError() from None


def require_internal_token(
    settings: Annotated[Settings, Depends(get_settings)],
    x_internal_token: Annotated[str | None, Header(alias="X-Internal-Token")] = None,
) -> None:
    """/internal/* 호출자를 확인합니다.

    internal_api_token이 설정되지 않은 환경(로컬 개발)에서는 검사하지 않습니다.
    """
    expected = settings.internal_api_token
    if not expected:
        return
    if not x_internal_token or not hmac.compare_digest(
        x_internal_token.encode("utf-8"), expected.encode("utf-8")
    ):
        raise UnauthorizedInternalCallError()
