"""Password Hasher Port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """비밀번호 해시 포트."""

    def hash(self, password: str) -> str:
        """비밀번호를 해시합니다."""
        ...

    def verify(self, password: str, hashed: str) -> bool:
        """비밀번호를 검증합니다."""
        ...
