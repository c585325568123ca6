"""Security adapters."""

from apps.skyparty.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
