from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: unlock the admin dashboard with the shared admin password."""

    def __init__(self, password_hash: Optional[str]):
        self._password_hash = password_hash

    @classmethod
    def from_plain_password(cls, password: Optional[str]) -> "AdminAuthService":
        return cls(generate_password_hash(password) if password else None)

    def authenticate(self, password: str) -> None:
        if not password:
            raise ValidationError("Password is required")

        if not self._password_hash:
            logger.warning("Admin login attempted but ADMIN_PASSWORD is not configured")
            raise AuthenticationError("Incorrect password")

        try:
            ok = check_password_hash(self._password_hash, password)
        except ValueError:
            # e.g. a corrupted or placeholder hash in settings
            ok = False

        if not ok:
            raise AuthenticationError("Incorrect password")
