from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from app.core.errors import RequestValidationFailure
from app.schemas.contact import ContactReply, ContactRequest

logger = logging.getLogger(__name__)

CONTACT_REQUIRED_MESSAGE = "Name, email, and message are required"
CONTACT_THANKS_MESSAGE = "Thank you for your message! I will get back to you soon."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContactService:
    """Accepts contact-form submissions. Nothing is stored; submissions are logged."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._logger = logger
        self._clock = clock

    def submit(self, request: ContactRequest) -> ContactReply:
        name = (request.name or "").strip()
        email = (request.email or "").strip()
        message = (request.message or "").strip()
        if not name or not email or not message:
            raise RequestValidationFailure(CONTACT_REQUIRED_MESSAGE)

        self._logger.info(
            "Contact form submission: name=%s email=%s subject=%s message=%s timestamp=%s",
            name,
            email,
            (request.subject or "").strip() or None,
            message,
            self._clock().isoformat(),
        )
        return ContactReply(success=True, message=CONTACT_THANKS_MESSAGE)
