from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_contact_service
from app.schemas.contact import ContactReply, ContactRequest
from app.services.contact import ContactService

router = APIRouter(prefix="/api")


@router.post("/contact", response_model=ContactReply)
def contact(
    request: ContactRequest,
    service: ContactService = Depends(get_contact_service),  # noqa: B008
) -> ContactReply:
    """Accept a contact-form submission.

    The body must be JSON; HTML forms posting application/x-www-form-urlencoded
    get a 400 and should submit via fetch with a JSON body instead.
    """
    return service.submit(request)
