"""
Contact / demo-request endpoint.

POST validates the form, emails the sales inbox through Resend and answers
with a small JSON document. Every failure is turned into a JSON error here;
nothing escapes to the platform's default error page.
"""

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError
from starlette.routing import Route
import logging

from issyx_site.core.config import Settings, get_settings
from issyx_site.core.cors import (
    cors_preflight_response,
    error_response,
    json_response,
    method_not_allowed_response,
)
from issyx_site.core.notification import build_notification
from issyx_site.core.resend import ResendClient
from issyx_site.models.contact import ContactSubmission, is_valid_email, missing_required_fields

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service not configured. Please email us directly at sales@issyx.com"
SEND_FAILED_MESSAGE = "Failed to send message. Please email us directly at sales@issyx.com"


def get_email_client(settings: Settings = Depends(get_settings)) -> ResendClient:
    return ResendClient.from_settings(settings)


async def handle_contact_form(request: Request, settings: Settings, email_client: ResendClient) -> Response:
    """
    Process one demo request.

    Returns:
        503 when Resend is not configured (checked before the body is read),
        400 for missing fields, wrong field types or a malformed email,
        502 when Resend rejects the message, 500 for anything unexpected,
        otherwise 200 {"success": true}.
    """
    try:
        if not settings.resend_api_key:
            logger.error("RESEND_API_KEY is not configured")
            return error_response(NOT_CONFIGURED_MESSAGE, 503)

        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        missing = missing_required_fields(payload)
        if missing:
            logger.info(f"Rejected contact form: missing {', '.join(missing)}")
            return error_response("Missing required fields", 400)

        try:
            submission = ContactSubmission.model_validate(payload)
        except ValidationError as e:
            logger.info(f"Rejected contact form: {e.error_count()} invalid field(s)")
            return error_response("Invalid form data", 400)

        if not is_valid_email(submission.email):
            return error_response("Invalid email address", 400)

        notification = build_notification(
            submission,
            recipient=settings.effective_contact_email,
            sender=settings.contact_from,
        )
        logger.info(f"Demo request from {submission.email} ({submission.company})")

        result = await email_client.send(notification)
        if not result.ok:
            logger.error(f"Resend API error ({result.status_code}): {result.body}")
            return error_response(SEND_FAILED_MESSAGE, 502)

        return json_response({"success": True})

    except Exception as e:
        logger.error(f"Contact form error: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@router.options("/contact", include_in_schema=False)
async def contact_preflight():
    return cors_preflight_response()


@router.post("/contact")
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    email_client: ResendClient = Depends(get_email_client),
):
    return await handle_contact_form(request, settings, email_client)


class ContactMethodNotAllowed:
    """Raw ASGI endpoint, so the route below matches every HTTP method"""

    async def __call__(self, scope, receive, send):
        response = method_not_allowed_response()
        await response(scope, receive, send)


# Registered after the OPTIONS and POST routes; anything they do not take ends here
router.routes.append(Route("/contact", ContactMethodNotAllowed(), include_in_schema=False))
