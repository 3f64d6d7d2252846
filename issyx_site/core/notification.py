"""
Builds the sales notification email for a demo request.

Every value that comes from the form is escaped with escape_html exactly once
before it is placed into the HTML body.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from issyx_site.core.html import escape_html
from issyx_site.models.contact import ContactSubmission
from issyx_site.models.notification import NotificationMessage

LABEL_CELL_STYLE = "padding: 8px 12px; border: 1px solid #ddd; font-weight: bold;"
VALUE_CELL_STYLE = "padding: 8px 12px; border: 1px solid #ddd;"


def _row(label: str, value_html: str) -> str:
    return (
        "<tr>"
        f'<td style="{LABEL_CELL_STYLE}">{label}</td>'
        f'<td style="{VALUE_CELL_STYLE}">{value_html}</td>'
        "</tr>"
    )


def _optional_rows(submission: ContactSubmission) -> List[Tuple[str, str]]:
    optional = [
        ("Device Count", submission.deviceCount),
        ("Interest", submission.interest),
        ("Message", submission.message),
    ]
    return [(label, escape_html(value)) for label, value in optional if value]


def build_subject(submission: ContactSubmission) -> str:
    return f"New Demo Request: {submission.full_name} — {submission.company}"


def build_html_body(submission: ContactSubmission, submitted_at: Optional[datetime] = None) -> str:
    """
    Render the notification body: a table of every submitted field followed
    by a footer with the submission time in ISO-8601 UTC.

    Optional fields only get a row when they are non-empty.
    """
    submitted_at = submitted_at or datetime.now(timezone.utc)
    email = escape_html(submission.email)

    rows = [
        _row("Name", f"{escape_html(submission.firstName)} {escape_html(submission.lastName)}"),
        _row("Email", f'<a href="mailto:{email}">{email}</a>'),
        _row("Company", escape_html(submission.company)),
    ]
    rows.extend(_row(label, value) for label, value in _optional_rows(submission))

    return (
        "<h2>New Demo Request from issyx.com</h2>"
        '<table style="border-collapse: collapse; width: 100%; max-width: 600px;">'
        + "".join(rows)
        + "</table>"
        "<br>"
        '<p style="color: #666; font-size: 12px;">'
        f"Submitted from issyx.com contact form at {submitted_at.isoformat()}"
        "</p>"
    )


def build_notification(
    submission: ContactSubmission,
    recipient: str,
    sender: str,
    submitted_at: Optional[datetime] = None,
) -> NotificationMessage:
    """Compose the email sent to sales; replies go straight to the submitter"""
    return NotificationMessage(
        sender=sender,
        to=[recipient],
        reply_to=submission.email,
        subject=build_subject(submission),
        html=build_html_body(submission, submitted_at),
    )
