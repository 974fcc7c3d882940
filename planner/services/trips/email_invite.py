from typing import Optional
from uuid import UUID

from planner.core.config import settings
from planner.utils.dates import format_long_date


def generate_trip_confirmation_link(trip_id: UUID) -> str:
    return f"{settings.API_BASE_URL}/trips/{trip_id}/confirm"


def generate_participant_confirmation_link(trip_id: UUID, participant_id: UUID) -> str:
    return f"{settings.API_BASE_URL}/trips/{trip_id}/confirm/{participant_id}"


def generate_trip_page_link(trip_id: UUID) -> str:
    """
    Returns the web app page a confirmation redirects to
    """
    return f"{settings.WEB_BASE_URL}/trips/{trip_id}"


def trip_confirmation_email(trip) -> tuple[str, str]:
    """
    Subject and HTML body asking the owner to confirm a newly created trip.
    """
    subject = f"Confirm your trip to {trip.destination} on {format_long_date(trip.starts_at)}"
    confirmation_link = generate_trip_confirmation_link(trip.id)

    html = f"""
    <div style="font-family: sans-serif; font-size: 16px; line-height: 1.6">
      <p>You asked to create a trip to <strong>{trip.destination}</strong> from
         <strong>{format_long_date(trip.starts_at)}</strong> to <strong>{format_long_date(trip.ends_at)}</strong>.</p>
      <p>To confirm your trip, click the link below:</p>
      <p><a href="{confirmation_link}">Confirm trip</a></p>
      <p>If you did not ask for this trip, please ignore this email.</p>
    </div>
    """.strip()

    return subject, html


def participant_invite_email(trip, participant_id: UUID, inviter_name: Optional[str] = None) -> tuple[str, str]:
    """
    Subject and HTML body inviting a participant to confirm their presence.
    """
    subject = f"Confirm your presence on the trip to {trip.destination}"
    confirmation_link = generate_participant_confirmation_link(trip.id, participant_id)

    html = f"""
    <div style="font-family: sans-serif; font-size: 16px; line-height: 1.6">
      <p>You have been invited by {inviter_name or "a friend"} to join a trip to <strong>{trip.destination}</strong>
         from <strong>{format_long_date(trip.starts_at)}</strong> to <strong>{format_long_date(trip.ends_at)}</strong>.</p>
      <p>To confirm your presence, click the link below:</p>
      <p><a href="{confirmation_link}">Confirm presence</a></p>
      <p>If you don't plan to join or don't know what this is about, please ignore this email.</p>
    </div>
    """.strip()

    return subject, html
