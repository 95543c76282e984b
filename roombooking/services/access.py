from roombooking.errors import AccessDenied
from roombooking.models.booking import Booking


class AuthorizationGate:
    """Owner-or-admin checks on bookings. Identity comes from the caller."""

    @staticmethod
    def is_owner_or_admin(booking: Booking, requester_id: int, is_admin: bool) -> bool:
        return is_admin or booking.user_id == requester_id

    def ensure_owner_or_admin(self, booking: Booking, requester_id: int, is_admin: bool, action: str) -> None:
        if not self.is_owner_or_admin(booking, requester_id, is_admin):
            raise AccessDenied(f"You can only {action} your own bookings")
