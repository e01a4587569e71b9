"""Profile domain service.

Remembers who is using the app on this device. The platform sign-in itself
happens elsewhere; this service only records its outcome: the user
identifier goes to the credential store, display details to settings.
"""

from typing import Optional

from ledgerly.database.base import CredentialStore, SettingsStore
from ledgerly.domain.entities import Profile
from ledgerly.domain.errors import ValidationError

USER_ID_KEY = "user_identifier"
NAME_SETTING = "profile_name"
EMAIL_SETTING = "profile_email"
GUEST_SETTING = "guest_mode"


class ProfileService:
    """Service for signing in, continuing as guest and signing out."""

    def __init__(self, credentials: CredentialStore, settings: SettingsStore):
        """Initialize profile service.

        Args:
            credentials: Store for the user identifier
            settings: Store for display name, e-mail and guest mode
        """
        self.credentials = credentials
        self.settings = settings

    def current(self) -> Profile:
        """Restore the profile remembered on this device."""
        return Profile(
            user_id=self.credentials.read(USER_ID_KEY),
            name=self.settings.get_setting(NAME_SETTING),
            email=self.settings.get_setting(EMAIL_SETTING),
            is_guest=self.settings.get_setting(GUEST_SETTING) == "1",
        )

    def sign_in(
        self, user_id: str, name: Optional[str] = None, email: Optional[str] = None
    ) -> Profile:
        """Record a completed sign-in.

        Name and e-mail are only overwritten when provided, since identity
        providers usually share them on the first sign-in only.

        Raises:
            ValidationError: If user_id is empty
        """
        if not user_id or not user_id.strip():
            raise ValidationError("User identifier must not be empty")

        self.credentials.save(USER_ID_KEY, user_id.strip())
        self.settings.delete_setting(GUEST_SETTING)
        if name and name.strip():
            self.settings.set_setting(NAME_SETTING, name.strip())
        if email and email.strip():
            self.settings.set_setting(EMAIL_SETTING, email.strip())
        return self.current()

    def continue_as_guest(self) -> Profile:
        """Use the app without an account."""
        self.credentials.delete(USER_ID_KEY)
        self.settings.set_setting(GUEST_SETTING, "1")
        return self.current()

    def sign_out(self) -> Profile:
        """Forget the user identifier and leave guest mode."""
        self.credentials.delete(USER_ID_KEY)
        self.settings.delete_setting(GUEST_SETTING)
        return self.current()
