"""Identity port: the application's view of the calling user."""

from finboard.application.ports.identity.current_user import CurrentUser

__all__ = ["CurrentUser"]
