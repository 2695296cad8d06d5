"""Entry domain exceptions."""

from bagelbot.services.exceptions import NotFoundError, ValidationError


class EntryNotFound(NotFoundError):
    """Entry not found."""

    pass


class MessageRequired(ValidationError):
    """Submitted entry has no message."""

    def __init__(self) -> None:
        super().__init__("Message is required")


class StatusRequired(ValidationError):
    """Status update carried no status."""

    def __init__(self) -> None:
        super().__init__("Status is required")
