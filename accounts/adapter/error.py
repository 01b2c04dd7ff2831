"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class MailDeliveryError(AdapterError):
    """Outgoing mail could not be delivered."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        super().__init__(f"Failed to deliver mail to {recipient}: {reason}")
