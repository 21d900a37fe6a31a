"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class MailError(AdapterError):
    """Mail could not be rendered or delivered."""

    pass
