"""Service-layer exceptions."""


class ChoiceSelectionError(IndexError):
    """Raised when a choice presenter returns an index outside the menu."""
