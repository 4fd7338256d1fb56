"""Sortable list exceptions."""


class ConfigurationError(ValueError):
    """Raised when a sortable list is set up with input it cannot order."""
