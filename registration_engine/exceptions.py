"""Custom exceptions."""


class RegistrationError(Exception):
    """Base exception for registration validation errors."""


class AddressTemplateError(RegistrationError):
    """Exception for missing or unreadable address template configuration."""
