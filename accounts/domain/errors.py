"""Account-related exceptions."""

from __future__ import annotations


class AccountError(Exception):
    """Base class for account management errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RegistrationError(AccountError):
    """Registration input rejected."""


class UsernameTakenError(RegistrationError):
    def __init__(self, message: str = "Username is already taken!"):
        super().__init__(message)


class EmailTakenError(RegistrationError):
    def __init__(self, message: str = "Email is already in use!"):
        super().__init__(message)


class RoleNotFoundError(AccountError):
    """The role catalog is missing an entry registration depends on.

    This is a seeding problem, never a user input problem.
    """

    def __init__(self, message: str = "Role is not found.", role_name: str | None = None):
        super().__init__(message)
        self.role_name = role_name


class UserNotFoundError(AccountError):
    pass


class InvalidPatchError(AccountError):
    pass


class PermissionDeniedError(AccountError):
    pass
