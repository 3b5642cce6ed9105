"""
Domain exceptions for the credential store.

Infrastructure implementations translate driver-specific errors into these
so the application layer never imports the database driver.
"""


class CredentialStoreError(Exception):
    """Base exception for credential store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateEmailError(CredentialStoreError):
    """Raised when a record with the same email already exists."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email
