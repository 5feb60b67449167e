"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UploadError(ValidationError):
    """Raised when an uploaded image has the wrong type or is too large."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class IssueLockedError(DomainError):
    """Raised when editing or deleting an issue that is no longer Pending."""

    def __init__(self, issue_id: str, status: str, action: str):
        self.action = action
        super().__init__(f"Cannot {action} issue {issue_id} with status {status}")


class DuplicateVoteError(DomainError):
    """Raised when a user votes on the same issue twice."""

    def __init__(self, user_id: str, issue_id: str):
        super().__init__(f"User {user_id} already voted on issue {issue_id}")


class EmailAlreadyRegisteredError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")


class InvalidCredentialsError(DomainError):
    """Raised when login email/password do not match."""

    pass
