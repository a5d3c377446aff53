from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class BookNotFoundError(DomainError):
    """Requested book does not exist."""


class BookSearchInputError(DomainError):
    """Invalid parameters for book search."""


class UserNotFoundError(DomainError):
    """Requested user does not exist."""


class UserSearchInputError(DomainError):
    """Invalid parameters for user search."""


class EmailAlreadyExistsError(DomainError):
    """Another user already owns this email."""


class ClubNotFoundError(DomainError):
    """Requested club does not exist."""


class MembershipNotFoundError(DomainError):
    """Requested membership does not exist."""


class MembershipInputError(DomainError):
    """Invalid parameters for a membership."""


class MembershipAlreadyExistsError(DomainError):
    """User already belongs to the club."""


class EmptyUpdateError(DomainError):
    """Partial update without any field to change."""


class BookLookupError(DomainError):
    """External book catalog could not be queried."""


class IdentityProviderError(DomainError):
    """Identity provider request failed."""


class LoginError(DomainError):
    """Login callback rejected."""


class OAuthStateInvalidError(LoginError):
    """CSRF state is unknown, expired or already consumed."""


class IdentityTokenValidationError(LoginError):
    """ID token signature, issuer, audience or nonce check failed."""


class EmailNotVerifiedError(LoginError):
    """Identity provider has not verified the email address."""


class PollCommandParseError(DomainError):
    """Chat text could not be parsed as a bot command."""


class DialogueStateDecodeError(DomainError):
    """Persisted conversation state has an unknown shape or schema version."""
