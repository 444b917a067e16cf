"""API errors and validation helpers."""


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Identifiers are stored as VARCHAR keys
MAX_IDENTITY_LENGTH = 128


def validate_identity(identity: str, field: str = "voter_id") -> str:
    """Validate a caller or voter identifier; returns it stripped."""
    if not isinstance(identity, str) or not identity.strip():
        raise ValidationError(f"Invalid {field}: must be a non-empty string")

    identity = identity.strip()
    if len(identity) > MAX_IDENTITY_LENGTH:
        raise ValidationError(f"Invalid {field}: longer than {MAX_IDENTITY_LENGTH} characters")
    return identity


def validate_candidate(candidate: str) -> str:
    """Normalize a candidate name to the stored upper-case form."""
    if not isinstance(candidate, str) or not candidate.strip():
        raise ValidationError("Invalid candidate: must be a non-empty string")
    return candidate.strip().upper()
