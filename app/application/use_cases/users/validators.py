"""Common validation helpers for user use cases."""


def ensure_not_blank(value: str | None, field_name: str) -> str:
    """Return ``value`` as given, or raise ``ValueError`` when it is missing or blank."""

    if value is None:
        raise ValueError(f"The {field_name} is required")
    if not value.strip():
        raise ValueError(f"The {field_name} must not be empty")
    return value


def validate_new_user(name: str | None, email: str | None, password: str | None) -> None:
    """Raise ``ValueError`` unless every field required to create a user is present."""

    ensure_not_blank(name, "name")
    ensure_not_blank(email, "email")
    ensure_not_blank(password, "password")
