"""Account Fields — pure validation for registration, login and post/comment text.

Invariants:
    - Registration requires name, a syntactically valid email, password >= 6 chars
    - Login requires a valid email and a non-empty password
    - Emails are normalized to lower case before lookup or storage
    - Avatar is derived from the email digest (gravatar), never user-supplied
"""

import hashlib

from email_validator import EmailNotValidError, validate_email

from devconnector.core.errors import ErrorList

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt input limit
GRAVATAR_URL = "https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_registration(name: str | None, email: str | None, password: str | None) -> None:
    errors = ErrorList()
    if not name or not name.strip():
        errors.add("Name is required", "name")
    if not _is_valid_email(email):
        errors.add("Please include a valid email", "email")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors.add(
            f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
            "password",
        )
    elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors.add(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes", "password",
        )
    errors.raise_if_any()


def validate_login(email: str | None, password: str | None) -> None:
    errors = ErrorList()
    if not _is_valid_email(email):
        errors.add("Please include a valid email", "email")
    if not password:
        errors.add("Password is required", "password")
    errors.raise_if_any()


def validate_text(text: str | None) -> str:
    """Post and comment bodies share one rule."""
    if not text or not text.strip():
        errors = ErrorList()
        errors.add("Text is required", "text")
        errors.raise_if_any()
    return text.strip()


def email_digest(email: str) -> str:
    return hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()


def gravatar_url(email: str) -> str:
    return GRAVATAR_URL.format(digest=email_digest(email))
