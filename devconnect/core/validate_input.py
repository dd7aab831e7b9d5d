"""Input Validation - pure rule checks run before any handler touches the database.

Invariants:
    - Every validator is PURE: returns a ValidationResult, never raises, never does IO
    - All failed rules are reported together, in field declaration order
    - A field that is missing is treated exactly like an empty string
    - Only the empty string is blank; whitespace-only values count as present
    - skills passes only if at least one non-empty entry survives parsing

Design Decisions:
    - Explicit function call over a middleware chain: handlers decide when to validate
      and the result is a plain value that is trivial to unit test
    - email-validator for syntax only (check_deliverability=False): no DNS at request time;
      test_environment=True so reserved .test addresses pass
"""

from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from devconnect.core.errors import FieldError
from devconnect.core.profile_changes import parse_skills


MIN_PASSWORD_LENGTH: int = 6


@dataclass
class ValidationResult:
    """Outcome of a validator: empty errors means the input passed."""
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))


def _is_blank(value: str | None) -> bool:
    return not value


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


def validate_registration(
    name: str | None, email: str | None, password: str | None,
) -> ValidationResult:
    """Registration rules: name present, email well-formed, password >= 6 chars."""
    result = ValidationResult()
    if _is_blank(name):
        result.add("name", "Name is required")
    if not is_valid_email(email):
        result.add("email", "Please include a valid email")
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        result.add(
            "password", "Please enter a password with six or more characters",
        )
    return result


def validate_profile(
    status: str | None, skills: str | list[str] | None,
) -> ValidationResult:
    """Profile rules: status and skills are required."""
    result = ValidationResult()
    if _is_blank(status):
        result.add("status", "Status is required")
    if not parse_skills(skills):
        result.add("skills", "Skills is required")
    return result
