"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Ghana basic schools run three terms a year
MIN_YEAR, MAX_YEAR = 2000, 2100
MAX_TERM = 3
MAX_WEEK = 53


def validate_entity_id(entity_id: int) -> None:
    """Validate entity id is a positive integer."""
    if entity_id < 1:
        raise ValidationError(f"Invalid id: {entity_id}. Must be a positive integer")


def validate_period(year: int | None, term: int | None, week: int | None) -> None:
    """Validate optional year/term/week filters."""
    if year is not None and not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Invalid year: {year}. Must be between {MIN_YEAR} and {MAX_YEAR}")
    if term is not None and not 1 <= term <= MAX_TERM:
        raise ValidationError(f"Invalid term: {term}. Must be between 1 and {MAX_TERM}")
    if week is not None and not 1 <= week <= MAX_WEEK:
        raise ValidationError(f"Invalid week: {week}. Must be between 1 and {MAX_WEEK}")


def validate_pattern(pattern: str) -> None:
    """Reject empty cache patterns."""
    if not pattern or not pattern.strip():
        raise ValidationError("Cache pattern must not be empty")
