"""Page/limit validation shared by task and profile listings."""

from taskdeck.domain.exceptions import ValidationException

MAX_PAGE_SIZE = 100
# OFFSET is bound as a signed 64-bit integer by asyncpg and sqlite3.
MAX_OFFSET = 2**63 - 1


def page_offset(page: int, limit: int, max_page_size: int = MAX_PAGE_SIZE) -> int:
    """Return the row offset for a 1-indexed page, or raise ValidationException."""
    if page < 1:
        raise ValidationException("Page must be a positive integer", field="page")
    if not 1 <= limit <= max_page_size:
        raise ValidationException(
            f"Limit must be between 1 and {max_page_size}", field="limit"
        )
    offset = (page - 1) * limit
    if offset > MAX_OFFSET:
        raise ValidationException("Page is out of range", field="page")
    return offset
