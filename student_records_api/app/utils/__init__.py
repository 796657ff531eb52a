"""
Shared helpers for student records.

``dates`` handles birth dates (formatting, age, validation and
timestamps); ``validators`` handles names and identifiers.  None of
these helpers raise on bad input: they return ``""``, ``False`` or
``0`` instead.
"""

from .dates import (  # noqa: F401
    are_dates_equal,
    calculate_age,
    format_date_to_french,
    get_current_iso_date,
    is_valid_birth_date,
)
from .validators import (  # noqa: F401
    generate_student_id,
    is_valid_name,
    is_valid_student_id,
    sanitize_name,
)
