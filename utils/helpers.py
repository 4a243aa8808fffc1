"""
Helper utilities shared by the blueprints and services.
"""

import re
import math
from typing import Any, Optional

def validate_email(email: str) -> bool:
    """Validate email address format."""
    if not email or not isinstance(email, str):
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email.strip()) is not None

def parse_numeric_id(value: Any) -> Optional[int]:
    """
    Coerce a path segment to an integer id.

    Accepts anything that reads as a whole number ("7", " 7 ", "7.0");
    anything else yields None, which no record matches.
    """
    if value is None:
        return None

    try:
        number = float(str(value).strip())
    except ValueError:
        return None

    if math.isnan(number) or math.isinf(number) or not number.is_integer():
        return None

    return int(number)
