import html
import re
from typing import Optional

_PHONE_SEPARATORS = re.compile(r"[\s()-]")


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Sanitize a string by escaping HTML special characters to prevent XSS.
    Returns None if input is None.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return html.escape(value, quote=True)


def phone_href(phone: str) -> str:
    """Build a tel: link target with separators stripped"""
    return f"tel:{_PHONE_SEPARATORS.sub('', phone)}"
