"""Redaction of credential-like ``key=value`` pairs in free-form text.

Request details attached to an error often come straight from a query string
or a log-style summary (``"user=alice, token=abc"``). Any pair whose key is one
of the sensitive names gets its value replaced by the mask; everything else in
the string is left exactly as it was. This runs whether or not debug mode is
on.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional

from sasato_res.core.config import settings

# A key only counts when it is not the tail of a longer word, so
# ``user_password=x`` and ``mytoken=x`` are left alone while ``(password=x``
# or ``filter=token=x`` are redacted.
_KEY_BOUNDARY = r"(?<![A-Za-z0-9_])"
_VALUE = r"[^&\s,]*"


class Sanitizer:
    """Compiled redaction pattern for a fixed set of sensitive keys."""

    def __init__(self, sensitive_keys: Iterable[str], mask: str = "********") -> None:
        keys = tuple(dict.fromkeys(k for k in sensitive_keys if k))
        if not keys:
            raise ValueError("at least one sensitive key is required")
        self.sensitive_keys = keys
        self.mask = mask
        # longest first so that overlapping names prefer the full key
        alternation = "|".join(re.escape(k) for k in sorted(keys, key=len, reverse=True))
        self.pattern = re.compile(
            rf"{_KEY_BOUNDARY}(?P<key>{alternation})={_VALUE}",
            re.IGNORECASE,
        )

    def sanitize(self, text: Optional[str]) -> Optional[str]:
        if text is None:
            return None
        return self.pattern.sub(self._replace, text)

    def contains_sensitive(self, text: Optional[str]) -> bool:
        return bool(text) and self.pattern.search(text) is not None

    def _replace(self, match: re.Match[str]) -> str:
        return f"{match.group('key')}={self.mask}"

    def __repr__(self) -> str:
        return f"Sanitizer(sensitive_keys={list(self.sensitive_keys)!r})"


def render_request_details(details: Mapping[str, object]) -> str:
    """Flatten a mapping into the ``key=value, key=value`` form the pattern scans."""
    return ", ".join(f"{key}={value}" for key, value in details.items())


default_sanitizer = Sanitizer(settings.SENSITIVE_KEYS, mask=settings.MASK)


def sanitize(text: Optional[str]) -> Optional[str]:
    return default_sanitizer.sanitize(text)
