"""Sensitive data redaction for log output."""

import re

_PATTERNS = [
    re.compile(r"(?i)(token|secret|password)=[^\s&,;]+"),
    re.compile(r"(?i)bearer\s+[A-Za-z0-9\-._~+/]+=*"),
    re.compile(r"\beyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*"),
    re.compile(r"https://(?:[\w-]+\.)?discord(?:app)?\.com/api/webhooks/\S+"),
]


def redact_text(text: str) -> str:
    """Redact tokens, signed credentials and webhook URLs in text."""

    redacted = text
    for pattern in _PATTERNS:
        redacted = pattern.sub("[REDACTED]", redacted)
    return redacted
