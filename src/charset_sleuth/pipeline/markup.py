"""Encoding declarations embedded in the content itself.

Covers XML declarations, HTML ``<meta>`` charsets and the looser
``coding:``/``charset=``/``encoding=`` marks found in source files, e-mail
headers and editors' mode lines.  A declaration only raises the priority of
an encoding; it is scored like every other candidate.
"""

from __future__ import annotations

import re

from charset_sleuth import registry

_SCAN_LIMIT = 4096

_XML_ENCODING_RE = re.compile(
    rb"""<\?xml[^>]+encoding\s*=\s*['"]([^'"]+)['"]""", re.IGNORECASE
)
_HTML5_CHARSET_RE = re.compile(
    rb"""<meta[^>]+charset\s*=\s*['"]?\s*([^\s'">;]+)""", re.IGNORECASE
)
_HTML4_CONTENT_TYPE_RE = re.compile(
    rb"""<meta[^>]+content\s*=\s*['"][^'"]*charset=([^\s'">;]+)""", re.IGNORECASE
)
_GENERIC_DECLARATION_RE = re.compile(
    rb"""(?:encoding|charset|coding)[:= ]{1,10}['"]?([a-zA-Z0-9_-]+)['"]?""",
    re.IGNORECASE,
)


def _resolve(name: bytes) -> str | None:
    try:
        text = name.decode("ascii").strip()
    except UnicodeDecodeError:
        return None
    resolved = registry.iana_name(text, strict=False)
    if resolved not in registry.all_known_encodings():
        return None
    return resolved


def find_declared_encoding(data: bytes) -> str | None:
    """Scan the first bytes of *data* for an encoding declaration.

    :param data: The raw byte data to scan.
    :returns: The canonical codec name declared, or ``None``.
    """
    head = data[:_SCAN_LIMIT]
    for pattern in (
        _XML_ENCODING_RE,
        _HTML5_CHARSET_RE,
        _HTML4_CONTENT_TYPE_RE,
        _GENERIC_DECLARATION_RE,
    ):
        for match in pattern.finditer(head):
            encoding = _resolve(match.group(1))
            if encoding is not None:
                return encoding
    return None
