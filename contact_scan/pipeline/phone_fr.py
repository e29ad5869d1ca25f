# French phone numbers: 0X XX XX XX XX, +33 X XX XX XX XX, 0XXXXXXXXX
# with optional space/dot/hyphen between the two-digit groups.
# Word boundaries are ASCII-only: "é0612345678" still matches.

import re

_PHONE_FR_RE = re.compile(r"(?:\+33\s?|(?<![A-Za-z0-9_])0)[1-9](?:[\s.\-]?[0-9]{2}){4}(?![A-Za-z0-9_])")
_SEPARATORS_RE = re.compile(r"[.\-\s]")


def normalize_phone(raw: str) -> str:
    """Drop separators and turn a +33 prefix into a leading 0."""
    p = _SEPARATORS_RE.sub("", raw)
    if p.startswith("+33"):
        p = "0" + p[3:]
    return p


def extract_phone_fr(text: str) -> str:
    """Return the first French number in text in local 10-digit form, or ""."""
    m = _PHONE_FR_RE.search(text or "")
    return normalize_phone(m.group(0)) if m else ""
