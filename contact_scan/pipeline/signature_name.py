"""
Signature name guesser
----------------------
Guesses a person's full name from the signature block of a mail body.

The block starts after the first closing line ("Cordialement", "Best regards",
"--", ...). When there is none, or it is the last line, the last lines of the
mail are used instead. Inside that window the first line made of 2-4 words,
at least two of them capitalized, is taken as the name. There is no scoring:
"Directeur Commercial" right after the closing wins over the real name below it.
"""
from __future__ import annotations

import re
from typing import List

SIGN_OFF_RE = re.compile(
    r"^(?:-{2,}|cordialement|bien cordialement|sincèrement|best regards|regards)$",
    re.IGNORECASE,
)

NAME_TOKEN_RE = re.compile(r"[A-ZÀÂÄÉÈÊËÏÎÔÖÙÛÜÇ][a-zàâäéèêëïîôöùûüç'\-]+")

WINDOW_AFTER_SIGN_OFF = 5
WINDOW_TAIL = 6


def _split_lines(text: str) -> List[str]:
    return [l.strip() for l in (text or "").split("\n") if l.strip()]


def signature_window(lines: List[str]) -> List[str]:
    """Lines that may hold the name: after the first sign-off, else the tail."""
    start = next((i for i, l in enumerate(lines) if SIGN_OFF_RE.match(l)), -1)
    if 0 <= start < len(lines) - 1:
        return lines[start + 1:start + 1 + WINDOW_AFTER_SIGN_OFF]
    return lines[-WINDOW_TAIL:]


def is_name_token(token: str) -> bool:
    return NAME_TOKEN_RE.fullmatch(token) is not None


def guess_full_name(text: str, fallback: str = "") -> str:
    for line in signature_window(_split_lines(text)):
        tokens = line.split()
        if 2 <= len(tokens) <= 4:
            if sum(1 for t in tokens if is_name_token(t)) >= 2:
                return line
    return fallback or ""
