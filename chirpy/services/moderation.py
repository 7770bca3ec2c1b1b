from __future__ import annotations
from dataclasses import dataclass

from chirpy.core.errors import ChirpTooLong

MAX_CHIRP_BYTES = 140

PROFANITY = {"kerfuffle", "sharbert", "fornax"}
MASK = "****"

def clean(text: str) -> str:
    """Mask profane words.

    Only whole space-delimited tokens match, compared case-insensitively,
    so "kerfuffle," and "kerfuffles" are left alone.
    """
    words = text.split(" ")
    return " ".join(MASK if w.lower() in PROFANITY else w for w in words)

@dataclass(frozen=True)
class ValidatedBody:
    body: str

    @property
    def cleaned(self) -> str:
        return clean(self.body)

def validate(body: str) -> ValidatedBody:
    # Length is checked on the raw UTF-8 bytes, before any filtering.
    if len(body.encode("utf-8")) > MAX_CHIRP_BYTES:
        raise ChirpTooLong()
    return ValidatedBody(body)
