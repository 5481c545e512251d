"""
Reversible opaque identifiers ("hashids") for exposing integer primary keys
in URLs and API payloads.

The codec is a thin, immutable wrapper around the ``hashids`` library. All of
its configuration is passed in explicitly through ``HashIdOptions``; nothing
here reads settings or the environment.
"""

from enum import Enum

from hashids import Hashids
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.exceptions import ConfigurationError

DEFAULT_MIN_LENGTH = 10
DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz1234567890"

# Minimum number of unique characters the hashids algorithm accepts.
MIN_ALPHABET_SIZE = 16


class HashIdLookup(str, Enum):
    """How a hashid is turned back into a row."""

    PRIMARY_KEY = "primary_key"  # decode, then look up by primary key
    COLUMN = "column"  # decode to validate, then look up by the stored hashid column


class HashIdOptions(BaseModel):
    """
    Immutable codec configuration. The same options must be used to encode and
    decode; changing any of them invalidates every hashid issued before.
    """

    model_config = ConfigDict(frozen=True)

    salt: str = Field(..., min_length=1, description="Secret salt, e.g. the application key")
    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0, description="Minimum length of an encoded hashid")
    alphabet: str = Field(default=DEFAULT_ALPHABET, description="Characters allowed in an encoded hashid")

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if any(char.isspace() for char in value):
            raise ValueError("Alphabet must not contain whitespace.")
        if len(set(value)) < MIN_ALPHABET_SIZE:
            raise ValueError(f"Alphabet must contain at least {MIN_ALPHABET_SIZE} unique characters.")
        return value


class HashIdCodec:
    """Encodes non-negative integers to opaque strings and back."""

    def __init__(self, options: HashIdOptions):
        self.options = options
        try:
            self._hashids = Hashids(salt=options.salt, min_length=options.min_length, alphabet=options.alphabet)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid hashid configuration: {exc}") from exc

    def encode(self, value: int) -> str:
        """
        Encodes a single non-negative integer. The result is deterministic for a
        given set of options and never shorter than ``min_length``.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Only integers can be encoded, got {type(value).__name__}.")
        if value < 0:
            raise ValueError("Only non-negative integers can be encoded.")

        return self._hashids.encode(value)

    def decode(self, hashid: object) -> int | None:
        """
        Decodes a hashid produced by ``encode`` under the same options.

        Returns None for anything else (empty, malformed, foreign, tampered or
        multi-value strings, non-string input); it never raises.
        """
        if not isinstance(hashid, str) or not hashid:
            return None

        # The library re-encodes the result and returns () on mismatch.
        numbers = self._hashids.decode(hashid)
        if len(numbers) != 1:
            return None
        return numbers[0]
