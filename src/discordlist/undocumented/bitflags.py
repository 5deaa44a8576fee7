"""
Bit flag sets packed into unsigned 64-bit integers.

The service transmits flag sets as plain integers. Decoding keeps the bits
this library knows about and silently drops the rest, so flags added on
the server side later never break deserialization.
"""

from enum import IntFlag
from typing import Annotated, Any, Type, TypeVar

from pydantic import PlainSerializer, PlainValidator

F = TypeVar("F", bound="BitFlags")

U64_MASK = (1 << 64) - 1


class BitFlags(IntFlag):
    """IntFlag with truncating construction from raw integers."""

    @classmethod
    def all(cls: Type[F]) -> F:
        mask = 0
        for member in cls.__members__.values():
            mask |= member.value
        return cls(mask)

    @classmethod
    def empty(cls: Type[F]) -> F:
        return cls(0)

    @classmethod
    def from_bits_truncate(cls: Type[F], raw: Any) -> F:
        """Build a flag set from a raw integer, discarding undefined bits."""
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"{cls.__name__} expects an integer, got {raw!r}")
        return cls(raw & U64_MASK & cls.all().value)

    def bits(self) -> int:
        return int(self.value)

    def contains(self, other: "BitFlags") -> bool:
        return (self & other) == other


def flags_annotation(flag_cls: Type[F]) -> Any:
    """
    Pydantic field type for a BitFlags subclass.

    Validates from an integer (truncating unknown bits) and serializes back
    to the integer.
    """
    return Annotated[
        flag_cls,
        PlainValidator(flag_cls.from_bits_truncate),
        PlainSerializer(lambda flags: int(flags), return_type=int),
    ]
