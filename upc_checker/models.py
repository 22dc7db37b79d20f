# upc_checker/models.py

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .validators import is_1_digit


class UPCCodeError(ValueError):
    """Base class for the two digit-range failures of a UPC check."""


class PayloadDigitOutOfRange(UPCCodeError):
    def __init__(self, position: int, digit):
        self.position = position
        self.digit = digit
        super().__init__(
            f"UPC payload digit {digit!r} at position {position} is not 0-9"
        )


class CheckDigitOutOfRange(UPCCodeError):
    def __init__(self, digit):
        self.digit = digit
        super().__init__(f"UPC check digit {digit!r} is not 0-9")


class UPCCodeStandard(str, enum.Enum):
    UPC_A = "UPC-A"
    UPC_E = "UPC-E"


# Payload shapes accepted when no policy says otherwise. The check digit is
# always passed separately; the longer shape keeps a 12th/8th slot in the sum.
DEFAULT_LENGTHS = {
    UPCCodeStandard.UPC_A.value: (11, 12),
    UPCCodeStandard.UPC_E.value: (7, 8),
}


def coerce_standard(standard) -> UPCCodeStandard:
    try:
        return UPCCodeStandard(standard)
    except ValueError:
        raise ValueError(f"Unknown UPC standard: {standard!r}") from None


@dataclass
class UPCCode:
    """
    A UPC payload and its check digit, parsed.

    Construction fails with PayloadDigitOutOfRange on the first payload digit
    outside 0-9, and only then with CheckDigitOutOfRange, so a UPCCode that
    exists always holds single digits.
    """

    upc: UPCCodeStandard
    payload: Tuple[int, ...]
    check_digit: int
    lengths: Sequence[int] | None = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        self.upc = coerce_standard(self.upc)
        self.payload = tuple(self.payload)

        if self.lengths is None:
            allowed = DEFAULT_LENGTHS[self.upc.value]
        else:
            allowed = tuple(self.lengths)
        if len(self.payload) not in allowed:
            raise ValueError(
                f"{self.upc.value} payload must have "
                f"{' or '.join(str(n) for n in allowed)} digits, "
                f"got {len(self.payload)}"
            )

        for position, digit in enumerate(self.payload):
            if not is_1_digit(digit):
                raise PayloadDigitOutOfRange(position, digit)

        if not is_1_digit(self.check_digit):
            raise CheckDigitOutOfRange(self.check_digit)
