"""OCC option symbology.

An OCC symbol is the underlying root padded with spaces to 6 characters,
the expiration as ``yymmdd``, ``C`` or ``P``, and the strike times 1000
zero-padded to 8 digits::

    AAPL  240119C00190000
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum

_OCC_PATTERN = re.compile(
    r"^(?P<root>[A-Z0-9./]{1,6}) *(?P<expiry>\d{6})(?P<type>[CP])(?P<strike>\d{8})$"
)


class OptionType(StrEnum):
    CALL = "C"
    PUT = "P"


@dataclass(frozen=True, slots=True)
class OCCSymbol:
    """An option contract in OCC notation."""

    symbol: str
    option_type: OptionType
    strike: Decimal
    expiration: date

    def __post_init__(self) -> None:
        if not self.symbol or len(self.symbol) > 6:
            msg = f"Root symbol must be 1-6 characters: {self.symbol!r}"
            raise ValueError(msg)
        if self.strike < 0:
            msg = f"Strike must not be negative: {self.strike}"
            raise ValueError(msg)

    def to_occ(self) -> str:
        """Format as an OCC symbol string."""
        strike = int((Decimal(str(self.strike)) * 1000).to_integral_value())
        if strike >= 10**8:
            msg = f"Strike too large for OCC symbology: {self.strike}"
            raise ValueError(msg)
        return (
            f"{self.symbol:<6}"
            f"{self.expiration.strftime('%y%m%d')}"
            f"{OptionType(self.option_type).value}"
            f"{strike:08d}"
        )

    def __str__(self) -> str:
        return self.to_occ()

    @classmethod
    def parse(cls, occ: str) -> OCCSymbol:
        """Parse an OCC symbol string.

        Raises:
            ValueError: If the string is not in OCC format
        """
        match = _OCC_PATTERN.match(occ.strip())
        if match is None:
            msg = f"Not an OCC option symbol: {occ!r}"
            raise ValueError(msg)

        return cls(
            symbol=match["root"],
            option_type=OptionType(match["type"]),
            strike=Decimal(match["strike"]) / 1000,
            expiration=datetime.strptime(match["expiry"], "%y%m%d").date(),
        )
