"""Instrument and symbol lookup endpoints."""

from urllib.parse import quote

from tasty_client.api.base import BaseAPI
from tasty_client.models.common import DataEnvelope, ListEnvelope
from tasty_client.models.instruments import EquitiesQuery, Equity, SymbolData


def escape_symbol(symbol: str) -> str:
    """Percent-escape a symbol for use as one path segment.

    Symbols such as ``BRK/B`` contain a slash that must not become a path
    separator: ``BRK/B`` -> ``BRK%2FB``.
    """
    return quote(symbol, safe="")


class InstrumentsAPI(BaseAPI):
    """tastytrade symbol search and instrument lookups."""

    async def symbol_search(self, symbol: str) -> list[SymbolData]:
        """Search symbols by prefix.

        Args:
            symbol: Symbol or prefix, may contain "/" (e.g., "BRK/B")

        Returns:
            Matching symbols
        """
        exchange = await self._custom_request(
            "GET",
            f"/symbols/search/{escape_symbol(symbol)}",
            result=ListEnvelope[SymbolData],
        )
        return self._expect(exchange).items

    async def get_equity(self, symbol: str) -> Equity:
        """Get a single equity by symbol."""
        exchange = await self._custom_request(
            "GET",
            f"/instruments/equities/{escape_symbol(symbol)}",
            result=DataEnvelope[Equity],
        )
        return self._expect(exchange).data

    async def get_equities(self, query: EquitiesQuery | None = None) -> list[Equity]:
        """List equities matching the filters.

        Args:
            query: Symbols, lendability, index and ETF filters

        Returns:
            Matching equities
        """
        envelope = await self._get("/instruments/equities", ListEnvelope[Equity], params=query)
        return envelope.items
