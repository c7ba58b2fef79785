"""Accounts API endpoints."""

from tasty_client.api.base import BaseAPI
from tasty_client.models.accounts import (
    AccountBalance,
    AccountPosition,
    AccountPositionQuery,
    TradingStatus,
)
from tasty_client.models.common import DataEnvelope, ListEnvelope


class AccountsAPI(BaseAPI):
    """tastytrade Accounts API.

    Provides access to balances, positions and trading status.
    """

    async def get_balances(self, account_number: str) -> AccountBalance:
        """Get the current balances of an account."""
        envelope = await self._get(
            f"/accounts/{account_number}/balances", DataEnvelope[AccountBalance]
        )
        return envelope.data

    async def get_positions(
        self,
        account_number: str,
        query: AccountPositionQuery | None = None,
    ) -> list[AccountPosition]:
        """List positions of an account.

        Args:
            account_number: The account number
            query: Optional filters (symbol, instrument type, closed positions...)

        Returns:
            List of positions
        """
        envelope = await self._get(
            f"/accounts/{account_number}/positions",
            ListEnvelope[AccountPosition],
            params=query,
        )
        return envelope.items

    async def get_trading_status(self, account_number: str) -> TradingStatus:
        """Get trading permissions and restrictions of an account."""
        envelope = await self._get(
            f"/accounts/{account_number}/trading-status", DataEnvelope[TradingStatus]
        )
        return envelope.data
