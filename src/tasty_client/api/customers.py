"""Customers API endpoints."""

from tasty_client.api.base import BaseAPI
from tasty_client.models.common import DataEnvelope, ListEnvelope
from tasty_client.models.customers import (
    Account,
    AccountAuthorityEntry,
    Customer,
    QuoteStreamerTokenAuthResult,
)


class CustomersAPI(BaseAPI):
    """tastytrade Customers API.

    Customer records, their accounts and market data streamer credentials.
    """

    async def get_my_customer_info(self) -> Customer:
        """Get the authenticated customer."""
        envelope = await self._get("/customers/me", DataEnvelope[Customer])
        return envelope.data

    async def get_customer(self, customer_id: str) -> Customer:
        """Get a full customer resource."""
        envelope = await self._get(f"/customers/{customer_id}", DataEnvelope[Customer])
        return envelope.data

    async def get_customer_accounts(self, customer_id: str) -> list[Account]:
        """List the accounts attached to a customer.

        Args:
            customer_id: Customer ID, or "me" for the authenticated customer

        Returns:
            Accounts in the order the API lists them
        """
        envelope = await self._get(
            f"/customers/{customer_id}/accounts", ListEnvelope[AccountAuthorityEntry]
        )
        return [entry.account for entry in envelope.items]

    async def get_customer_account(self, customer_id: str, account_number: str) -> Account:
        """Get a full customer account resource."""
        envelope = await self._get(
            f"/customers/{customer_id}/accounts/{account_number}", DataEnvelope[Account]
        )
        return envelope.data

    async def get_my_account(self, account_number: str) -> Account:
        """Get one of the authenticated customer's accounts."""
        return await self.get_customer_account("me", account_number)

    async def get_quote_streamer_tokens(self) -> QuoteStreamerTokenAuthResult:
        """Get the streamer endpoint, level and token for market data."""
        envelope = await self._get(
            "/quote-streamer-tokens", DataEnvelope[QuoteStreamerTokenAuthResult]
        )
        return envelope.data
