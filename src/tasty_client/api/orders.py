"""Orders API endpoints."""

from tasty_client.api.base import BaseAPI
from tasty_client.models.common import DataEnvelope, ListEnvelope, Pagination
from tasty_client.models.orders import (
    NewOrder,
    NewOrderECR,
    Order,
    OrderErrorResponse,
    OrderResponse,
    OrdersQuery,
    OrderSubmitEnvelope,
)


class OrdersAPI(BaseAPI):
    """tastytrade Orders API.

    Provides order management - listing, dry runs, placing, editing
    and canceling orders.
    """

    async def submit_order_dry_run(
        self,
        account_number: str,
        order: NewOrder,
    ) -> tuple[OrderResponse, OrderErrorResponse | None]:
        """Run the preflight checks for an order without placing it.

        Returns:
            Tuple of (order response, preflight errors if any)
        """
        envelope = await self._post(
            f"/accounts/{account_number}/orders/dry-run", OrderSubmitEnvelope, order
        )
        return envelope.data, envelope.error

    async def submit_order(
        self,
        account_number: str,
        order: NewOrder,
    ) -> tuple[OrderResponse, OrderErrorResponse | None]:
        """Place an order.

        Args:
            account_number: The account number
            order: Order to place

        Returns:
            Tuple of (order response, preflight errors if any)
        """
        envelope = await self._post(
            f"/accounts/{account_number}/orders", OrderSubmitEnvelope, order
        )
        return envelope.data, envelope.error

    async def reconfirm_order(self, account_number: str, order_id: int) -> Order:
        """Reconfirm an order. Only applies to equity offering orders."""
        envelope = await self._post(
            f"/accounts/{account_number}/orders/{order_id}/reconfirm", DataEnvelope[Order]
        )
        return envelope.data

    async def get_live_orders(self, account_number: str) -> list[Order]:
        """List live orders of an account."""
        envelope = await self._get(
            f"/accounts/{account_number}/orders/live", ListEnvelope[Order]
        )
        return envelope.items

    async def get_orders(
        self,
        account_number: str,
        query: OrdersQuery | None = None,
    ) -> tuple[list[Order], Pagination]:
        """List orders of an account, newest first unless sorted otherwise.

        Args:
            account_number: The account number
            query: Paging, date range, symbol and status filters

        Returns:
            Tuple of (orders, pagination metadata)
        """
        envelope = await self._get(
            f"/accounts/{account_number}/orders", ListEnvelope[Order], params=query
        )
        return envelope.items, envelope.pagination or Pagination()

    async def submit_order_ecr_dry_run(
        self,
        account_number: str,
        order_id: int,
        order: NewOrderECR,
    ) -> OrderResponse:
        """Run the preflight checks for an edit or cancel-replace."""
        envelope = await self._post(
            f"/accounts/{account_number}/orders/{order_id}/dry-run",
            DataEnvelope[OrderResponse],
            order,
        )
        return envelope.data

    async def get_order(self, account_number: str, order_id: int) -> Order:
        """Get a single order."""
        envelope = await self._get(
            f"/accounts/{account_number}/orders/{order_id}", DataEnvelope[Order]
        )
        return envelope.data

    async def cancel_order(self, account_number: str, order_id: int) -> Order:
        """Request cancellation of an order."""
        envelope = await self._delete(
            f"/accounts/{account_number}/orders/{order_id}", DataEnvelope[Order]
        )
        return envelope.data

    async def replace_order(
        self,
        account_number: str,
        order_id: int,
        order: NewOrderECR,
    ) -> Order:
        """Replace a live order.

        Fills of the original order arriving first abort the replacement.
        """
        envelope = await self._put(
            f"/accounts/{account_number}/orders/{order_id}", DataEnvelope[Order], order
        )
        return envelope.data

    async def patch_order(
        self,
        account_number: str,
        order_id: int,
        order: NewOrderECR,
    ) -> Order:
        """Edit price and execution properties of a live order."""
        envelope = await self._patch(
            f"/accounts/{account_number}/orders/{order_id}", DataEnvelope[Order], order
        )
        return envelope.data

    async def get_customer_live_orders(
        self,
        customer_id: str,
        query: OrdersQuery,
    ) -> list[Order]:
        """List live orders across a customer's accounts.

        ``query.account_numbers`` selects the accounts to include.
        """
        envelope = await self._get(
            f"/customers/{customer_id}/orders/live", ListEnvelope[Order], params=query
        )
        return envelope.items

    async def get_customer_orders(
        self,
        customer_id: str,
        query: OrdersQuery,
    ) -> tuple[list[Order], Pagination]:
        """List orders across a customer's accounts.

        ``query.account_numbers`` selects the accounts to include.
        """
        envelope = await self._get(
            f"/customers/{customer_id}/orders", ListEnvelope[Order], params=query
        )
        return envelope.items, envelope.pagination or Pagination()
