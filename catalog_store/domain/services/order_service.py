"""Order repository service."""

from typing import Any, Dict, List, Optional, Union

from ..entities import Order, OrderFilter, OrderStatus
from ..query import Predicate, order_predicate
from ..repositories import DocumentStore
from ..schemas import OrderCreate, OrderUpdate
from ...config import ORDERS_COLLECTION
from ...exceptions import EntityValidationError, RepositoryError, StoreError
from ...error_handler import handle_errors
from ...logging_config import get_logger
from .entity_service import EntityService
from .order_status_policy import OrderStatusPolicy

logger = get_logger(__name__)


def _parse_status(status: Union[OrderStatus, str]) -> OrderStatus:
    try:
        return OrderStatus(status)
    except ValueError as e:
        raise EntityValidationError(
            message=f"Unknown order status: {status!r}",
            details={'status': status, 'allowed': [s.value for s in OrderStatus]}
        ) from e


class OrderService(EntityService[Order, OrderFilter]):
    """Orders: filter by customer email and status; status changes go through a policy.

    Orders carry no category or tags, so ``list_categories``/``list_tags``
    always return empty lists.
    """

    collection_name = ORDERS_COLLECTION
    entity_type = Order
    filter_type = OrderFilter
    create_schema = OrderCreate
    update_schema = OrderUpdate

    def __init__(self, store: DocumentStore, status_policy: Optional[OrderStatusPolicy] = None):
        super().__init__(store)
        self.status_policy = status_policy or OrderStatusPolicy()

    def build_predicate(self, filter: Optional[OrderFilter]) -> Predicate:
        return order_predicate(filter)

    def _before_update(self, current: Dict[str, Any], fields: Dict[str, Any]) -> None:
        if "status" in fields:
            self.status_policy.check(_parse_status(current["status"]), _parse_status(fields["status"]))

    @handle_errors(default_return=[], exception_type=StoreError)
    async def list_by_customer_email(self, email: str) -> List[Order]:
        """A customer's orders, newest first."""
        return await self.list(OrderFilter(customer_email=email), newest_first=True)

    @handle_errors(exception_type=RepositoryError, reraise=True)
    async def update_status(self, order_id: str, status: Union[OrderStatus, str]) -> bool:
        """Move an order to ``status``; False when the order does not exist."""
        new_status = _parse_status(status)
        current = self.collection.find_by_id(order_id)
        if current is None:
            return False
        self.status_policy.check(_parse_status(current["status"]), new_status)
        updated = self.collection.update_by_id(order_id, {"status": new_status.value})
        if updated:
            logger.info(f"Order {order_id} status {current['status']} -> {new_status.value}")
        return updated
