"""Order status transition policy."""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from ..entities import OrderStatus
from ...exceptions import StatusTransitionError


class OrderStatusPolicy:
    """Decides which status changes an order may go through.

    With no transition map every status may overwrite every other one. Pass a
    map of ``current -> allowed next statuses`` to restrict changes; setting
    the status an order already has is always allowed.
    """

    def __init__(self, transitions: Optional[Mapping[OrderStatus, Iterable[OrderStatus]]] = None):
        self._transitions: Optional[Dict[OrderStatus, FrozenSet[OrderStatus]]] = None
        if transitions is not None:
            self._transitions = {
                OrderStatus(current): frozenset(OrderStatus(s) for s in allowed)
                for current, allowed in transitions.items()
            }

    @property
    def unrestricted(self) -> bool:
        return self._transitions is None

    def allows(self, current: OrderStatus, new: OrderStatus) -> bool:
        if self._transitions is None or current == new:
            return True
        return new in self._transitions.get(current, frozenset())

    def check(self, current: OrderStatus, new: OrderStatus) -> None:
        """Raise StatusTransitionError when ``current -> new`` is not allowed."""
        if not self.allows(current, new):
            raise StatusTransitionError(
                message=f"Order status cannot change from '{current.value}' to '{new.value}'",
                details={'current': current.value, 'requested': new.value}
            )
