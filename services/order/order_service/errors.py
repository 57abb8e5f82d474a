"""Order service exceptions.

Domain code raises these; ``order_service.main`` maps each one to an HTTP
status so that "your request was wrong" and "the system is down" stay
distinguishable for the client.
"""


class OrderServiceError(Exception):
    """Base class for all order service errors."""


class ProductNotFound(OrderServiceError):
    """The catalog has no product with the requested identifier."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class CatalogUnavailable(OrderServiceError):
    """The catalog could not be reached or answered unexpectedly."""


class StorageFailure(OrderServiceError):
    """Persisting an order failed."""


class OrderNotFound(OrderServiceError):
    """No stored order has the requested identifier."""

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class EmptyOrder(OrderServiceError):
    """An order was requested without any line items."""

    def __init__(self):
        super().__init__("Order must contain at least one line item")
