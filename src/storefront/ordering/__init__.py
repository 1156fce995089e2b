"""Ordering: carts, checkout and orders.

Domain traversal only reaches modules directly under ``ordering/``. Importing
the package pulls in the command modules of the nested ``cart`` and ``order``
packages so their commands and handlers are registered before ``init()``.
"""

from storefront.ordering.cart import items  # noqa: F401
from storefront.ordering.order import status  # noqa: F401
