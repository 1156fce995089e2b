"""Domain initialization and configuration.

One Protean domain hosts the catalogue, ordering and identity aggregates so
that checkout can read products and write orders in a single unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
