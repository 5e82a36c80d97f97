from typing import NamedTuple, Tuple


class Resource(NamedTuple):
    """A collection exposed over the CRUD routes."""
    name: str
    label: str
    # Navbar search: result type/category tags and the fields matched against
    search_type: str = ""
    category: str = ""
    search_fields: Tuple[str, ...] = ()
    has_gallery: bool = False


PRODUCTS = Resource(
    "products", "Product",
    search_type="product", category="Product",
    search_fields=("name", "description"), has_gallery=True,
)
EVENT_PRODUCTS = Resource(
    "event-products", "Event product",
    search_type="event-product", category="Event Product",
    search_fields=("name", "description"), has_gallery=True,
)
EVENTS = Resource(
    "events", "Event",
    search_type="event", category="Event",
    search_fields=("title", "description", "location"),
)
TESTIMONIALS = Resource("testimonials", "Testimonial")

RESOURCES = (PRODUCTS, EVENT_PRODUCTS, EVENTS, TESTIMONIALS)
