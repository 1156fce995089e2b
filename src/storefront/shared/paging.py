"""Reading whole result sets through Protean querysets.

``QuerySet.all()`` stops at the provider's default page size, so listings
that must return every record walk the pages explicitly.
"""

PAGE_SIZE = 100


def fetch_all(queryset, page_size: int = PAGE_SIZE) -> list:
    """Return every record matched by ``queryset``, page by page, in its ordering."""
    records = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all()
        records.extend(page.items)
        offset += page_size
        if not page.items or offset >= page.total:
            return records
