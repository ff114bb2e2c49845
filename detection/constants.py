# Substrings that mark a cell as a likely header (matched against lowercased text).
HEADER_INDICATORS = (
    "name", "id", "code", "number", "date", "amount", "total", "price",
    "quantity", "description", "type", "status", "address", "email",
    "phone", "category", "item", "product", "service", "client", "customer",
    "vendor", "supplier", "company", "organization", "department", "location",
    "reference", "order", "invoice", "bill", "receipt", "payment", "tax",
)

STOP_WORDS = frozenset(
    {"a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)

# Headers are only looked for in the first rows (0-based index).
MAX_HEADER_ROW_INDEX = 5
