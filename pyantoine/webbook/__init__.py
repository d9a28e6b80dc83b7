from .webbook import get_page, parse_page, search, disjoint_rows, fetch
