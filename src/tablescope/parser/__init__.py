from tablescope.parser.markup import (
    count_tables,
    extract_identifier,
    parse_markup,
    split_regions,
)

__all__ = ["parse_markup", "extract_identifier", "count_tables", "split_regions"]
