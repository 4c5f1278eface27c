"""Formatting, date and general helpers."""

from expense_client.utils.dates import (
    YearMonth,
    format_date,
    format_date_to_string,
    get_current_date,
    get_current_month,
    get_month_name,
    is_valid_date,
    month_bounds,
    parse_date,
)
from expense_client.utils.formatting import format_currency, parse_currency_string
from expense_client.utils.helpers import (
    calculate_percentage,
    deep_clone,
    generate_url,
    is_empty,
    truncate_text,
)
