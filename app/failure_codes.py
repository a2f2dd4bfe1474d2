"""Shared failure code constants for disclosure import error handling."""

# Whole-batch failures: nothing is imported.
MALFORMED_INPUT = "malformed_input"
EMPTY_FILE = "empty_file"
COMPANY_NOT_FOUND = "company_not_found"

FATAL_FAILURES = [
    MALFORMED_INPUT,
    EMPTY_FILE,
    COMPANY_NOT_FOUND,
]

# Per-row failures: the row is skipped, the batch continues.
MISSING_REQUIRED_FIELD = "missing_required_field"
INVALID_NUMBER_FORMAT = "invalid_number_format"
INVALID_DATE_FORMAT = "invalid_date_format"
INVALID_PERIOD_ORDER = "invalid_period_order"
PERSISTENCE_FAILED = "persistence_failed"

ROW_FAILURES = [
    MISSING_REQUIRED_FIELD,
    INVALID_NUMBER_FORMAT,
    INVALID_DATE_FORMAT,
    INVALID_PERIOD_ORDER,
    PERSISTENCE_FAILED,
]

# Request rejected before an import starts.
UNSUPPORTED_FILE_TYPE = "unsupported_file_type"
UNSUPPORTED_TEMPLATE_TYPE = "unsupported_template_type"
