"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_EMPLOYEES = "all"
UNKNOWN_EMPLOYEE_NAME = "Unknown"
ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

DEFAULT_LANGUAGE = "te"
DEFAULT_REPORT_DAYS = 30
DASHBOARD_SUMMARY_LIMIT = 5

MONEY_PLACES = 2
# Largest amount a DECIMAL(14,2) column holds.
MAX_AMOUNT = "999999999999.99"
REPORT_FILENAME_PREFIX = "wage-report"
