"""Default values for new records and standard response messages."""

from decimal import Decimal

from eazybank.core.enums import AccountType, CardType, LoanType

MOBILE_NUMBER_PATTERN = r"^\d{10}$"
CARD_NUMBER_PATTERN = r"^\d{12}$"
LOAN_NUMBER_PATTERN = r"^\d{12}$"

# Accounts
DEFAULT_ACCOUNT_TYPE = AccountType.SAVINGS
DEFAULT_BRANCH_ADDRESS = "123 Main Street, New York"
ACCOUNT_NUMBER_FLOOR = 1_000_000_000

# Cards
DEFAULT_CARD_TYPE = CardType.CREDIT_CARD
NEW_CARD_LIMIT = Decimal("100000")

# Loans
DEFAULT_LOAN_TYPE = LoanType.HOME_LOAN
NEW_LOAN_LIMIT = Decimal("100000")

# Card and loan numbers share a 12-digit range
RECORD_NUMBER_FLOOR = 100_000_000_000
RECORD_NUMBER_SPAN = 900_000_000

# Response status codes and messages
STATUS_200 = "200"
MESSAGE_200 = "Request processed successfully"
STATUS_201 = "201"
STATUS_417 = "417"
MESSAGE_417_UPDATE = "Update operation failed. Please try again or contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please try again or contact Dev team"
MESSAGE_500 = "An error occurred. Please try again or contact Dev team"

CORRELATION_ID_HEADER = "eazybank-correlation-id"
