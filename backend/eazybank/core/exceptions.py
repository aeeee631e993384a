"""Domain exceptions raised by services and translated by the API layer.

Services raise these to signal business-rule violations. Exception handlers
registered in ``eazybank.main`` render them as ``ErrorResponseDto`` bodies.
"""


class BankingError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(BankingError):
    """Raised when a lookup by owner key or record number finds nothing."""

    def __init__(self, resource: str, field: str, value: object) -> None:
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(
            f"{resource} not found with the given input data {field} : '{value}'"
        )


class ResourceAlreadyExistsError(BankingError):
    """Raised when a record already exists for the given owner key."""

    pass


class NumberGenerationError(BankingError):
    """Raised when no unused record number could be generated."""

    pass


class InvalidAmountError(BankingError):
    """Raised when an update would leave a used amount above its total."""

    pass
