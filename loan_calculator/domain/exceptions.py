"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RefusalError(DomainException):
    """Applicant is well-formed but ineligible for credit"""

    def __init__(self, code: str, reason: str):
        super().__init__(reason)
        self.code = code
        self.reason = reason


class ComputationError(DomainException):
    """Arithmetic cannot be carried out for the given inputs"""

    pass


class InvalidTermError(ComputationError):
    """Loan term is zero or negative"""

    pass
