"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ReportFormatError(DomainException):
    """Credit report document is not shaped like a bureau response"""

    pass
