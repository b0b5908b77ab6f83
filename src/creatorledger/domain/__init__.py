"""Domain layer for creatorledger application.

Services live in their own modules (``income``, ``expense``, ``summary``) and
are imported from there; this package only re-exports the value types so
that the database layer can import entities without pulling in services.
"""

from creatorledger.domain.money import Money, SignedMoney
from creatorledger.domain.tax_year import TaxYear
from creatorledger.domain.errors import DomainError, NotFoundError, ValidationError

__all__ = [
    "Money",
    "SignedMoney",
    "TaxYear",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
