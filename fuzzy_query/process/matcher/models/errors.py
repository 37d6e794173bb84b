# Path: fuzzy_query/process/matcher/models/errors.py
"""
Fuzzy Query Errors

Exception hierarchy for fuzzy query building.

All errors are raised synchronously while a query is being built; nothing
here is raised during execution. Unknown column names are left to the
database, which reports them when the statement runs.
"""


class FuzzyQueryError(Exception):
    """Base class for all fuzzy_query errors."""


class InvalidWeightError(FuzzyQueryError, ValueError):
    """
    A term or matcher weight is not a finite positive number.

    Relevance comparisons are only meaningful with strictly positive
    weights, so zero, negative, infinite and non-numeric weights are
    rejected when the term (or registry override) is constructed.
    """

    def __init__(self, weight: object, subject: str = 'term'):
        self.weight = weight
        self.subject = subject
        super().__init__(
            f"Weight for {subject} must be a positive number, got {weight!r}"
        )


class EmptyConditionError(FuzzyQueryError):
    """A fuzzy condition was built without any search term in it."""


class UnknownFuzzyFieldError(FuzzyQueryError, KeyError):
    """
    order_by_fuzzy() was asked for a field with no fuzzy search term.

    The relevance of a field is only defined by the term it was searched
    with, so a field must be passed to where_fuzzy() before it can be
    used for relevance ordering.
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"No fuzzy search term was given for field {self.field!r}"


__all__ = [
    'FuzzyQueryError',
    'InvalidWeightError',
    'EmptyConditionError',
    'UnknownFuzzyFieldError',
]
