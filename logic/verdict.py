# logic/verdict.py

"""
Verdict enumeration for satisfiability checking, capturing how a formula
behaves across all assignments of its literals.
"""

from enum import Enum, auto


class Verdict(Enum):
    """Three-way classification of a formula."""
    TAUTOLOGY = auto()  # true under every assignment
    CONTINGENT = auto()  # true under some assignments, false under others
    UNSATISFIABLE = auto()  # false under every assignment

    @property
    def satisfiable(self) -> bool:
        return self is not Verdict.UNSATISFIABLE

    def __str__(self) -> str:
        return self.name
