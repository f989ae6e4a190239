"""
Shared type variables for the rose tree package.

Types:
    Id        - Caller-supplied identifier type (only equality is required)
    T, U      - Node payload types before/after a transform
    A, B, C   - Payload types of the two inputs and the output of map2
    Acc       - Accumulator type for folds
"""

from typing import TypeVar

Id = TypeVar("Id")
T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
Acc = TypeVar("Acc")
