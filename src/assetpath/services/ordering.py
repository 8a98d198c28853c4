"""Bundle order assignment."""

from __future__ import annotations


class OrderAssigner:
    """Hands out a gapless, strictly increasing order starting at 1.

    Not synchronised: one assigner belongs to a single producer.
    """

    def __init__(self) -> None:
        self.produced = 0

    def next_order(self) -> int:
        self.produced += 1
        return self.produced
