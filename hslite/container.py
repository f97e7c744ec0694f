"""Fixed-capacity slot containers holding cards."""

from __future__ import annotations

import random
from typing import Iterator, Optional

from hslite.cards import Card


class ContainerFullError(OverflowError):
    """Every slot of the container is already taken."""


class CardSlots:
    """A row of card slots of fixed capacity; empty slots hold None.

    Cards put into the container are cloned, so the container owns its cards.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._slots: list[Optional[Card]] = [None] * capacity

    def __repr__(self) -> str:
        return f"CardSlots({self._slots!r})"

    @property
    def capacity(self) -> int:
        """The number of slots."""
        return len(self._slots)

    def __len__(self) -> int:
        """The number of occupied slots."""
        return sum(1 for card in self._slots if card is not None)

    def __iter__(self) -> Iterator[Optional[Card]]:
        """Iterate over every slot, empty ones included."""
        return iter(self._slots)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"slot index {index} out of range")

    def __getitem__(self, index: int) -> Optional[Card]:
        self._check_index(index)
        return self._slots[index]

    def insert_random(self, card: Card, rng: Optional[random.Random] = None) -> int:
        """Put a copy of the card into a random empty slot and return its index.

        A random slot is picked; if it is taken, the next free slot after it
        (wrapping around) is used.
        """
        if len(self) >= self.capacity:
            raise ContainerFullError("container is full")
        chooser = rng if rng is not None else random
        index = chooser.randrange(self.capacity)
        while self._slots[index] is not None:
            index = (index + 1) % self.capacity
        self._slots[index] = card.clone()
        return index

    def put(self, card: Card, index: int) -> None:
        """Put a copy of the card into the given slot.

        Putting into a full container empties it and raises ContainerFullError.
        """
        if len(self) >= self.capacity:
            self.clear()
            raise ContainerFullError("container is full")
        self._check_index(index)
        self._slots[index] = card.clone()

    def take(self, index: int) -> Optional[Card]:
        """Remove and return the card in the given slot."""
        self._check_index(index)
        card = self._slots[index]
        self._slots[index] = None
        return card

    def clear(self) -> None:
        """Empty every slot."""
        self._slots = [None] * self.capacity

    def copy(self) -> CardSlots:
        """Return a container of the same capacity holding copies of the cards."""
        duplicate = CardSlots(self.capacity)
        duplicate._slots = [None if card is None else card.clone() for card in self._slots]
        return duplicate