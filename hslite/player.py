"""A player's boss, mana and card zones."""

from __future__ import annotations

import copy
import enum
import random
from typing import Optional

from hslite.cards import Boss, Card, Minion
from hslite.container import CardSlots


class Zone(enum.Enum):
    """The card containers a player owns."""

    HAND = "hand"
    DRAW = "draw"
    MINIONS = "minions"


class Player:
    """One side of the board: a boss, a hand, a draw pile, minions and a deck.

    The deck is what the draw pile is shuffled from; mana grows by one each turn.
    """

    def __init__(
        self,
        boss: Optional[Boss] = None,
        minion_capacity: int = 0,
        hand_capacity: int = 0,
        deck: Optional[CardSlots] = None,
        max_mana: int = 0,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.max_mana = max_mana
        self.mana = max_mana
        self.boss = boss.clone() if boss is not None else Boss()
        self.deck = deck.copy() if deck is not None else CardSlots(0)
        self.hand = CardSlots(hand_capacity)
        self.draw = self.deck.copy()
        self.minions = CardSlots(minion_capacity)
        self.shuffle_draw_pile()

    def refill_hand(self) -> None:
        """Draw cards from the top of the draw pile until the hand is full."""
        while len(self.hand) < self.hand.capacity and len(self.draw) > 0:
            top = max(i for i, card in enumerate(self.draw) if card is not None)
            card = self.draw.take(top)
            free = next(i for i, slot in enumerate(self.hand) if slot is None)
            self.hand.put(card, free)

    def new_turn(self) -> None:
        """Reactivate the boss and minions, refill the hand and grow the mana."""
        self.boss.reactivate()
        for card in self.minions:
            if isinstance(card, Minion):
                card.reactivate()
        self.refill_hand()
        self.max_mana += 1
        self.mana = self.max_mana

    def shuffle_draw_pile(self) -> None:
        """Rebuild the draw pile from the deck in random order."""
        self.draw.clear()
        for card in self.deck:
            if card is not None:
                self.draw.insert_random(card, self.rng)

    def play(self, card: Card, target: Optional[Card]) -> int:
        """Play a card on a target, paying from this player's mana."""
        self.mana = card.play(self.mana, target)
        return self.mana

    def zone(self, kind: Zone) -> CardSlots:
        """Return the container of the given kind."""
        if kind is Zone.HAND:
            return self.hand
        if kind is Zone.DRAW:
            return self.draw
        if kind is Zone.MINIONS:
            return self.minions
        raise ValueError(f"no such zone: {kind!r}")

    def copy(self) -> Player:
        """Return an independent copy of the player."""
        duplicate = copy.copy(self)
        duplicate.boss = self.boss.clone()
        duplicate.hand = self.hand.copy()
        duplicate.draw = self.draw.copy()
        duplicate.minions = self.minions.copy()
        duplicate.deck = self.deck.copy()
        return duplicate

    def serialize(self) -> str:
        """Return the player's deck in the saved-game text format."""
        header = (
            f"{len(self.deck)} {self.minions.capacity} {self.hand.capacity} "
            f"{self.mana} {self.minions.capacity}\n"
        )
        parts = [header, self.boss.serialize()]
        parts.extend(card.serialize() for card in self.deck if card is not None)
        parts.append("MINION\n")
        return "".join(parts)