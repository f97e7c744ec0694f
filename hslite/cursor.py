"""Board cursor: moves over the cards of both players and picks the acting card.

The moving marker's level tells which row of the board it points at:
0 is the first player's boss, 1 their hand, 2 their minions, 3 the second
player's minions, 4 their hand and 5 their boss.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Optional

from hslite.cards import Card
from hslite.player import Player


class Direction(enum.Enum):
    """An input direction given to the cursor."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    SELECT = "select"


_HORIZONTAL = (Direction.RIGHT, Direction.LEFT)
_VERTICAL = (Direction.UP, Direction.DOWN)


@dataclass
class Marker:
    """A position on the board and the card found there."""

    card: Optional[Card] = None
    index: int = 0
    level: int = 0


def _wrap(value: int, forward: bool, limit: int) -> int:
    """Step value by one, wrapping around within [0, limit)."""
    if forward:
        value += 1
        remainder = abs(value) % limit
        return remainder if value >= 0 else -remainder
    return limit - 1 if value == 0 else value - 1


class Cursor:
    """Tracks where the player is pointing and which card they picked."""

    def __init__(
        self, player1: Optional[Player] = None, player2: Optional[Player] = None
    ) -> None:
        self.player1 = player1
        self.player2 = player2
        self.moving = Marker()
        self.selected = Marker()

    def _players(self) -> tuple[Player, Player]:
        if self.player1 is None or self.player2 is None:
            raise RuntimeError("the cursor is not attached to two players")
        return self.player1, self.player2

    def _point_at_level(self) -> None:
        """Point the moving marker at the card on its level and index."""
        first, second = self._players()
        level, index = self.moving.level, self.moving.index
        if level == 0:
            card: Optional[Card] = first.boss
        elif level == 1:
            card = first.hand[index]
        elif level == 2:
            card = first.minions[index]
        elif level == 3:
            card = second.minions[index]
        elif level == 4:
            card = second.hand[index]
        elif level == 5:
            card = second.boss
        else:
            return
        self.moving.card = card

    def step(
        self, direction: Direction, phase: int, player_index: int, active: Player
    ) -> None:
        """Move the cursor; phase 1 plays cards, phase 2 attacks, others ignore input."""
        if phase == 1:
            self._placement_step(direction, active)
        elif phase == 2:
            self._attack_step(direction, player_index)

    def _placement_step(self, direction: Direction, active: Player) -> None:
        marker = self.moving
        forward = direction is Direction.RIGHT
        if self.selected.card is None:
            # Choosing a card from the hand.
            if direction in _HORIZONTAL:
                marker.index = _wrap(marker.index, forward, active.hand.capacity)
                marker.card = active.hand[marker.index]
        elif self.selected.card.is_minion():
            # A minion only goes to the player's own minion row.
            if direction in _HORIZONTAL:
                marker.index = _wrap(marker.index, forward, active.minions.capacity)
                marker.card = active.minions[marker.index]
        elif direction in _HORIZONTAL:
            marker.index = _wrap(marker.index, forward, active.minions.capacity)
            self._point_at_level()
        elif direction is Direction.UP:
            if marker.level in (2, 5):
                marker.level = _wrap(marker.level, True, 6)
            marker.level = _wrap(marker.level, True, 6)
            self._point_at_level()
        elif direction is Direction.DOWN:
            if marker.level in (0, 3):
                marker.level = _wrap(marker.level, False, 6)
            marker.level = _wrap(marker.level, False, 3)
            self._point_at_level()

    def _shift_level(self, forward: bool, player_index: int) -> None:
        offset = 2 * player_index
        self.moving.level = _wrap(self.moving.level - offset, forward, 1) + offset

    def _attack_step(self, direction: Direction, player_index: int) -> None:
        first, _ = self._players()
        limit = first.minions.capacity
        marker = self.moving
        forward = direction is Direction.RIGHT
        if self.selected.card is None:
            # Choosing the attacker among the player's own boss and minions.
            if direction in _HORIZONTAL:
                marker.index = _wrap(marker.index, forward, limit - 1)
                self._point_at_level()
            elif direction in _VERTICAL:
                self._shift_level(direction is Direction.UP, player_index)
                self._point_at_level()
            return
        # Choosing whom to attack.
        if direction in _HORIZONTAL:
            marker.index = _wrap(marker.index, forward, limit)
            self._point_at_level()
        elif direction is Direction.UP:
            if player_index == 0:
                marker.level = 2 if marker.level > 2 else 3
            else:
                marker.level = 0 if marker.level > 0 else 1
            self._shift_level(True, player_index)
            self._point_at_level()
        elif direction is Direction.DOWN:
            self._shift_level(False, player_index)
            self._point_at_level()

    def select(
        self, phase: int, active: Player, opponent: Player, player_index: int
    ) -> bool:
        """Pick the card under the cursor as the one to act with.

        The cursor then moves to where that card can be used: the player's own
        minion row for a minion, the player's own boss for anything else.
        Returns False, since a selection by itself never carries out an action.
        """
        if self.selected.card is None:
            if self.moving.card is None:
                return False
            self.selected = dataclasses.replace(self.moving)
            self.moving.index = 0
            self.moving.card = None
            if self.selected.card.is_minion():
                self.moving.level = player_index + 2
            else:
                self.moving.level = player_index * 5
        return False