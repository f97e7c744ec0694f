"""Playing cards: plain cards, characters, bosses, minions and spells."""

from __future__ import annotations

import copy
import re
from typing import IO, Optional, Union

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_INTEGER = re.compile(r"[+-]?\d+")


class CardError(Exception):
    """A card cannot do what was asked of it, or its data is malformed."""


class NotEnoughManaError(CardError):
    """The card costs more mana than is available."""

    def __init__(self, cost: int, available: int) -> None:
        super().__init__(f"card costs {cost} mana, only {available} available")
        self.cost = cost
        self.available = available


class TokenReader:
    """Reads whitespace separated tokens from saved card data."""

    def __init__(self, source: Union[str, IO[str]]) -> None:
        self._text = source if isinstance(source, str) else source.read()
        self._pos = 0

    def _skip_space(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def word(self) -> Optional[str]:
        """Return the next whitespace delimited word, or None at end of input."""
        self._skip_space()
        match = _WORD.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def quoted(self) -> str:
        """Return the text between the next pair of double quotes."""
        self._skip_space()
        if self._text[self._pos:self._pos + 1] != '"':
            raise CardError("expected a quoted name")
        end = self._text.find('"', self._pos + 1)
        if end < 0:
            raise CardError("unterminated quoted name")
        value = self._text[self._pos + 1:end]
        self._pos = end + 1
        return value

    def integer(self) -> int:
        """Return the next integer."""
        self._skip_space()
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            raise CardError("expected an integer")
        self._pos = match.end()
        return int(match.group())

    def char(self) -> str:
        """Return the next non-whitespace character."""
        self._skip_space()
        if self._pos >= len(self._text):
            raise CardError("expected a character")
        value = self._text[self._pos]
        self._pos += 1
        return value


def _read_flag(reader: TokenReader) -> bool:
    value = reader.integer()
    if value not in (0, 1):
        raise CardError(f"expected 0 or 1, got {value}")
    return bool(value)


class Card:
    """A card with a name, a mana cost and an icon."""

    kind = "KARTYA"
    # Plain cards have no life and always show as active.
    hp = 0
    active = True

    def __init__(self, name: str = "", mana_cost: int = 0, icon: str = " ") -> None:
        self.name = name
        self.mana_cost = mana_cost
        self.icon = icon

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, mana_cost={self.mana_cost})"

    def _line(self, *extra: object) -> str:
        fields = [self.kind, f'"{self.name}"', str(self.mana_cost), self.icon]
        fields.extend(str(value) for value in extra)
        return " ".join(fields) + "\n"

    def play(self, mana: int, target: Optional[Card]) -> int:
        """Pay for the card and return the mana left."""
        if self.mana_cost > mana:
            raise NotEnoughManaError(self.mana_cost, mana)
        return mana - self.mana_cost

    def display_name(self, max_width: int) -> str:
        """Return the name cut to at most max_width characters."""
        return self.name[:max_width]

    def take_damage(self, amount: int, attacker: Optional[Card]) -> None:
        raise CardError(f"{self.name!r} cannot take damage")

    def change_defence(self, delta: int) -> None:
        raise CardError(f"{self.name!r} has no defence")

    def heal(self, amount: int) -> bool:
        raise CardError(f"{self.name!r} cannot be healed")

    def clear(self) -> None:
        """Turn the card into a blank one."""
        self.icon = " "
        self.name = " "
        self.mana_cost = 0

    def is_minion(self) -> bool:
        return False

    def clone(self) -> Card:
        return copy.copy(self)

    def serialize(self) -> str:
        """Return the card as one line of saved data."""
        return self._line()

    def load(self, reader: TokenReader) -> None:
        """Read the card's fields; the type word is already consumed."""
        self.name = reader.quoted()
        self.mana_cost = reader.integer()
        self.icon = reader.char()

    def content_lines(self, in_hand: bool) -> list[str]:
        """Return the lines shown inside the card's frame."""
        return [f"M: {self.mana_cost}"] if in_hand else []


class Character(Card):
    """A card with life points that can be damaged, healed and killed."""

    kind = "KARAKTER"

    def __init__(
        self,
        name: str = "",
        mana_cost: int = 0,
        icon: str = " ",
        max_hp: int = 0,
        *,
        hp: Optional[int] = None,
        active: bool = True,
    ) -> None:
        super().__init__(name, mana_cost, icon)
        self.max_hp = max_hp
        self.hp = max_hp if hp is None else hp
        self.active = active

    def take_damage(self, amount: int, attacker: Optional[Card]) -> None:
        self.hp -= amount

    def heal(self, amount: int) -> bool:
        """Heal up to max_hp; a dead character cannot be healed."""
        if self.hp <= 0:
            return False
        self.hp = min(self.hp + amount, self.max_hp)
        return True

    def reactivate(self) -> None:
        if self.hp > 0:
            self.active = True

    def die(self) -> None:
        self.clear()
        self.active = False
        self.hp = 0
        self.max_hp = 0

    def serialize(self) -> str:
        return self._line(self.hp, self.max_hp, int(self.active))

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.hp = reader.integer()
        self.max_hp = reader.integer()
        self.active = _read_flag(reader)

    def content_lines(self, in_hand: bool) -> list[str]:
        lines = [f"Man: {self.mana_cost}"] if in_hand else []
        lines.append(f"HP: {self.hp}")
        return lines


class Boss(Character):
    """A player's main character with a once-per-turn special attack."""

    kind = "BOSS"

    def __init__(
        self,
        name: str = "",
        mana_cost: int = 0,
        icon: str = " ",
        max_hp: int = 0,
        special: int = 0,
        *,
        hp: Optional[int] = None,
        active: bool = True,
    ) -> None:
        super().__init__(name, mana_cost, icon, max_hp, hp=hp, active=active)
        self.special = special

    def play(self, mana: int, target: Optional[Card]) -> int:
        """Hit the target with the special attack; costs no mana."""
        if not self.active:
            raise CardError(f"{self.name!r} has already acted this turn")
        if target is None:
            raise CardError("the special attack needs a target")
        target.take_damage(self.special, None)
        self.active = False
        return mana

    def serialize(self) -> str:
        return self._line(self.hp, self.max_hp, int(self.active), self.special)

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.special = reader.integer()

    def content_lines(self, in_hand: bool) -> list[str]:
        lines = [f"Man: {self.mana_cost}"] if in_hand else []
        lines.append(f"HP: {self.hp}")
        lines.append(f"SPEC: {self.special}")
        return lines


class Minion(Character):
    """A character on the board with strength and a defence shield."""

    kind = "MINION"

    def __init__(
        self,
        name: str = "",
        mana_cost: int = 0,
        icon: str = " ",
        max_hp: int = 0,
        strength: int = 0,
        defence: int = 0,
        *,
        hp: Optional[int] = None,
        active: bool = True,
    ) -> None:
        super().__init__(name, mana_cost, icon, max_hp, hp=hp, active=active)
        self.strength = strength
        self.defence = defence

    def take_damage(self, amount: int, attacker: Optional[Card]) -> None:
        """Absorb damage with defence first; a surviving minion strikes back."""
        if self.defence >= amount:
            self.defence -= amount
        else:
            self.hp -= amount - self.defence
            self.defence = 0
        if self.hp <= 0:
            self.die()
        elif attacker is not None and attacker.is_minion():
            attacker.take_damage(self.strength, None)

    def change_defence(self, delta: int) -> None:
        self.defence += delta
        if delta < 0 and self.defence < 0:
            self.defence = 0

    def play(self, mana: int, target: Optional[Card]) -> int:
        """Pay for placing the minion on an empty slot."""
        if target is not None:
            raise CardError("a minion can only be placed on an empty slot")
        if self.mana_cost > mana:
            raise NotEnoughManaError(self.mana_cost, mana)
        return mana - self.mana_cost

    def attack(self, target: Card) -> None:
        """Attack the target once per turn."""
        if self.active:
            target.take_damage(self.strength, self)
            self.active = False

    def reactivate(self) -> None:
        """Make the minion ready again; it loses its defence."""
        self.active = True
        self.defence = 0

    def is_minion(self) -> bool:
        return True

    def serialize(self) -> str:
        return self._line(
            self.hp, self.max_hp, int(self.active), self.strength, self.defence
        )

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.strength = reader.integer()
        self.defence = reader.integer()

    def content_lines(self, in_hand: bool) -> list[str]:
        lines = [f"Man: {self.mana_cost}"] if in_hand else []
        lines.append(f"HP: {self.hp}")
        lines.append(f"ERO: {self.strength}")
        lines.append(f"VED: {self.defence}")
        return lines


class Spell(Card):
    """A one-shot card that shields, damages and heals its target."""

    kind = "VARAZSLAT"

    def __init__(
        self,
        name: str = "",
        mana_cost: int = 0,
        icon: str = " ",
        damage: int = 0,
        healing: int = 0,
        defence: int = 0,
    ) -> None:
        super().__init__(name, mana_cost, icon)
        self.damage = damage
        self.healing = healing
        self.defence = defence

    def play(self, mana: int, target: Optional[Card]) -> int:
        """Apply defence, then damage, then healing to the target."""
        if self.mana_cost > mana:
            raise NotEnoughManaError(self.mana_cost, mana)
        if target is None:
            raise CardError("a spell needs a target")
        target.change_defence(self.defence)
        target.take_damage(self.damage, None)
        target.heal(self.healing)
        return mana - self.mana_cost

    def serialize(self) -> str:
        return self._line(self.damage, self.healing, self.defence)

    def load(self, reader: TokenReader) -> None:
        super().load(reader)
        self.damage = reader.integer()
        self.healing = reader.integer()
        self.defence = reader.integer()

    def content_lines(self, in_hand: bool) -> list[str]:
        return [
            f"Man: {self.mana_cost}",
            f"Seb: {self.damage}",
            f"+Hp: {self.healing}",
            f"Ved: {self.defence}",
        ]