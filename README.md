# hslite

The rules of a small two-player card battle game, as a Python library. Each
player has a boss to protect, a hand of cards, a draw pile and a row of
minions on the table. The player whose boss dies loses.

## Installing

```
pip install .
```

## Modules

* `hslite.cards` has the cards: `Card`, `Character`, `Boss`, `Minion` and
  `Spell`. It also has `TokenReader` for reading saved card data, and the
  errors `CardError` and `NotEnoughManaError`.
* `hslite.container` has `CardSlots`, a row of card places with a fixed
  capacity, and `ContainerFullError`.
* `hslite.player` has `Player` and the `Zone` enum, which names a player's
  hand, draw pile and minion row.
* `hslite.cursor` has `Cursor`, the board cursor, with `Direction` and
  `Marker`.

## Cards

* **Card**: a name, a mana cost and a one-character icon. `play(mana, target)`
  returns the mana that is left. It raises `NotEnoughManaError` when the card
  costs more than `mana`.
* **Character**: a card with `hp` and `max_hp`. `heal` never raises health
  above `max_hp`, and it returns `False` for a character that is already dead.
  `die()` turns the character into a blank card with no health.
* **Minion**: has `strength` and `defence`. Damage uses up defence before it
  reaches health. A minion that survives strikes back at a minion that attacked
  it. `attack(target)` works once per turn. `reactivate()` makes the minion
  ready again and removes its defence. `play` places the minion on an empty
  slot, so the target must be `None`.
* **Spell**: `play(mana, target)` does three things to the target, in this
  order: it adds defence, it deals damage, and it heals.
* **Boss**: `play(mana, target)` uses the special attack on the target. The
  attack costs no mana and the target cannot strike back. It can be used once
  per turn; a second use raises `CardError`.

Cards that cannot take damage, defence or healing raise `CardError`.

```python
from hslite.cards import Minion, Spell

kobold = Minion("kobold", 2, "k", 10, strength=3)
fireball = Spell("Tuzgolyo", 3, "f", damage=20, healing=10, defence=10)

mana = fireball.play(20, kobold)
assert mana == 17
assert kobold.hp == 0
```

### Saved card lines

`serialize()` returns a card as one line of text. The name is in double
quotes and may contain spaces.

* `MINION "name" mana icon hp max_hp active strength defence`
* `BOSS "name" mana icon hp max_hp active special_damage`
* `VARAZSLAT "name" mana icon damage healing defence`

To read a line back, take the type word with `TokenReader.word()`. Then call
`load(reader)` on an empty card of the matching class. Malformed data raises
`CardError`.

```python
from hslite.cards import Minion, TokenReader

reader = TokenReader('MINION "kobold" 2 k 10 10 1 3 0')
assert reader.word() == "MINION"
card = Minion()
card.load(reader)
assert card.serialize() == 'MINION "kobold" 2 k 10 10 1 3 0\n'
```

## Containers

`CardSlots(capacity)` holds cards in numbered slots, and empty slots hold
`None`. How the container behaves:

* It stores copies of the cards put into it.
* `len()` counts the occupied slots. Iterating visits every slot.
* Indexing outside the capacity raises `IndexError`.
* `insert_random(card, rng)` puts the card into a random free slot.
* `put` into a full container empties the container and raises
  `ContainerFullError`.

## Players

`Player(boss, minion_capacity, hand_capacity, deck, max_mana, rng=...)`
shuffles its draw pile from the `deck` (a `CardSlots`) when it is created.

* `refill_hand()` draws cards until the hand is full.
* `new_turn()` reactivates the boss and the minions, refills the hand and
  raises the mana by one.
* `play(card, target)` pays for the card from the player's mana.
* `serialize()` writes the player's deck in the saved-card format, after a
  header line.

## Cursor

`Cursor(player1, player2)` moves over the rows of the board. `moving.level`
tells which row the cursor is on:

| Level | Row                     |
|-------|-------------------------|
| 0     | first player's boss     |
| 1     | first player's hand     |
| 2     | first player's minions  |
| 3     | second player's minions |
| 4     | second player's hand    |
| 5     | second player's boss    |

* `step(direction, phase, player_index, active)` moves the cursor. In phase 1
  the player plays cards. In phase 2 the player attacks. Any other phase
  ignores input.
* `select(...)` picks the card under the cursor as the card to act with. It
  does not carry out the action itself, and it always returns `False`.

## What the package does not do

There is no terminal screen, no keyboard handling and no command to start a
game. There is also no reader for a whole deck file with both players in it.
The package gives the rules and the game state; drawing the board and driving
a game from input is left to the program that uses it.

## Running the tests

```
pip install .[test]
pytest
```