import random

import pytest

from hslite.cards import Boss, Minion, NotEnoughManaError, Spell
from hslite.container import CardSlots
from hslite.player import Player, Zone


def _deck():
    sari = Minion("Sarkany", 2, "S", 40, 15, 0)
    nekro = Spell("nekromanta", 2, "n", 0, 3, 10)
    savas = Spell("savas eso", 2, "s", 10, 0, 0)
    kobold = Minion("kobold", 2, "k", 10, 3, 0)
    deck = CardSlots(20)
    cards = [sari] + [nekro] * 2 + [savas] * 2 + [kobold] * 5
    for index, card in enumerate(cards):
        deck.put(card, index)
    return deck


def _player():
    boss = Boss("Hos Lovag", 0, "L", 30, 2000)
    return Player(boss, 5, 5, _deck(), 3, rng=random.Random(7))


def test_constructor():
    player = _player()
    assert player.mana == 3
    assert player.boss.hp == 30
    assert len(player.draw) == 10
    assert len(player.deck) == 10


def test_refill_hand_fills_to_capacity():
    player = _player()
    assert len(player.zone(Zone.HAND)) == 0
    player.refill_hand()
    assert len(player.zone(Zone.HAND)) == 5
    assert len(player.draw) == 5


def test_refill_hand_stops_when_draw_pile_empty():
    deck = CardSlots(3)
    deck.put(Minion("kobold", 2, "k", 10, 3), 0)
    deck.put(Minion("gyalog", 2, "g", 10, 3), 1)
    player = Player(Boss("b", 0, "b", 30, 1), 5, 5, deck, 1, rng=random.Random(0))
    player.refill_hand()
    assert len(player.hand) == 2
    assert len(player.draw) == 0


def test_shuffle_keeps_deck_contents():
    player = _player()
    drawn = sorted(card.name for card in player.draw if card is not None)
    expected = sorted(card.name for card in player.deck if card is not None)
    assert drawn == expected


def test_new_turn_grows_mana_and_reactivates():
    player = _player()
    minion = Minion("kobold", 2, "k", 10, 3, 5)
    player.minions.put(minion, 0)
    placed = player.minions[0]
    placed.active = False
    player.boss.active = False
    player.new_turn()
    assert player.max_mana == 4
    assert player.mana == 4
    assert placed.active is True
    assert placed.defence == 0
    assert player.boss.active is True
    assert len(player.hand) == 5


def test_play_pays_mana():
    player = _player()
    kobold = Minion("kobold", 2, "k", 10, 3)
    assert player.play(kobold, None) == 1
    assert player.mana == 1
    with pytest.raises(NotEnoughManaError):
        player.play(kobold, None)
    assert player.mana == 1


def test_zone_lookup():
    player = _player()
    assert player.zone(Zone.HAND) is player.hand
    assert player.zone(Zone.DRAW) is player.draw
    assert player.zone(Zone.MINIONS) is player.minions
    with pytest.raises(ValueError):
        player.zone("hand")


def test_copy_is_independent():
    player = _player()
    duplicate = player.copy()
    duplicate.refill_hand()
    duplicate.boss.hp = 1
    assert len(player.hand) == 0
    assert player.boss.hp == 30
    assert len(duplicate.hand) == 5


def test_serialize_layout():
    player = _player()
    text = player.serialize()
    lines = text.splitlines()
    assert lines[0] == "10 5 5 3 5"
    assert lines[1] == player.boss.serialize().rstrip("\n")
    assert lines[-1] == "MINION"
    assert len(lines) == 13
    assert lines[2].startswith('MINION "Sarkany"')


def test_default_player_is_empty():
    player = Player()
    assert player.mana == 0
    assert player.hand.capacity == 0
    assert len(player.draw) == 0