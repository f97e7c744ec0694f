import random

import pytest

from hslite.cards import Card, Minion
from hslite.container import CardSlots, ContainerFullError


def _cards():
    return [Card("a", 10, "x"), Card("b", 10, "x"), Card("c", 10, "x"), Card("d", 10, "x")]


def test_new_container_is_empty():
    slots = CardSlots(4)
    assert slots.capacity == 4
    assert len(slots) == 0
    assert list(slots) == [None, None, None, None]


def test_insert_random_fills_every_slot():
    slots = CardSlots(4)
    for card in _cards():
        slots.insert_random(card, random.Random(1))
    assert len(slots) == 4
    assert sorted(card.name for card in slots) == ["a", "b", "c", "d"]


def test_insert_random_when_full_raises():
    slots = CardSlots(2)
    rng = random.Random(3)
    slots.insert_random(Card("a"), rng)
    slots.insert_random(Card("b"), rng)
    with pytest.raises(ContainerFullError):
        slots.insert_random(Card("c"), rng)
    assert len(slots) == 2


def test_insert_random_zero_capacity_raises():
    with pytest.raises(ContainerFullError):
        CardSlots(0).insert_random(Card("a"), random.Random(0))


def test_insert_random_same_seed_same_order():
    first, second = CardSlots(4), CardSlots(4)
    rng1, rng2 = random.Random(42), random.Random(42)
    for card in _cards():
        first.insert_random(card, rng1)
        second.insert_random(card, rng2)
    assert [c.name for c in first] == [c.name for c in second]


def test_put_stores_a_copy():
    slots = CardSlots(3)
    original = Minion("kobold", 2, "k", 10, 3)
    slots.put(original, 1)
    stored = slots[1]
    assert stored is not original
    assert stored.name == "kobold"
    original.hp = 1
    assert stored.hp == 10


def test_put_into_full_container_clears_and_raises():
    slots = CardSlots(2)
    slots.put(Card("a"), 0)
    slots.put(Card("b"), 1)
    with pytest.raises(ContainerFullError):
        slots.put(Card("c"), 0)
    assert len(slots) == 0


def test_take_removes_card():
    slots = CardSlots(3)
    slots.put(Card("a"), 2)
    card = slots.take(2)
    assert card.name == "a"
    assert slots[2] is None
    assert len(slots) == 0


def test_take_empty_slot_returns_none():
    slots = CardSlots(2)
    assert slots.take(0) is None
    assert len(slots) == 0


def test_index_out_of_range():
    slots = CardSlots(2)
    with pytest.raises(IndexError):
        slots[2]
    with pytest.raises(IndexError):
        slots.take(5)


def test_clear_empties_all_slots():
    slots = CardSlots(3)
    slots.put(Card("a"), 0)
    slots.put(Card("b"), 2)
    slots.clear()
    assert len(slots) == 0
    assert slots.capacity == 3


def test_copy_is_independent():
    slots = CardSlots(3)
    slots.put(Minion("kobold", 2, "k", 10, 3), 0)
    duplicate = slots.copy()
    assert duplicate.capacity == 3
    assert duplicate[0] is not slots[0]
    duplicate[0].hp = 1
    assert slots[0].hp == 10
    duplicate.take(0)
    assert len(slots) == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CardSlots(-1)