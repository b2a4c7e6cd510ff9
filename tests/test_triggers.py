import itertools

import pytest

from argoslib.triggers import Trigger, all_of, any_of, none_of, one_of


def make_triggers(count):
    state = [False] * count
    triggers = [Trigger(lambda i=i: state[i]) for i in range(count)]
    return state, triggers


def test_trigger_reads_live_state():
    state = {"on": False}
    trigger = Trigger(lambda: state["on"])
    assert trigger() is False
    state["on"] = True
    assert trigger() is True


def test_trigger_operators():
    true, false = Trigger(lambda: True), Trigger(lambda: False)
    assert (true & false)() is False
    assert (true | false)() is True
    assert (~false)() is True
    assert (~true)() is False


def test_or_short_circuits():
    calls = []

    def counted():
        calls.append(1)
        return False

    combined = Trigger(lambda: True) | Trigger(counted)
    assert combined() is True
    assert calls == []


@pytest.mark.parametrize("count", [2, 3, 4])
def test_one_of_truth_table(count):
    state, triggers = make_triggers(count)
    combined = one_of(triggers)
    for values in itertools.product([False, True], repeat=count):
        state[:] = values
        assert combined() == (values.count(True) == 1)


@pytest.mark.parametrize("count", [1, 2, 3])
def test_any_all_none_truth_tables(count):
    state, triggers = make_triggers(count)
    anyt, allt, nonet = any_of(triggers), all_of(triggers), none_of(triggers)
    for values in itertools.product([False, True], repeat=count):
        state[:] = values
        assert anyt() == any(values)
        assert allt() == all(values)
        assert nonet() == (not any(values))


def test_one_of_single_trigger_is_returned_unchanged():
    trigger = Trigger(lambda: True)
    assert one_of([trigger]) is trigger


@pytest.mark.parametrize("combiner", [one_of, none_of, any_of, all_of])
def test_empty_rejected(combiner):
    with pytest.raises(ValueError):
        combiner([])