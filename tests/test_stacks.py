import random

import pytest

from pushswap.stacks import Stacks


def test_initial_layout_puts_first_value_on_top():
    s = Stacks([1, 2, 3])
    assert s.a == [3, 2, 1]
    assert s.b == []
    assert s.log == []


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert s.a[-1] == 2
    assert s.a[-2] == 1
    assert s.a[0] == 3
    assert s.log == ["sa"]


def test_sa_on_single_element_records_nothing():
    s = Stacks([7])
    s.sa()
    assert s.a == [7]
    assert s.log == []


def test_ss_skips_swap_of_short_stack():
    s = Stacks([1, 2, 3])
    s.ss()
    assert s.log == ["sa"]


def test_push_round_trip():
    s = Stacks([5, 6, 7])
    s.pb()
    assert s.b == [5]
    assert s.a == [7, 6]
    s.pa()
    assert s.a == [7, 6, 5]
    assert s.b == []
    assert s.log == ["pb", "pa"]


def test_pa_on_empty_b_is_still_recorded():
    s = Stacks([1, 2])
    s.pa()
    assert s.a == [2, 1]
    assert s.log == ["pa"]


def test_pb_on_empty_a_is_still_recorded():
    s = Stacks([])
    s.pb()
    assert s.b == []
    assert s.log == ["pb"]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert s.a == [1, 3, 2]
    assert s.log == ["ra"]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert s.a == [2, 1, 3]
    assert s.log == ["rra"]


def test_rotations_on_single_element_still_recorded():
    s = Stacks([9])
    s.ra()
    s.rra()
    assert s.a == [9]
    assert s.log == ["ra", "rra"]


@pytest.mark.parametrize("values", [[1, 2, 3], [4, -2, 8, 0, 5]])
def test_ra_then_rra_restores(values):
    s = Stacks(values)
    before = list(s.a)
    s.ra()
    s.rra()
    assert s.a == before


def test_rr_and_rrr_record_both_halves():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    a_before, b_before = list(s.a), list(s.b)
    s.rr()
    s.rrr()
    assert s.log == ["pb", "pb", "ra", "rb", "rra", "rrb"]
    assert s.a == a_before
    assert s.b == b_before


def test_rb_and_rrb_are_inverse():
    s = Stacks([1, 2, 3, 4])
    for _ in range(3):
        s.pb()
    before = list(s.b)
    s.rb()
    assert s.b[0] == before[-1]
    s.rrb()
    assert s.b == before


def test_emit_callback_receives_names():
    seen = []
    s = Stacks([3, 1, 2], emit=seen.append)
    s.sa()
    s.pb()
    s.ra()
    assert seen == ["sa", "pb", "ra"]
    assert seen == s.log


def test_random_operations_preserve_elements():
    rng = random.Random(1234)
    values = rng.sample(range(-50, 50), 20)
    s = Stacks(values)
    ops = [s.sa, s.sb, s.ss, s.pa, s.pb, s.ra, s.rb, s.rr, s.rra, s.rrb, s.rrr]
    for _ in range(500):
        rng.choice(ops)()
    assert sorted(s.a + s.b) == sorted(values)
    assert len(s.a) + len(s.b) == len(values)