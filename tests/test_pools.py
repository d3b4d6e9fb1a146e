"""
Tests for the fixed character pools and their startup invariants.
"""

import string

import pytest
from advpwgen.pools import (
    ALL_CLASSES,
    POOL_CAPACITY,
    POOLS,
    UNIQUE_CAPACITY,
    CharClass,
    class_of,
    fold,
    pool_for,
    validate_pools,
)


def test_pools_match_reference_charsets():
    assert pool_for(CharClass.UPPER) == string.ascii_uppercase
    assert pool_for(CharClass.LOWER) == string.ascii_lowercase
    assert pool_for(CharClass.DIGIT) == string.digits
    assert len(pool_for(CharClass.SPECIAL)) == 28


def test_capacities():
    assert POOL_CAPACITY == 26 + 26 + 10 + 28
    # Upper and lower letters collapse onto the same folded values.
    assert UNIQUE_CAPACITY == 26 + 10 + 28


def test_every_character_maps_back_to_its_class():
    for cls in ALL_CLASSES:
        for ch in pool_for(cls):
            assert class_of(ch) is cls


def test_class_of_unknown_character():
    assert class_of(" ") is None
    assert class_of("é") is None


def test_fold_ignores_case_only():
    assert fold("A") == fold("a") == ord("a")
    assert fold("7") == ord("7")
    assert fold("~") == ord("~")


def test_special_pool_has_no_letters_or_digits():
    assert not any(ch.isalnum() for ch in pool_for(CharClass.SPECIAL))


def test_builtin_table_passes_validation():
    validate_pools(POOLS)


@pytest.mark.parametrize(
    "override",
    [
        {CharClass.SPECIAL: ""},
        {CharClass.SPECIAL: "!1"},
        {CharClass.DIGIT: "0123€"},
        {CharClass.UPPER: "ABC", CharClass.LOWER: "ab", CharClass.SPECIAL: "c"},
    ],
    ids=["empty-pool", "duplicate-across-pools", "not-single-byte", "folded-collision"],
)
def test_broken_tables_fail_validation(override):
    pools = dict(POOLS)
    pools.update(override)
    with pytest.raises(AssertionError):
        validate_pools(pools)


def test_missing_class_fails_validation():
    pools = {cls: pool for cls, pool in POOLS.items() if cls is not CharClass.DIGIT}
    with pytest.raises(AssertionError):
        validate_pools(pools)
