import pytest

from algoshelf.backtracking import (
    combination_sum,
    combination_sum3,
    letter_combinations,
    letter_combinations_backtracking,
    partition_palindromes,
    restore_ip_addresses,
)


def test_combination_sum_source_case():
    assert combination_sum([7, 3, 2], 18) == [
        [7, 7, 2, 2],
        [7, 3, 3, 3, 2],
        [7, 3, 2, 2, 2, 2],
        [3, 3, 3, 3, 3, 3],
        [3, 3, 3, 3, 2, 2, 2],
        [3, 3, 2, 2, 2, 2, 2, 2],
        [2] * 9,
    ]


def test_combination_sum_classic():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_results_are_independent():
    result = combination_sum([3, 2], 6)
    assert all(sum(combo) == 6 for combo in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_no_solution():
    assert combination_sum([4], 7) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_combination_sum3_source_case():
    assert combination_sum3(3, 9) == [[1, 2, 6], [1, 3, 5], [2, 3, 4]]


@pytest.mark.parametrize(
    ("k", "n", "expected"),
    [
        (3, 7, [[1, 2, 4]]),
        (4, 1, []),
        (9, 45, [[1, 2, 3, 4, 5, 6, 7, 8, 9]]),
        (-1, 0, []),
    ],
)
def test_combination_sum3_cases(k, n, expected):
    assert combination_sum3(k, n) == expected


def test_letter_combinations_backtracking_source_case():
    assert letter_combinations_backtracking("23") == [
        "ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf",
    ]


def test_letter_combinations_order():
    assert letter_combinations("23") == [
        "ad", "bd", "cd", "ae", "be", "ce", "af", "bf", "cf",
    ]


def test_letter_combinations_same_set():
    assert sorted(letter_combinations("79")) == letter_combinations_backtracking("79")
    assert len(letter_combinations("79")) == 16


@pytest.mark.parametrize("func", [letter_combinations, letter_combinations_backtracking])
def test_letter_combinations_empty_and_unknown(func):
    assert func("") == []
    assert func("21") == []


def test_partition_palindromes_source_case():
    assert partition_palindromes("aab") == [["a", "a", "b"], ["aa", "b"]]


def test_partition_palindromes_single_and_empty():
    assert partition_palindromes("a") == [["a"]]
    assert partition_palindromes("") == [[]]


def test_partition_palindromes_pieces_rebuild_string():
    result = partition_palindromes("abba")
    assert ["abba"] in result
    assert all("".join(p) == "abba" for p in result)
    assert all(piece == piece[::-1] for p in result for piece in p)


def test_restore_ip_addresses_source_case():
    assert restore_ip_addresses("101023") == [
        "1.0.10.23",
        "1.0.102.3",
        "10.1.0.23",
        "10.10.2.3",
        "101.0.2.3",
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("25525511135", ["255.255.11.135", "255.255.111.35"]),
        ("0000", ["0.0.0.0"]),
        ("123", []),
        ("1111111111111", []),
    ],
)
def test_restore_ip_addresses_cases(text, expected):
    assert restore_ip_addresses(text) == expected


def test_restore_ip_addresses_rejects_non_digits():
    with pytest.raises(ValueError):
        restore_ip_addresses("12a45")