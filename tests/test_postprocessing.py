"""Tests for Oxford-comma removal."""

import pytest

from advertorial.postprocessing import remove_oxford_comma


def test_removes_serial_comma_from_three_item_list():
    assert remove_oxford_comma("Rio Tinto, BHP, and Fortescue") == "Rio Tinto, BHP and Fortescue"


def test_four_item_list_only_touches_last_comma():
    assert remove_oxford_comma("gold, copper, lithium, and nickel") == "gold, copper, lithium and nickel"


def test_rewrites_every_list_not_just_the_first():
    text = (
        "The contract covers Perth, Broome, and Darwin.\n"
        "Suppliers include Komatsu, Epiroc, and Sandvik."
    )
    expected = (
        "The contract covers Perth, Broome and Darwin.\n"
        "Suppliers include Komatsu, Epiroc and Sandvik."
    )
    assert remove_oxford_comma(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Rio Tinto, BHP and Fortescue",
        "The mine produces iron ore and copper.",
        "Drilling started in March, and assays are due in June.",
        "",
    ],
)
def test_text_without_serial_comma_is_unchanged(text):
    assert remove_oxford_comma(text) == text


def test_second_pass_is_a_no_op():
    once = remove_oxford_comma("Perth, Kalgoorlie, and Port Hedland host crews.")
    assert remove_oxford_comma(once) == once
