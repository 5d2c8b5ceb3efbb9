import pytest

from core.filters import ALL_NEIGHBORHOODS, filter_outfitters, neighborhood_options


def _names(items):
    return [o.name for o in items]


def test_options_all_first_then_first_appearance(outfitters):
    assert neighborhood_options(outfitters) == ["All", "TXST", "San Marcos"]


def test_options_for_empty_list():
    assert neighborhood_options([]) == [ALL_NEIGHBORHOODS]


def test_all_returns_everything_in_order(outfitters):
    assert filter_outfitters(outfitters, ALL_NEIGHBORHOODS) == outfitters


@pytest.mark.parametrize("selection", ["All", "TXST", "San Marcos"])
def test_every_result_matches_selection(outfitters, selection):
    result = filter_outfitters(outfitters, selection)
    if selection == ALL_NEIGHBORHOODS:
        assert result == outfitters
    else:
        assert result
        assert all(o.neighborhood == selection for o in result)


@pytest.mark.parametrize("selection", ["All", "TXST", "San Marcos"])
def test_filter_is_idempotent(outfitters, selection):
    once = filter_outfitters(outfitters, selection)
    assert filter_outfitters(once, selection) == once


@pytest.mark.parametrize("selection", ["TXST", "San Marcos"])
def test_filter_preserves_relative_order(outfitters, selection):
    result = filter_outfitters(outfitters, selection)
    positions = [outfitters.index(o) for o in result]
    assert positions == sorted(positions)


@pytest.mark.parametrize("previous", ["TXST", "San Marcos"])
def test_all_after_other_filter_restores_full_list(outfitters, previous):
    filter_outfitters(outfitters, previous)
    assert filter_outfitters(outfitters, ALL_NEIGHBORHOODS) == outfitters


def test_txst(outfitters):
    assert _names(filter_outfitters(outfitters, "TXST")) == ["Lion's Club", "Paddle SMTX"]


def test_san_marcos(outfitters):
    assert _names(filter_outfitters(outfitters, "San Marcos")) == [
        "Texas State Tubes",
        "Alamo Adventures",
        "Great Gonzo's Tubes & Shuttles",
    ]


def test_unknown_label_matches_nothing(outfitters):
    assert filter_outfitters(outfitters, "Austin") == []


def test_filter_does_not_mutate_input(outfitters):
    before = list(outfitters)
    filter_outfitters(outfitters, "TXST")
    assert outfitters == before
