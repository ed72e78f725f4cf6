"""Tests for the two-card hand predicates."""

from poker_trainer.strategy.hand_classifier import (
    hand_to_notation,
    has_ace,
    has_king,
    has_rank,
    has_ten,
    high_low,
    is_broadway_hand,
    is_bottom_hand,
    is_pocket_pair,
    is_suited,
    is_suited_connector_or_gapper,
)
from poker_trainer.utils.card import Card
from poker_trainer.utils.constants import Rank


def _hand(s: str) -> tuple[Card, Card]:
    """Helper: parse 'Ah Kd' into a two-card hand."""
    a, b = s.split()
    return (Card.from_str(a), Card.from_str(b))


class TestBasicPredicates:
    def test_pocket_pair(self) -> None:
        assert is_pocket_pair(_hand("7h 7d"))
        assert not is_pocket_pair(_hand("7h 8h"))

    def test_has_rank(self) -> None:
        hand = _hand("Ah Td")
        assert has_ace(hand)
        assert has_ten(hand)
        assert not has_king(hand)
        assert has_rank(hand, Rank.TEN)

    def test_suited(self) -> None:
        assert is_suited(_hand("9s 4s"))
        assert not is_suited(_hand("9s 4h"))

    def test_high_low_orders_by_value(self) -> None:
        assert high_low(_hand("4c Qd")) == (12, 4)
        assert high_low(_hand("Qd 4c")) == (12, 4)

    def test_high_low_pair(self) -> None:
        assert high_low(_hand("Jc Jd")) == (11, 11)


class TestSuitedConnectorOrGapper:
    def test_connector(self) -> None:
        assert is_suited_connector_or_gapper(_hand("8h 7h"))

    def test_two_gapper(self) -> None:
        assert is_suited_connector_or_gapper(_hand("9h 6h"))

    def test_three_gaps_too_wide(self) -> None:
        assert not is_suited_connector_or_gapper(_hand("9h 5h"))

    def test_low_card_two_excluded(self) -> None:
        assert not is_suited_connector_or_gapper(_hand("4h 2h"))

    def test_offsuit_excluded(self) -> None:
        assert not is_suited_connector_or_gapper(_hand("8h 7d"))


class TestBroadway:
    def test_both_high(self) -> None:
        assert is_broadway_hand(_hand("Kd Ts"))
        assert is_broadway_hand(_hand("Ad Ks"))

    def test_one_low(self) -> None:
        assert not is_broadway_hand(_hand("Kd 9s"))


class TestBottomHand:
    def test_worst_offsuit_hands(self) -> None:
        for s in ("3d 2c", "7d 2c", "8h 3s", "9c 4d", "Th 5s", "6d 4c"):
            assert is_bottom_hand(_hand(s)), s

    def test_suited_never_bottom(self) -> None:
        assert not is_bottom_hand(_hand("3d 2d"))
        assert not is_bottom_hand(_hand("7h 2h"))

    def test_high_card_above_ten(self) -> None:
        assert not is_bottom_hand(_hand("Jd 2c"))

    def test_kicker_above_five(self) -> None:
        assert not is_bottom_hand(_hand("9d 6c"))


class TestNotation:
    def test_pair(self) -> None:
        assert hand_to_notation(_hand("Th Tc")) == "TT"

    def test_suited(self) -> None:
        assert hand_to_notation(_hand("4h Ah")) == "A4s"

    def test_offsuit(self) -> None:
        assert hand_to_notation(_hand("2c 7d")) == "72o"
