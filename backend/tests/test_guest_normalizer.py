"""
Guest normalizer: children above the hotel's age ceiling count as adults.
"""
from conftest import multiplier
from stayquote.services.pricing.guest_normalizer import GuestNormalizer
from stayquote.services.pricing.multiplier_table import MultiplierTable
from stayquote.services.pricing.types import GuestGroup


def test_child_above_default_ceiling_becomes_adult():
    normalizer = GuestNormalizer(MultiplierTable([multiplier(2, "1.0")]))
    assert normalizer.normalize(1, 2, 1, [14]) == GuestGroup(3, 0, ())


def test_child_at_ceiling_stays_child():
    normalizer = GuestNormalizer(MultiplierTable([multiplier(1, "0.5", ["0-11"])]))
    assert normalizer.normalize(1, 1, 1, [11]) == GuestGroup(1, 1, (11,))


def test_remaining_ages_keep_order():
    normalizer = GuestNormalizer(MultiplierTable([multiplier(2, "1.0", ["0-6", "0-11"])]))
    result = normalizer.normalize(1, 2, 4, [9, 15, 3, 12])
    assert result == GuestGroup(4, 2, (9, 3))


def test_ceiling_is_per_hotel():
    normalizer = GuestNormalizer(MultiplierTable([
        multiplier(2, "1.0", ["0-6"], hotel_id=1),
        multiplier(2, "1.0", ["0-16"], hotel_id=2),
    ]))
    assert normalizer.normalize(1, 2, 1, [10]) == GuestGroup(3, 0, ())
    assert normalizer.normalize(2, 2, 1, [10]) == GuestGroup(2, 1, (10,))


def test_configured_default_ceiling():
    normalizer = GuestNormalizer(MultiplierTable([multiplier(2, "1.0")]), default_ceiling=14)
    assert normalizer.child_age_ceiling(1) == 14
    assert normalizer.normalize(1, 2, 2, [13, 15]) == GuestGroup(3, 1, (13,))


def test_hotel_ranges_override_default():
    normalizer = GuestNormalizer(MultiplierTable([multiplier(1, "0.5", ["0-5"])]), default_ceiling=14)
    assert normalizer.normalize(1, 1, 1, [8]) == GuestGroup(2, 0, ())
