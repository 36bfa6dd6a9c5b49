from domain.models import OVRBand
from domain.youngster_logic import get_avg_upgrade, get_games_upgrade, get_ovr_band, get_youngster_upgrade


def test_ovr_bands():
    assert get_ovr_band(40) == OVRBand.UP_TO_69
    assert get_ovr_band(69) == OVRBand.UP_TO_69
    assert get_ovr_band(70) == OVRBand.B70_74
    assert get_ovr_band(74) == OVRBand.B70_74
    assert get_ovr_band(75) == OVRBand.B75_79
    assert get_ovr_band(80) == OVRBand.B80_84
    assert get_ovr_band(85) == OVRBand.B85_89
    assert get_ovr_band(89) == OVRBand.B85_89
    assert get_ovr_band(90) == OVRBand.B90_PLUS
    assert get_ovr_band(99) == OVRBand.B90_PLUS


def test_games_upgrade_low_band():
    expected = {20: 2, 14: 2, 13: 1, 12: 1, 11: 0, 8: 0, 7: -1, 6: -1, 5: -2, 0: -2}
    for games, delta in expected.items():
        assert get_games_upgrade(65, games) == delta, games


def test_games_upgrade_70_to_79():
    for rating in (72, 77):
        assert get_games_upgrade(rating, 14) == 1
        assert get_games_upgrade(rating, 12) == 0
        assert get_games_upgrade(rating, 8) == 0
        assert get_games_upgrade(rating, 6) == -1
        assert get_games_upgrade(rating, 3) == -2


def test_games_upgrade_80_to_84():
    expected = {15: 1, 14: 0, 11: 0, 10: -1, 8: -1, 7: -2, 6: -2, 5: -3}
    for games, delta in expected.items():
        assert get_games_upgrade(82, games) == delta, games


def test_games_upgrade_top_bands():
    for rating in (87, 93):
        assert get_games_upgrade(rating, 12) == 0
        assert get_games_upgrade(rating, 11) == -1
        assert get_games_upgrade(rating, 9) == -1
        assert get_games_upgrade(rating, 8) == -2
        assert get_games_upgrade(rating, 6) == -2
        assert get_games_upgrade(rating, 5) == -3


def test_avg_upgrade_needs_eight_games():
    for rating in (50, 72, 77, 82, 87, 95):
        for avg in (0.0, 5.0, 6.5, 9.9):
            assert get_avg_upgrade(rating, avg, 7) == 0
            assert get_avg_upgrade(rating, avg, 0) == 0


def test_avg_upgrade_tables():
    cases = [
        (65, 7.0, 4), (65, 6.6, 3), (65, 6.2, 2), (65, 5.8, 1), (65, 5.6, 0), (65, 5.2, -1), (65, 5.1, -2),
        (72, 7.1, 4), (72, 7.0, 3), (72, 6.3, 2), (72, 5.7, 0), (72, 5.2, -2),
        (82, 7.2, 3), (82, 6.8, 2), (82, 6.0, 0), (82, 5.6, -1), (82, 5.1, -3),
        (87, 7.4, 3), (87, 7.0, 2), (87, 6.2, 0), (87, 5.3, -3),
        (95, 7.4, 2), (95, 6.6, 0), (95, 5.8, -2), (95, 5.3, -4),
    ]
    for rating, avg, delta in cases:
        assert get_avg_upgrade(rating, avg, 8) == delta, (rating, avg)


def test_avg_upgrade_75_to_79_is_zero_by_default():
    for rating in (75, 77, 79):
        for avg in (4.0, 5.0, 5.8, 6.5, 7.1, 7.5, 9.0):
            assert get_avg_upgrade(rating, avg, 10) == 0, (rating, avg)
    assert get_youngster_upgrade(76, 9, 6.5) == 0
    assert get_youngster_upgrade(76, 14, 7.5) == 1


def test_avg_upgrade_75_to_79_with_own_ranges():
    cases = [(77, 7.2, 4), (77, 7.1, 3), (77, 6.5, 2), (77, 6.0, 1), (77, 5.8, 0), (77, 5.4, -1), (77, 5.3, -2)]
    for rating, avg, delta in cases:
        assert get_avg_upgrade(rating, avg, 8, own_75_ranges=True) == delta, (rating, avg)
    assert get_youngster_upgrade(76, 9, 6.5, own_75_ranges=True) == 2
    # other bands are unaffected
    assert get_avg_upgrade(72, 7.1, 8, own_75_ranges=True) == 4


def test_youngster_upgrade_is_max_of_both():
    for rating in (55, 69, 70, 76, 80, 84, 86, 91):
        for games in (0, 5, 7, 8, 10, 12, 15):
            for avg in (4.9, 5.5, 6.0, 6.4, 6.9, 7.3, 7.6):
                expected = max(get_games_upgrade(rating, games), get_avg_upgrade(rating, avg, games))
                assert get_youngster_upgrade(rating, games, avg) == expected


def test_youngster_upgrade_examples():
    assert get_youngster_upgrade(65, 15, 5.0) == 2
    assert get_youngster_upgrade(65, 9, 7.2) == 4
    # under eight games the average counts as 0, so the result never drops below 0
    assert get_youngster_upgrade(72, 4, 4.0) == 0
    assert get_games_upgrade(72, 4) == -2
    assert get_youngster_upgrade(86, 8, 5.0) == -2
