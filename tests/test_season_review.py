from domain.models import YoungsterRecord
from domain.policies import ProgressionPolicies
from domain.season_review import base_rating_of, preview_roster, preview_youngster
from services.repository import Repository


def make_youngster(**kwargs):
    defaults = dict(
        player_id="p-1",
        player_name="Test Youngster",
        positions="ST",
        base_rating=68,
        games_played=0,
        adj_avg=0,
        ind_training_attrs=["finishing"],
        non_weighted_attrs=["agility"],
        attributes={"finishing": 70, "positioning": 68, "agility": 77},
    )
    defaults.update(kwargs)
    return YoungsterRecord(**defaults)


def test_base_rating_precedence():
    assert base_rating_of(make_youngster(base_rating=70, rating=72)) == 70
    assert base_rating_of(make_youngster(base_rating=None, rating=72)) == 72
    assert base_rating_of(make_youngster(base_rating=None, rating=None)) == 60


def test_preview_uses_performance_over_stored_totals():
    y = make_youngster(
        games_played=2, adj_avg=5.0,
        performance={"domestic_games": 11, "domestic_avg": 6.9, "ucl_gs_games": 4, "ucl_gs_avg": 6.5},
    )
    p = preview_youngster(y)
    assert p.total_games == 15
    assert p.games_upgrade == 2
    assert p.avg_upgrade == 3
    assert p.delta == 3
    assert p.new_rating == 71
    assert p.attribute_updates["finishing"] == 76
    assert p.attribute_updates["positioning"] == 73    # 68 + 4.8
    assert p.attribute_updates["agility"] == 80


def test_preview_under_eight_games_ignores_average():
    p = preview_youngster(make_youngster(base_rating=72, games_played=4, adj_avg=4.0))
    assert p.games_upgrade == -2
    assert p.avg_upgrade == 0
    assert p.delta == 0
    assert p.new_rating == 72
    assert p.attribute_updates["finishing"] == 70


def test_new_rating_is_clamped():
    top = preview_youngster(make_youngster(base_rating=98, games_played=14, adj_avg=7.5))
    assert top.delta == 2
    assert top.new_rating == 99
    floor = ProgressionPolicies(previewRatingFloor=85)
    low = preview_youngster(make_youngster(base_rating=86, games_played=8, adj_avg=5.0), floor)
    assert low.delta == -2
    assert low.new_rating == 85


def test_attributes_outside_stat_columns_are_ignored():
    y = make_youngster(attributes={"finishing": 70, "mystery": 12}, non_weighted_attrs=["mystery"])
    p = preview_youngster(y)
    assert p.attribute_updates["mystery"] == 50 + p.delta


def test_missing_positions_default_to_cm():
    p = preview_youngster(make_youngster(positions=None, non_weighted_attrs=[]))
    assert p.positions == "CM"
    assert "vision" in p.attribute_updates


def test_shipped_roster_preview():
    roster = Repository().load_roster()
    previews = preview_roster(roster.youngsters)
    assert [p.delta for p in previews] == [3, 0, 0]
    assert [p.new_rating for p in previews] == [71, 76, 72]
    emre = previews[1]
    assert emre.base_rating == 76
    assert emre.avg_upgrade == 0
    assert emre.attribute_updates["standing_tackle"] == 78


def test_shipped_roster_preview_with_own_75_ranges():
    roster = Repository().load_roster()
    previews = preview_roster(roster.youngsters, ProgressionPolicies(band75OwnAvgRanges=True))
    emre = previews[1]
    assert emre.avg_upgrade == 2
    assert emre.delta == 2
    assert emre.new_rating == 78
    assert emre.attribute_updates["standing_tackle"] == 82
