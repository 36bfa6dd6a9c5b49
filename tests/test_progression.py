from domain.models import YoungsterAttributesInput
from domain.numeric import round_half_up
from domain.policies import ProgressionPolicies
from domain.position_weights import weighted_attrs_for_position
from domain.progression import compute_youngster_attributes, potential_capped_ovr

NON_WEIGHTED = ["agility", "balance", "jumping", "stamina", "composure", "penalties"]


def make_input(**kwargs):
    defaults = dict(
        base_ovr=68,
        new_ovr=70,
        positions="ST",
        current_attributes={"finishing": 70, "positioning": 68, "ball_control": 67, "agility": 77},
        ind_training_attrs=["finishing"],
        non_weighted_attrs=list(NON_WEIGHTED),
    )
    defaults.update(kwargs)
    return YoungsterAttributesInput(**defaults)


def test_rates_for_weighted_training_and_non_weighted():
    out = compute_youngster_attributes(make_input())
    assert out["finishing"] == 74        # 70 + 2 * 2.0
    assert out["positioning"] == 71      # 68 + 3.2
    assert out["ball_control"] == 70     # 67 + 3.2
    assert out["agility"] == 79          # 77 + 2 * 1.0
    assert out["balance"] == 52          # missing -> 50


def test_touches_only_weighted_and_non_weighted():
    out = compute_youngster_attributes(make_input())
    assert set(out) == set(weighted_attrs_for_position("ST")) | set(NON_WEIGHTED)
    assert "gk_diving" not in out


def test_zero_delta_leaves_values_unchanged():
    current = {attr: 40 + i for i, attr in enumerate(weighted_attrs_for_position("CB") + NON_WEIGHTED)}
    out = compute_youngster_attributes(make_input(
        base_ovr=75, new_ovr=75, positions="CB,CDM", current_attributes=current,
        ind_training_attrs=["standing_tackle"],
    ))
    assert out == current


def test_values_are_clamped():
    up = compute_youngster_attributes(make_input(
        base_ovr=60, new_ovr=70, current_attributes={"finishing": 99, "agility": 98},
    ))
    assert up["finishing"] == 99
    assert up["agility"] == 99
    down = compute_youngster_attributes(make_input(
        base_ovr=70, new_ovr=60, current_attributes={"finishing": 1, "positioning": 5, "agility": 3},
    ))
    assert down["finishing"] == 1
    assert down["positioning"] == 1
    assert down["agility"] == 1


def test_negative_delta():
    out = compute_youngster_attributes(make_input(base_ovr=70, new_ovr=69, current_attributes={}))
    assert out["positioning"] == 48      # 50 - 1.6 = 48.4
    assert out["finishing"] == 48        # 50 - 2.0
    assert out["agility"] == 49


def test_non_weighted_does_not_override_weighted():
    out = compute_youngster_attributes(make_input(non_weighted_attrs=["finishing", "positioning"]))
    assert out["finishing"] == 74
    assert out["positioning"] == 71


def test_bad_current_values_default_to_fifty():
    out = compute_youngster_attributes(make_input(
        current_attributes={"finishing": None, "positioning": float("nan")}, ind_training_attrs=[],
    ))
    assert out["finishing"] == 53        # 50 + 3.2
    assert out["positioning"] == 53


def test_unknown_position_progresses_cm_attributes():
    out = compute_youngster_attributes(make_input(positions="", non_weighted_attrs=[]))
    assert set(out) == set(weighted_attrs_for_position("CM"))


def test_potential_cap_is_not_applied_by_default():
    inp = make_input(base_ovr=70, new_ovr=75, potential=72, current_attributes={"positioning": 60})
    assert potential_capped_ovr(75, 72) == 72
    assert potential_capped_ovr(75, None) == 75
    assert compute_youngster_attributes(inp)["positioning"] == 68     # 60 + 5 * 1.6


def test_potential_cap_when_enabled():
    inp = make_input(base_ovr=70, new_ovr=75, potential=72, current_attributes={"positioning": 60})
    out = compute_youngster_attributes(inp, ProgressionPolicies(applyPotentialCap=True))
    assert out["positioning"] == 63      # 60 + 2 * 1.6 = 63.2


def test_custom_rates_round_half_up():
    pol = ProgressionPolicies(progressionRate=0.5, indTrainingRate=0.5, nonWeightedRate=0.5)
    out = compute_youngster_attributes(make_input(base_ovr=60, new_ovr=61, current_attributes={}), pol)
    assert out["positioning"] == 51      # 50.5 rounds up
    assert out["agility"] == 51


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(80.8) == 81
    assert round_half_up(48.4) == 48
