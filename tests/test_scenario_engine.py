"""Tests for state updates and issue catalog operations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.scenario_engine import (
    apply_action,
    add_issue_impact,
    remove_issue_impact,
    compare_presets,
)
from engine.model_engine import compute_state
from models.issue import default_issue_catalog
from models.state import ModelState


class TestApplyAction:
    def test_set_input_returns_new_state(self):
        state = ModelState()
        updated = apply_action(state, {"type": "set_input", "field": "cartons_delivered", "value": 5000})
        assert updated.inputs.cartons_delivered == 5000
        assert state.inputs.cartons_delivered == 12000  # Original unchanged

    def test_set_input_clamps(self):
        state = apply_action(ModelState(), {"type": "set_input", "field": "stores", "value": 0})
        assert state.inputs.stores == 1
        state = apply_action(state, {"type": "set_input", "field": "hourly_rate", "value": -3})
        assert state.inputs.hourly_rate == 0
        state = apply_action(state, {"type": "set_input", "field": "online_units", "value": ""})
        assert state.inputs.online_units == 0

    def test_unknown_input_field(self):
        with pytest.raises(ValueError):
            apply_action(ModelState(), {"type": "set_input", "field": "pallets", "value": 1})

    def test_set_share_capped_by_remaining(self):
        state = apply_action(ModelState(), {"type": "set_share", "category": "Demand", "value": 0.9})
        assert state.split["Demand"] == pytest.approx(0.68)
        assert sum(state.split.values()) <= 1.0 + 1e-9

    def test_set_share_after_freeing_room(self):
        state = apply_action(ModelState(), {"type": "set_share", "category": "OMS", "value": 0.0})
        state = apply_action(state, {"type": "set_share", "category": "Demand", "value": 0.9})
        assert state.split["Demand"] == pytest.approx(0.73)

    def test_set_share_unknown_category(self):
        with pytest.raises(ValueError):
            apply_action(ModelState(), {"type": "set_share", "category": "Seasonal", "value": 0.1})

    def test_set_process(self):
        state = apply_action(ModelState(), {"type": "set_process", "model": "new",
                                             "process": "Decant", "field": "use_roster", "value": True})
        state = apply_action(state, {"type": "set_process", "model": "new",
                                     "process": "Decant", "field": "roster", "value": 80})
        assert state.new_cfg["Decant"].use_roster is True
        assert state.new_cfg["Decant"].roster == 80
        assert state.current_cfg["Decant"].use_roster is False
        assert compute_state(state).new_hours["Decant"] == pytest.approx(80)

    def test_set_process_rejects_bad_unit(self):
        with pytest.raises(ValueError):
            apply_action(ModelState(), {"type": "set_process", "model": "current",
                                        "process": "Decant", "field": "unit", "value": "pallets"})

    def test_toggle_issue_flips(self):
        state = apply_action(ModelState(), {"type": "toggle_issue", "issue_id": "late"})
        assert state.issue_toggles["late"] is True
        assert state.enabled_issue_ids == ("late",)
        state = apply_action(state, {"type": "toggle_issue", "issue_id": "late"})
        assert state.issue_toggles["late"] is False

    def test_set_mitigation_clamped(self):
        state = apply_action(ModelState(), {"type": "set_mitigation", "value": 1.7})
        assert state.mitigation == 1.0

    def test_forecast_set_and_clear(self):
        state = apply_action(ModelState(), {"type": "set_forecast",
                                             "forecast": {"Decant": 150, "Unknown": 3, "Online": -4}})
        assert state.forecast == {"Decant": 150, "Online": 0}
        state = apply_action(state, {"type": "clear_forecast"})
        assert state.forecast is None

    def test_set_rule_validates(self):
        state = apply_action(ModelState(), {"type": "set_rule", "key": "allocation_preset", "value": "v2"})
        assert state.rule_config["allocation_preset"] == "v2"
        with pytest.raises(ValueError):
            apply_action(state, {"type": "set_rule", "key": "allocation_preset", "value": "v9"})
        with pytest.raises(ValueError):
            apply_action(state, {"type": "set_rule", "key": "forecast_target", "value": "later"})

    def test_reset(self):
        state = apply_action(ModelState(), {"type": "set_mitigation", "value": 0.1})
        state = apply_action(state, {"type": "reset"})
        assert state.mitigation == 0.5

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            apply_action(ModelState(), {"type": "explode"})


class TestIssueCatalog:
    def test_add_impact(self):
        catalog = default_issue_catalog()
        updated = add_issue_impact(catalog, "late", "Online", 0.05)
        late = next(i for i in updated if i.issue_id == "late")
        assert late.impact["Online"] == 0.05
        assert "Online" not in next(i for i in catalog if i.issue_id == "late").impact

    def test_add_impact_replaces_existing(self):
        updated = add_issue_impact(default_issue_catalog(), "late", "Decant", 0.2)
        assert next(i for i in updated if i.issue_id == "late").impact["Decant"] == 0.2

    def test_add_impact_unknown_issue(self):
        with pytest.raises(ValueError):
            add_issue_impact(default_issue_catalog(), "flood", "Decant", 0.1)

    def test_remove_impact(self):
        updated = remove_issue_impact(default_issue_catalog(), "roster", "Online")
        roster = next(i for i in updated if i.issue_id == "roster")
        assert roster.impact == {"Decant": 0.07, "Loadfill": 0.07}

    def test_remove_missing_pair_is_noop(self):
        catalog = default_issue_catalog()
        assert remove_issue_impact(catalog, "late", "Backfill") == catalog

    def test_catalog_edit_changes_hours(self):
        state = apply_action(ModelState(), {"type": "toggle_issue", "issue_id": "late", "enabled": True})
        before = compute_state(state).current_hours["Decant"]
        state = apply_action(state, {"type": "remove_issue_impact", "issue_id": "late", "process": "Decant"})
        after = compute_state(state).current_hours["Decant"]
        assert before == pytest.approx(168.48)
        assert after == pytest.approx(156)


class TestComparePresets:
    def test_total_row(self):
        rows = compare_presets(ModelState())
        total = rows[-1]
        assert total["Process"] == "Total"
        assert total["v1 Benefit"] == pytest.approx(93.568)
        assert total["v2 Benefit"] == pytest.approx(100.96)
        assert len(rows) == 7


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
