"""Tests for app start-up checks."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

import app
from data.validator import validate_presets


class TestCheckPresets:
    def test_shipped_presets_raise_no_alerts(self, monkeypatch):
        alerts = []
        monkeypatch.setattr(app, "render_alert_card", lambda msg, level: alerts.append((msg, level)))
        assert app.check_presets().is_valid
        assert alerts == []

    def test_broken_preset_alerted(self, monkeypatch):
        broken = {"bad": {"current": {"Demand": {"Loadfill": 0.5}}, "new": {}}}
        alerts = []
        monkeypatch.setattr(app, "validate_presets", lambda: validate_presets(broken))
        monkeypatch.setattr(app, "render_alert_card", lambda msg, level: alerts.append((msg, level)))
        result = app.check_presets()
        assert not result.is_valid
        assert alerts
        assert all(level == "error" for _, level in alerts)
        assert any("bad/current" in msg for msg, _ in alerts)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
