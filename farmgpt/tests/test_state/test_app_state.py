"""Tests for application state transitions and the community board."""

from datetime import UTC, datetime, timedelta

from farmgpt.agronomy.soil import DEFAULT_SOIL_PROFILE
from farmgpt.models.common import Language
from farmgpt.models.weather import Location
from farmgpt.reporting.formatters import time_ago
from farmgpt.state.app_state import AppState, LoadStatus


class TestAppState:
    def test_defaults(self):
        state = AppState()
        assert state.language == Language.ENGLISH
        assert state.status == LoadStatus.IDLE
        assert state.forecast == []

    def test_set_language(self):
        state = AppState()
        state.set_language("hi")
        assert state.language == Language.HINDI

    def test_refresh_cycle(self):
        state = AppState()
        state.begin_refresh()
        assert state.status == LoadStatus.LOADING
        state.set_location(
            Location(1.0, 2.0, "Lucknow", "Uttar Pradesh"), DEFAULT_SOIL_PROFILE
        )
        state.finish()
        assert state.status == LoadStatus.READY
        assert state.location is not None
        assert state.location.city == "Lucknow"

    def test_fail_survives_finish(self):
        state = AppState()
        state.begin_refresh()
        state.fail("network down")
        state.finish()
        assert state.status == LoadStatus.LOCATION_ERROR
        assert state.error == "network down"
        assert state.show_error_screen

    def test_begin_refresh_clears_error(self):
        state = AppState()
        state.fail("boom")
        state.begin_refresh()
        assert state.error is None
        assert state.status == LoadStatus.LOADING


class TestCommunityBoard:
    def test_newest_first(self):
        state = AppState()
        state.add_community_message("First", "Farmer Ram")
        state.add_community_message("  Second  ", "Farmer Shyam")
        assert [m.text for m in state.messages] == ["Second", "First"]
        assert state.messages[0].author == "Farmer Shyam"

    def test_blank_ignored(self):
        state = AppState()
        assert state.add_community_message("   ", "Farmer Ram") is None
        assert state.messages == []


class TestTimeAgo:
    def test_buckets(self):
        now = datetime(2026, 2, 10, 12, 0, 0, tzinfo=UTC)
        assert time_ago(now - timedelta(seconds=30), now) == "Just now"
        assert time_ago(now - timedelta(minutes=5), now) == "5m ago"
        assert time_ago(now - timedelta(hours=3), now) == "3h ago"
        assert time_ago(now - timedelta(days=2), now) == "2d ago"
