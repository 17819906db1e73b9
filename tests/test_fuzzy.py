"""
Tests for the approximate matcher.

Uses real rapidfuzz scoring against plain dict candidates.
"""

from seekr.search.fuzzy import distance, match

APPS = [
    {"name": "Firefox", "description": "Web Browser"},
    {"name": "Visual Studio Code", "description": "Code Editor"},
    {"name": "Files", "description": "Access and organize files"},
    {"name": "Terminal", "description": "Use the command line"},
]


class TestDistance:
    def test_exact_name_is_zero(self):
        assert distance(APPS[0], "Firefox") == 0.0

    def test_case_ignored(self):
        assert distance(APPS[0], "FIREFOX") == 0.0

    def test_description_hit_is_weighted_down(self):
        name_hit = distance(APPS[0], "firefox")
        description_hit = distance(APPS[0], "browser")
        assert name_hit < description_hit < 0.3

    def test_missing_fields_score_nothing(self):
        assert distance({"name": None}, "anything") == 1.0

    def test_attribute_candidates(self):
        class App:
            name = "Firefox"
            description = ""

        assert distance(App(), "fire") == 0.0


class TestMatch:
    """Filtering and ranking."""

    def test_empty_query_returns_all_unranked(self):
        assert match(APPS, "") == APPS

    def test_typo_tolerated(self):
        results = match(APPS, "firefx")
        assert results[0]["name"] == "Firefox"

    def test_unrelated_excluded(self):
        assert match(APPS, "zzzzqqq") == []

    def test_best_match_first(self):
        results = match(APPS, "code")
        assert results[0]["name"] == "Visual Studio Code"

    def test_name_beats_description(self):
        results = match(APPS, "files")
        assert [r["name"] for r in results][:1] == ["Files"]

    def test_threshold_controls_strictness(self):
        assert match(APPS, "firefx", threshold=0.0) == []
        assert match(APPS, "firefox", threshold=0.0) == [APPS[0]]

    def test_ties_keep_input_order(self):
        candidates = [{"name": "Files A"}, {"name": "Files B"}]
        assert match(candidates, "files") == candidates


class TestLongQueries:
    """A query longer than the field is compared whole, not as a substring."""

    def test_short_name_inside_query_is_not_a_match(self):
        candidates = [{"name": "Go"}, {"name": "Google Chrome"}]
        assert match(candidates, "google chrome browser") == [candidates[1]]

    def test_full_name_plus_extra_word_still_matches(self):
        assert distance({"name": "Google Chrome"}, "google chrome browser") < 0.3

    def test_two_letter_name(self):
        assert distance({"name": "vi"}, "david vacation pictures") > 0.3
