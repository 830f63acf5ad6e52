from __future__ import annotations

import pytest

from asset_size_summary.fingerprint import diff_sizes, normalise_fingerprint, removed_files

BASE = {
    "dist/app.js": {"raw": 10_000, "gzip": 3_000},
    "dist/vendor.js": {"raw": 50_000, "gzip": 15_000},
    "dist/old.css": {"raw": 800, "gzip": 300},
}
HEAD = {
    "dist/app.js": {"raw": 12_500, "gzip": 3_400},
    "dist/vendor.js": {"raw": 47_000, "gzip": 14_100},
    "dist/new.js": {"raw": 500, "gzip": 200},
}


class TestNormaliseFingerprint:
    def test_same_keys_and_values(self):
        assert normalise_fingerprint(HEAD) == HEAD

    def test_output_is_independent(self):
        original = {"a.js": {"raw": 1, "gzip": 1}}
        copy = normalise_fingerprint(original)
        copy["b.js"] = {"raw": 2, "gzip": 2}
        copy["a.js"]["raw"] = 99
        assert original == {"a.js": {"raw": 1, "gzip": 1}}

    def test_accepts_mapping_subclasses(self):
        from collections import OrderedDict

        result = normalise_fingerprint(OrderedDict(HEAD))
        assert type(result) is dict
        assert result == HEAD

    def test_empty(self):
        assert normalise_fingerprint({}) == {}


class TestDiffSizes:
    def test_identical_fingerprints_diff_to_zero(self):
        delta = diff_sizes(HEAD, HEAD)
        assert set(delta) == set(HEAD)
        assert all(entry == {"raw": 0, "gzip": 0} for entry in delta.values())

    def test_keyed_by_head_only(self):
        delta = diff_sizes(BASE, HEAD)
        assert set(delta) == set(HEAD)
        assert "dist/old.css" not in delta

    def test_new_file_reports_full_size(self):
        delta = diff_sizes(BASE, HEAD)
        assert delta["dist/new.js"] == {"raw": 500, "gzip": 200}

    def test_signed_changes(self):
        delta = diff_sizes(BASE, HEAD)
        assert delta["dist/app.js"] == {"raw": 2_500, "gzip": 400}
        assert delta["dist/vendor.js"] == {"raw": -3_000, "gzip": -900}

    def test_empty_base(self):
        assert diff_sizes({}, HEAD) == HEAD

    def test_empty_base_record_is_not_a_new_file(self):
        with pytest.raises(KeyError):
            diff_sizes({"dist/app.js": {}}, {"dist/app.js": {"raw": 10, "gzip": 5}})


class TestRemovedFiles:
    def test_base_only_entries(self):
        assert removed_files(BASE, HEAD) == {"dist/old.css": {"raw": 800, "gzip": 300}}

    def test_nothing_removed(self):
        assert removed_files(HEAD, HEAD) == {}
