"""
msbcodec - Entry Name Tests

EntryCollection lookups, name disambiguation and name <-> index resolution.

Can be run standalone: python test_names.py
Or via main runner: python tests.py
"""

import sys

import harness
from harness import expect_raises
from msbcodec.formats.msb import (
    EntryCollection, MissingReferenceError, MapPieceModel, ObjectModel,
    disambiguate_names,
    find_name, find_names, find_index, find_indices, find_short_index, find_short_indices,
    lookup_index, Resolved, Absent, Missing,
)


def _models(*names):
    return [MapPieceModel(name=name) for name in names]


def _names(entries):
    return [entry.name for entry in entries]


# ═══════════════════════════════════════════════════════════════════════════════
# ENTRY COLLECTION
# ═══════════════════════════════════════════════════════════════════════════════

def test_collection_aliases_items():
    models = _models("a", "b", "c")
    collection = EntryCollection(models)
    assert collection.items is models
    assert collection.names == ["a", "b", "c"]
    assert collection.indices == {"a": 0, "b": 1, "c": 2}
    assert len(collection) == 3
    assert list(collection) == models
    assert "b" in collection and "d" not in collection


def test_collection_duplicate_maps_to_last_index():
    collection = EntryCollection(_models("a", "b", "a"))
    assert collection.index_of("a") == 2
    assert collection.names == ["a", "b", "a"]


def test_collection_is_a_snapshot():
    models = _models("a", "b")
    collection = EntryCollection(models)
    models[0].name = "z"
    assert collection.names == ["a", "b"]
    assert "z" not in collection
    assert EntryCollection(models).index_of("z") == 0


def test_collection_lowercase_keys():
    collection = EntryCollection(_models("m0000B0", "h0000B0"))
    assert collection.lower_indices == {"m0000b0": 0, "h0000b0": 1}


# ═══════════════════════════════════════════════════════════════════════════════
# DISAMBIGUATION
# ═══════════════════════════════════════════════════════════════════════════════

def test_disambiguate_with_category():
    entries = _models("A", "A", "")
    renamed = disambiguate_names(entries, "X")
    assert _names(entries) == ["A", "X A {2}", "X {1}"]
    assert renamed == 2


def test_disambiguate_default_category():
    entries = _models("A", "A", "A", "B")
    disambiguate_names(entries)
    assert _names(entries) == ["A", "A {2}", "A {3}", "B"]


def test_disambiguate_is_idempotent():
    entries = _models("a", "b", "c")
    assert disambiguate_names(entries) == 0
    assert _names(entries) == ["a", "b", "c"]

    entries = _models("a", "a", "", "")
    disambiguate_names(entries)
    once = _names(entries)
    assert disambiguate_names(entries) == 0
    assert _names(entries) == once


def test_single_blank_name_is_renamed():
    entries = _models("", "a")
    disambiguate_names(entries)
    assert _names(entries) == [" {1}", "a"]


def test_blank_names_become_unique():
    entries = _models("", "", "", "x")
    disambiguate_names(entries)
    names = _names(entries)
    assert all(names)
    assert len(set(names)) == len(names)


def test_rename_collision_needs_another_pass():
    # The second "A" becomes "A {2}", which is already taken.
    entries = _models("A {2}", "A", "A")
    disambiguate_names(entries)
    assert _names(entries) == ["A {2}", "A", "A {2} {2}"]


def test_disambiguate_many_duplicates():
    entries = _models(*(["dup"] * 50 + [""] * 20 + ["dup {3}"] * 3))
    disambiguate_names(entries)
    names = _names(entries)
    assert all(names)
    assert len(set(names)) == len(names)


def test_file_name_follows_renames():
    entries = _models("A", "A", "", "lamp {2}")
    stored = _names(entries)
    disambiguate_names(entries)
    for entry, name in zip(entries, stored):
        entry.remember_file_name(name)

    assert [e.file_name() for e in entries] == ["A", "A", "", "lamp {2}"]
    entries[1].name = "B"
    assert entries[1].file_name() == "B"
    # Renaming back to the disambiguated name restores the stored one
    entries[1].name = "A {2}"
    assert entries[1].file_name() == "A"


def test_new_entry_writes_its_name():
    assert MapPieceModel(name="lamp {2}").file_name() == "lamp {2}"
    assert MapPieceModel(name="").file_name() == ""


# ═══════════════════════════════════════════════════════════════════════════════
# INDEX -> NAME
# ═══════════════════════════════════════════════════════════════════════════════

def test_find_name():
    names = ["a", "b"]
    assert find_name(names, 0) == "a"
    assert find_name(names, 1) == "b"
    assert find_name(names, -1) is None
    assert find_name(names, 2) is None
    assert find_name(names, -5) is None
    assert find_name([], 0) is None


def test_find_names_keeps_order():
    assert find_names(["a", "b", "c"], [2, -1, 0, 9]) == ["c", None, "a", None]


# ═══════════════════════════════════════════════════════════════════════════════
# NAME -> INDEX
# ═══════════════════════════════════════════════════════════════════════════════

def test_lookup_index_results():
    collection = EntryCollection(_models("m0000B0", "h0000B0"))
    assert lookup_index(collection, "h0000B0") == Resolved(1)
    assert lookup_index(collection, "") == Absent()
    assert lookup_index(collection, None) == Absent()
    assert lookup_index(collection, "nope") == Missing("nope")


def test_lookup_index_ignores_case_as_fallback():
    collection = EntryCollection(_models("m0000B0", "M0000B0"))
    # Exact match wins over the lowercased one
    assert lookup_index(collection, "m0000B0") == Resolved(0)
    assert lookup_index(collection, "M0000b0") == Resolved(1)


def test_find_index():
    referrer = ObjectModel(name="referrer")
    collection = EntryCollection(_models("a", "b"))
    assert find_index(referrer, collection, "b") == 1
    assert find_index(referrer, collection, "B") == 1
    assert find_index(referrer, collection, "") == -1
    assert find_index(referrer, collection, None) == -1


def test_missing_reference():
    referrer = ObjectModel(name="referrer")
    collection = EntryCollection(_models("a"))
    err = expect_raises(MissingReferenceError, find_index, referrer, collection, "ghost")
    assert err.referrer is referrer
    assert err.referee_name == "ghost"
    assert "ghost" in str(err) and "referrer" in str(err)
    assert isinstance(err, KeyError)


def test_find_indices():
    referrer = ObjectModel(name="referrer")
    collection = EntryCollection(_models("a", "b", "c"))
    assert find_indices(referrer, collection, ["c", None, "a", ""]) == [2, -1, 0, -1]
    expect_raises(MissingReferenceError, find_indices, referrer, collection, ["a", "ghost"])


def test_find_short_indices():
    referrer = ObjectModel(name="referrer")
    collection = EntryCollection(_models("a", "b"))
    assert find_short_indices(referrer, collection, ["b", None]) == [1, -1]


def test_short_index_range():
    referrer = ObjectModel(name="referrer")
    collection = EntryCollection(_models(*(f"r{i}" for i in range(0x8001))))
    assert find_short_index(referrer, collection, "r32767") == 0x7FFF
    expect_raises(ValueError, find_short_index, referrer, collection, "r32768")


def run_all_tests(results):
    harness.run_module_tests(sys.modules[__name__], results, "ENTRY NAMES")


if __name__ == "__main__":
    results = harness.TestResults()
    run_all_tests(results)
    sys.exit(0 if results.summary() else 1)
