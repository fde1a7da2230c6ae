from core.categories import Category, StaticCategoryLookup, normalize_categories


def test_normalize_categories_sorts_and_filters() -> None:
    raw = [
        {"_id": "c3", "name": "No order"},
        {"_id": "c2", "name": "Second", "displayOrder": 2},
        {"id": "c1", "_id": "c1-mongo", "name": "First", "displayOrder": 1},
        {"_id": "c4", "name": "Inactive", "displayOrder": 0, "isActive": False},
        {"_id": "", "name": "No id"},
        {"_id": "c5"},
        "garbage",
    ]

    assert normalize_categories(raw) == [
        Category("c1-mongo", "First"),
        Category("c2", "Second"),
        Category("c3", "No order"),
    ]


def test_normalize_categories_accepts_envelopes_and_junk() -> None:
    assert normalize_categories({"success": True, "data": [{"id": "a", "name": "A"}]}) == [Category("a", "A")]
    assert normalize_categories({"success": False}) == []
    assert normalize_categories(None) == []


def test_missing_display_order_keeps_input_order() -> None:
    raw = [{"id": "b", "name": "B"}, {"id": "a", "name": "A"}]

    assert [category.id for category in normalize_categories(raw)] == ["b", "a"]


def test_static_lookup() -> None:
    lookup = StaticCategoryLookup([Category("a", "Alpha")])

    assert lookup.name_for("a") == "Alpha"
    assert lookup.name_for("missing") is None
    assert len(lookup) == 1
