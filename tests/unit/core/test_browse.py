"""Unit tests for core/browse.py"""

import pytest

from writings.core.browse import build_group_index, flatten_groups, page_list, paginate
from writings.core.groups import build_group_tree


@pytest.fixture(name="groups")
def groups_fixture(make_summary):
    return build_group_tree([
        make_summary("p1", tags=["science/physics/quantum"]),
        make_summary("p2", tags=["science"]),
        make_summary("p3", tags=["art"]),
        make_summary("p4"),
    ])


def test_flatten_groups_depth_first(groups):
    flattened, lookup = flatten_groups(groups)
    assert [(g.slug, g.depth, g.count) for g in flattened] == [
        ("art", 0, 1),
        ("science", 0, 2),
        ("science/physics", 1, 1),
        ("science/physics/quantum", 2, 1),
        ("ungrouped", 0, 1),
    ]
    assert lookup["science/physics"].label == "physics"


def test_group_index_matches_node_posts(groups):
    """Unioning descendant sets gives the same membership as a node's own posts."""
    index = build_group_index(groups)
    _, lookup = flatten_groups(groups)
    for slug, members in index.items():
        assert members == {p.slug for p in lookup[slug].posts}
    assert index["science"] == {"p1", "p2"}


@pytest.mark.parametrize("total,current,expected", [
    (1, 1, [1]),
    (7, 4, [1, 2, 3, 4, 5, 6, 7]),
    (10, 1, [1, 2, None, 9, 10]),
    (10, 5, [1, 2, None, 4, 5, 6, None, 9, 10]),
    (10, 10, [1, 2, None, 9, 10]),
    (10, 3, [1, 2, 3, 4, None, 9, 10]),
])
def test_page_list(total, current, expected):
    assert page_list(total, current) == expected


def test_paginate_clamps_page():
    items = list(range(25))
    assert paginate(items, 1, 10) == (list(range(10)), 1, 3)
    assert paginate(items, 99, 10) == ([20, 21, 22, 23, 24], 3, 3)
    assert paginate(items, 0, 10)[1] == 1
    assert paginate([], 1, 10) == ([], 1, 1)
