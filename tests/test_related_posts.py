from bizsite.utils.related_posts import (
    count_shared,
    get_related_posts,
    hash_string,
    tie_break_key,
)


#============================================
def test_hash_string_known_values() -> None:
    """
    djb2 variant: start at 5381, multiply by 33 and XOR each code unit.
    """
    assert hash_string("") == 5381
    assert hash_string("a") == (5381 * 33) ^ ord("a")


#============================================
def test_hash_string_stays_unsigned_32_bit() -> None:
    value = hash_string("a-very-long-post-slug-that-overflows-32-bits" * 4)
    assert 0 <= value < 2**32


#============================================
def test_tie_break_key_is_signed_32_bit() -> None:
    key = tie_break_key("some-post", hash_string("current"))
    assert -(2**31) <= key < 2**31


#============================================
def test_count_shared_is_case_insensitive() -> None:
    assert count_shared(["SEO", "Marketing"], ["seo", "marketing", "sales"]) == 2
    assert count_shared([], ["seo"]) == 0


#============================================
def test_excludes_current_post(make_post) -> None:
    current = make_post("current", tags=["a"])
    assert get_related_posts(current, [current]) == []
    assert get_related_posts(current, []) == []


#============================================
def test_ranks_by_tag_then_category_score(make_post) -> None:
    """
    Tags are worth 10 points each, categories 5.
    """
    current = make_post("current", tags=["a", "b"], categories=["X"])
    one_tag = make_post("one-tag", tags=["a"])
    two_tags = make_post("two-tags", tags=["A", "b"])
    one_category = make_post("one-category", categories=["x"])
    nothing = make_post("nothing", tags=["z"])

    related = get_related_posts(current, [current, nothing, one_category, one_tag, two_tags])

    assert [p.id for p in related] == ["two-tags", "one-tag", "one-category"]


#============================================
def test_limit_is_respected(make_post) -> None:
    current = make_post("current", tags=["a"])
    others = [make_post(f"post-{i}", tags=["a"]) for i in range(6)]
    assert len(get_related_posts(current, [current, *others], limit=2)) == 2
    assert len(get_related_posts(current, [current, *others])) == 3


#============================================
def test_ties_are_broken_deterministically(make_post) -> None:
    """
    Equal scores order by the hash tie-break, regardless of input order.
    """
    current = make_post("current", tags=["a"])
    others = [make_post(f"post-{i}", tags=["a"]) for i in range(8)]

    forward = [p.id for p in get_related_posts(current, others, limit=8)]
    backward = [p.id for p in get_related_posts(current, list(reversed(others)), limit=8)]

    assert forward == backward
    current_hash = hash_string("current")
    assert forward == sorted(forward, key=lambda pid: tie_break_key(pid, current_hash))


#============================================
def test_no_overlap_falls_back_to_hash_order(make_post) -> None:
    current = make_post("current", tags=["a"])
    others = [make_post(f"unrelated-{i}", tags=["z"]) for i in range(5)]

    related = get_related_posts(current, others)

    current_hash = hash_string("current")
    expected = sorted((p.id for p in others), key=lambda pid: tie_break_key(pid, current_hash))
    assert [p.id for p in related] == expected[:3]


#============================================
def test_scored_posts_outrank_hash_order(make_post) -> None:
    current = make_post("current", categories=["News"])
    match = make_post("match", categories=["news"])
    others = [make_post(f"other-{i}") for i in range(5)]

    related = get_related_posts(current, [*others, match])

    assert related[0].id == "match"


#============================================
def test_hash_matches_reference_values() -> None:
    """
    Fixed values keep the UTF-16 and signed 32-bit arithmetic honest.
    """
    assert hash_string("choosing-a-crm") == 1808728416
    # Accented letter plus a surrogate pair
    assert hash_string("café-😀-post") == 1205471181
    assert tie_break_key("welcome-to-acme", hash_string("current")) == -1578925182


#============================================
def test_unrelated_posts_follow_fixed_hash_order(make_post) -> None:
    current = make_post("current", tags=["a"])
    ids = [
        "welcome-to-acme",
        "software-rollout-checklist",
        "process-mapping-basics",
        "choosing-a-crm",
        "quarterly-planning",
    ]
    others = [make_post(post_id, tags=["z"]) for post_id in ids]

    related = get_related_posts(current, others, limit=5)

    assert [p.id for p in related] == [
        "choosing-a-crm",
        "quarterly-planning",
        "welcome-to-acme",
        "process-mapping-basics",
        "software-rollout-checklist",
    ]
