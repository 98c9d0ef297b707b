import random

import pytest

from cursorkit.rb_dictionary import RedBlackDictionary

FRUITS = [
    "kiwi", "quince", "elderberry", "date", "cherry", "banana", "fig", "lemon", "honeydew", "apple",
    "nectarine", "orange", "grape", "papaya", "tangerine", "raspberry", "watermelon", "strawberry", "ugli", "mango",
    "mulberry", "peach", "cantaloupe", "lime", "zucchini", "durian", "olive", "blueberry", "nutmeg", "apricot",
    "entawak", "rambutan", "vanilla", "feijoa", "guava", "jackfruit", "quararibea", "kumquat", "salak", "tamarillo",
    "voavanga", "ugli", "waxapple", "xigua", "ziziphus", "yuzu", "bilberry", "medlar", "ximenia", "jaboticaba",
    "langsat", "kaffirlime", "hackberry", "cloudberry", "dewberry", "flacourtia", "gac", "icecreambean", "cranberry",
    "thimbleberry", "starfruit", "plumcot", "mandarine", "riberry", "yangmei", "sapodilla", "vitaminfruit", "uppuma", "quandong",
    "quartfruit", "roseapple", "orangemelon", "tomato", "pear", "zinfandelgrape", "wineberry", "ume", "wolfberry", "voavanga",
    "yellowplum", "ximeniaberry", "waxapple", "vitaminfruit", "zapote", "barberry", "emblica", "dragonfruit", "fingerlime",
    "grapefruit", "honeyberry", "italianlemon", "juneberry", "kiwano", "lucuma", "nut", "ospemifruit", "acai", "vitaminfruit",
]


def _fruit_dict():
    d = RedBlackDictionary()
    for i, name in enumerate(FRUITS):
        d[name] = 2 * i + 3
    return d


def _expected_pairs():
    expected = {}
    for i, name in enumerate(FRUITS):
        expected[name] = 2 * i + 3
    return sorted(expected.items())


def _rebuild(pre):
    """Rebuild the tree shape from pre-order output."""
    root = None
    for line in pre.splitlines():
        red = line.endswith(" (RED)")
        key = line[: -len(" (RED)")] if red else line
        node = {"key": key, "red": red, "left": None, "right": None}
        if root is None:
            root = node
            continue
        cur = root
        while True:
            side = "left" if key < cur["key"] else "right"
            if cur[side] is None:
                cur[side] = node
                break
            cur = cur[side]
    return root


def _black_height(node):
    if node is None:
        return 1
    for child in (node["left"], node["right"]):
        if node["red"] and child is not None:
            assert not child["red"], "red node with red child"
    left = _black_height(node["left"])
    right = _black_height(node["right"])
    assert left == right, "unequal black heights"
    return left + (0 if node["red"] else 1)


def _assert_red_black(d):
    root = _rebuild(d.pre_string())
    if root is not None:
        assert not root["red"]
    _black_height(root)
    assert list(d) == sorted(d)


def test_insert_keeps_order_and_size():
    d = _fruit_dict()
    assert list(d.items()) == _expected_pairs()
    assert len(d) == len(set(FRUITS))
    _assert_red_black(d)


def test_str_format():
    d = RedBlackDictionary([("b", 2), ("a", 1)])
    assert str(d) == "a : 1\nb : 2\n"
    assert str(RedBlackDictionary()) == ""


def test_pre_string_marks_red_nodes():
    d = RedBlackDictionary()
    d["a"] = 1
    assert d.pre_string() == "a\n"
    d["b"] = 2
    d["c"] = 3
    assert d.pre_string() == "b\na (RED)\nc (RED)\n"


def test_sorted_insertion_stays_balanced():
    d = RedBlackDictionary((f"{i:04d}", i) for i in range(200))
    _assert_red_black(d)
    assert len(d) == 200


def test_copy_equal_and_independent():
    a = _fruit_dict()
    b = a.copy()
    assert a == b
    assert b.pre_string() == a.pre_string()
    assert not b.has_current()
    b["zucchini"] = -231341241
    b["quince"] = -3213
    b["acai"] = 99987
    assert len(a) == len(b)
    assert a != b
    assert a["acai"] == dict(_expected_pairs())["acai"]


def test_getitem_missing_raises():
    d = _fruit_dict()
    before = list(d.items())
    with pytest.raises(KeyError):
        _ = d["pineapple"]
    with pytest.raises(KeyError):
        del d["pineapple"]
    assert len(d) == len(set(FRUITS))
    assert list(d.items()) == before
    assert "pineapple" not in d


def test_contains():
    d = _fruit_dict()
    assert "rambutan" in d
    assert "pineapple" not in d


def test_forward_and_backward_cursor_walk():
    d = _fruit_dict()
    forward = []
    d.begin()
    while d.has_current():
        forward.append((d.current_key(), d.current_value()))
        d.next()
    assert forward == _expected_pairs()

    backward = []
    d.end()
    while d.has_current():
        backward.append(d.current_key())
        d.prev()
    assert backward == sorted(set(FRUITS), reverse=True)


def test_cursor_second_and_second_last():
    d = _fruit_dict()
    keys = sorted(set(FRUITS))
    d.begin()
    d.next()
    assert d.current_key() == keys[1]
    d.end()
    d.prev()
    assert d.current_key() == keys[-2]


def test_set_current_value_and_overwrite():
    d = RedBlackDictionary()
    d["someone pls read this"] = 420
    d.end()
    assert d.current_value() == 420
    d.begin()
    d["someone pls read this"] = 69
    assert d.current_value() == 69
    d.set_current_value(7)
    assert d["someone pls read this"] == 7
    assert len(d) == 1


def test_cursor_undefined_errors():
    d = RedBlackDictionary()
    d.begin()
    assert not d.has_current()
    for op in (d.current_key, d.current_value, d.next, d.prev):
        with pytest.raises(LookupError):
            op()
    with pytest.raises(LookupError):
        d.set_current_value(1)


def test_clear_resets():
    d = _fruit_dict()
    d.begin()
    d.clear()
    assert len(d) == 0
    assert str(d) == ""
    assert not d.has_current()
    assert d.pre_string() == ""


def test_remove_current_makes_it_undefined():
    d = _fruit_dict()
    d.begin()
    key = d.current_key()
    del d[key]
    assert not d.has_current()
    assert key not in d
    _assert_red_black(d)


def test_remove_keeps_other_cursor():
    d = _fruit_dict()
    d.end()
    last = d.current_key()
    del d["acai"]
    del d["raspberry"]
    assert d.current_key() == last
    assert "acai" not in d and "raspberry" not in d
    assert len(d) == len(set(FRUITS)) - 2
    _assert_red_black(d)


def test_random_operations_match_dict():
    rng = random.Random(1234)
    d = RedBlackDictionary()
    model = {}
    for step in range(2000):
        key = rng.randrange(300)
        if key in model and rng.random() < 0.5:
            del d[key]
            del model[key]
        else:
            d[key] = step
            model[key] = step
        if step % 250 == 0:
            assert list(d.items()) == sorted(model.items())
    assert list(d.items()) == sorted(model.items())
    assert len(d) == len(model)


def test_delete_everything_preserves_invariants():
    d = RedBlackDictionary((f"k{i:03d}", i) for i in range(64))
    rng = random.Random(7)
    keys = list(d)
    rng.shuffle(keys)
    for key in keys:
        del d[key]
        _assert_red_black(d)
    assert len(d) == 0


def test_init_from_mapping():
    d = RedBlackDictionary({"y": 1, "x": 2})
    assert list(d) == ["x", "y"]
    assert d == RedBlackDictionary([("x", 2), ("y", 1)])