import copy
from collections import namedtuple
from dataclasses import dataclass

import pytest

from funkit import LensPathError, pipe
from funkit import lens as L
from funkit.maybe import NOTHING, Some


@pytest.fixture
def app_state():
    return {
        "user": {
            "id": 1,
            "name": "Alice",
            "settings": {"theme": "dark", "language": "en"},
        },
        "todos": [
            {"id": 1, "text": "Learn lenses", "completed": False, "tags": ["learning", "fp"]},
            {"id": 2, "text": "Build app", "completed": False, "tags": ["project"]},
        ],
        "ui": {"sidebar": {"collapsed": False, "width": 250}},
    }


Point = namedtuple("Point", "x y")


@dataclass(frozen=True)
class Profile:
    name: str
    age: int


LAW_CASES = [
    (L.prop("name"), {"name": "Alice", "age": 30}, "Bob"),
    (L.index(1), [10, 20, 30], 99),
    (L.index(-1), (1, 2, 3), 7),
    (L.path(["user", "settings", "theme"]), None, "light"),
    (L.path(["todos", 1, "tags", 0]), None, "urgent"),
    (L.compose(L.prop("ui"), L.prop("sidebar"), L.prop("width")), None, 300),
    (L.prop("x"), Point(1, 2), 5),
    (L.prop("age"), Profile("Ann", 40), 41),
    (L.path([]), {"whole": True}, {"replaced": True}),
    # Missing focus: get gives None, setting that None back is a no-op
    (L.prop("b"), {"a": 1}, 2),
    (L.path(["user", "nickname"]), None, "Al"),
    (L.index(5), [1, 2], 3),
    (L.path(["todos", 9, "text"]), None, "later"),
]


@pytest.mark.parametrize(("lens", "source", "value"), LAW_CASES)
def test_get_after_set_returns_what_was_set(lens, source, value, app_state):
    data = app_state if source is None else source
    assert lens.get(lens.set(value, data)) == value


@pytest.mark.parametrize(("lens", "source", "value"), LAW_CASES)
def test_set_what_you_get_changes_nothing(lens, source, value, app_state):
    data = app_state if source is None else source
    assert lens.set(lens.get(data), data) == data


@pytest.mark.parametrize(("lens", "source", "value"), LAW_CASES)
def test_set_never_mutates_the_source(lens, source, value, app_state):
    data = app_state if source is None else source
    before = copy.deepcopy(data)
    lens.set(value, data)
    assert data == before


def test_path_get_and_set_share_siblings():
    obj = {"preferences": {"theme": "dark", "font": {"size": 12}}, "account": {"id": 7}}
    theme = L.path(["preferences", "theme"])
    assert theme.get(obj) == "dark"

    updated = theme.set("light", obj)
    assert updated["preferences"]["theme"] == "light"
    assert updated is not obj
    assert updated["account"] is obj["account"]
    assert updated["preferences"]["font"] is obj["preferences"]["font"]
    assert obj["preferences"]["theme"] == "dark"


def test_deep_path_keeps_sibling_branch_reference():
    obj = {"a": {"b": {"c": 1}, "d": {"e": 2}}}
    updated = L.path(["a", "b", "c"]).set(5, obj)
    assert updated["a"]["d"] is obj["a"]["d"]
    assert updated["a"]["b"]["c"] == 5


def test_array_update_shares_untouched_elements(app_state):
    updated = L.path(["todos", 0, "completed"]).set(True, app_state)
    assert updated["todos"][0]["completed"] is True
    assert updated["todos"][1] is app_state["todos"][1]
    assert updated["user"] is app_state["user"]


def test_over_applies_function_to_focus(app_state):
    width = L.path(["ui", "sidebar", "width"])
    assert width.over(lambda w: w + 50, app_state)["ui"]["sidebar"]["width"] == 300


def test_missing_segments_read_as_none():
    assert L.path(["a", "b", "c"]).get({"a": {}}) is None
    assert L.path(["items", 5]).get({"items": [1]}) is None
    assert L.prop("x").get(None) is None


def test_set_through_missing_segments_materializes_containers():
    assert L.path(["a", "b"]).set(1, {}) == {"a": {"b": 1}}
    assert L.path(["rows", 2]).set("z", {}) == {"rows": [None, None, "z"]}
    assert L.index(3).set("d", ["a"]) == ["a", None, None, "d"]


def test_set_errors_are_explicit():
    with pytest.raises(LensPathError):
        L.index(-5).set(0, [1, 2])
    with pytest.raises(LensPathError):
        L.index(0).set(0, "text")
    with pytest.raises(LensPathError):
        L.prop("x").set(1, object())


def test_tuple_setter_keeps_tuple_type():
    assert L.index(0).set(9, (1, 2)) == (9, 2)


def test_lens_is_immutable():
    lens = L.prop("a")
    with pytest.raises(AttributeError):
        lens.getter = lambda data: None


# ---------------------------------------------------------------------------
# Function forms
# ---------------------------------------------------------------------------


def test_function_forms_match_methods(app_state):
    name = L.path(["user", "name"])
    assert L.get(name, app_state) == "Alice"
    assert L.set(name, "Bob", app_state)["user"]["name"] == "Bob"
    assert L.over(name, str.upper, app_state)["user"]["name"] == "ALICE"


def test_function_forms_are_data_last_for_pipe(app_state):
    update = pipe(
        L.set(L.path(["user", "settings", "theme"]), "light"),
        L.over(L.path(["ui", "sidebar", "collapsed"]), lambda c: not c),
    )
    updated = update(app_state)
    assert updated["user"]["settings"]["theme"] == "light"
    assert updated["ui"]["sidebar"]["collapsed"] is True
    assert updated["todos"] is app_state["todos"]


def test_preview_wraps_focus_in_maybe(app_state):
    assert L.preview(L.path(["user", "name"]), app_state) == Some("Alice")
    assert L.preview(L.path(["user", "email"]), app_state) is NOTHING


# ---------------------------------------------------------------------------
# Derived lenses
# ---------------------------------------------------------------------------


def test_find_focuses_first_match(app_state):
    todo_2 = L.prop("todos").compose(L.find(lambda t: t["id"] == 2))
    assert todo_2.get(app_state)["text"] == "Build app"

    done = todo_2.compose(L.prop("completed")).set(True, app_state)
    assert done["todos"][1]["completed"] is True
    assert done["todos"][0] is app_state["todos"][0]


def test_find_without_match_leaves_data_unchanged(app_state):
    missing = L.find(lambda t: t["id"] == 99)
    todos = app_state["todos"]
    assert missing.get(todos) is None
    assert missing.set({"id": 99}, todos) is todos


def test_default_lens():
    email = L.default(L.prop("email"), "n/a")
    assert email.get({}) == "n/a"
    assert email.get({"email": "a@b.c"}) == "a@b.c"
    assert email.set("x@y.z", {}) == {"email": "x@y.z"}


def test_mapped_lens(app_state):
    texts = L.prop("todos").compose(L.mapped(L.prop("text")))
    assert texts.get(app_state) == ["Learn lenses", "Build app"]
    renamed = texts.over(lambda ts: [t.upper() for t in ts], app_state)
    assert [t["text"] for t in renamed["todos"]] == ["LEARN LENSES", "BUILD APP"]


def test_set_none_at_missing_key_is_a_no_op():
    source = {"a": 1}
    assert L.prop("b").set(L.prop("b").get(source), source) == {"a": 1}
    assert L.index(3).set(None, [1]) == [1]
    assert L.path(["x", "y"]).set(None, {}) == {}


def test_find_and_mapped_read_through_missing_list():
    first = L.prop("todos").compose(L.find(lambda t: True))
    texts = L.prop("todos").compose(L.mapped(L.prop("text")))
    assert first.get({}) is None
    assert texts.get({}) == []
    assert first.set(first.get({}), {}) == {}
    assert texts.set(texts.get({}), {}) == {}


def test_filtered_lens(app_state):
    todos = app_state["todos"]
    learning = L.filtered(lambda t: "learning" in t["tags"])
    assert learning.get(todos) == [todos[0]]

    updated = learning.over(lambda ts: [{**t, "completed": True} for t in ts], todos)
    assert updated[0]["completed"] is True
    assert updated[1] is todos[1]
    assert learning.set(learning.get(todos), todos) == todos


def test_filtered_lens_drops_and_appends_surplus():
    evens = L.filtered(lambda n: n % 2 == 0)
    assert evens.set([20], [1, 2, 3, 4]) == [1, 20, 3]
    assert evens.set([20, 40, 60], [1, 2, 3, 4]) == [1, 20, 3, 40, 60]
    assert evens.get(None) == []


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


def test_store_updates_and_notifies(app_state):
    store = L.Store(app_state)
    changes = []
    unsubscribe = store.subscribe(lambda old, new: changes.append((old, new)))

    name = L.path(["user", "name"])
    store.update(name, "Bob")
    store.modify(L.prop("todos"), lambda todos: [*todos, {"id": 3}])

    assert store.select(name) == "Bob"
    assert len(store.state["todos"]) == 3
    assert len(changes) == 2
    assert changes[0][0] is app_state
    assert changes[1][0] is changes[0][1]

    unsubscribe()
    unsubscribe()
    store.update(name, "Carol")
    assert len(changes) == 2
    assert app_state["user"]["name"] == "Alice"
