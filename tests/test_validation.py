from dataclasses import dataclass

import pytest
from kungfu import Error, Ok

from funkit import ValidationFailedError
from funkit import validation as V
from funkit.validation import Invalid, Valid


def errors_of(v):
    match v:
        case Invalid(errs):
            return list(errs)
        case Valid(value):
            pytest.fail(f"expected Invalid, got Valid({value!r})")


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


def test_failure_coerces_to_non_empty_tuple():
    assert V.failure("bad").errors == ("bad",)
    assert V.failure(["a", "b"]).errors == ("a", "b")
    assert Invalid(["x"]).errors == ("x",)
    with pytest.raises(ValueError):
        V.failure([])


def test_get_and_get_or_else():
    assert V.success(3).get() == 3
    assert V.get_or_else(V.failure("bad"), 0) == 0
    with pytest.raises(ValidationFailedError) as exc_info:
        V.get(V.failure(["a", "b"]))
    assert exc_info.value.errors == ("a", "b")
    assert "a, b" in str(exc_info.value)


def test_map_turns_exceptions_into_errors():
    assert V.success(2).map(lambda x: x + 1) == Valid(3)
    assert errors_of(V.success(0).map(lambda x: 1 // x)) == ["integer division or modulo by zero"]
    bad = V.failure("nope")
    assert bad.map(lambda x: x + 1) is bad


def test_and_then_is_fail_fast():
    positive = lambda x: V.success(x) if x > 0 else V.failure("not positive")  # noqa: E731
    assert V.success(1).and_then(positive) == Valid(1)
    assert errors_of(V.success(-1).and_then(positive)) == ["not positive"]


def test_combine_concatenates_errors_in_order():
    combined = V.combine(V.success(1), V.failure(["a", "b"]), V.success(2), V.failure("c"))
    assert errors_of(combined) == ["a", "b", "c"]
    assert V.combine(V.success(1), V.success(2)) == Valid([1, 2])


def test_result_interop():
    assert V.to_result(V.success(1)).unwrap() == 1
    match V.to_result(V.failure(["a", "b"])):
        case Error(errs):
            assert errs == ["a", "b"]
        case other:
            pytest.fail(f"expected Error, got {other!r}")
    assert V.from_result(Ok(5)) == Valid(5)
    assert errors_of(V.from_result(Error("x"))) == ["x"]
    assert errors_of(V.from_result(Error(["x", "y"]))) == ["x", "y"]


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def test_all_of_runs_every_rule():
    seen = []

    def tracking(message):
        def rule(value):
            seen.append(message)
            return V.failure(message)

        return rule

    result = V.all_of(tracking("first"), V.required("X"), tracking("second"))("value")
    assert errors_of(result) == ["first", "second"]
    assert seen == ["first", "second"]


def test_all_of_success_keeps_original_value():
    assert V.all_of(V.required("Age"), V.is_number("Age"))("25") == Valid("25")


def test_any_of():
    short_or_number = V.any_of(V.max_length(3, "Code"), V.is_number("Code"))
    assert short_or_number("abc") == Valid("abc")
    assert short_or_number("12345") == Valid("12345")
    assert errors_of(short_or_number("abcdef")) == [
        "Code must be no more than 3 characters long",
        "Code must be a valid number",
    ]


def test_any_of_runs_every_rule_even_after_a_pass():
    seen = []

    def audit(tag):
        return V.custom(lambda v: seen.append(tag) or True, "Code")

    assert V.any_of(audit("first"), audit("second"))("x") == Valid("x")
    assert seen == ["first", "second"]


def test_optional_skips_absent_values():
    rule = V.optional(V.email("Email"))
    assert rule(None) == Valid(None)
    assert rule("") == Valid("")
    assert errors_of(rule("bad")) == ["Email must be a valid email address"]


def test_when_applies_rule_conditionally():
    rule = V.when(lambda s: s.startswith("+"), V.min_length(8, "Phone"))
    assert rule("123") == Valid("123")
    assert errors_of(rule("+123")) == ["Phone must be at least 8 characters long"]


def test_object_collects_errors_from_every_field():
    form = V.object_of({
        "name": V.all_of(V.required("Name")),
        "email": V.all_of(V.required("Email"), V.email("Email")),
    })
    assert errors_of(form({"name": "", "email": "bad"})) == [
        "Name is required",
        "Email must be a valid email address",
    ]


def test_object_union_of_independent_field_errors():
    form = V.object({
        "password": V.all(V.min_length(8, "Password"), V.pattern(r"\d", "Password", "Password needs a digit")),
        "age": V.all(V.required("Age"), V.in_range(13, 120, "Age")),
    })
    assert errors_of(form({"password": "abc", "age": 7})) == [
        "Password must be at least 8 characters long",
        "Password needs a digit",
        "Age must be between 13 and 120",
    ]


def test_object_success_rebuilds_declared_fields_only():
    form = V.object_of({"age": V.is_number("Age"), "name": V.required("Name")})
    data = {"age": "42", "name": "Ann", "extra": True}
    result = form(data)
    assert result == Valid({"age": 42.0, "name": "Ann"})
    assert result.value is not data


def test_object_reads_attributes():
    @dataclass
    class Signup:
        name: str
        email: str

    form = V.object_of({"name": V.required("Name"), "email": V.email("Email")})
    assert form(Signup("Ann", "ann@example.com")) == Valid({"name": "Ann", "email": "ann@example.com"})


def test_nested_prefixes_errors():
    address = V.object_of({"city": V.required("city"), "zip": V.pattern(r"^\d{5}$", "zip")})
    rule = V.nested("address", address)
    assert errors_of(rule({"address": {"city": "", "zip": "1"}})) == [
        "address.city is required",
        "address.zip format is invalid",
    ]
    assert errors_of(rule({"address": "Main St"})) == ["address must be an object"]
    assert rule({"address": {"city": "Oslo", "zip": "12345"}}) == Valid({"address": {"city": "Oslo", "zip": "12345"}})


def test_array_of_prefixes_index_and_checks_every_element():
    tags = V.array_of(V.all_of(V.required("Tag"), V.min_length(2, "Tag")))("Tags")
    assert errors_of(tags(["ok", "x", "fine", ""])) == [
        "Tags[1]: Tag must be at least 2 characters long",
        "Tags[3]: Tag is required",
        "Tags[3]: Tag must be at least 2 characters long",
    ]
    assert tags(["ab", "cd"]) == Valid(["ab", "cd"])


@pytest.mark.parametrize("value", ["abc", None, {"a": 1}, 3])
def test_array_of_rejects_non_lists(value):
    assert errors_of(V.array_of(V.required("Tag"))("Tags")(value)) == ["Tags must be a list"]


def test_array_of_objects_inside_object():
    order = V.object_of({
        "items": V.all_of(
            V.non_empty_list("Items"),
            V.array_of(V.object_of({"qty": V.in_range(1, 99, "Quantity")}))("Items"),
        ),
    })
    assert errors_of(order({"items": [{"qty": 1}, {"qty": 0}]})) == [
        "Items[1]: Quantity must be between 1 and 99",
    ]
    assert errors_of(order({"items": []})) == ["Items must be a non-empty list"]


# ---------------------------------------------------------------------------
# Forms and async checks
# ---------------------------------------------------------------------------


@pytest.fixture
def signup():
    return V.object_of({
        "name": V.required("Name"),
        "email": V.all_of(V.required("Email"), V.email("Email")),
    })


def test_form_validator_flattens_result(signup):
    check = V.form_validator(signup)

    ok = check({"name": "Ann", "email": "ann@example.com", "extra": 1})
    assert ok.is_valid
    assert ok.data == {"name": "Ann", "email": "ann@example.com"}
    assert ok.errors == ()

    form = {"name": "", "email": "bad"}
    failed = check(form)
    assert not failed.is_valid
    assert failed.data is form
    assert failed.field_errors("Email") == ["Email must be a valid email address"]
    assert failed.field_errors("Name") == ["Name is required"]
    assert failed.field_errors("Phone") == []


@pytest.mark.asyncio
async def test_async_validator_runs_checks_after_sync_rule(signup):
    calls = []

    async def email_free(data):
        calls.append(data["email"])
        if data["email"] == "taken@example.com":
            return V.failure("Email is already registered")
        return V.success(data)

    async def name_free(data):
        return V.failure("Name is taken") if data["name"] == "admin" else V.success(data)

    register = V.async_validator(signup, email_free, name_free)

    assert errors_of(await register({"name": "", "email": "x"})) == [
        "Name is required",
        "Email must be a valid email address",
    ]
    assert calls == []

    assert errors_of(await register({"name": "admin", "email": "taken@example.com"})) == [
        "Email is already registered",
        "Name is taken",
    ]
    assert await register({"name": "Ann", "email": "ann@example.com"}) == Valid(
        {"name": "Ann", "email": "ann@example.com"}
    )


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("rule", "value", "message"),
    [
        (V.required("Name"), None, "Name is required"),
        (V.min_length(3, "Username"), "ab", "Username must be at least 3 characters long"),
        (V.max_length(3, "Code"), "abcd", "Code must be no more than 3 characters long"),
        (V.pattern(r"^[a-z]+$", "Slug"), "A-1", "Slug format is invalid"),
        (V.email("Email"), "user@host", "Email must be a valid email address"),
        (V.is_number("Age"), "twelve", "Age must be a valid number"),
        (V.is_number("Age"), True, "Age must be a valid number"),
        (V.in_range(1, 5, "Rating"), 6, "Rating must be between 1 and 5"),
        (V.array_length(1, 2, "Tags"), [1, 2, 3], "Tags must have between 1 and 2 items"),
        (V.array_length(1, 2, "Tags"), "ab", "Tags must be a list"),
        (V.non_empty_list("Items"), [], "Items must be a non-empty list"),
        (V.custom(lambda v: v is True, "Terms", "You must accept the terms"), False, "You must accept the terms"),
        (V.custom(lambda v: v > 0, "Price"), -1, "Price is invalid"),
    ],
)
def test_rule_messages(rule, value, message):
    assert errors_of(rule(value)) == [message]


def test_custom_reports_predicate_exceptions():
    rule = V.custom(lambda v: v > 0, "Price")
    assert errors_of(rule(None))[0].startswith("Price validation error: ")


def test_numeric_rules_return_numbers():
    assert V.is_number("Age")("25") == Valid(25.0)
    assert V.is_number("Age")(7) == Valid(7)
    assert V.in_range(0, 10, "Score")("3.5") == Valid(3.5)
    assert V.email("Email")("a@b.co") == Valid("a@b.co")
