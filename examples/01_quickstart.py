from __future__ import annotations

from _infra import banner, sample_gradebook

from funkit import lens as L, maybe as M, pipe, validation as V
from funkit.validation import Invalid, Valid

assignment = V.object_of({
    "name": V.all_of(V.required("Name"), V.max_length(40, "Name")),
    "score": V.all_of(V.required("Score"), V.in_range(0, 1000, "Score")),
    "max_score": V.all_of(V.required("Max score"), V.in_range(1, 1000, "Max score")),
    "weight": V.optional(V.in_range(0, 1, "Weight")),
})

assignments = L.prop("assignments")
theme = L.path(["settings", "theme"])


def add_assignment(book: dict, raw: dict) -> dict:
    match assignment(raw):
        case Valid(clean):
            return assignments.over(lambda items: [*items, clean], book)
        case Invalid(errors):
            for error in errors:
                print(f"  rejected: {error}")
            return book


def weighted_average(book: dict) -> float:
    items = assignments.get(book)
    total_weight = sum(a["weight"] or 0 for a in items)
    weighted = sum(a["score"] / a["max_score"] * (a["weight"] or 0) for a in items)
    return M.safe_divide(weighted * 100, total_weight).get_or_else(0.0)


def main() -> None:
    banner("01_quickstart: validation + lens + maybe")

    book = sample_gradebook()
    book = add_assignment(book, {"name": "Final", "score": "45", "max_score": 50, "weight": 0.5})
    book = add_assignment(book, {"name": "", "score": "lots", "max_score": 0})

    light = pipe(L.set(theme, "light"), L.over(L.path(["student", "name"]), str.upper))(book)
    print("theme:", L.get(theme, light), "| student:", L.get(L.path(["student", "name"]), light))
    print("email:", M.safe_get(book, "student.email").get_or_else("n/a"))
    print("phone:", M.safe_get(book, "student.phone").get_or_else("n/a"))
    print(f"average: {weighted_average(book):.1f}%")


if __name__ == "__main__":
    main()
