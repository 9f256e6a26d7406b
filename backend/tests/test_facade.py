import pytest

from liftlog.errors import IntegrityError, NotFoundError, ValidationError
from liftlog.facade import coerce_id

def test_scenario_first_workout(tracker):
    exercises = tracker.list_exercises()
    assert [(e.name, e.category) for e in exercises] == [
        ("Bench Press", "Chest"), ("Squat", "Legs"), ("Deadlift", "Back"), ("Overhead Press", "Shoulders"),
    ]
    bench = next(e for e in exercises if e.name == "Bench Press")

    w = tracker.log_workout([
        {"exerciseId": str(bench.id), "sets": [{"reps": 10, "weight": 60}, {"reps": 8, "weight": 65}]},
    ])
    assert w.date
    assert len(w.exercises) == 1
    assert w.exercises[0].exercise.name == "Bench Press"
    assert [(s.reps, s.weight) for s in w.exercises[0].sets] == [(10, 60.0), (8, 65.0)]
    assert tracker.get_workout(str(w.id)) == w

def test_scenario_delete_squat_used_in_two_workouts(tracker, seeded_ids):
    squat, bench, dead = seeded_ids["Squat"], seeded_ids["Bench Press"], seeded_ids["Deadlift"]
    w1 = tracker.log_workout([
        {"exercise_id": bench, "sets": [{"reps": 5, "weight": 80}]},
        {"exercise_id": squat, "sets": [{"reps": 5, "weight": 100}]},
    ])
    w2 = tracker.log_workout([
        {"exercise_id": squat, "sets": [{"reps": 3, "weight": 110}]},
        {"exercise_id": dead, "sets": [{"reps": 1, "weight": 180}]},
    ])

    deleted = tracker.delete_exercise(str(squat))
    assert deleted.name == "Squat"
    assert squat not in [e.id for e in tracker.list_exercises()]

    after = {w.id: w for w in tracker.list_workouts()}
    assert list(after) == [w1.id, w2.id]
    assert after[w1.id].exercises == [w1.exercises[0]]
    assert after[w2.id].exercises == [w2.exercises[1]]
    for w in after.values():
        assert all(we.exercise_id != squat for we in w.exercises)

def test_delete_missing_exercise_is_none(tracker):
    assert tracker.delete_exercise(404) is None

def test_update_missing_exercise_raises_not_found(tracker):
    with pytest.raises(NotFoundError):
        tracker.update_exercise("999", "Ghost", "None")

def test_update_exercise_trims(tracker, seeded_ids):
    ex = tracker.update_exercise(str(seeded_ids["Deadlift"]), " Sumo Deadlift ", "Back")
    assert ex.name == "Sumo Deadlift"

def test_create_exercise_validation(tracker, row_counts):
    before = row_counts()
    with pytest.raises(ValidationError):
        tracker.create_exercise("   ", "Legs")
    assert row_counts() == before

@pytest.mark.parametrize("entries", [
    [],
    [{"exercise_id": "abc", "sets": []}],
    [{"exercise_id": 1, "sets": [{"reps": -3, "weight": 10}]}],
    [{"exercise_id": 1, "sets": [{"reps": 3, "weight": -10}]}],
    [{"sets": []}],
])
def test_log_workout_rejects_malformed_input(tracker, row_counts, entries):
    before = row_counts()
    with pytest.raises(ValidationError):
        tracker.log_workout(entries)
    assert row_counts() == before

def test_log_workout_unknown_exercise(tracker, row_counts):
    before = row_counts()
    with pytest.raises(IntegrityError):
        tracker.log_workout([{"exercise_id": 9999, "sets": [{"reps": 1, "weight": 1}]}])
    assert row_counts() == before

def test_get_missing_workout(tracker):
    assert tracker.get_workout(77) is None

@pytest.mark.parametrize("raw,expected", [(3, 3), ("3", 3), (" 12 ", 12)])
def test_coerce_id(raw, expected):
    assert coerce_id(raw) == expected

@pytest.mark.parametrize("raw", ["x", "", None, True, "1.5"])
def test_coerce_id_rejects(raw):
    with pytest.raises(ValidationError):
        coerce_id(raw)

def test_non_positive_ids_are_not_found(tracker, row_counts):
    before = row_counts()
    assert coerce_id("0") == 0
    assert tracker.get_workout(0) is None
    assert tracker.delete_exercise(-1) is None
    assert tracker.delete_workout("0") is False
    with pytest.raises(NotFoundError):
        tracker.update_exercise(0, "Ghost", "None")
    assert row_counts() == before
