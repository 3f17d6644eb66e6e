"""
Unit tests for the entity services.

Tests for:
- Shared CRUD behaviour and error wrapping
- Ownership and role-based visibility filters
- Library catalog filters
- Question answer lifecycle
- Workout cascading delete
- User role changes
"""

import pytest

from application.collections import (
    COLLECTION_EXERCISE_LIBRARY,
    COLLECTION_EXERCISES,
    COLLECTION_QUESTIONS,
    COLLECTION_USERS,
    COLLECTION_WORKOUTS,
)
from application.exceptions import RepositoryError, ServiceError
from application.services import (
    EXERCISE_OWNERSHIP_MISMATCH,
    QUESTION_ALREADY_ANSWERED,
    ExerciseLibraryService,
    ExerciseService,
    QuestionService,
    UserService,
    WorkoutService,
)
from domain.models import Identity, Intensity, Role
from tests.fakes import FakeIdentityProvider, InMemoryDocumentStore, create_library_store


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return create_library_store()


# =============================================================================
# Shared CRUD
# =============================================================================


@pytest.mark.unit
class TestDocumentServiceCrud:

    def test_create_returns_input_with_id(self, store):
        service = WorkoutService(store)

        created = service.create({"name": "Leg Day", "user_id": "u1"})

        assert created == {"id": created["id"], "name": "Leg Day", "user_id": "u1"}

    def test_create_then_get_round_trip(self, store):
        service = WorkoutService(store)
        created = service.create({"name": "Leg Day", "user_id": "u1"})

        assert service.get_by_id(created["id"]) == created

    def test_update_returns_only_sent_fields(self, store):
        service = WorkoutService(store)
        created = service.create({"name": "Leg Day", "user_id": "u1"})

        updated = service.update(created["id"], {"name": "Push Day"})

        assert updated == {"id": created["id"], "name": "Push Day"}
        assert service.get_by_id(created["id"])["user_id"] == "u1"

    def test_missing_document_wrapped_as_404_service_error(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).get_by_id("missing")

        error = exc_info.value
        assert error.status_code == 404
        assert error.code == "DOCUMENT_NOT_FOUND"
        assert error.message.startswith("Failed to retrieve workout missing: ")

    def test_backend_failure_is_wrapped(self, store):
        store.fail("get_all", RepositoryError("offline", "unavailable", 500))

        with pytest.raises(ServiceError) as exc_info:
            ExerciseLibraryService(store).get_all()

        assert exc_info.value.code == "unavailable"
        assert "offline" in exc_info.value.message

    def test_raw_exceptions_never_leak(self, store):
        store.fail("create", KeyError("boom"))

        with pytest.raises(ServiceError):
            ExerciseService(store).create({"name": "Squat"})


# =============================================================================
# ExerciseLibraryService
# =============================================================================


@pytest.mark.unit
class TestExerciseLibraryFilters:

    def test_no_filters_returns_all(self, store):
        assert len(ExerciseLibraryService(store).get_all()) == 3

    def test_equipment_filter(self, store):
        names = {e["name"] for e in ExerciseLibraryService(store).get_all(equipment=["Bench"])}

        assert names == {"Bench Press"}

    def test_muscles_filter_matches_any_overlap(self, store):
        entries = ExerciseLibraryService(store).get_all(muscles_worked=["Chest", "Legs"])

        assert len(entries) == 3

    def test_intensity_filter(self, store):
        entries = ExerciseLibraryService(store).get_all(intensity=Intensity.LOW)

        assert [e["id"] for e in entries] == ["pu1"]

    def test_combined_filters(self, store):
        entries = ExerciseLibraryService(store).get_all(
            equipment=["Barbell"], intensity=Intensity.HIGH
        )

        assert [e["id"] for e in entries] == ["sq1"]


# =============================================================================
# ExerciseService
# =============================================================================


@pytest.mark.unit
class TestExerciseVisibility:

    @pytest.fixture(autouse=True)
    def exercises(self, store):
        store.seed(COLLECTION_EXERCISES, [
            {"id": "e1", "user_id": "u1", "workout_id": "w1", "name": "Squat"},
            {"id": "e2", "user_id": "u1", "workout_id": "w2", "name": "Lunge"},
            {"id": "e3", "user_id": "u2", "workout_id": "w3", "name": "Row"},
        ])

    def test_user_sees_only_own(self, store):
        exercises = ExerciseService(store).get_all(Identity("u1", Role.PREMIUM))

        assert {e["id"] for e in exercises} == {"e1", "e2"}

    def test_trainer_sees_all(self, store):
        exercises = ExerciseService(store).get_all(Identity("t1", Role.TRAINER))

        assert len(exercises) == 3

    def test_admin_is_not_a_trainer(self, store):
        exercises = ExerciseService(store).get_all(Identity("a1", Role.ADMIN))

        assert exercises == []

    def test_workout_filter(self, store):
        exercises = ExerciseService(store).get_all(Identity("u1", Role.LITE), workout_id="w2")

        assert [e["id"] for e in exercises] == ["e2"]

    def test_trainer_with_workout_filter(self, store):
        exercises = ExerciseService(store).get_all(Identity("t1", Role.TRAINER), "w3")

        assert [e["id"] for e in exercises] == ["e3"]


# =============================================================================
# QuestionService
# =============================================================================


@pytest.mark.unit
class TestQuestionService:

    def test_create_stamps_user_and_date(self, store):
        created = QuestionService(store).create(
            {"question": "How deep should I squat?", "date_asked": "1999-01-01"}, "u1"
        )

        assert created["user_id"] == "u1"
        assert created["date_asked"] != "1999-01-01"
        assert created["date_asked"].endswith("+00:00")
        assert "response" not in store.get_by_id(COLLECTION_QUESTIONS, created["id"])

    def test_visibility(self, store):
        service = QuestionService(store)
        service.create({"question": "q1"}, "u1")
        service.create({"question": "q2"}, "u2")

        assert len(service.get_all(Identity("u1", Role.PREMIUM))) == 1
        assert len(service.get_all(Identity("t1", Role.TRAINER))) == 2

    def test_respond_answers_open_question(self, store):
        service = QuestionService(store)
        question = service.create({"question": "Rest days?"}, "u1")

        answer = service.respond(question["id"], "Two per week", "t1")

        stored = store.get_by_id(COLLECTION_QUESTIONS, question["id"])
        assert answer["response"] == stored["response"] == "Two per week"
        assert stored["trainer_id"] == "t1"
        assert stored["date_responded"]
        assert store.transactions_committed == 1

    def test_respond_twice_is_rejected(self, store):
        service = QuestionService(store)
        question = service.create({"question": "Rest days?"}, "u1")
        service.respond(question["id"], "Two per week", "t1")

        with pytest.raises(ServiceError) as exc_info:
            service.respond(question["id"], "Three", "t2")

        assert exc_info.value.code == QUESTION_ALREADY_ANSWERED
        assert exc_info.value.status_code == 409
        assert store.get_by_id(COLLECTION_QUESTIONS, question["id"])["response"] == "Two per week"

    def test_respond_to_missing_question_is_404(self, store):
        with pytest.raises(ServiceError) as exc_info:
            QuestionService(store).respond("missing", "Hi", "t1")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message.startswith("Failed to respond to question missing")


# =============================================================================
# WorkoutService
# =============================================================================


@pytest.mark.unit
class TestWorkoutService:

    def test_get_all_filters_by_owner(self, store):
        store.seed(COLLECTION_WORKOUTS, [
            {"id": "w1", "user_id": "u1", "name": "A"},
            {"id": "w2", "user_id": "u2", "name": "B"},
        ])

        assert [w["id"] for w in WorkoutService(store).get_all("u1")] == ["w1"]

    def test_delete_cascades_to_exercises(self, store):
        store.seed(COLLECTION_WORKOUTS, [{"id": "w1", "user_id": "u1", "name": "A"}])
        store.seed(COLLECTION_EXERCISES, [
            {"id": "e1", "workout_id": "w1"},
            {"id": "e2", "workout_id": "w1"},
            {"id": "e3", "workout_id": "w2"},
        ])

        WorkoutService(store).delete("w1")

        assert store.count(COLLECTION_WORKOUTS) == 0
        assert [e["id"] for e in store.documents(COLLECTION_EXERCISES)] == ["e3"]

    def test_delete_missing_workout_is_404(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).delete("missing")

        assert exc_info.value.status_code == 404

    def test_failed_cascade_deletes_nothing(self, store):
        store.seed(COLLECTION_WORKOUTS, [{"id": "w1", "user_id": "u1", "name": "A"}])
        store.seed(COLLECTION_EXERCISES, [{"id": "e1", "workout_id": "w1"}])
        store.fail("delete", RuntimeError("boom"), collection=COLLECTION_WORKOUTS)

        with pytest.raises(ServiceError):
            WorkoutService(store).delete("w1")

        assert store.count(COLLECTION_WORKOUTS) == 1
        assert store.count(COLLECTION_EXERCISES) == 1


# =============================================================================
# UserService
# =============================================================================


@pytest.mark.unit
class TestUserService:

    def test_create_uses_subject_id(self, store):
        created = UserService(store).create({"name": "Ana"}, "firebase-uid")

        assert created["id"] == "firebase-uid"
        assert store.get_by_id(COLLECTION_USERS, "firebase-uid")["name"] == "Ana"

    def test_delete_does_not_cascade(self, store):
        store.seed(COLLECTION_USERS, [{"id": "u1", "name": "Ana"}])
        store.seed(COLLECTION_WORKOUTS, [{"id": "w1", "user_id": "u1", "name": "A"}])

        UserService(store).delete("u1")

        assert store.count(COLLECTION_WORKOUTS) == 1

    def test_change_role_updates_profile_and_claim(self, store):
        provider = FakeIdentityProvider()
        store.seed(COLLECTION_USERS, [{"id": "u1", "name": "Ana", "role": "lite"}])

        result = UserService(store, provider).change_role("u1", Role.PREMIUM)

        assert result == {"id": "u1", "role": "premium"}
        assert store.get_by_id(COLLECTION_USERS, "u1")["role"] == "premium"
        assert provider.claims["u1"] == {"role": "premium"}

    def test_change_role_of_missing_user_touches_nothing(self, store):
        provider = FakeIdentityProvider()

        with pytest.raises(ServiceError) as exc_info:
            UserService(store, provider).change_role("ghost", Role.ADMIN)

        assert exc_info.value.status_code == 404
        assert provider.claims == {}

    def test_claim_failure_leaves_profile_unchanged(self, store):
        provider = FakeIdentityProvider()
        provider.unknown_subjects.add("u1")
        store.seed(COLLECTION_USERS, [{"id": "u1", "name": "Ana", "role": "lite"}])

        with pytest.raises(ServiceError):
            UserService(store, provider).change_role("u1", Role.TRAINER)

        assert store.get_by_id(COLLECTION_USERS, "u1")["role"] == "lite"

    def test_change_role_requires_identity_provider(self, store):
        with pytest.raises(ServiceError) as exc_info:
            UserService(store).change_role("u1", Role.ADMIN)

        assert exc_info.value.code == "AUTH_NOT_CONFIGURED"


def test_library_collection_name_is_canonical():
    assert COLLECTION_EXERCISE_LIBRARY == "exercise-library"


# =============================================================================
# Requester-scoped access
# =============================================================================


LITE = Identity("u1", Role.LITE)
OTHER = Identity("u2", Role.PREMIUM)
TRAINER = Identity("t1", Role.TRAINER)
ADMIN = Identity("a1", Role.ADMIN)

SQUAT = {
    "name": "Squat",
    "equipment": ["Barbell"],
    "muscles_worked": ["Legs"],
    "intensity": "High",
    "sets": 4,
    "reps": 12,
}


@pytest.fixture
def owned(store):
    store.seed(COLLECTION_WORKOUTS, [
        {"id": "w1", "user_id": "u1", "name": "Leg Day", "exercises": []},
        {"id": "w2", "user_id": "u2", "name": "Chest Day", "exercises": []},
    ])
    store.seed(COLLECTION_EXERCISES, [
        {"id": "e1", "user_id": "u1", "workout_id": "w1", **SQUAT},
        {"id": "e2", "user_id": "u2", "workout_id": "w2", **SQUAT},
    ])
    store.seed(COLLECTION_QUESTIONS, [
        {"id": "q1", "user_id": "u1", "question": "Rest days?", "date_asked": "2024-01-01"},
    ])


@pytest.mark.unit
@pytest.mark.usefixtures("owned")
class TestRequesterScope:

    def test_owner_reads_own_exercise(self, store):
        assert ExerciseService(store).get_by_id("e1", LITE)["id"] == "e1"

    def test_foreign_exercise_looks_missing(self, store):
        with pytest.raises(ServiceError) as exc_info:
            ExerciseService(store).get_by_id("e2", LITE)

        error = exc_info.value
        assert error.status_code == 404
        assert error.code == "DOCUMENT_NOT_FOUND"
        assert error.message.startswith("Failed to retrieve exercise e2: ")

    def test_trainer_reads_any_exercise(self, store):
        assert ExerciseService(store).get_by_id("e2", TRAINER)["user_id"] == "u2"

    def test_foreign_exercise_update_touches_nothing(self, store):
        with pytest.raises(ServiceError):
            ExerciseService(store).update("e2", {"sets": 99}, LITE)

        assert store.get_by_id(COLLECTION_EXERCISES, "e2")["sets"] == 4

    def test_foreign_exercise_delete_touches_nothing(self, store):
        with pytest.raises(ServiceError):
            ExerciseService(store).delete("e2", LITE)

        assert store.count(COLLECTION_EXERCISES) == 2

    def test_create_into_own_workout(self, store):
        created = ExerciseService(store).create({"workout_id": "w1", "user_id": "u1", **SQUAT}, LITE)

        assert created["workout_id"] == "w1"

    def test_create_into_foreign_workout_rejected(self, store):
        with pytest.raises(ServiceError) as exc_info:
            ExerciseService(store).create({"workout_id": "w2", "user_id": "u1", **SQUAT}, LITE)

        assert exc_info.value.status_code == 404
        assert store.count(COLLECTION_EXERCISES) == 2

    def test_move_into_foreign_workout_rejected(self, store):
        with pytest.raises(ServiceError):
            ExerciseService(store).update("e1", {"workout_id": "w2"}, LITE)

        assert store.get_by_id(COLLECTION_EXERCISES, "e1")["workout_id"] == "w1"

    def test_question_hidden_from_admin(self, store):
        with pytest.raises(ServiceError) as exc_info:
            QuestionService(store).get_by_id("q1", ADMIN)

        assert exc_info.value.status_code == 404

    def test_question_visible_to_trainer(self, store):
        assert QuestionService(store).get_by_id("q1", TRAINER)["user_id"] == "u1"

    def test_trainer_cannot_read_foreign_workout(self, store):
        with pytest.raises(ServiceError):
            WorkoutService(store).get_by_id("w1", TRAINER)

    def test_foreign_workout_update_touches_nothing(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).update("w2", {"name": "Mine now"}, LITE)

        assert exc_info.value.status_code == 404
        assert store.get_by_id(COLLECTION_WORKOUTS, "w2")["name"] == "Chest Day"

    def test_foreign_workout_delete_touches_nothing(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).delete("w2", LITE)

        assert exc_info.value.status_code == 404
        assert store.count(COLLECTION_WORKOUTS) == 2
        assert store.count(COLLECTION_EXERCISES) == 2


@pytest.mark.unit
@pytest.mark.usefixtures("owned")
class TestWorkoutExerciseOwnership:

    def test_exercises_stamped_with_workout_and_owner(self, store):
        updated = WorkoutService(store).update("w1", {"exercises": [dict(SQUAT)]}, LITE)

        [exercise] = store.get_by_id(COLLECTION_WORKOUTS, "w1")["exercises"]
        assert exercise["workout_id"] == "w1"
        assert exercise["user_id"] == "u1"
        assert updated["exercises"] == [exercise]

    def test_stamped_without_requester(self, store):
        WorkoutService(store).update("w1", {"exercises": [dict(SQUAT)]})

        [exercise] = store.get_by_id(COLLECTION_WORKOUTS, "w1")["exercises"]
        assert (exercise["workout_id"], exercise["user_id"]) == ("w1", "u1")

    def test_foreign_workout_id_rejected(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).update(
                "w1", {"exercises": [{**SQUAT, "workout_id": "w2"}]}, LITE
            )

        assert exc_info.value.code == EXERCISE_OWNERSHIP_MISMATCH
        assert exc_info.value.status_code == 400
        assert store.get_by_id(COLLECTION_WORKOUTS, "w1")["exercises"] == []

    def test_foreign_user_id_rejected(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).update(
                "w1", {"exercises": [{**SQUAT, "user_id": "u2"}]}, LITE
            )

        assert exc_info.value.code == EXERCISE_OWNERSHIP_MISMATCH

    def test_malformed_exercise_rejected(self, store):
        with pytest.raises(ServiceError) as exc_info:
            WorkoutService(store).update("w1", {"exercises": [{"name": "Squat"}]}, LITE)

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.status_code == 400
