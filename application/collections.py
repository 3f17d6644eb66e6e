"""Document store collection names (schema-in-code).

Collections are created automatically when the first document is written.
Use these constants so every service and migration script agrees on one
canonical lowercase name per entity.

Example:
    from application.collections import COLLECTION_WORKOUTS

    store.create(COLLECTION_WORKOUTS, {"name": "Leg Day", "user_id": uid})
"""

COLLECTION_USERS = "users"
COLLECTION_EXERCISES = "exercises"
COLLECTION_EXERCISE_LIBRARY = "exercise-library"
COLLECTION_WORKOUTS = "workouts"
COLLECTION_QUESTIONS = "questions"

ALL_COLLECTIONS = (
    COLLECTION_USERS,
    COLLECTION_EXERCISES,
    COLLECTION_EXERCISE_LIBRARY,
    COLLECTION_WORKOUTS,
    COLLECTION_QUESTIONS,
)
