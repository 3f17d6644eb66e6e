"""
Router package for the fitness tracking API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- users: Profiles and role upgrades
- admin: Custom claim management
- exercise_library: Trainer-curated exercise catalog
- exercises: Workout-scoped exercises
- questions: Trainer questions and answers
- workouts: Workout assembly and CRUD
"""

from api.routers.admin import router as admin_router
from api.routers.exercise_library import router as exercise_library_router
from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.questions import router as questions_router
from api.routers.users import router as users_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "users_router",
    "admin_router",
    "exercise_library_router",
    "exercises_router",
    "questions_router",
    "workouts_router",
]
