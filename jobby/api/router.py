from fastapi import APIRouter

from jobby.api.endpoints import auth, feedback, health, jobs, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router, prefix="/api")
api_router.include_router(jobs.router, prefix="/api")
api_router.include_router(feedback.router, prefix="/api")
