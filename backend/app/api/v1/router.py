from fastapi import APIRouter
from app.api.v1.endpoints import users, courses, tasks, mindmap, goals, pomodoro

api_router = APIRouter()

api_router.include_router(users.router)
api_router.include_router(courses.router)
api_router.include_router(tasks.router)
api_router.include_router(mindmap.router)
api_router.include_router(goals.router)
api_router.include_router(pomodoro.router)
