"""
Course endpoints
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.exceptions import CourseNotFoundError
from app.core.logging_config import logger
from app.modules.auth.dependencies import get_storage, get_current_user_id
from app.schemas.course import CourseCreate, CourseUpdate, CourseResponse, CourseDistributionResponse
from app.services.memory_storage import MemStorage
from app.services.task_views import course_distribution

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=List[CourseResponse])
async def list_courses(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.get_courses_by_user_id(user_id)


@router.get("/distribution", response_model=List[CourseDistributionResponse])
async def get_course_distribution(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """Task count and completion percentage per course"""
    return course_distribution(
        storage.get_courses_by_user_id(user_id),
        storage.get_tasks_by_user_id(user_id)
    )


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    course: CourseCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    created = storage.create_course(user_id, course.model_dump())
    logger.info(f"Course created: {created.code} ({created.id})")
    return created


@router.patch("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: int,
    changes: CourseUpdate,
    storage: MemStorage = Depends(get_storage)
):
    updated = storage.update_course(course_id, changes.model_dump(exclude_unset=True))
    if not updated:
        raise CourseNotFoundError(course_id)
    return updated


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_course(course_id):
        raise CourseNotFoundError(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
