"""
In-memory storage for StudyFlow

One map per entity keyed by an auto-incrementing integer id. Everything
lives in process memory and is gone on restart.

Usage:
    storage = MemStorage()

    task = storage.create_task(user_id, {"title": "Read chapter 4"})
    storage.update_task(task.id, {"completed": True})
    storage.delete_task(task.id)

The instance is owned by the FastAPI app (app.state.storage) and handed to
request handlers through a dependency, never imported as a global.
"""

import threading
from dataclasses import replace, fields
from datetime import datetime
from itertools import count
from typing import Optional, Dict, List, Any, Iterator, TypeVar

from app.core.logging_config import logger
from app.models import (
    User,
    Course,
    Task,
    TaskPriority,
    MindMapNode,
    MindMapEdge,
    Goal,
    PomodoroSession,
)

T = TypeVar("T")

SAMPLE_USER = {
    "username": "student",
    "password": "password123",
    "first_name": "John",
    "last_name": "Smith",
    "university": "Stanford University",
}

SAMPLE_COURSES = [
    {"name": "Deep Learning", "code": "CS 401", "color": "#6C5CE7"},
    {"name": "Calculus II", "code": "MATH 240", "color": "#00B894"},
    {"name": "Waves & Optics", "code": "PHYS 210", "color": "#FF6B6B"},
]


def _apply_changes(record: T, changes: Dict[str, Any]) -> T:
    """Return a copy of a dataclass record with the known fields in changes applied"""
    allowed = {f.name for f in fields(record)} - {"id", "user_id"}
    return replace(record, **{k: v for k, v in changes.items() if k in allowed})


class MemStorage:
    """
    Thread-safe in-memory store for every StudyFlow entity.

    - Integer ids start at 1 per entity type and are never reused
    - No foreign-key checks between entities
    - Deleting a mind map node also removes edges that touch it
    """

    def __init__(self, seed: bool = False):
        self._lock = threading.Lock()

        self._users: Dict[int, User] = {}
        self._courses: Dict[int, Course] = {}
        self._tasks: Dict[int, Task] = {}
        self._nodes: Dict[int, MindMapNode] = {}
        self._edges: Dict[int, MindMapEdge] = {}
        self._goals: Dict[int, Goal] = {}
        self._sessions: Dict[int, PomodoroSession] = {}

        self._ids: Dict[str, Iterator[int]] = {
            name: count(1)
            for name in ("user", "course", "task", "node", "edge", "goal", "session")
        }

        if seed:
            self.seed_sample_data()

    def _next_id(self, entity: str) -> int:
        return next(self._ids[entity])

    def counts(self) -> Dict[str, int]:
        """Number of stored records per entity"""
        return {
            "users": len(self._users),
            "courses": len(self._courses),
            "tasks": len(self._tasks),
            "mindmap_nodes": len(self._nodes),
            "mindmap_edges": len(self._edges),
            "goals": len(self._goals),
            "pomodoro_sessions": len(self._sessions),
        }

    def seed_sample_data(self) -> User:
        """Create the development user and their courses"""
        user = self.create_user(SAMPLE_USER)
        for course in SAMPLE_COURSES:
            self.create_course(user.id, course)
        logger.info(f"Seeded sample user '{user.username}' with {len(SAMPLE_COURSES)} courses")
        return user

    # ==================== Users ====================

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, data: Dict[str, Any]) -> User:
        with self._lock:
            user = User(
                id=self._next_id("user"),
                username=data["username"],
                password=data["password"],
                first_name=data["first_name"],
                last_name=data["last_name"],
                university=data.get("university") or None,
            )
            self._users[user.id] = user
        logger.log_store_event("create", "user", user.id)
        return user

    # ==================== Courses ====================

    def get_course(self, course_id: int) -> Optional[Course]:
        return self._courses.get(course_id)

    def get_courses_by_user_id(self, user_id: int) -> List[Course]:
        return [c for c in self._courses.values() if c.user_id == user_id]

    def create_course(self, user_id: int, data: Dict[str, Any]) -> Course:
        with self._lock:
            course = Course(
                id=self._next_id("course"),
                user_id=user_id,
                name=data["name"],
                code=data["code"],
                color=data["color"],
            )
            self._courses[course.id] = course
        logger.log_store_event("create", "course", course.id)
        return course

    def update_course(self, course_id: int, changes: Dict[str, Any]) -> Optional[Course]:
        with self._lock:
            course = self._courses.get(course_id)
            if course is None:
                return None
            course = _apply_changes(course, changes)
            self._courses[course_id] = course
        logger.log_store_event("update", "course", course_id)
        return course

    def delete_course(self, course_id: int) -> bool:
        with self._lock:
            deleted = self._courses.pop(course_id, None) is not None
        if deleted:
            logger.log_store_event("delete", "course", course_id)
        return deleted

    # ==================== Tasks ====================

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    def get_tasks_by_user_id(self, user_id: int) -> List[Task]:
        return [t for t in self._tasks.values() if t.user_id == user_id]

    def create_task(self, user_id: int, data: Dict[str, Any]) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id("task"),
                user_id=user_id,
                title=data["title"],
                description=data.get("description") or None,
                course_id=data.get("course_id") or None,
                due_date=data.get("due_date") or None,
                priority=TaskPriority(data.get("priority") or TaskPriority.MEDIUM),
                completed=bool(data.get("completed", False)),
                created_at=data.get("created_at") or datetime.now(),
            )
            self._tasks[task.id] = task
        logger.log_store_event("create", "task", task.id)
        return task

    def update_task(self, task_id: int, changes: Dict[str, Any]) -> Optional[Task]:
        if changes.get("priority") is not None:
            changes = {**changes, "priority": TaskPriority(changes["priority"])}
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task = _apply_changes(task, changes)
            self._tasks[task_id] = task
        logger.log_store_event("update", "task", task_id, fields=sorted(changes))
        return task

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            deleted = self._tasks.pop(task_id, None) is not None
        if deleted:
            logger.log_store_event("delete", "task", task_id)
        return deleted

    # ==================== Mind map ====================

    def get_mind_map_nodes_by_user_id(self, user_id: int) -> List[MindMapNode]:
        return [n for n in self._nodes.values() if n.user_id == user_id]

    def get_mind_map_node(self, node_id: int) -> Optional[MindMapNode]:
        return self._nodes.get(node_id)

    def create_mind_map_node(self, user_id: int, data: Dict[str, Any]) -> MindMapNode:
        with self._lock:
            node = MindMapNode(
                id=self._next_id("node"),
                user_id=user_id,
                title=data["title"],
                position=dict(data["position"]),
                parent_id=data.get("parent_id") or None,
                color=data.get("color") or None,
                task_id=data.get("task_id") or None,
            )
            self._nodes[node.id] = node
        logger.log_store_event("create", "mindmap_node", node.id)
        return node

    def update_mind_map_node(self, node_id: int, changes: Dict[str, Any]) -> Optional[MindMapNode]:
        with self._lock:
            node = self._nodes.get(node_id)
            if node is None:
                return None
            node = _apply_changes(node, changes)
            self._nodes[node_id] = node
        logger.log_store_event("update", "mindmap_node", node_id)
        return node

    def delete_mind_map_node(self, node_id: int) -> bool:
        with self._lock:
            if self._nodes.pop(node_id, None) is None:
                return False
            dangling = [
                edge_id for edge_id, edge in self._edges.items()
                if node_id in (edge.source_id, edge.target_id)
            ]
            for edge_id in dangling:
                del self._edges[edge_id]
        logger.log_store_event("delete", "mindmap_node", node_id, removed_edges=dangling)
        return True

    def get_mind_map_edges_by_user_id(self, user_id: int) -> List[MindMapEdge]:
        return [e for e in self._edges.values() if e.user_id == user_id]

    def create_mind_map_edge(self, user_id: int, data: Dict[str, Any]) -> MindMapEdge:
        with self._lock:
            edge = MindMapEdge(
                id=self._next_id("edge"),
                user_id=user_id,
                source_id=data["source_id"],
                target_id=data["target_id"],
            )
            self._edges[edge.id] = edge
        logger.log_store_event("create", "mindmap_edge", edge.id)
        return edge

    def delete_mind_map_edge(self, edge_id: int) -> bool:
        with self._lock:
            deleted = self._edges.pop(edge_id, None) is not None
        if deleted:
            logger.log_store_event("delete", "mindmap_edge", edge_id)
        return deleted

    # ==================== Goals ====================

    def get_goals_by_user_id(self, user_id: int) -> List[Goal]:
        return [g for g in self._goals.values() if g.user_id == user_id]

    def create_goal(self, user_id: int, data: Dict[str, Any]) -> Goal:
        with self._lock:
            goal = Goal(
                id=self._next_id("goal"),
                user_id=user_id,
                title=data["title"],
                progress=data.get("progress") or 0,
                color=data.get("color") or None,
                course_id=data.get("course_id") or None,
            )
            self._goals[goal.id] = goal
        logger.log_store_event("create", "goal", goal.id)
        return goal

    def update_goal(self, goal_id: int, changes: Dict[str, Any]) -> Optional[Goal]:
        with self._lock:
            goal = self._goals.get(goal_id)
            if goal is None:
                return None
            goal = _apply_changes(goal, changes)
            self._goals[goal_id] = goal
        logger.log_store_event("update", "goal", goal_id)
        return goal

    def delete_goal(self, goal_id: int) -> bool:
        with self._lock:
            deleted = self._goals.pop(goal_id, None) is not None
        if deleted:
            logger.log_store_event("delete", "goal", goal_id)
        return deleted

    # ==================== Pomodoro sessions ====================

    def get_pomodoro_sessions_by_user_id(self, user_id: int) -> List[PomodoroSession]:
        return [s for s in self._sessions.values() if s.user_id == user_id]

    def create_pomodoro_session(self, user_id: int, data: Dict[str, Any]) -> PomodoroSession:
        with self._lock:
            session = PomodoroSession(
                id=self._next_id("session"),
                user_id=user_id,
                start_time=data["start_time"],
                duration=data["duration"],
                task_id=data.get("task_id") or None,
                end_time=data.get("end_time") or None,
            )
            self._sessions[session.id] = session
        logger.log_store_event("create", "pomodoro_session", session.id)
        return session

    def update_pomodoro_session(self, session_id: int, changes: Dict[str, Any]) -> Optional[PomodoroSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            session = _apply_changes(session, changes)
            self._sessions[session_id] = session
        logger.log_store_event("update", "pomodoro_session", session_id)
        return session
