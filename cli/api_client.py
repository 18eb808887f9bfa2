"""
HTTP client for the StudyFlow REST API
"""

from typing import Optional, Dict, Any, List

import httpx

from cli.config import CLIConfig
from app.modules.pomodoro.state_machine import CompletedInterval


class APIError(Exception):
    """Non-success response from the API"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class StudyFlowClient:
    """
    Thin async wrapper over the REST endpoints.

    Usage:
        async with StudyFlowClient(config) as client:
            tasks = await client.list_tasks(sort="priority")
    """

    def __init__(self, config: CLIConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url.rstrip("/"),
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "StudyFlowClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            try:
                message = response.json().get("message", response.reason_phrase)
            except ValueError:
                message = response.reason_phrase
            raise APIError(response.status_code, message)
        if response.status_code == 204:
            return None
        return response.json()

    # ==================== Endpoints ====================

    async def get_user(self) -> Dict[str, Any]:
        return await self._request("GET", "/user")

    async def list_tasks(
        self,
        filter: str = "all",
        sort: str = "dueDate",
        course_id: Optional[int] = None,
        search: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"filter": filter, "sort": sort}
        if course_id is not None:
            params["courseId"] = course_id
        if search:
            params["search"] = search
        return await self._request("GET", "/tasks", params=params)

    async def upcoming_deadlines(self, limit: int = 5) -> List[Dict[str, Any]]:
        return await self._request("GET", "/tasks/upcoming", params={"limit": limit})

    async def week(self, day: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"date": day} if day else {}
        return await self._request("GET", "/tasks/week", params=params)

    async def list_courses(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/courses")

    async def goal_summary(self) -> Dict[str, Any]:
        return await self._request("GET", "/goals/summary")

    async def list_sessions(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/pomodoro/sessions")

    async def create_session(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/pomodoro/sessions", json=payload)


class ApiSessionRecorder:
    """Async completion handler that logs finished pomodoros through the API"""

    def __init__(self, client: StudyFlowClient):
        self.client = client
        self.recorded: List[Dict[str, Any]] = []

    async def __call__(self, interval: CompletedInterval) -> Optional[Dict[str, Any]]:
        if not interval.is_pomodoro:
            return None
        session = await self.client.create_session({
            "taskId": interval.task_id,
            "startTime": interval.started_at.isoformat(),
            "endTime": interval.ended_at.isoformat(),
            "duration": interval.duration_minutes,
        })
        self.recorded.append(session)
        return session
