"""
Unit Tests for Task API Endpoints
"""
import pytest
from datetime import datetime, timedelta
from httpx import AsyncClient
from faker import Faker

fake = Faker()


async def create_task(client: AsyncClient, **overrides) -> dict:
    payload = {"title": fake.sentence(nb_words=4)}
    payload.update(overrides)
    response = await client.post('/api/tasks', json=payload)
    assert response.status_code == 201
    return response.json()


class TestTaskCreation:
    """Test task creation endpoint"""

    @pytest.mark.asyncio
    async def test_create_task_defaults(self, client: AsyncClient):
        """New tasks default to medium priority and incomplete"""
        response = await client.post('/api/tasks', json={'title': 'Read chapter 4'})

        assert response.status_code == 201
        data = response.json()
        assert data['id'] == 1
        assert data['userId'] == 1
        assert data['title'] == 'Read chapter 4'
        assert data['priority'] == 'medium'
        assert data['completed'] is False
        assert data['description'] is None
        assert data['dueDate'] is None
        assert 'createdAt' in data

    @pytest.mark.asyncio
    async def test_create_task_camel_case_fields(self, client: AsyncClient):
        data = await create_task(
            client,
            title='Problem set 3',
            courseId=2,
            dueDate='2026-10-20T12:00:00',
            priority='high'
        )

        assert data['courseId'] == 2
        assert data['dueDate'] == '2026-10-20T12:00:00'
        assert data['priority'] == 'high'

    @pytest.mark.asyncio
    async def test_create_task_missing_title(self, client: AsyncClient):
        """Schema failures return 400 with an error list"""
        response = await client.post('/api/tasks', json={'priority': 'high'})

        assert response.status_code == 400
        body = response.json()
        assert body['message'] == 'Validation error'
        assert isinstance(body['errors'], list)
        assert body['errors']

    @pytest.mark.asyncio
    async def test_create_task_invalid_priority(self, client: AsyncClient):
        response = await client.post('/api/tasks', json={'title': 'x', 'priority': 'urgent'})

        assert response.status_code == 400


class TestTaskListing:
    """Test the filtered and sorted task list"""

    @pytest.mark.asyncio
    async def test_list_sorted_by_due_date(self, client: AsyncClient):
        await create_task(client, title='later', dueDate='2026-10-22T10:00:00')
        await create_task(client, title='undated')
        await create_task(client, title='sooner', dueDate='2026-10-20T10:00:00')

        response = await client.get('/api/tasks')

        assert response.status_code == 200
        assert [t['title'] for t in response.json()] == ['sooner', 'later', 'undated']

    @pytest.mark.asyncio
    async def test_completed_filter(self, client: AsyncClient):
        await create_task(client, title='open')
        await create_task(client, title='done', completed=True)
        await create_task(client, title='also open')

        response = await client.get('/api/tasks', params={'filter': 'completed'})

        assert [t['title'] for t in response.json()] == ['done']

    @pytest.mark.asyncio
    async def test_priority_sort_and_course_filter(self, client: AsyncClient):
        await create_task(client, title='low', priority='low', courseId=1)
        await create_task(client, title='high', priority='high', courseId=1)
        await create_task(client, title='other course', priority='high', courseId=2)

        response = await client.get('/api/tasks', params={'sort': 'priority', 'courseId': 1})

        assert [t['title'] for t in response.json()] == ['high', 'low']

    @pytest.mark.asyncio
    async def test_search(self, client: AsyncClient):
        await create_task(client, title='Fourier worksheet')
        await create_task(client, title='Essay')

        response = await client.get('/api/tasks', params={'search': 'fourier'})

        assert [t['title'] for t in response.json()] == ['Fourier worksheet']

    @pytest.mark.asyncio
    async def test_unknown_filter_rejected(self, client: AsyncClient):
        response = await client.get('/api/tasks', params={'filter': 'archived'})

        assert response.status_code == 400
        body = response.json()
        assert body['message'] == 'Validation error'
        assert body['errors'][0]['code'] == 'INVALID_VIEW_OPTION'

    @pytest.mark.asyncio
    async def test_upcoming_deadlines(self, client: AsyncClient):
        now = datetime.now()
        await create_task(client, title='past', dueDate=(now - timedelta(days=1)).isoformat())
        await create_task(client, title='in two days', dueDate=(now + timedelta(days=2)).isoformat())
        await create_task(client, title='tomorrow', dueDate=(now + timedelta(days=1)).isoformat())
        await create_task(client, title='done', completed=True, dueDate=(now + timedelta(days=1)).isoformat())

        response = await client.get('/api/tasks/upcoming', params={'limit': 5})

        assert response.status_code == 200
        assert [t['title'] for t in response.json()] == ['tomorrow', 'in two days']

    @pytest.mark.asyncio
    async def test_week_view(self, client: AsyncClient):
        await create_task(client, title='tuesday', dueDate='2026-10-20T09:00:00')

        response = await client.get('/api/tasks/week', params={'date': '2026-10-22'})

        assert response.status_code == 200
        days = response.json()
        assert len(days) == 7
        assert days[0]['day'] == '2026-10-19'
        assert days[6]['day'] == '2026-10-25'
        assert [t['title'] for t in days[1]['tasks']] == ['tuesday']
        assert 'isToday' in days[0]


class TestTaskOperations:
    """Test task update and delete operations"""

    @pytest.mark.asyncio
    async def test_update_task(self, client: AsyncClient):
        task = await create_task(client, title='Lab report')

        response = await client.patch(f"/api/tasks/{task['id']}", json={'completed': True})

        assert response.status_code == 200
        assert response.json()['completed'] is True
        assert response.json()['title'] == 'Lab report'

    @pytest.mark.asyncio
    async def test_update_nonexistent_task(self, client: AsyncClient):
        response = await client.patch('/api/tasks/999', json={'completed': True})

        assert response.status_code == 404
        assert response.json()['message'] == 'Task not found'

    @pytest.mark.asyncio
    async def test_delete_task(self, client: AsyncClient):
        task = await create_task(client)

        response = await client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 204
        assert response.content == b''

        response = await client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_integer_id(self, client: AsyncClient):
        response = await client.patch('/api/tasks/abc', json={})

        assert response.status_code == 400


class TestTaskPartialUpdate:
    """Omitted fields are kept; null is only accepted for nullable fields"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "priority", "completed"])
    async def test_null_for_required_field(self, client: AsyncClient, field):
        task = await create_task(client, title='Lab report', priority='high')

        response = await client.patch(f"/api/tasks/{task['id']}", json={field: None})

        assert response.status_code == 400
        assert response.json()['message'] == 'Validation error'

        listed = await client.get('/api/tasks', params={'search': 'lab'})
        assert listed.status_code == 200
        stored = listed.json()[0]
        assert stored['title'] == 'Lab report'
        assert stored['priority'] == 'high'
        assert stored['completed'] is False

    @pytest.mark.asyncio
    async def test_null_clears_nullable_fields(self, client: AsyncClient):
        task = await create_task(
            client,
            title='Lab report',
            description='Section 2',
            courseId=1,
            dueDate='2026-10-20T12:00:00'
        )

        response = await client.patch(
            f"/api/tasks/{task['id']}",
            json={'description': None, 'courseId': None, 'dueDate': None}
        )

        assert response.status_code == 200
        data = response.json()
        assert data['description'] is None
        assert data['courseId'] is None
        assert data['dueDate'] is None
        assert data['title'] == 'Lab report'
