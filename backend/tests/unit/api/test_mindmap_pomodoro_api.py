"""
Unit Tests for Mind Map and Pomodoro Session API Endpoints
"""
import pytest
from httpx import AsyncClient

NODE_COLORS = ["#6C5CE7", "#00B894", "#FF6B6B", "#FDCB6E", "#E056FD"]


class TestMindMapNodes:
    """Test node endpoints"""

    @pytest.mark.asyncio
    async def test_create_node_random_defaults(self, client: AsyncClient):
        response = await client.post('/api/mindmap/nodes', json={'title': 'Neural networks'})

        assert response.status_code == 201
        node = response.json()
        assert 100 <= node['position']['x'] < 500
        assert 100 <= node['position']['y'] < 300
        assert node['color'] in NODE_COLORS
        assert node['parentId'] is None

    @pytest.mark.asyncio
    async def test_create_node_explicit_values(self, client: AsyncClient):
        response = await client.post('/api/mindmap/nodes', json={
            'title': 'Backprop',
            'position': {'x': 12.5, 'y': 40},
            'color': '#000000',
            'parentId': 1,
            'taskId': 3
        })

        node = response.json()
        assert node['position'] == {'x': 12.5, 'y': 40.0}
        assert node['color'] == '#000000'
        assert node['parentId'] == 1
        assert node['taskId'] == 3

    @pytest.mark.asyncio
    async def test_move_node(self, client: AsyncClient):
        node = (await client.post('/api/mindmap/nodes', json={'title': 'A'})).json()

        response = await client.patch(f"/api/mindmap/nodes/{node['id']}", json={'position': {'x': 1, 'y': 2}})

        assert response.status_code == 200
        assert response.json()['position'] == {'x': 1.0, 'y': 2.0}

    @pytest.mark.asyncio
    async def test_delete_node_cascades_edges(self, client: AsyncClient):
        a = (await client.post('/api/mindmap/nodes', json={'title': 'A'})).json()
        b = (await client.post('/api/mindmap/nodes', json={'title': 'B'})).json()
        await client.post('/api/mindmap/edges', json={'sourceId': a['id'], 'targetId': b['id']})

        response = await client.delete(f"/api/mindmap/nodes/{a['id']}")
        assert response.status_code == 204

        assert (await client.get('/api/mindmap/edges')).json() == []
        assert [n['title'] for n in (await client.get('/api/mindmap/nodes')).json()] == ['B']

    @pytest.mark.asyncio
    async def test_missing_node(self, client: AsyncClient):
        response = await client.delete('/api/mindmap/nodes/77')

        assert response.status_code == 404
        assert response.json()['message'] == 'Node not found'


class TestMindMapEdges:
    """Test edge endpoints"""

    @pytest.mark.asyncio
    async def test_create_and_delete_edge(self, client: AsyncClient):
        response = await client.post('/api/mindmap/edges', json={'sourceId': 1, 'targetId': 2})
        assert response.status_code == 201
        edge = response.json()
        assert edge['sourceId'] == 1
        assert edge['targetId'] == 2

        assert (await client.delete(f"/api/mindmap/edges/{edge['id']}")).status_code == 204
        assert (await client.delete(f"/api/mindmap/edges/{edge['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_edge_requires_both_ends(self, client: AsyncClient):
        response = await client.post('/api/mindmap/edges', json={'sourceId': 1})

        assert response.status_code == 400


class TestPomodoroSessions:
    """Test session log endpoints"""

    @pytest.mark.asyncio
    async def test_create_and_list_sessions(self, client: AsyncClient):
        response = await client.post('/api/pomodoro/sessions', json={
            'taskId': 2,
            'startTime': '2026-10-19T09:00:00',
            'endTime': '2026-10-19T09:25:00',
            'duration': 25
        })

        assert response.status_code == 201
        session = response.json()
        assert session['taskId'] == 2
        assert session['duration'] == 25

        sessions = (await client.get('/api/pomodoro/sessions')).json()
        assert [s['id'] for s in sessions] == [session['id']]

    @pytest.mark.asyncio
    async def test_update_session(self, client: AsyncClient):
        session = (await client.post('/api/pomodoro/sessions', json={
            'startTime': '2026-10-19T09:00:00',
            'duration': 25
        })).json()
        assert session['endTime'] is None

        response = await client.patch(
            f"/api/pomodoro/sessions/{session['id']}",
            json={'endTime': '2026-10-19T09:25:00'}
        )

        assert response.status_code == 200
        assert response.json()['endTime'] == '2026-10-19T09:25:00'

    @pytest.mark.asyncio
    async def test_update_missing_session(self, client: AsyncClient):
        response = await client.patch('/api/pomodoro/sessions/5', json={'duration': 10})

        assert response.status_code == 404
        assert response.json()['message'] == 'Session not found'

    @pytest.mark.asyncio
    async def test_negative_duration_rejected(self, client: AsyncClient):
        response = await client.post('/api/pomodoro/sessions', json={
            'startTime': '2026-10-19T09:00:00',
            'duration': -1
        })

        assert response.status_code == 400


class TestPartialUpdateNulls:
    """null is rejected for fields a stored record cannot be without"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "position"])
    async def test_node_null_rejected(self, client: AsyncClient, field):
        node = (await client.post('/api/mindmap/nodes', json={
            'title': 'Optics',
            'position': {'x': 150, 'y': 150}
        })).json()

        response = await client.patch(f"/api/mindmap/nodes/{node['id']}", json={field: None})

        assert response.status_code == 400
        nodes = await client.get('/api/mindmap/nodes')
        assert nodes.status_code == 200
        assert nodes.json()[0]['title'] == 'Optics'
        assert nodes.json()[0]['position'] == {'x': 150.0, 'y': 150.0}

    @pytest.mark.asyncio
    async def test_node_nullable_fields(self, client: AsyncClient):
        node = (await client.post('/api/mindmap/nodes', json={'title': 'Optics', 'parentId': 1, 'taskId': 2})).json()

        response = await client.patch(
            f"/api/mindmap/nodes/{node['id']}",
            json={'parentId': None, 'taskId': None, 'color': None}
        )

        assert response.status_code == 200
        assert response.json()['parentId'] is None
        assert response.json()['taskId'] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["startTime", "duration"])
    async def test_session_null_rejected(self, client: AsyncClient, field):
        session = (await client.post('/api/pomodoro/sessions', json={
            'startTime': '2026-10-19T09:00:00',
            'duration': 25
        })).json()

        response = await client.patch(f"/api/pomodoro/sessions/{session['id']}", json={field: None})

        assert response.status_code == 400
        sessions = await client.get('/api/pomodoro/sessions')
        assert sessions.status_code == 200
        assert sessions.json()[0]['startTime'] == '2026-10-19T09:00:00'
        assert sessions.json()[0]['duration'] == 25

    @pytest.mark.asyncio
    async def test_session_end_time_can_be_cleared(self, client: AsyncClient):
        session = (await client.post('/api/pomodoro/sessions', json={
            'startTime': '2026-10-19T09:00:00',
            'endTime': '2026-10-19T09:25:00',
            'duration': 25
        })).json()

        response = await client.patch(f"/api/pomodoro/sessions/{session['id']}", json={'endTime': None})

        assert response.status_code == 200
        assert response.json()['endTime'] is None
