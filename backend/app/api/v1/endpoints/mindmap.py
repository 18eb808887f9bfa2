"""
Mind map endpoints
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.exceptions import NodeNotFoundError, EdgeNotFoundError
from app.modules.auth.dependencies import get_storage, get_current_user_id
from app.schemas.mindmap import (
    MindMapNodeCreate,
    MindMapNodeUpdate,
    MindMapNodeResponse,
    MindMapEdgeCreate,
    MindMapEdgeResponse,
)
from app.services.memory_storage import MemStorage
from app.services.mindmap_service import with_node_defaults

router = APIRouter(prefix="/mindmap", tags=["Mind Map"])


# ==================== Nodes ====================

@router.get("/nodes", response_model=List[MindMapNodeResponse])
async def list_nodes(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.get_mind_map_nodes_by_user_id(user_id)


@router.post("/nodes", response_model=MindMapNodeResponse, status_code=status.HTTP_201_CREATED)
async def create_node(
    node: MindMapNodeCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """Create a node; position and color are randomised when omitted"""
    return storage.create_mind_map_node(user_id, with_node_defaults(node.model_dump()))


@router.patch("/nodes/{node_id}", response_model=MindMapNodeResponse)
async def update_node(
    node_id: int,
    changes: MindMapNodeUpdate,
    storage: MemStorage = Depends(get_storage)
):
    updated = storage.update_mind_map_node(node_id, changes.model_dump(exclude_unset=True))
    if not updated:
        raise NodeNotFoundError(node_id)
    return updated


@router.delete("/nodes/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_node(node_id: int, storage: MemStorage = Depends(get_storage)):
    """Delete a node and every edge touching it"""
    if not storage.delete_mind_map_node(node_id):
        raise NodeNotFoundError(node_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== Edges ====================

@router.get("/edges", response_model=List[MindMapEdgeResponse])
async def list_edges(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.get_mind_map_edges_by_user_id(user_id)


@router.post("/edges", response_model=MindMapEdgeResponse, status_code=status.HTTP_201_CREATED)
async def create_edge(
    edge: MindMapEdgeCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    # Free-form graph: duplicates and cycles are allowed
    return storage.create_mind_map_edge(user_id, edge.model_dump())


@router.delete("/edges/{edge_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_edge(edge_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_mind_map_edge(edge_id):
        raise EdgeNotFoundError(edge_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
