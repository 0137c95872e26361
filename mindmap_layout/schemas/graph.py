from typing import List, Optional, Dict
from pydantic import BaseModel, Field, validator


class NodeSpec(BaseModel):
    """Mind map node as supplied by the client"""
    id: int
    width: float = Field(200.0, ge=0, description="Node width in scene units")
    height: float = Field(75.0, ge=0, description="Node height in scene units")
    text: Optional[str] = None


class EdgeSpec(BaseModel):
    """Directed connection between two node ids"""
    source: int
    target: int


class LayoutRequest(BaseModel):
    """Automatic layout request"""
    nodes: List[NodeSpec]
    edges: List[EdgeSpec] = []
    aspect_ratio: float = Field(1.0, gt=0, description="Target width / height of the layout")
    min_edge_length: float = Field(50.0, ge=0, description="Gap between adjacent grid cells")
    seed: Optional[int] = None

    @validator('nodes')
    def validate_unique_ids(cls, v):
        """Node ids must be unique"""
        ids = [n.id for n in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Node ids must be unique")
        return v


class NodePosition(BaseModel):
    id: int
    x: float
    y: float
    width: float
    height: float


class LayoutResponse(BaseModel):
    nodes: List[NodePosition]
    success: bool
    message: str
    initial_cost: float = 0.0
    final_cost: float = 0.0
    metrics: Dict[str, float] = {}
