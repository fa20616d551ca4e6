"""
Editor API

FastAPI service that lets an external renderer drive the edit controller.

HTTP Endpoints:
- GET    /                          - Health check
- GET    /health                    - Detailed health status
- GET    /state                     - Nodes, edges, validation and stats
- POST   /nodes                     - Add a node
- PATCH  /nodes/{node_id}/position  - Store a dragged position
- POST   /nodes/{node_id}/select    - Set a node's selected flag
- POST   /edges                     - Connect two nodes
- DELETE /edges/{edge_id}           - Delete one edge
- POST   /edges/{edge_id}/select    - Set an edge's selected flag
- DELETE /selection                 - Delete selected nodes and edges
- POST   /layout                    - Apply the grid layout
- POST   /clear                     - Remove everything

Mutating endpoints always answer 200 with {"accepted", "id", "state"};
a refused edit is reported as accepted=false, never as an HTTP error.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from engine.config.loader import EditorConfig
from engine.editor.controller import EditController

logger = logging.getLogger(__name__)


# Request models (Pydantic)
class AddNodeRequest(BaseModel):
    """Node creation request from the naming dialog"""
    label: str


class ConnectRequest(BaseModel):
    """Connection dragged from a source handle to a target handle"""
    source: str
    target: str


class MoveRequest(BaseModel):
    x: float
    y: float


class SelectRequest(BaseModel):
    selected: bool = True


# Response models (Pydantic)
class PositionModel(BaseModel):
    x: float
    y: float


class NodeModel(BaseModel):
    id: str
    label: str
    position: PositionModel
    selected: bool


class EdgeModel(BaseModel):
    id: str
    source: str
    target: str
    selected: bool
    animated: bool
    marker_end: Dict[str, Any]
    style: Dict[str, Any]


class ValidationModel(BaseModel):
    is_valid: bool
    issues: List[str]


class StateResponse(BaseModel):
    """Everything a renderer needs to draw the canvas"""
    nodes: List[NodeModel]
    edges: List[EdgeModel]
    validation: ValidationModel
    stats: Dict[str, int]


class EditResponse(BaseModel):
    """Outcome of one edit plus the state after it"""
    accepted: bool
    id: Optional[str] = None
    state: StateResponse


# Global edit controller
controller: Optional[EditController] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler owning the edit controller"""
    global controller

    # Startup
    logger.info("Starting Editor API...")
    config = EditorConfig.from_env()
    controller = EditController(config)
    logger.info("Edit controller ready")

    yield

    # Shutdown
    controller = None
    logger.info("Editor API shutdown complete")


app = FastAPI(
    title="Pipeline Editor - Editor API",
    description="Build a pipeline graph and check it is a valid DAG",
    version="1.0.0",
    lifespan=lifespan,
)


def get_controller() -> EditController:
    if controller is None:
        raise HTTPException(
            status_code=503,
            detail="Edit controller unavailable"
        )
    return controller


def current_state(ctl: EditController) -> StateResponse:
    return StateResponse(**ctl.state.to_dict())


def edit_response(ctl: EditController, accepted: bool, item_id: Optional[str] = None) -> EditResponse:
    return EditResponse(accepted=accepted, id=item_id, state=current_state(ctl))


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "running",
        "service": "editor-api",
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/health")
async def health():
    """Detailed health status"""
    return {
        "status": "healthy",
        "service": "editor-api",
        "controller_ready": controller is not None,
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/state")
async def get_state() -> StateResponse:
    """Current nodes, edges, validation verdict and stats"""
    return current_state(get_controller())


@app.post("/nodes")
async def add_node(request: AddNodeRequest) -> EditResponse:
    ctl = get_controller()
    node_id = ctl.add_node(request.label)
    return edit_response(ctl, node_id is not None, node_id)


@app.patch("/nodes/{node_id}/position")
async def move_node(node_id: str, request: MoveRequest) -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.move_node(node_id, request.x, request.y), node_id)


@app.post("/nodes/{node_id}/select")
async def select_node(node_id: str, request: SelectRequest) -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.select_node(node_id, request.selected), node_id)


@app.post("/edges")
async def connect(request: ConnectRequest) -> EditResponse:
    ctl = get_controller()
    edge_id = ctl.connect(request.source, request.target)
    return edit_response(ctl, edge_id is not None, edge_id)


@app.delete("/edges/{edge_id}")
async def delete_edge(edge_id: str) -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.delete_edge(edge_id), edge_id)


@app.post("/edges/{edge_id}/select")
async def select_edge(edge_id: str, request: SelectRequest) -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.select_edge(edge_id, request.selected), edge_id)


@app.delete("/selection")
async def delete_selection() -> EditResponse:
    """Delete key: selected nodes, selected edges and edges touching them"""
    ctl = get_controller()
    return edit_response(ctl, ctl.delete_selection())


@app.post("/layout")
async def apply_layout() -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.apply_layout())


@app.post("/clear")
async def clear() -> EditResponse:
    ctl = get_controller()
    return edit_response(ctl, ctl.clear())
