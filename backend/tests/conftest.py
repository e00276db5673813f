"""pytest configuration and fixtures.

This module provides factory fixtures for workflow nodes, edges and
documents, deterministic random sources for the simulator, and an async
HTTP client bound to the FastAPI app.
"""

from collections.abc import AsyncGenerator, Callable, Iterable
from itertools import cycle
from typing import Any, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.types import ASGIApp

from hrflow.api.deps import get_workflow_service
from hrflow.main import app
from hrflow.models.enums import NodeType
from hrflow.schemas.workflow import Workflow, WorkflowEdge, WorkflowNode
from hrflow.services.workflow.simulator import WorkflowSimulator
from hrflow.services.workflow_service import WorkflowService

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "asyncio: marks tests as async (pytest-asyncio)",
    )


# =============================================================================
# GRAPH FACTORY FIXTURES
# =============================================================================

DEFAULT_NODE_DATA: dict[NodeType, dict[str, Any]] = {
    NodeType.START: {"title": "Begin"},
    NodeType.TASK: {"title": "Collect Documents", "assignee": "HR Coordinator"},
    NodeType.APPROVAL: {"title": "Manager Approval", "approverRole": "Manager"},
    NodeType.AUTOMATED: {"title": "Send Welcome Email", "actionId": "send_email"},
    NodeType.END: {"endMessage": "Done"},
}


@pytest.fixture
def node_factory() -> Callable[..., WorkflowNode]:
    """Factory for creating fully configured WorkflowNode objects.

    Data keys use the wire (camelCase) spelling. ``label`` defaults to the
    node id; pass ``data`` to replace the default payload entirely.

    Example:
        def test_node(node_factory):
            node = node_factory("t1", NodeType.TASK, assignee="")
            assert node.data.assignee == ""
    """

    def _create(
        node_id: str,
        node_type: NodeType,
        data: dict[str, Any] | None = None,
        **overrides: Any,
    ) -> WorkflowNode:
        payload = dict(DEFAULT_NODE_DATA[node_type]) if data is None else dict(data)
        payload.setdefault("label", node_id)
        payload.update(overrides)
        return WorkflowNode.model_validate(
            {
                "id": node_id,
                "type": node_type.value,
                "position": {"x": 0, "y": 0},
                "data": payload,
            }
        )

    return _create


@pytest.fixture
def edge_factory() -> Callable[..., WorkflowEdge]:
    """Factory for creating WorkflowEdge objects with ids ``e-<source>-<target>``."""

    def _create(source: str, target: str, edge_id: str | None = None) -> WorkflowEdge:
        return WorkflowEdge(id=edge_id or f"e-{source}-{target}", source=source, target=target)

    return _create


@pytest.fixture
def chain_edges(edge_factory) -> Callable[[Iterable[str]], list[WorkflowEdge]]:
    """Connect node ids in order: ``chain_edges(["a", "b", "c"])`` gives a->b, b->c."""

    def _create(node_ids: Iterable[str]) -> list[WorkflowEdge]:
        ids = list(node_ids)
        return [edge_factory(source, target) for source, target in zip(ids, ids[1:])]

    return _create


@pytest.fixture
def valid_nodes(node_factory) -> list[WorkflowNode]:
    """Five configured nodes: start, task, approval, automated, end."""
    return [
        node_factory("start", NodeType.START),
        node_factory("task", NodeType.TASK),
        node_factory("approval", NodeType.APPROVAL),
        node_factory("auto", NodeType.AUTOMATED),
        node_factory("end", NodeType.END),
    ]


@pytest.fixture
def valid_workflow(valid_nodes, chain_edges) -> Workflow:
    """A valid linear five-node workflow.

    Example:
        def test_workflow(valid_workflow):
            assert [n.id for n in valid_workflow.nodes][0] == "start"
    """
    return Workflow(
        id="wf-onboarding",
        name="Onboarding",
        description="Linear test workflow",
        nodes=valid_nodes,
        edges=chain_edges(node.id for node in valid_nodes),
    )


# =============================================================================
# SIMULATION FIXTURES
# =============================================================================


@pytest.fixture
def sequence_source() -> Callable[[Iterable[float]], Callable[[], float]]:
    """Build a random source that replays the given values forever."""

    def _create(values: Iterable[float]) -> Callable[[], float]:
        replay = cycle(list(values))
        return lambda: next(replay)

    return _create


@pytest.fixture
def never_fail_simulator() -> WorkflowSimulator:
    """Simulator whose failure draw never triggers and every step lasts 1500ms."""
    return WorkflowSimulator(
        random_source=lambda: 0.5,
        failure_rate=0.05,
        min_step_ms=500,
        max_step_ms=2500,
        step_delay=0,
    )


# =============================================================================
# HTTP CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def workflow_service(never_fail_simulator: WorkflowSimulator) -> WorkflowService:
    """WorkflowService with a deterministic simulator."""
    return WorkflowService(simulator=never_fail_simulator)


@pytest_asyncio.fixture
async def async_client(
    workflow_service: WorkflowService,
) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing API endpoints.

    Uses ASGI transport to test the FastAPI app without running a server.
    Overrides the workflow service dependency so simulations are
    deterministic.

    Example:
        async def test_templates(async_client):
            response = await async_client.get("/api/v1/workflows/templates")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_workflow_service] = lambda: workflow_service

    try:
        transport = ASGITransport(app=cast("ASGIApp", app))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
