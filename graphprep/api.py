"""
graphprep HTTP API - FastAPI Application

Exposes the preprocessing pipeline to a browser front end:
- POST endpoints taking a graph snapshot and returning derived structures
- Health check for service supervision
- CORS configuration for local frontend development

Request bodies are parsed into GraphInput; malformed bodies are rejected by
FastAPI with a 422 before any preprocessing runs.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .adjacency import build_adjacency
from .edges import remove_repeated_edges
from .models import GraphInput
from .preprocess import ordered_components, preprocess_graph
from .validation import validate_graph, validation_summary

logger = logging.getLogger(__name__)


# --- FastAPI App ---

app = FastAPI(
    title="graphprep API",
    description="Preprocessing of graph snapshots for layout algorithms",
    version="0.1.0",
)

# CORS for local frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/preprocess")
async def preprocess(graph: GraphInput):
    """
    Run the full preprocessing pipeline.

    Returns adjacency map, start node, ordered components, extra nodes and
    the edge list to render.
    """
    result = preprocess_graph(graph)
    return {"success": True, **result.to_dict()}


@app.post("/api/adjacency")
async def adjacency(graph: GraphInput):
    """Build the adjacency map using the graph's directedness."""
    return {
        "success": True,
        "directed": graph.directed,
        "adjacency": build_adjacency(graph.edges, graph.directed)
    }


@app.post("/api/components")
async def components(graph: GraphInput):
    """List connected components as node id lists, start component first."""
    found = ordered_components(graph)
    return {
        "success": True,
        "components": [[n.id for n in component] for component in found]
    }


@app.post("/api/dedupe")
async def dedupe(graph: GraphInput):
    """Remove mirrored edges for undirected rendering."""
    edges = remove_repeated_edges(graph.edges)
    return {"success": True, "edges": [e.to_json_dict() for e in edges]}


@app.post("/api/validate")
async def validate(graph: GraphInput):
    """
    Validate the graph for structural oddities.

    Returns a list of issues (warnings, info) and a summary.
    """
    issues = validate_graph(graph)
    logger.debug("Validation found %d issues", len(issues))
    return {
        "success": True,
        "issues": [issue.to_dict() for issue in issues],
        "summary": validation_summary(issues)
    }


# --- Run with uvicorn ---

if __name__ == "__main__":
    import uvicorn
    from .config import configure_logging, settings

    configure_logging()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
