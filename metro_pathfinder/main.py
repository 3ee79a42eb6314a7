"""
Metro Pathfinder - Web Interface
Run with: uvicorn metro_pathfinder.main:app --reload
Open browser: http://localhost:8000
"""
import logging
import os

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from metro_pathfinder.network import create_metro_graph
from metro_pathfinder.shortest_path import ShortestPath

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates"))


def create_app(graph, network_name="Metro"):
    """Web app answering journey queries against one fixed graph"""
    sp = ShortestPath(graph)

    app = FastAPI(title="METRO PATHFINDER", version="1.0")

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        """Home page"""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"network": network_name, "stations": graph.stations()},
        )

    @app.get("/api/stations")
    async def get_stations():
        """List of stations in the network"""
        station_list = [{"id": i, "name": name} for i, name in graph.stations()]
        return {"network": network_name, "stations": station_list}

    @app.post("/api/route")
    async def calculate_route(start: str = Form(...), end: str = Form(...)):
        """Shortest travel time between two stations"""
        try:
            return sp.journey(start.strip(), end.strip())
        except Exception as e:
            logger.exception("route query %r -> %r failed", start, end)
            return {"success": False, "error": "internal", "message": str(e)}

    @app.get("/api/graph-data")
    async def get_graph_data():
        """Graph data for visualization"""
        nodes = [{"id": i, "name": graph.station_name(i)} for i in range(len(graph))]
        edges = [{"from": a, "to": b, "weight": w} for a, b, w in graph.connections()]
        return {"nodes": nodes, "edges": edges}

    return app


graph, network_name = create_metro_graph()
app = create_app(graph, network_name)
