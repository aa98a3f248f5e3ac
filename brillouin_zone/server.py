"""
JSON service for Brillouin zone construction.

Run with:

    python -m brillouin_zone.server
"""

import os
from typing import List, Optional

import numpy as np
import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .bz_geometry import ZoneConfig, generate_bz, get_bz_intersection_plane
from .exceptions import (
    DegenerateBasis,
    InsufficientReciprocalCoverage,
    InvalidLatticeType,
)
from .lattice import LatticeType
from .polygon_geometry import polyhedron_topology
from .symmetry_points import default_path, get_high_symmetry_path
from .utils.constants import FRAGMENT_BUDGET
from .utils.logger import setup_logger

logger = setup_logger("brillouin_zone.server")

app = FastAPI(title="Brillouin Zone Construction")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Reciprocal points echoed back in responses
MAX_POINTS_IN_RESPONSE = 50


class BZRequest(BaseModel):
    lattice_type: str = "square"
    a: float = Field(1.0, gt=0)
    b: Optional[float] = Field(None, gt=0)  # rectangular only
    max_zone: int = Field(1, ge=1, le=20)
    max_index: Optional[int] = Field(None, ge=1, le=30)
    fragment_budget: int = Field(FRAGMENT_BUDGET, ge=1)
    path_points: int = Field(100, ge=10, le=2000)


class PlaneRequest(BaseModel):
    lattice_type: str = "cubic"
    a: float = Field(1.0, gt=0)
    max_index: Optional[int] = Field(None, ge=1, le=10)
    # Miller indices [h, k, l]
    plane_miller: List[float] = Field(..., min_length=3, max_length=3)
    plane_distance: float = 0.0


def _points_dict(points):
    return {name: k.tolist() for name, k in points.items()}


def _build(lattice_type, a, b=None, max_zone=1, max_index=None, config=None):
    """Run the construction, translating library errors to HTTP errors."""
    try:
        return generate_bz(lattice_type, a=a, b=b, max_zone=max_zone,
                           max_index=max_index, config=config)
    except (InvalidLatticeType, DegenerateBasis) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InsufficientReciprocalCoverage as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/lattices")
async def list_lattices():
    """List the supported lattice types."""
    return {
        "lattices": [
            {"type": t.value, "name": t.display_name, "dimension": t.dimension}
            for t in LatticeType
        ]
    }


@app.post("/api/brillouin_zone")
async def calculate_bz(request: BZRequest):
    """Construct Brillouin zones and return their geometry as JSON."""
    config = ZoneConfig(fragment_budget=request.fragment_budget)
    bz = _build(request.lattice_type, request.a, request.b,
                request.max_zone, request.max_index, config)

    response = {
        "lattice_type": bz.lattice.lattice_type.value,
        "name": bz.lattice.name,
        "dimension": bz.dimension,
        "parameters": bz.lattice.parameters,
        "lattice_vectors": bz.lattice.vectors.tolist(),
        "reciprocal_vectors": bz.reciprocal_basis.vectors.tolist(),
        "max_index": bz.max_index,
        "high_symmetry_points": _points_dict(bz.high_symmetry_points),
        "reciprocal_points": [
            {"miller": list(p.miller), "vector": p.vector.tolist(), "norm": p.norm}
            for p in bz.reciprocal_points[:MAX_POINTS_IN_RESPONSE]
        ],
    }

    if bz.dimension == 2:
        response["zones"] = [
            {
                "index": z.index,
                "area": z.area,
                "truncated": z.truncated,
                "fragments": [f.tolist() for f in z.fragments],
            }
            for z in bz.zones
        ]
    else:
        n_vertices, n_edges, n_faces = polyhedron_topology(bz.faces)
        response["faces"] = [
            {"vertices": f.vertices.tolist(), "normal": f.normal.tolist()}
            for f in bz.faces
        ]
        response["volume"] = bz.get_volume()
        response["topology"] = {"vertices": n_vertices, "edges": n_edges, "faces": n_faces}

    path = default_path(bz.lattice.lattice_type)
    k_path, k_dist, labels = get_high_symmetry_path(
        bz.high_symmetry_points, path, request.path_points)
    response["k_path"] = {
        "labels": [{"index": i, "label": name} for i, name in labels],
        "points": k_path.tolist(),
        "distance": k_dist.tolist(),
    }

    logger.info(f"Built {bz}")
    return response


@app.post("/api/intersection_plane")
async def intersection_plane(request: PlaneRequest):
    """Section of a 3D first zone by the plane n̂ · k = plane_distance."""
    if np.linalg.norm(request.plane_miller) == 0:
        raise HTTPException(status_code=400, detail="Plane normal must be non-zero")

    bz = _build(request.lattice_type, request.a, max_index=request.max_index)
    if bz.dimension != 3:
        raise HTTPException(status_code=400,
                            detail=f"Plane sections need a 3D lattice, got '{request.lattice_type}'")

    polygon = get_bz_intersection_plane(bz, request.plane_miller, request.plane_distance)
    if polygon is None:
        return {"intersects": False, "vertices": []}
    return {"intersects": True, "vertices": polygon.tolist()}


if __name__ == "__main__":
    host = os.environ.get("BZ_HOST", "127.0.0.1")
    port = int(os.environ.get("BZ_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)
