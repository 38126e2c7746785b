# api/main.py
"""
FastAPI backend for the beam bending calculator - exposes bendcalc.analyze as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
import sys
from pathlib import Path

# Add project root to path to import bendcalc
sys.path.insert(0, str(Path(__file__).parent.parent))

from bendcalc import (
    CONFIG,
    MATERIALS,
    BeamAnalysisError,
    LoadKind,
    SectionKind,
    analyze,
    default_load_params,
    default_section_params,
    default_span,
)


app = FastAPI(
    title=f"{CONFIG.app_name} API",
    description="Closed-form beam stress and deflection engine",
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class MaterialData(BaseModel):
    """Material constants (canonical units)."""
    name: str = "Custom"
    elastic_modulus: float = Field(..., description="Young's modulus (GPa)")
    yield_strength: float = Field(..., description="Yield strength (MPa)")
    density: Optional[float] = Field(None, description="Density (kg/m³)")


class AnalyzeRequest(BaseModel):
    """Input for one bending analysis."""
    section_kind: str = Field(..., description="rectangular, circular, hollow_rectangular, "
                                               "hollow_circular, i_beam, t_beam")
    section_params: Dict[str, Optional[float]] = Field(default_factory=dict)
    load_kind: str = Field(..., description="point, distributed, moment")
    load_params: Dict[str, Optional[float]] = Field(default_factory=dict)
    material: Optional[str] = Field("steel", description="Catalog material name")
    custom_material: Optional[MaterialData] = Field(
        None, description="User-entered material; overrides `material`"
    )
    span: Optional[float] = Field(
        None, description="Span length (m or in); omitted means the default span"
    )
    unit_system: str = Field("metric", description="metric or imperial")
    support: str = Field("simply_supported", description="simply_supported or cantilever")


class AnalysisData(BaseModel):
    """Analysis result, canonical units."""
    moment_of_inertia: float
    section_modulus: float
    max_bending_moment: float
    max_stress: float
    max_deflection: float
    section_kind: str
    load_kind: str
    support: str
    span: float
    material: str
    yield_utilization: float
    disclaimer: str
    assumptions: List[str]


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Beam Bending Calculator API"}


@app.get("/api/materials")
async def list_materials():
    """Catalog materials."""
    return {key: MaterialData(**vars(mat)).model_dump() for key, mat in MATERIALS.items()}


@app.get("/api/defaults")
async def input_defaults(unit_system: str = "metric"):
    """Default section dimensions and load fields for the input form."""
    try:
        return {
            "unit_system": unit_system,
            "span": default_span(unit_system),
            "sections": {k.value: default_section_params(k, unit_system) for k in SectionKind},
            "loads": {k.value: default_load_params(k, unit_system) for k in LoadKind},
        }
    except BeamAnalysisError as e:
        raise HTTPException(status_code=422, detail={"error": type(e).__name__, "message": str(e)})


@app.post("/api/analyze", response_model=AnalysisData)
async def analyze_beam(request: AnalyzeRequest):
    """Run one bending analysis."""
    material = (
        request.custom_material.model_dump()
        if request.custom_material is not None
        else request.material
    )
    try:
        span = request.span if request.span is not None else default_span(request.unit_system)
        result = analyze(
            request.section_kind,
            request.section_params,
            request.load_kind,
            request.load_params,
            material,
            span,
            request.unit_system,
            request.support,
        )
    except BeamAnalysisError as e:
        raise HTTPException(status_code=422, detail={"error": type(e).__name__, "message": str(e)})

    return AnalysisData(**result.to_dict())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
