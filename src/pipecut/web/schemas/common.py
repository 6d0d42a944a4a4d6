"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class StockSchema(BaseModel):
    """Stock pipe specification."""

    model_config = ConfigDict(allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Length of one stock unit in mm")
    quantity: int = Field(..., ge=0, description="Number of stock units available")
    diameter: float | None = Field(
        default=None, gt=0, description="Outside diameter in mm"
    )
    thickness: float | None = Field(
        default=None, gt=0, description="Wall thickness in mm"
    )
    material: str | None = Field(default=None, description="Material name")


class CutSchema(BaseModel):
    """Required cut: a length and how many pieces of it."""

    model_config = ConfigDict(allow_inf_nan=False)

    length: float = Field(..., gt=0, description="Cut length in mm")
    quantity: int = Field(..., ge=0, description="Number of pieces required")


class ParametersSchema(BaseModel):
    """Optimization parameters."""

    model_config = ConfigDict(allow_inf_nan=False)

    kerf_width: float = Field(default=2.0, ge=0, description="Saw blade width in mm")
    min_waste_threshold: float = Field(
        default=100.0, ge=0, description="Offcut length worth keeping, in mm"
    )
    prioritize_waste_reduction: float = Field(
        default=70.0, ge=0, le=100, description="Waste reduction weight (0-100)"
    )


class CutPlacementSchema(BaseModel):
    """A piece positioned on a stock unit."""

    length: float
    start_pos: float
    end_pos: float


class CuttingPatternSchema(BaseModel):
    """Cuts made on one stock unit."""

    stock_index: int = Field(..., description="Stock unit index (0-based)")
    cuts: list[CutPlacementSchema] = Field(default_factory=list)
    waste: float = Field(..., description="Remaining length in mm")


class UnmetDemandSchema(BaseModel):
    """Cut length that could not be fully placed."""

    length: float
    requested: int
    placed: int
    shortfall: int
