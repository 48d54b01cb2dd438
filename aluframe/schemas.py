from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict


class EstimateSession(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    aluminium_total: float = Field(default=0.0, ge=0)
    total_sq_ft: float = Field(default=0.0, ge=0)
    window_count: int = Field(default=0, ge=0)


class BatchRequest(BaseModel):
    shape: int
    items: List[dict] = Field(min_length=1)


class PriceRequest(BatchRequest):
    rates: Dict[str, float] = {}
    session: EstimateSession = EstimateSession()


class SummaryRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    session: EstimateSession
    glass_rate: Optional[float] = Field(default=None, ge=0)
    labor_rate: Optional[float] = Field(default=None, ge=0)
    hardware_rate: Optional[float] = Field(default=None, ge=0)
    discount_pct: Optional[float] = Field(default=None, ge=0, le=100)


class ComponentSections(BaseModel):
    label: str
    sections: Dict[str, float]
    area_sq_ft: float


class SectionsResponse(BaseModel):
    shape: int
    components: List[ComponentSections]
    required_sections: List[str]


class PricedLineItem(BaseModel):
    section: str
    inches: float
    feet: float
    rounded_feet: float
    rate: float
    amount: float


class PricedComponent(BaseModel):
    label: str
    area_sq_ft: float
    items: List[PricedLineItem]
    missing_rates: List[str]
    total: float


class PriceResponse(BaseModel):
    shape: int
    components: List[PricedComponent]
    required_sections: List[str]
    missing_rates: List[str]
    aluminium_total: float
    total_sq_ft: float
    window_count: int
    session: EstimateSession


class FinalSummary(BaseModel):
    aluminium_before_discount: float
    discount_pct: float
    discount: float
    aluminium_after_discount: float
    glass: float
    labor: float
    hardware: float
    net_total: float
    total_sq_ft: float
    window_count: int
    currency: str


class ShapeInfo(BaseModel):
    selector: int
    name: str
    shape: str
    collar_range: Optional[List[int]] = None
    fields: List[str]
