from pydantic import BaseModel, Field


class ReaderSettingsResponse(BaseModel):
    """Schema for returning the public reader settings the client runs with."""

    max_page: int = Field(..., description="Last page of the reading-progress slider")
    reader_path: str = Field(..., description="Path of the reader page")
    slider_debounce_ms: int = Field(..., description="Quiet period before a slider move is sent")
    intersection_threshold: float = Field(
        ..., description="Visible fraction at which a section counts as dominant"
    )
    intersection_root_margin_px: int = Field(
        ..., description="Margin around the viewport when testing visibility"
    )
    hysteresis_pages: int = Field(
        ..., description="Page distance within which scroll reports are ignored"
    )
