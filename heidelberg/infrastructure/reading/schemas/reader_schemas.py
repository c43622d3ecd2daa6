from pydantic import BaseModel, Field

from heidelberg.application.reading.use_cases.reader_session_use_case import ReaderView


class ContentGroupingSchema(BaseModel):
    """Schema for the content grouping rendered around a page."""

    name: str = Field(..., description="Grouping key, e.g. 'verlossing'")
    title: str
    first_page: int = Field(..., ge=1)
    last_page: int = Field(..., ge=1)


class SliderSchema(BaseModel):
    """Bounds of the reading-progress slider."""

    name: str = Field(default="reader_progress", description="Form name of the range input")
    min: int = 1
    max: int
    value: int


class ReaderViewResponse(BaseModel):
    """Schema for the state the reader renders for one page."""

    session_id: str | None = Field(None, description="Live session id, set on live sessions only")
    page: int = Field(..., ge=1)
    url: str = Field(..., description="Shareable URL of the page")
    grouping: ContentGroupingSchema
    sections: list[str] = Field(..., description="DOM ids of the rendered sections")
    slider: SliderSchema

    @classmethod
    def from_view(cls, view: ReaderView, session_id: str | None = None) -> "ReaderViewResponse":
        return cls(
            session_id=session_id,
            page=view.page,
            url=view.url,
            grouping=ContentGroupingSchema(
                name=view.grouping.name,
                title=view.grouping.title,
                first_page=view.grouping.first_page,
                last_page=view.grouping.last_page,
            ),
            sections=[str(section) for section in view.sections],
            slider=SliderSchema(max=view.max_page, value=view.page),
        )
