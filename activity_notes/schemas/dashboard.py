"""Dashboard Schemas — response contract for the dashboard read path."""

from pydantic import BaseModel


class DashboardNote(BaseModel):
    id: str
    title: str
    category: str
    priority: str
    summary: str
    content: str
    description_preview: str
    created_at: str


class DashboardResponse(BaseModel):
    email: str | None
    default_category: str
    selected_categories: list[str]
    allowed_categories: list[str]
    notes: list[DashboardNote]
    show_reminder: bool
