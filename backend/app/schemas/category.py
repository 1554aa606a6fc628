from pydantic import BaseModel, ConfigDict


class CategoryRow(BaseModel):
    """Snapshot of one ``categories`` row as read before normalization."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    slug: str = ""
    parent_category_id: int | None = None


__all__ = ["CategoryRow"]
