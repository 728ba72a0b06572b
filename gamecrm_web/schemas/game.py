from pydantic import BaseModel, Field
from typing import Optional, List


class Option(BaseModel):
    label: str
    value: str


class GameRecord(BaseModel):
    id: str
    game_name: Optional[str] = None
    genre: Optional[str] = None
    release_date: Optional[str] = None
    platform_availability: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    rating: Optional[str] = None
    development_status: Optional[str] = None
    base_price: Optional[str] = None
    global_sales: Optional[str] = None
    lead_developer: Optional[str] = None
    game_engine: Optional[str] = None
    store_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived: bool = False

    class Config:
        from_attributes = True
