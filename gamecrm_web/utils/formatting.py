import re
from typing import Optional

from ..schemas.game import GameRecord
from .catalog import PROPERTY_TO_FORM_FIELD

PLATFORM_READ_SEPARATORS = re.compile(r"[,;|]")
PLATFORM_WRITE_SEPARATOR = ";"


def split_platforms(raw: Optional[str]) -> list[str]:
    """
    Lenient read of a stored platform string: any of , ; | separates values.
    """
    if not raw:
        return []
    return [p.strip() for p in PLATFORM_READ_SEPARATORS.split(str(raw)) if p.strip()]


def join_platforms(values: list[str]) -> str:
    return PLATFORM_WRITE_SEPARATOR.join(values)


def format_crm_game(raw: dict) -> GameRecord:
    """
    Takes a CRM object envelope ({id, properties, createdAt, ...}) and returns
    the record as shown in the views, keyed by form field names.
    """
    props = raw.get("properties") or {}
    fields = {
        field: props.get(prop)
        for prop, field in PROPERTY_TO_FORM_FIELD.items()
    }
    return GameRecord(
        id=str(raw.get("id", "")),
        platforms=split_platforms(props.get("platform_availability")),
        created_at=raw.get("createdAt"),
        updated_at=raw.get("updatedAt"),
        archived=bool(raw.get("archived", False)),
        **fields,
    )


def format_crm_games(raw_records: list[dict]) -> list[GameRecord]:
    return [format_crm_game(r) for r in raw_records if r.get("id") is not None]
