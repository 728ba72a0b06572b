from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

from .catalog import FORM_FIELD_TO_PROPERTY
from .formatting import join_platforms, split_platforms


@dataclass(frozen=True)
class CreateGame:
    pass


@dataclass(frozen=True)
class UpdateGame:
    record_id: str


Submission = Union[CreateGame, UpdateGame]


def classify_submission(existing_id: Optional[str]) -> Submission:
    """
    Upsert by presence: a non-blank existing id means update, anything else
    means create. The CRM is not consulted.
    """
    if existing_id and existing_id.strip():
        return UpdateGame(record_id=existing_id.strip())
    return CreateGame()


def normalize_platforms(values: Union[str, Sequence[str], None]) -> list[str]:
    """
    Several submitted values (checkboxes) are trimmed as-is; a single value is
    treated as a delimited string and split on , ; or |.
    """
    if values is None:
        return []
    if isinstance(values, str):
        return split_platforms(values)
    if len(values) == 1:
        return split_platforms(values[0])
    return [str(v).strip() for v in values if v is not None and str(v).strip()]


def build_properties(form: Mapping[str, object]) -> dict[str, str]:
    """
    Map submitted form fields onto CRM properties. Optional fields default to
    "" so the CRM clears them; platforms are always sent ;-joined.
    """
    props: dict[str, str] = {}
    for field, prop in FORM_FIELD_TO_PROPERTY.items():
        if field == "platform_availability":
            props[prop] = join_platforms(normalize_platforms(form.get(field)))
        elif field == "game_name":
            props[prop] = str(form.get(field) or "").strip()
        else:
            props[prop] = str(form.get(field) or "")
    return props
