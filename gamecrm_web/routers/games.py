import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..crm import get_crm_client
from ..schemas.game import GameRecord
from ..utils.catalog import GAME_PROPERTIES, form_options
from ..utils.config import PAGE_LIMIT
from ..utils.external import CrmApiError, CrmClient
from ..utils.formatting import format_crm_games
from ..utils.game import CreateGame, build_properties, classify_submission
from ..utils.response import error_response, passthrough_error_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Games"])

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

LIST_TITLE = "Games | HubSpot APIs"
FORM_TITLE = "Create / Update Game"


def log_crm_error(context: str, err: CrmApiError) -> None:
    logger.error(f"{context}: {err.message}")
    if err.has_response:
        logger.error(f"CRM response status: {err.status_code}")
        logger.error(f"CRM response body: {err.body}")


async def fetch_games(crm: CrmClient, context: str) -> List[GameRecord]:
    """
    Read path: any CRM failure is logged and degrades to an empty list.
    """
    try:
        raw = await crm.list_records(GAME_PROPERTIES, PAGE_LIMIT)
    except CrmApiError as e:
        log_crm_error(context, e)
        return []
    return format_crm_games(raw)


@router.get("/", response_class=HTMLResponse)
async def list_games(request: Request, crm: CrmClient = Depends(get_crm_client)):
    games = await fetch_games(crm, "Error fetching games")
    return templates.TemplateResponse(
        request,
        "homepage.html",
        {"title": LIST_TITLE, "games": games},
    )


@router.get("/update-cobj", response_class=HTMLResponse)
async def game_form(
        request: Request,
        selected: Optional[str] = None,
        crm: CrmClient = Depends(get_crm_client),
):
    games = await fetch_games(crm, "Error fetching games for update form")
    selected_game = next((g for g in games if selected and g.id == selected), None)
    return templates.TemplateResponse(
        request,
        "update-cobj.html",
        {
            "title": FORM_TITLE,
            "games": games,
            "selected": selected_game,
            **form_options(),
        },
    )


@router.post("/update-cobj")
@router.post("/create-cobj", include_in_schema=False)
async def submit_game(
        existing_id: Optional[str] = Form(None),
        game_name: Optional[str] = Form(None),
        genre: Optional[str] = Form(None),
        release_date: Optional[str] = Form(None),
        platform_availability: Optional[List[str]] = Form(None),
        rating: Optional[str] = Form(None),
        development_status: Optional[str] = Form(None),
        base_price: Optional[str] = Form(None),
        global_sales: Optional[str] = Form(None),
        lead_developer: Optional[str] = Form(None),
        game_engine: Optional[str] = Form(None),
        store_url: Optional[str] = Form(None),
        crm: CrmClient = Depends(get_crm_client),
):
    if not game_name or not game_name.strip():
        logger.warning("Rejected game submission without a game_name")
        return RedirectResponse("/update-cobj", status_code=302)

    props = build_properties({
        "game_name": game_name,
        "genre": genre,
        "release_date": release_date,
        "platform_availability": platform_availability,
        "rating": rating,
        "development_status": development_status,
        "base_price": base_price,
        "global_sales": global_sales,
        "lead_developer": lead_developer,
        "game_engine": game_engine,
        "store_url": store_url,
    })

    action = classify_submission(existing_id)
    try:
        if isinstance(action, CreateGame):
            created = await crm.create_record(props)
            logger.info(f"Created game {created.get('id')} ({props['game_name']})")
        else:
            await crm.update_record(action.record_id, props)
            logger.info(f"Updated game {action.record_id} ({props['game_name']})")
    except CrmApiError as e:
        log_crm_error("Error creating/updating game", e)
        return RedirectResponse("/update-cobj", status_code=302)

    return RedirectResponse("/", status_code=302)


@router.delete("/delete-cobj")
@router.delete("/delete-cobj/")
async def delete_game_without_id():
    return error_response("Missing game id", 400)


@router.delete("/delete-cobj/{record_id}")
async def delete_game(record_id: str, crm: CrmClient = Depends(get_crm_client)):
    if not record_id.strip():
        return error_response("Missing game id", 400)

    try:
        await crm.delete_record(record_id.strip())
    except CrmApiError as e:
        log_crm_error(f"Error deleting game {record_id}", e)
        if e.has_response:
            return passthrough_error_response(e.status_code, e.body)
        return error_response(e.message, 500)

    logger.info(f"Deleted game {record_id}")
    return Response(status_code=204)
