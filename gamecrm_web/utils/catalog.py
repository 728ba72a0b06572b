from ..schemas.game import Option


def _options(*values: str) -> list[Option]:
    return [Option(label=v, value=v) for v in values]


GENRE_OPTIONS = _options(
    "RPG", "FPS", "Strategy", "Simulation", "Indie", "Action",
    "Adventure", "Puzzle", "Sports", "Racing", "Fighting", "Horror",
)

# ESRB then PEGI
RATING_OPTIONS = _options(
    "EC", "E", "E10+", "T", "M", "AO", "RP",
    "3+", "7+", "12+", "16+", "18+",
)

DEV_STATUS_OPTIONS = _options("In Development", "Alpha", "Beta", "Released", "Sunsetting")

PLATFORM_OPTIONS = _options("PC", "PlayStation", "Xbox", "Switch", "Mobile")

# Suggestions only, the engine field also takes free text.
ENGINE_OPTIONS = _options(
    "Unity", "Unreal Engine", "Godot", "GameMaker",
    "CryEngine", "Source", "Proprietary", "Other",
)

FORM_FIELD_TO_PROPERTY = {
    "game_name": "game_name",
    "genre": "genre",
    "release_date": "release_date",
    "platform_availability": "platform_availability",
    "rating": "esrb__pegi_rating",
    "development_status": "development_status",
    "base_price": "base_price",
    "global_sales": "global_sales__player_count",
    "lead_developer": "lead_developer__studio",
    "game_engine": "game_engine",
    "store_url": "store_url",
}

PROPERTY_TO_FORM_FIELD = {prop: field for field, prop in FORM_FIELD_TO_PROPERTY.items()}

GAME_PROPERTIES = tuple(FORM_FIELD_TO_PROPERTY.values())


def form_options() -> dict:
    return {
        "genre_options": GENRE_OPTIONS,
        "rating_options": RATING_OPTIONS,
        "dev_status_options": DEV_STATUS_OPTIONS,
        "platform_options": PLATFORM_OPTIONS,
        "engine_options": ENGINE_OPTIONS,
    }
