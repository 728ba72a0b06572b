from fastapi import Request

from .utils.config import Settings
from .utils.external import CrmClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_crm_client(request: Request) -> CrmClient:
    return request.app.state.crm_client
