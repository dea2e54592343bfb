from fastapi import Request

from bootpane.config.settings import Settings
from bootpane.views.assets import View


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_view(request: Request) -> View:
    return View(settings=get_settings(request))
