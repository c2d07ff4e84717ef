# squirrel_registry/api/pages.py

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from squirrel_registry.api.sightings import get_squirrel
from squirrel_registry.entities.squirrel import Squirrel
from squirrel_registry.forms import FIELDS
from squirrel_registry.templating import templates
from squirrel_registry.views.squirrel_view import SUBMIT_OK, SquirrelView

router = APIRouter(tags=["pages"])


def _render(request: Request, view: SquirrelView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": view, "fields": FIELDS},
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    add: bool = Query(False, description="Open the add-squirrel modal"),
    added: bool = Query(False, description="Show the confirmation after a redirected submit"),
    squirrel: Squirrel = Depends(get_squirrel),
) -> HTMLResponse:
    """Registry page: all sightings as cards."""
    view = SquirrelView(squirrel)
    await view.mount()
    if added:
        view.notify("success", SUBMIT_OK)
    if add:
        view.open_modal()
    return _render(request, view)


@router.post("/", response_class=HTMLResponse)
async def submit_sighting(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    location: str = Form(""),
    action: str = Form("submit"),
    squirrel: Squirrel = Depends(get_squirrel),
):
    """
    Modal form handler.

    A successful submit or a cancel redirects back to the page (303), so a
    browser refresh does not resend the form. A rejected submit re-renders
    the open modal with the entered values.
    """
    if action == "cancel":
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    view = SquirrelView(squirrel)
    if await view.submit({"name": name, "description": description, "location": location}):
        return RedirectResponse("/?added=1", status_code=status.HTTP_303_SEE_OTHER)

    # records behind the modal; a successful submit already reloaded them
    await view.load_records()
    return _render(request, view)
