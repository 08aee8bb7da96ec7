# =============================================================================
# app/routers/fruits.py - Fruit CRUD Endpoints
# =============================================================================
# Server-rendered fruit views plus the seed endpoint.
#
# Routes are matched in registration order, so the fixed paths (/seed, /new,
# /{fruit_id}/edit) are declared before /{fruit_id}.
#
# Failures raised by the store are turned into JSON by the app's exception
# handlers; nothing here catches them.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path, Request, status
from fastapi.responses import RedirectResponse

from app.dependencies import FruitServiceDep
from app.templating import render
from core.models.fruit import FruitCreate, FruitUpdate

router = APIRouter()

# Where create/update/delete send the browser afterwards
INDEX_URL = "/fruits"

FruitId = Annotated[str, Path(description="Fruit UUID")]


# =============================================================================
# Form Input
# =============================================================================

def read_fruit_form(
    name: Annotated[str, Form()] = "",
    color: Annotated[str, Form()] = "",
    ready_to_eat: Annotated[str | None, Form(alias="readyToEat")] = None,
) -> dict[str, str | None]:
    """Collect the URL-encoded fruit form fields (checkbox left as sent)."""
    return {"name": name, "color": color, "ready_to_eat": ready_to_eat}


FruitFormDep = Annotated[dict[str, str | None], Depends(read_fruit_form)]


def redirect_to_index() -> RedirectResponse:
    # 303 so the browser follows with GET after POST/PUT/DELETE
    return RedirectResponse(url=INDEX_URL, status_code=status.HTTP_303_SEE_OTHER)


# =============================================================================
# Endpoints
# =============================================================================

# Handlers are plain `def`; the store client is synchronous and FastAPI runs
# sync handlers in its threadpool.
#
# Every path also has a trailing-slash alias (/fruits/, /fruits/<id>/). The
# static mount at "/" matches all leftover paths, so Starlette never gets to
# redirect slashes itself.

@router.get("/seed")
@router.get("/seed/", include_in_schema=False)
def seed_fruits(service: FruitServiceDep):
    """
    Replace all fruits with the starter set.

    Returns the created fruits as JSON.
    """
    fruits = service.seed_fruits()
    return [fruit.to_json() for fruit in fruits]


@router.get("", name="list_fruits")
@router.get("/", include_in_schema=False)
def list_fruits(request: Request, service: FruitServiceDep):
    """Render the list of all fruits."""
    fruits = service.list_fruits()
    return render(request, "fruits/index.html", {"fruits": fruits})


@router.get("/new")
@router.get("/new/", include_in_schema=False)
def new_fruit(request: Request):
    """Render the empty create form."""
    return render(request, "fruits/new.html")


@router.post("")
@router.post("/", include_in_schema=False)
def create_fruit(form: FruitFormDep, service: FruitServiceDep):
    """Create a fruit from the submitted form, then go back to the list."""
    service.create_fruit(FruitCreate.from_form(**form))
    return redirect_to_index()


@router.get("/{fruit_id}/edit")
@router.get("/{fruit_id}/edit/", include_in_schema=False)
def edit_fruit(request: Request, fruit_id: FruitId, service: FruitServiceDep):
    """Render the edit form for one fruit."""
    fruit = service.get_fruit(fruit_id)
    return render(request, "fruits/edit.html", {"fruit": fruit})


@router.put("/{fruit_id}")
@router.put("/{fruit_id}/", include_in_schema=False)
def update_fruit(fruit_id: FruitId, form: FruitFormDep, service: FruitServiceDep):
    """Replace a fruit's fields from the submitted form."""
    service.update_fruit(fruit_id, FruitUpdate.from_form(**form))
    return redirect_to_index()


@router.get("/{fruit_id}")
@router.get("/{fruit_id}/", include_in_schema=False)
def show_fruit(request: Request, fruit_id: FruitId, service: FruitServiceDep):
    """Render one fruit."""
    fruit = service.get_fruit(fruit_id)
    return render(request, "fruits/show.html", {"fruit": fruit})


@router.delete("/{fruit_id}")
@router.delete("/{fruit_id}/", include_in_schema=False)
def delete_fruit(fruit_id: FruitId, service: FruitServiceDep):
    """Delete a fruit, then go back to the list."""
    service.delete_fruit(fruit_id)
    return redirect_to_index()
