# aminpur/routers/public.py
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..deps import get_directory
from ..icons import glyph_for, resolve_color, resolve_icon
from ..schemas import Category, InfoItem
from ..state import DirectoryState

router = APIRouter(tags=["public"])

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

UNCATEGORIZED = "অশ্রেণীভুক্ত"


def category_out(cat: Category, count: int | None = None) -> dict:
    data = cat.to_wire()
    data["icon"] = resolve_icon(cat.icon).value
    data["color"] = resolve_color(cat.color).value
    data["glyph"] = glyph_for(cat.icon)
    if count is not None:
        data["count"] = count
    return data


def item_out(item: InfoItem, directory: DirectoryState) -> dict:
    data = item.to_wire()
    cat = directory.category_of(item)
    data["categoryName"] = cat.name if cat else UNCATEGORIZED
    data["uncategorized"] = cat is None
    return data


# ---------- HTML ----------

@router.get("/", include_in_schema=False)
def index():
    return RedirectResponse("/dashboard", status_code=307)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, directory: DirectoryState = Depends(get_directory)):
    counts = directory.stats()["per_category"]
    blocks = [category_out(c, counts.get(c.id, 0)) for c in directory.list_categories()]
    return templates.TemplateResponse(request, "dashboard.html", {"blocks": blocks})


@router.get("/category/{category_id}", response_class=HTMLResponse)
def category_page(category_id: str, request: Request, directory: DirectoryState = Depends(get_directory)):
    try:
        cat = directory.get_category(category_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Category not found")
    items = [item_out(i, directory) for i in directory.list_items(category_id)]
    return templates.TemplateResponse(
        request, "category.html",
        {"category": category_out(cat), "items": items, "back_href": "/dashboard"},
    )


@router.get("/about", response_class=HTMLResponse)
def about_page(request: Request):
    return templates.TemplateResponse(request, "about.html", {"back_href": "/dashboard"})


# ---------- API ----------

@router.get("/api/categories")
def api_categories(directory: DirectoryState = Depends(get_directory)):
    counts = directory.stats()["per_category"]
    return {"ok": True, "items": [category_out(c, counts.get(c.id, 0)) for c in directory.list_categories()]}


@router.get("/api/categories/{category_id}")
def api_category(category_id: str, directory: DirectoryState = Depends(get_directory)):
    try:
        cat = directory.get_category(category_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Category not found")
    items = [item_out(i, directory) for i in directory.list_items(category_id)]
    return {"ok": True, "category": category_out(cat, len(items)), "items": items}


@router.get("/api/items/{item_id}")
def api_item(item_id: str, directory: DirectoryState = Depends(get_directory)):
    try:
        item = directory.get_item(item_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Item not found")
    cat = directory.category_of(item)
    return {"ok": True, "item": item_out(item, directory), "category": category_out(cat) if cat else None}


@router.get("/api/search")
def api_search(q: str = Query("", max_length=200), directory: DirectoryState = Depends(get_directory)):
    return {"ok": True, "q": q, "items": [item_out(i, directory) for i in directory.search(q)]}
