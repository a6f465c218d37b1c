"""
Catalogue API
-------------
Read-only JSON view of the task library, plus notebook download.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response
from pydantic import BaseModel

from analytics.notebook_export import build_export
from catalogue.models import TaskRecord
from catalogue.store import get_default_store

router = APIRouter(prefix="/api", tags=["catalogue"])


class TaskSchema(BaseModel):
    id: int
    category: str
    title: str
    description: str
    code: str

    @classmethod
    def from_record(cls, record: TaskRecord) -> "TaskSchema":
        return cls(**record.as_dict())


class CategorySchema(BaseModel):
    name: str
    label: str
    icon: str
    count: int


def _get_task_or_404(task_id: int) -> TaskRecord:
    record = get_default_store().get(task_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return record


@router.get("/categories", response_model=List[CategorySchema])
async def list_categories():
    """Categories in catalogue order with display label, icon and task count."""
    store = get_default_store()
    counts = store.count_by_category()
    return [
        CategorySchema(
            name=name,
            label=store.category_label(name),
            icon=store.category_icon(name).value,
            count=counts[name],
        )
        for name in store.list_categories()
    ]


@router.get("/tasks", response_model=List[TaskSchema])
async def list_tasks(
    category: Optional[str] = Query(
        None, description="Category label; defaults to the first category"
    ),
    q: str = Query("", description="Case-insensitive search over title and description"),
):
    store = get_default_store()
    if category is None:
        categories = store.list_categories()
        if not categories:
            return []
        category = categories[0]
    return [TaskSchema.from_record(r) for r in store.filter(category, q)]


@router.get("/tasks/{task_id}", response_model=TaskSchema)
async def get_task(task_id: int):
    return TaskSchema.from_record(_get_task_or_404(task_id))


@router.get("/tasks/{task_id}/notebook")
async def download_notebook(task_id: int):
    """The task's snippet as a Colab-ready .ipynb attachment."""
    record = _get_task_or_404(task_id)
    export = build_export(record.code, record.title)
    return Response(
        content=export.payload,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
