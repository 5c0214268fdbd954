from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todo_api.schemas.transfer import (
    ExportPayload, ImportFullRequest, ImportFullResponse, ImportAppendRequest, ImportAppendResponse,
)
from todo_api.services import transfer as service
from todo_api.database import get_db
from todo_api.utils.auth import get_current_user

router = APIRouter(tags=["transfer"], dependencies=[Depends(get_current_user)])

@router.get("/exportData", response_model=ExportPayload)
def export_data(db: Session = Depends(get_db)):
    return service.export_data(db)

@router.post("/importData", response_model=ImportFullResponse)
def import_data(body: ImportFullRequest, db: Session = Depends(get_db)):
    assignees, todos = service.import_full(db, body)
    return ImportFullResponse(assignees=assignees, todos=todos)

@router.post("/importTodos", response_model=ImportAppendResponse)
def import_todos(body: ImportAppendRequest, db: Session = Depends(get_db)):
    return ImportAppendResponse(created=service.import_append(db, body.todos))
