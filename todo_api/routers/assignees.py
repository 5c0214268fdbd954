from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todo_api.schemas.assignee import AssigneeCreate, AssigneeUpdate, AssigneeOut
from todo_api.services import assignees as service
from todo_api.database import get_db
from todo_api.utils.auth import get_current_user

router = APIRouter(tags=["assignees"], dependencies=[Depends(get_current_user)])

@router.get("/allAssignees", response_model=List[AssigneeOut])
def all_assignees(db: Session = Depends(get_db)):
    return service.list_assignees(db)

@router.post("/createAssignee", response_model=AssigneeOut)
def create_assignee(body: AssigneeCreate, db: Session = Depends(get_db)):
    return service.create_assignee(db, body)

@router.put("/editAssignee/{assignee_id}", response_model=AssigneeOut)
def edit_assignee(assignee_id: int, body: AssigneeUpdate, db: Session = Depends(get_db)):
    return service.update_assignee(db, assignee_id, body)

@router.delete("/deleteAssignee/{assignee_id}", response_model=AssigneeOut)
def delete_assignee(assignee_id: int, db: Session = Depends(get_db)):
    return service.delete_assignee(db, assignee_id)
