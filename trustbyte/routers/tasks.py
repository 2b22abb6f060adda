import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Header
from sqlalchemy.orm import Session

from trustbyte.core.database import get_db
from trustbyte.core.security import extract_token, verify_token
from trustbyte.models.user import User
from trustbyte.schemas.task import (
    SuccessResponse,
    TaskCreate,
    TaskDeleteRequest,
    TaskEnvelope,
    TaskListRequest,
    TaskListResponse,
    TaskUpdate,
)
from trustbyte.services import task_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tasks"])


def get_current_user(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(None)
) -> User:
    token = extract_token(authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")

    payload = verify_token(token)
    if not payload or not payload.get("email"):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = db.query(User).filter(User.email == payload["email"]).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return user


def _check_owner(requested: Optional[str], current_user: User) -> None:
    # tasks are scoped by the token, a body naming someone else is refused
    if requested and requested.lower() != current_user.email:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not allowed")


@router.post("/alltasks", response_model=TaskListResponse)
def all_tasks(
    request: TaskListRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _check_owner(request.user, current_user)
    tasks = task_service.list_tasks(db, current_user.email)
    return {"success": True, "tasks": tasks}


@router.post("/addtask", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def add_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _check_owner(task_data.user, current_user)
    task = task_service.create_task(db, current_user.email, task_data)
    return {"success": True, "task": task}


@router.post("/updatetask", response_model=TaskEnvelope)
def update_task(task_data: TaskUpdate, db: Session = Depends(get_db)):
    # no token required here, the frontend posts the bare task
    task = task_service.update_task(db, task_data)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return {"success": True, "task": task}


@router.post("/deletetask", response_model=SuccessResponse)
def delete_task(
    request: TaskDeleteRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if not task_service.delete_task(db, current_user.email, request.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return {"success": True, "message": "Task deleted"}
