from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from classbook.api.deps import db, current_user, Principal, MAX_ID
from classbook.schemas.user import UserUpdate, UserOut
from classbook.schemas.class_client import ClassClientOut
from classbook.core.security import hash_password
from classbook.services import users, class_clients

router = APIRouter(prefix="/api/user", tags=["user"])

@router.put("", response_model=UserOut)
@router.put("/", response_model=UserOut, include_in_schema=False)
def update_user(body: UserUpdate, s: Session = Depends(db), me: Principal = Depends(current_user)):
    patch = body.changes()
    if "password" in patch:
        patch["password_hash"] = hash_password(patch.pop("password"))
    return users.update(s, me.id, patch)

@router.delete("", response_model=int)
@router.delete("/", response_model=int, include_in_schema=False)
def delete_user(s: Session = Depends(db), me: Principal = Depends(current_user)):
    return users.remove(s, me.id)

@router.get("/classes", response_model=list[ClassClientOut])
def retrieve_classes(s: Session = Depends(db), me: Principal = Depends(current_user)):
    return class_clients.find_by(s, client_id=me.id)

@router.post("/classes/{class_id}", response_model=ClassClientOut)
def add_user_to_class(class_id: int = Path(ge=1, le=MAX_ID), s: Session = Depends(db), me: Principal = Depends(current_user)):
    return class_clients.add(s, class_id=class_id, client_id=me.id)

@router.delete("/classes/{class_id}", response_model=int)
def remove_user_from_class(class_id: int = Path(ge=1, le=MAX_ID), s: Session = Depends(db), me: Principal = Depends(current_user)):
    return class_clients.remove(s, class_id=class_id, client_id=me.id)
