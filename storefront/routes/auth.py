# storefront/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from storefront.database import get_db
from storefront.models.users import User
from storefront.schemas import user as schemas
from storefront.utils.audit import client_ip, write_log
from storefront.utils.hashing import get_password_hash, verify_password
from storefront.utils.tokenJWT import create_access_token, get_current_user

router = APIRouter(tags=["Auth"])


# Register a new identity
@router.post("/register", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: schemas.UserCreate, request: Request, db: Session = Depends(get_db)):
    normalized_email = payload.email.strip().lower()

    existing = db.query(User).filter(func.lower(User.email) == normalized_email).first()
    if existing:
        write_log(
            db,
            user_id=None,
            action="REGISTER",
            resource="auth",
            status="FAIL",
            ip=client_ip(request),
            meta={"email": normalized_email, "reason": "Email exists"},
        )
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        email=normalized_email,
        password_hash=get_password_hash(payload.password),
        full_name=payload.full_name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    out = schemas.UserResponse.model_validate(user)

    write_log(db, user_id=out.id, action="REGISTER", resource="auth",
              status="SUCCESS", ip=client_ip(request), meta={"email": out.email})
    return out


# Authenticate and issue a bearer token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.UserLogin, request: Request, db: Session = Depends(get_db)):
    user = db.query(User).filter(func.lower(User.email) == payload.email.strip().lower()).first()

    if not user or not verify_password(payload.password, user.password_hash):
        write_log(db, user_id=(user.id if user else None), action="LOGIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": user.id, "email": user.email})

    write_log(db, user_id=user.id, action="LOGIN", resource="auth",
              status="SUCCESS", ip=client_ip(request), meta={"email": user.email})
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
