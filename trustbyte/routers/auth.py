import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from trustbyte.core.database import get_db
from trustbyte.core.security import create_access_token
from trustbyte.models.user import User
from trustbyte.schemas.task import SuccessResponse
from trustbyte.schemas.user import RegisterRequest, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# same message for unknown email and bad password, no account enumeration
INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/register", response_model=SuccessResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Create a new user"""

    if not user_data.name or not user_data.email or not user_data.password:
        raise HTTPException(status_code=400, detail="Name, email, and password are required")

    email = user_data.email.lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise HTTPException(status_code=400, detail="User already exists")

    new_user = User(name=user_data.name, email=email)
    new_user.set_password(user_data.password)

    db.add(new_user)
    db.commit()
    logger.info("Registered user %s", email)

    return {"success": True, "message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Log in and receive a token"""

    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    user = db.query(User).filter(User.email == credentials.email.strip().lower()).first()
    if not user:
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    if not user.verify_password(credentials.password):
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    token = create_access_token(user.id, user.email, user.name)

    return {
        "success": True,
        "message": "User logged in successfully",
        "jwtToken": token,
        "email": user.email,
        "name": user.name,
    }
