from pydantic import BaseModel, EmailStr
from typing import Optional
from .common import ORMModel

class UserCreate(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    gender: str

class UserUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    gender: Optional[str] = None

class UserOut(ORMModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    gender: str
