from pydantic import BaseModel

class LoginOut(BaseModel):
    success: bool = True
