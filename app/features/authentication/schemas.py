from pydantic import BaseModel, Field

from app.features.users.schemas import Email, LoginPassword, Password, Username, UserOut

# ---------- Inputs ----------

class RegisterIn(BaseModel):
    username: Username = Field(..., examples=["alice"])
    email: Email = Field(..., examples=["alice@example.com"])
    password: Password = Field(..., examples=["s3cret-pass"])

class LoginIn(BaseModel):
    email: Email = Field(..., examples=["alice@example.com"])
    password: LoginPassword = Field(..., examples=["s3cret-pass"])


# ---------- Outputs ----------

class RegisterOut(BaseModel):
    message: str = "User registered successfully"
    user: UserOut

class LoginOut(BaseModel):
    message: str = "Login successful"
    user: UserOut
    token: str
    token_type: str = "bearer"
    expires_in: int  # secondes (durée de vie du token)
