from datetime import datetime
from pydantic import BaseModel, Field

# ---------- Inputs ----------

class LoginIn(BaseModel):
    key: str = Field(examples=["my-shared-secret"])


# ---------- Outputs ----------

class TokenOut(BaseModel):
    token: str

class ClaimsOut(BaseModel):
    subject: str
    issued_at: datetime
    expires_at: datetime
