from sqlmodel import Field, SQLModel

# ==========================================
# SQLModel (Database Entity + Base Pydantic)
# ==========================================
class Operator(SQLModel, table=True):
    __tablename__ = "operators"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    hashed_password: str = Field(nullable=False)
    is_active: bool = Field(default=True)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on login
class LoginRequest(SQLModel):
    username: str
    password: str
