"""
User Domain Model (lightweight, session context only)
"""
from pydantic import BaseModel, Field, ConfigDict


class User(BaseModel):
    """Signed-in storefront customer"""

    id: int = Field(..., description="User ID")
    mobile: str = Field(..., description="Mobile number")
    name: str = Field(..., description="Display name")

    model_config = ConfigDict(from_attributes=True)
