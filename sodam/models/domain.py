"""
Domain models shared by services and handlers
"""
from pydantic import BaseModel, Field


class CodeEntry(BaseModel):
    """One member of a code book"""
    code: str = Field(..., description="Enumeration member name")
    label: str = Field(..., description="Display label or role name")
