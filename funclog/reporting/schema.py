from __future__ import annotations
from typing import List, Literal
from pydantic import BaseModel, Field

class PositionJSON(BaseModel):
    line: int = Field(..., ge=1, description="1-based source line")
    column: int = Field(..., ge=1, description="1-based byte column")

class TraceJSON(BaseModel):
    before_line: int = Field(..., ge=1, description="Original line the trace is inserted before")
    column: int = Field(..., ge=1, description="Indentation column of the trace")
    text: str = Field(..., description="Go statement inserted")

class FunctionJSON(BaseModel):
    name: str
    kind: Literal["function", "method"] = "function"
    receiver: str = ""
    params: List[str] = Field(default_factory=list, description="Parameter names, '' for unnamed")
    returns: List[str] = Field(default_factory=list, description="Result names, '' for unnamed")
    entry: PositionJSON
    exits: List[PositionJSON] = Field(..., min_length=1)

class PlanJSON(BaseModel):
    source: str = Field(..., description="Instrumented file")
    destination: str = Field(..., description="File the instrumented copy goes to")
    line_numbers: Literal["compensated", "original"]
    functions: List[FunctionJSON]
    traces: List[TraceJSON]
