"""Tool descriptor models advertised to chat backends."""

from typing import Any, Literal

from pydantic import BaseModel


class FunctionSpec(BaseModel):
    """Function part of a tool descriptor."""

    name: str
    description: str
    parameters: dict[str, Any]

    class Config:
        frozen = True


class ToolDescriptor(BaseModel):
    """Advisory description of a callable tool, in JSON-schema shape."""

    type: Literal["function"] = "function"
    function: FunctionSpec

    class Config:
        frozen = True

    @property
    def name(self) -> str:
        return self.function.name
