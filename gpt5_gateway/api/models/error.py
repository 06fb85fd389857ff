from pydantic import BaseModel


class ErrorDetail(BaseModel):
    type: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    ok: bool = False
    error: ErrorDetail

    @classmethod
    def build(cls, type: str, message: str) -> "ErrorResponse":
        return cls(error=ErrorDetail(type=type, message=message))
