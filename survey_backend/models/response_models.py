from pydantic import BaseModel


class SaveResult(BaseModel):
    success: bool = True


class ErrorBody(BaseModel):
    error: str
