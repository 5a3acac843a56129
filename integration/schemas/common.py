from pydantic import BaseModel, ConfigDict


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class OperationResult(BaseModel):
    success: bool
    error: str | None = None
