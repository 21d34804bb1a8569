from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CountResponse(BaseModel):
    len: int


class CodeResponse(BaseModel):
    code: str


class UploadResponse(BaseModel):
    url: str


class TagResponse(BaseModel):
    """An allergy or ingredient as nested inside users and dishes."""
    id: int
    name: str

    class Config:
        from_attributes = True
