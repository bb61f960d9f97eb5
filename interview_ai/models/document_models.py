from pydantic import BaseModel

class ParsedCVResponse(BaseModel):
    success: bool = True
    fileName: str
    content: str
