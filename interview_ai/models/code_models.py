from pydantic import BaseModel

class CodeRunRequest(BaseModel):
    code: str
    language: str = "javascript"

class CodeRunResult(BaseModel):
    language: str
    output: str
    simulated: bool
