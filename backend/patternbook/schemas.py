from pydantic import BaseModel
from typing import Optional


class BuildRequest(BaseModel):
    output_path: str
    catalog_path: Optional[str] = None  # None -> built-in catalog
    output_format: Optional[str] = None  # markdown | html | json; inferred from suffix when unset
    title: Optional[str] = None
    strict: bool = False  # Treat warnings as errors


class BuildResponse(BaseModel):
    status: str
    output_path: str
    output_format: str
    entry_count: int
    bytes_written: int
    source: str
