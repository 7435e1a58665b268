"""Request and response models for the HTTP API."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

OperationName = Literal["validate", "format", "minify", "sort-keys"]


class ProcessRequest(BaseModel):
    """Body of POST /api/process."""

    model_config = ConfigDict(populate_by_name=True)

    json_content: str = Field(alias="jsonContent")
    operation: OperationName
    indent_size: int = Field(default=2, ge=1, le=8, alias="indentSize")


class ValidateRequest(BaseModel):
    """Body of POST /api/validate."""

    model_config = ConfigDict(populate_by_name=True)

    json_content: str = Field(alias="jsonContent")


class FileUploadRequest(BaseModel):
    """Body of POST /api/upload."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    file_content: str = Field(alias="fileContent")
    file_size: int = Field(alias="fileSize")


class TreeRequest(BaseModel):
    """Body of POST /api/tree."""

    model_config = ConfigDict(populate_by_name=True)

    json_content: str = Field(alias="jsonContent")
    expand_depth: Optional[int] = Field(default=None, ge=0, alias="expandDepth")


class ProcessResponse(BaseModel):
    success: bool
    result: Optional[str]
    error: Optional[str]
    originalSize: int
    processedSize: Optional[int]
    operation: OperationName


class ValidationResponse(BaseModel):
    isValid: bool
    error: Optional[str]
    lineNumber: Optional[int]
    columnNumber: Optional[int]


class HistoryRecordResponse(BaseModel):
    id: int
    original_content: str
    processed_content: Optional[str]
    operation: str
    success: bool
    error_message: Optional[str]
    original_size: int
    processed_size: Optional[int]
    created_at: str


class TreeResponse(BaseModel):
    success: bool
    error: Optional[str]
    lines: List[str]
    root: Optional[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
