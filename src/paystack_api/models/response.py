"""
Generic response envelope shared by every PayStack endpoint.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from paystack_api.models.base import PayStackModel


DataT = TypeVar("DataT")


class Meta(PayStackModel):
    """Pagination context returned alongside list responses."""

    # PayStack sends these either as numbers or numeric strings
    total: Optional[int] = Field(None, description="Total number of records")
    skipped: Optional[int] = Field(None, description="Records skipped before this page")
    per_page: Optional[int] = Field(None, alias="perPage", description="Maximum records per page")
    page: Optional[int] = Field(None, description="Current page")
    page_count: Optional[int] = Field(None, alias="pageCount", description="Number of pages available")
    next: Optional[str] = Field(None, description="Cursor for the next page")
    previous: Optional[str] = Field(None, description="Cursor for the previous page")


class PayStackResponse(BaseModel, Generic[DataT]):
    """
    The ``{status, message, data}`` envelope PayStack wraps every reply in.

    ``data`` is ``None`` when the API did not send it.
    """
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    status: bool = Field(..., description="Whether the request was successful")
    message: str = Field(..., description="Summary of the response")
    data: Optional[DataT] = Field(None, description="Resource payload")
    meta: Optional[Meta] = Field(None, description="Pagination context")
    response_type: Optional[str] = Field(None, alias="type", description="Error type on failures")
    code: Optional[str] = Field(None, description="Error code on failures")
