"""Listing record as supplied by an upstream listings feed."""

from typing import Optional
from datetime import date
from pydantic import BaseModel, Field


class Listing(BaseModel):
    """Real estate listing mapped into attachment fields by the caller."""
    listing_id: Optional[str] = Field(None, description="Listing ID (text)")
    type: Optional[str] = Field(None, description="SALE or LEASE")
    status: Optional[str] = Field(None, description="Listing status")
    address_string: Optional[str] = Field(None, description="Property address")
    price: Optional[int] = Field(None, ge=0, description="Asking price in whole dollars")
    assignee: Optional[str] = Field(None, description="Assignee name")
    due_date: Optional[date] = Field(None, description="Due date")
    progress: Optional[float] = Field(None, ge=0.0, le=1.0, description="Progress (0.0-1.0)")
    listing_url: Optional[str] = Field(None, description="Public listing page")
    photo_url: Optional[str] = Field(None, description="Primary listing photo")
