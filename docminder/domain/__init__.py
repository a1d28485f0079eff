"""Core domain models for docminder.

This module provides the value types produced by document extraction:
- VendorDetails, ProductDetails, DateDetails: extracted fields
- MonetaryAmount, SerialNumber: list-valued matches
- DocumentClassification, ReminderSuggestion, DocumentExtraction: results
- ReminderDraft: normalized reminder handed to storage

Usage:
    from docminder.domain import DocumentExtraction, ReminderSuggestion
"""

from docminder.domain.document import (
    DateDetails,
    DocumentClassification,
    DocumentExtraction,
    DocumentType,
    MonetaryAmount,
    Priority,
    ProductDetails,
    ReminderSuggestion,
    ReminderType,
    SerialNumber,
    VendorDetails,
)
from docminder.domain.reminder import ReminderDraft

__all__ = [
    "DateDetails",
    "DocumentClassification",
    "DocumentExtraction",
    "DocumentType",
    "MonetaryAmount",
    "Priority",
    "ProductDetails",
    "ReminderDraft",
    "ReminderSuggestion",
    "ReminderType",
    "SerialNumber",
    "VendorDetails",
]
