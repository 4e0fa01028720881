"""
Custom exceptions for the phrase store.
All store errors are raised synchronously to the caller and never retried.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the data store."""

    MISSING_PARAM = "MISSING_PARAM"
    PHRASE_NOT_FOUND = "PHRASE_NOT_FOUND"
    ADD_TRANSLATION_FAILED = "ADD_TRANSLATION_FAILED"
    INVALID_PHRASE = "INVALID_PHRASE"
    COMMIT_LOG_UPDATE_FAILED = "COMMIT_LOG_UPDATE_FAILED"


class DataStoreError(Exception):
    """Base exception for the phrase store."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class MissingParamError(DataStoreError):
    """Raised when a required translation parameter is absent."""

    def __init__(self, param: str, missing: Optional[list] = None):
        super().__init__(
            message=f"missing param: {param}",
            error_code=ErrorCode.MISSING_PARAM,
            details={"param": param, "missing": missing or [param]},
        )
        self.param = param


class PhraseNotFoundError(DataStoreError):
    """Raised when no phrase matches the resolved index key."""

    def __init__(self, repo_name: str, key: Optional[str], meta_key: Optional[str], commit_id: str):
        super().__init__(
            message=(
                f"couldn't find phrase identified by key '{key}' and meta key "
                f"'{meta_key}' in repo '{repo_name}' at commit '{commit_id}'"
            ),
            error_code=ErrorCode.PHRASE_NOT_FOUND,
            details={
                "repo_name": repo_name,
                "key": key,
                "meta_key": meta_key,
                "commit_id": commit_id,
            },
        )


class AddTranslationError(DataStoreError):
    """Raised when a translation row cannot be persisted."""

    def __init__(self, message: str = "Translation could not be saved", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.ADD_TRANSLATION_FAILED,
            details=details,
        )


class InvalidPhraseError(DataStoreError):
    """Raised when phrase attributes fail validation."""

    def __init__(self, errors: list):
        fields = ", ".join(str(e.get("field")) for e in errors)
        super().__init__(
            message=f"Invalid phrase: {fields}",
            error_code=ErrorCode.INVALID_PHRASE,
            details={"errors": errors},
        )
        self.errors = errors


class CommitLogUpdateError(DataStoreError):
    """Raised when a commit log entry cannot be written."""

    def __init__(self, commit_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Commit log for '{commit_id}' could not be saved",
            error_code=ErrorCode.COMMIT_LOG_UPDATE_FAILED,
            details=details or {"commit_id": commit_id},
        )
