"""Custom exceptions for htmlquill."""

from typing import Optional


class HtmlQuillError(Exception):
    """Base exception for htmlquill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(HtmlQuillError):
    """Exception raised when conversion input cannot be read."""

    pass


class StyleError(HtmlQuillError):
    """Exception raised when a style sheet cannot be loaded."""

    pass

