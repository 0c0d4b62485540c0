# core/errors.py

from typing import List

from fastapi import HTTPException


class CatalogConfigurationError(RuntimeError):
    """
    Raised when the role / permission / building / navigation catalogs
    are inconsistent. This is a deployment defect and blocks startup.
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(
            f"Invalid access catalogs: {'; '.join(self.problems)}"
        )


def forbidden(detail: str) -> HTTPException:
    """
    Build a 403 HTTPException.
    Returns (doesn't raise) so caller can customize or re-raise.
    """
    return HTTPException(status_code=403, detail=detail)
