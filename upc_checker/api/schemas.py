# upc_checker/api/schemas.py

from typing import List, Literal, Optional
from pydantic import BaseModel, StrictInt


class CheckRequest(BaseModel):
    standard: Literal["UPC-A", "UPC-E"] = "UPC-A"
    # Strict so "7", 7.0 and True are refused instead of coerced to digits.
    payload: List[StrictInt]
    check_digit: StrictInt


class CheckResponse(BaseModel):
    standard: str
    valid: Optional[bool] = None
    expected_check_digit: Optional[int] = None
    error: Optional[str] = None  # PayloadDigitOutOfRange / CheckDigitOutOfRange
