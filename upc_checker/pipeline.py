# upc_checker/pipeline.py

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .models import UPCCode
from .policy import CheckPolicy, default_policy
from .validators import expected_check_digit, upc_check_ok

logger = logging.getLogger(__name__)


def parse_upc(
    standard,
    payload: Sequence[int],
    check_digit: int,
    policy: Optional[CheckPolicy] = None,
) -> UPCCode:
    """Build a UPCCode using the payload lengths the policy allows."""
    policy = policy or default_policy()
    return UPCCode(
        upc=standard,
        payload=tuple(payload),
        check_digit=check_digit,
        lengths=policy.lengths_for(standard),
    )


def check_upc(code: UPCCode, policy: Optional[CheckPolicy] = None) -> bool:
    """Return True if code.check_digit matches its payload."""
    policy = policy or default_policy()
    ok = upc_check_ok(code.payload, code.check_digit, policy.partition_rule())
    logger.debug(
        "%s payload=%s check_digit=%d ok=%s",
        code.upc.value,
        "".join(str(d) for d in code.payload),
        code.check_digit,
        ok,
    )
    return ok


def validate(
    standard,
    payload: Sequence[int],
    check_digit: int,
    policy: Optional[CheckPolicy] = None,
) -> bool:
    """
    Validate a UPC-A or UPC-E check digit.

    standard:
      - "UPC-A" (11 or 12 payload digits) or "UPC-E" (7 or 8), or the
        matching UPCCodeStandard member.

    Raises PayloadDigitOutOfRange for the first payload digit outside 0-9,
    otherwise CheckDigitOutOfRange if the check digit is outside 0-9.
    """
    policy = policy or default_policy()
    code = parse_upc(standard, payload, check_digit, policy)
    return check_upc(code, policy)


def expected_for(
    standard, payload: Sequence[int], policy: Optional[CheckPolicy] = None
) -> int:
    policy = policy or default_policy()
    # 0 stands in for the check digit so only the payload is checked.
    code = parse_upc(standard, payload, 0, policy)
    return expected_check_digit(code.payload, policy.partition_rule())
