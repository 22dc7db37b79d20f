import os
import logging
import logging.config
from typing import Optional

import yaml

from upc_checker.api.schemas import CheckRequest, CheckResponse
from upc_checker.models import UPCCodeError
from upc_checker.pipeline import parse_upc
from upc_checker.policy import CheckPolicy, default_policy
from upc_checker.validators import expected_check_digit


def setup_logging(cfg_path: str = os.path.join("configs", "logging.yaml")) -> None:
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except Exception as e:
            print(f"[logging] Failed to load {cfg_path}: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


logger = logging.getLogger("upc_checker.api")


def check(req: CheckRequest, policy: Optional[CheckPolicy] = None) -> CheckResponse:
    logger.info("Received %s check request", req.standard)
    policy = policy or default_policy()
    try:
        code = parse_upc(req.standard, req.payload, req.check_digit, policy)
    except UPCCodeError as e:
        logger.warning("Rejected %s request: %s", req.standard, e)
        return CheckResponse(standard=req.standard, error=type(e).__name__)

    expected = expected_check_digit(code.payload, policy.partition_rule())
    return CheckResponse(
        standard=req.standard,
        valid=code.check_digit == expected,
        expected_check_digit=expected,
    )
