# upc_checker/policy.py

from __future__ import annotations

import yaml
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .models import DEFAULT_LENGTHS, coerce_standard
from .validators import PARTITIONS, PARTITION_POSITION


@dataclass
class StandardPolicy:
    id: str
    lengths: Tuple[int, ...]


def _default_standards() -> Dict[str, StandardPolicy]:
    return {
        std_id: StandardPolicy(id=std_id, lengths=lengths)
        for std_id, lengths in DEFAULT_LENGTHS.items()
    }


@dataclass
class CheckPolicy:
    partition: str = PARTITION_POSITION
    standards: Dict[str, StandardPolicy] = field(default_factory=_default_standards)

    def __post_init__(self):
        if self.partition not in PARTITIONS:
            raise ValueError(
                f"Unknown partition rule {self.partition!r}, "
                f"expected one of {', '.join(PARTITIONS)}"
            )

    def lengths_for(self, standard) -> Tuple[int, ...]:
        std_id = coerce_standard(standard).value
        sp = self.standards.get(std_id)
        return sp.lengths if sp else DEFAULT_LENGTHS[std_id]

    def partition_rule(self) -> str:
        return self.partition


def default_policy() -> CheckPolicy:
    return CheckPolicy()


def load_policy(path: str) -> CheckPolicy:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    standards = _default_standards()
    for std_id, props in (cfg.get("standards") or {}).items():
        std_id = coerce_standard(std_id).value
        props = props or {}
        lengths = props.get("lengths", standards[std_id].lengths)
        if not isinstance(lengths, (list, tuple)) or not lengths:
            raise ValueError(
                f"{std_id} lengths must be a non-empty list, got {lengths!r}"
            )
        standards[std_id] = StandardPolicy(
            id=std_id,
            lengths=tuple(int(n) for n in lengths),
        )

    checksum_cfg = cfg.get("checksum", {}) or {}

    return CheckPolicy(
        partition=checksum_cfg.get("partition", PARTITION_POSITION),
        standards=standards,
    )
