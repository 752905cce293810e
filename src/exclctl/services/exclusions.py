"""ExclusionService — validate, dump, and expand configured exclusion rules.

Every operation parses the full rule set first, so a syntax error in
any line fails the operation before expansion starts.  Expansion is all
or nothing: one malformed block or date discards every interval.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

import structlog

from exclctl.domain.errors import (
    ExclusionSyntaxError,
    MalformedBlockError,
    MalformedDateError,
)
from exclctl.domain.exclusion import ExclusionRule
from exclctl.domain.interval import Interval
from exclctl.services.result import ServiceResult

if TYPE_CHECKING:
    from exclctl.config.settings import ExclSettings

logger = structlog.get_logger(__name__)


class ExclusionService:
    """Operations over an ordered set of exclusion rule lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = [line for line in lines if line.strip()]

    @classmethod
    def from_settings(
        cls,
        settings: ExclSettings,
        *,
        extra: Iterable[str] = (),
        include_config: bool = True,
    ) -> ExclusionService:
        """Build a service from configured rules plus *extra* lines."""
        lines = settings.rule_lines() if include_config else []
        return cls([*lines, *extra])

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self) -> ServiceResult:
        """Validate the syntax of every rule."""
        op = "check"
        started = time.perf_counter()
        try:
            rules = self._parse_all()
        except ExclusionSyntaxError as exc:
            return _syntax_failure(op, exc)

        warnings: list[str] = []
        if not rules:
            warnings.append("No exclusion rules configured")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(rules),
                "additive_count": sum(1 for r in rules if r.additive),
                "rules": [
                    {"rule": r.serialize(), "additive": r.additive, "kind": str(r.kind)}
                    for r in rules
                ],
            },
            warnings=warnings,
            meta=_timing(started),
        )

    def show(self) -> ServiceResult:
        """Render the diagnostic dump of every rule."""
        op = "show"
        try:
            rules = self._parse_all()
        except ExclusionSyntaxError as exc:
            return _syntax_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(rules), "dump": "".join(r.dump() for r in rules)},
        )

    def expand(self, start: datetime, end: datetime) -> ServiceResult:
        """Expand every rule over ``[start, end)``.

        Items keep rule order, then the order each rule produced them.
        """
        op = "expand"
        started = time.perf_counter()
        try:
            bound = Interval(start, end)
        except ValueError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_RANGE",
                str(exc),
                start=start.isoformat(),
                end=end.isoformat(),
            )

        try:
            rules = self._parse_all()
        except ExclusionSyntaxError as exc:
            return _syntax_failure(op, exc)

        items: list[dict[str, Any]] = []
        for rule in rules:
            try:
                intervals = rule.ranges(bound)
            except MalformedBlockError as exc:
                logger.debug("block_decode_failed", op=op, rule=rule.serialize(), block=exc.block)
                return ServiceResult.failure(
                    op, "MALFORMED_BLOCK", str(exc), block=exc.block, rule=rule.serialize()
                )
            except MalformedDateError as exc:
                logger.debug("date_decode_failed", op=op, rule=rule.serialize(), date=exc.text)
                return ServiceResult.failure(
                    op, "MALFORMED_DATE", str(exc), date=exc.text, rule=rule.serialize()
                )
            logger.debug(
                "rule_expanded", op=op, rule=rule.serialize(), intervals=len(intervals)
            )
            items.extend(
                {"rule": rule.serialize(), "additive": rule.additive, **interval.to_dict()}
                for interval in intervals
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": start.isoformat(),
                "end": end.isoformat(),
                "count": len(items),
                "items": items,
            },
            meta=_timing(started),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _parse_all(self) -> list[ExclusionRule]:
        rules = [ExclusionRule.parse(line) for line in self._lines]
        logger.debug("rules_parsed", count=len(rules))
        return rules


def _syntax_failure(op: str, exc: ExclusionSyntaxError) -> ServiceResult:
    return ServiceResult.failure(op, "SYNTAX_ERROR", str(exc), line=exc.line)


def _timing(started: float) -> dict[str, Any]:
    return {"duration_ms": round((time.perf_counter() - started) * 1000, 2)}
