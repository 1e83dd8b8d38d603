"""Rules that rewrite the slot, source, destination and call type of DMR data."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from .defines import FLCO

logger = logging.getLogger(__name__)

_UINT32 = 0xFFFFFFFF


class DMRFrame(Protocol):
    """The parts of a DMR frame that rewrite rules read and change."""

    flco: FLCO
    src_id: int
    dst_id: int
    slot_no: int


class ProcessResult(Enum):
    """Outcome of applying a rule to a frame."""

    MATCHED = "matched"
    UNMATCHED = "unmatched"


def _check_slot(slot: int, what: str) -> None:
    if slot not in (1, 2):
        raise ValueError(f"{what} must be 1 or 2, not {slot}")


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"range size must be at least 1, not {size}")


def _span(start: int, end: int, prefix: str = "", end_prefix: str | None = None) -> str:
    if start == end:
        return f"{prefix}{start}"
    return f"{prefix}{start}-{prefix if end_prefix is None else end_prefix}{end}"


class Rewrite:
    """Base of all rewrite rules."""

    def __init__(self, on_rewrite: Callable[[Any], None] | None = None) -> None:
        self._on_rewrite = on_rewrite

    def process(self, data: DMRFrame, trace: bool = False) -> ProcessResult:
        """Apply the rule to the frame, changing it in place when it matches."""
        raise NotImplementedError

    def process_message(self, data: DMRFrame) -> None:
        """Hand a frame whose addressing was changed to the rewrite callback."""
        if self._on_rewrite is not None:
            self._on_rewrite(data)


class RewriteSrc(Rewrite):
    """Turns private calls from a range of source ids into calls to a talk group."""

    def __init__(
        self,
        name: str,
        from_slot: int,
        from_id: int,
        to_slot: int,
        to_tg: int,
        size: int = 1,
        on_rewrite: Callable[[Any], None] | None = None,
    ) -> None:
        super().__init__(on_rewrite)
        _check_slot(from_slot, "from_slot")
        _check_slot(to_slot, "to_slot")
        _check_size(size)
        self.name = name
        self.from_slot = from_slot
        self.from_id_start = from_id
        self.from_id_end = from_id + size - 1
        self.to_slot = to_slot
        self.to_tg = to_tg

    def process(self, data: DMRFrame, trace: bool = False) -> ProcessResult:
        if (
            data.flco != FLCO.USER_USER
            or data.slot_no != self.from_slot
            or not self.from_id_start <= data.src_id <= self.from_id_end
        ):
            if trace:
                logger.debug(
                    "Rule Trace,\tRewriteSrc from %s Slot=%u Src=%u-%u: not matched",
                    self.name, self.from_slot, self.from_id_start, self.from_id_end,
                )
            return ProcessResult.UNMATCHED

        if self.from_slot != self.to_slot:
            data.slot_no = self.to_slot
        data.dst_id = self.to_tg
        data.flco = FLCO.GROUP

        self.process_message(data)

        if trace:
            logger.debug(
                "Rule Trace,\tRewriteSrc from %s Slot=%u Src=%u-%u: matched",
                self.name, self.from_slot, self.from_id_start, self.from_id_end,
            )
            logger.debug(
                "Rule Trace,\tRewriteSrc to %s Slot=%u Dst=TG%u",
                self.name, self.to_slot, self.to_tg,
            )
        return ProcessResult.MATCHED


class RewriteSrcId(Rewrite):
    """Replaces one source id with another."""

    def __init__(
        self,
        name: str,
        from_id: int,
        to_id: int,
        on_rewrite: Callable[[Any], None] | None = None,
    ) -> None:
        super().__init__(on_rewrite)
        self.name = name
        self.from_id = from_id
        self.to_id = to_id

    def process(self, data: DMRFrame, trace: bool = False) -> ProcessResult:
        if data.src_id != self.from_id:
            if trace:
                logger.debug(
                    "Rule Trace,\tRewriteSrcId from %s Src=%u: not matched",
                    self.name, self.from_id,
                )
            return ProcessResult.UNMATCHED

        data.src_id = self.to_id

        self.process_message(data)

        if trace:
            logger.debug(
                "Rule Trace,\tRewriteSrcId from %s Src=%u: matched", self.name, self.from_id
            )
            logger.debug("Rule Trace,\tRewriteSrcId to %s Src=%u", self.name, self.to_id)
        return ProcessResult.MATCHED


class RewriteTG(Rewrite):
    """Maps a range of talk groups on one slot onto a range on another."""

    def __init__(
        self,
        name: str,
        from_slot: int,
        from_tg: int,
        to_slot: int,
        to_tg: int,
        size: int = 1,
        on_rewrite: Callable[[Any], None] | None = None,
    ) -> None:
        super().__init__(on_rewrite)
        _check_slot(from_slot, "from_slot")
        _check_slot(to_slot, "to_slot")
        _check_size(size)
        self.name = name
        self.from_slot = from_slot
        self.from_tg_start = from_tg
        self.from_tg_end = from_tg + size - 1
        self.to_slot = to_slot
        self.to_tg_start = to_tg
        self.to_tg_end = to_tg + size - 1

    def _from_text(self) -> str:
        return _span(self.from_tg_start, self.from_tg_end, "TG")

    def process(self, data: DMRFrame, trace: bool = False) -> ProcessResult:
        dst_id = data.dst_id
        if (
            data.flco != FLCO.GROUP
            or data.slot_no != self.from_slot
            or not self.from_tg_start <= dst_id <= self.from_tg_end
        ):
            if trace:
                logger.debug(
                    "Rule Trace,\tRewriteTG from %s Slot=%u Dst=%s: not matched",
                    self.name, self.from_slot, self._from_text(),
                )
            return ProcessResult.UNMATCHED

        if self.from_slot != self.to_slot:
            data.slot_no = self.to_slot

        if self.from_tg_start != self.to_tg_start:
            data.dst_id = (dst_id + self.to_tg_start - self.from_tg_start) & _UINT32
            self.process_message(data)

        if trace:
            logger.debug(
                "Rule Trace,\tRewriteTG from %s Slot=%u Dst=%s: matched",
                self.name, self.from_slot, self._from_text(),
            )
            logger.debug(
                "Rule Trace,\tRewriteTG to %s Slot=%u Dst=%s",
                self.name, self.to_slot, _span(self.to_tg_start, self.to_tg_end, "TG"),
            )
        return ProcessResult.MATCHED


class RewriteType(Rewrite):
    """Turns group calls to a range of talk groups into private calls."""

    def __init__(
        self,
        name: str,
        from_slot: int,
        from_tg: int,
        to_slot: int,
        to_id: int,
        size: int = 1,
        on_rewrite: Callable[[Any], None] | None = None,
    ) -> None:
        super().__init__(on_rewrite)
        _check_slot(from_slot, "from_slot")
        _check_slot(to_slot, "to_slot")
        _check_size(size)
        self.name = name
        self.from_slot = from_slot
        self.from_tg_start = from_tg
        self.from_tg_end = from_tg + size - 1
        self.to_slot = to_slot
        self.to_id_start = to_id
        self.to_id_end = to_id + size - 1

    def _from_text(self) -> str:
        return _span(self.from_tg_start, self.from_tg_end, "TG", "")

    def process(self, data: DMRFrame, trace: bool = False) -> ProcessResult:
        dst_id = data.dst_id
        if (
            data.flco != FLCO.GROUP
            or data.slot_no != self.from_slot
            or not self.from_tg_start <= dst_id <= self.from_tg_end
        ):
            if trace:
                logger.debug(
                    'Rule Trace,\tRewriteType from "%s" Slot=%u Dst=%s: not matched',
                    self.name, self.from_slot, self._from_text(),
                )
            return ProcessResult.UNMATCHED

        if self.from_slot != self.to_slot:
            data.slot_no = self.to_slot
        if self.from_tg_start != self.to_id_start:
            data.dst_id = (dst_id + self.to_id_start - self.from_tg_start) & _UINT32
        data.flco = FLCO.USER_USER

        self.process_message(data)

        if trace:
            logger.debug(
                'Rule Trace,\tRewriteType from "%s" Slot=%u Dst=%s: matched',
                self.name, self.from_slot, self._from_text(),
            )
            logger.debug(
                'Rule Trace,\tRewriteType  to  "%s" Slot=%u Dst=%s: matched',
                self.name, self.to_slot, _span(self.to_id_start, self.to_id_end),
            )
        return ProcessResult.MATCHED