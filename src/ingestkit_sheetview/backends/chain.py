"""Decoder fallback chain.

Tries each decoder in order and returns the first successful result.  Each
fallback is logged as ``W_DECODER_FALLBACK`` and travels with the call's
own outcome: on ``DecodedSheet.warnings`` when a later decoder succeeds, on
``DecodeError.warnings`` when every decoder fails.  The chain keeps no
per-call state, so one instance can serve concurrent decodes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ingestkit_sheetview.errors import DecodeError, ErrorCode, IngestError
from ingestkit_sheetview.models import DecodedSheet
from ingestkit_sheetview.protocols import SheetDecoder

logger = logging.getLogger("ingestkit_sheetview")


class DecoderChain:
    """Ordered list of decoders with per-file fallback."""

    name = "chain"

    def __init__(self, decoders: Sequence[SheetDecoder]) -> None:
        if not decoders:
            raise ValueError("DecoderChain requires at least one decoder.")
        self._decoders = list(decoders)

    def decode(self, content: bytes) -> DecodedSheet:
        warnings: list[IngestError] = []
        last_error: DecodeError | None = None
        for position, decoder in enumerate(self._decoders):
            try:
                sheet = decoder.decode(content)
            except DecodeError as exc:
                last_error = exc
                warnings.extend(exc.warnings)
                if position + 1 < len(self._decoders):
                    label = getattr(decoder, "name", type(decoder).__name__)
                    logger.warning(
                        "ingestkit_sheetview | decoder=%s failed (%s), falling back",
                        label,
                        exc.code.value,
                    )
                    warnings.append(
                        IngestError(
                            code=ErrorCode.W_DECODER_FALLBACK,
                            message=f"Decoder {label} failed: {exc.message}",
                            stage="decode",
                            recoverable=True,
                        )
                    )
                continue
            return sheet.model_copy(update={"warnings": warnings + sheet.warnings})
        assert last_error is not None
        raise DecodeError(
            warnings=warnings, **last_error.error.model_dump()
        ) from last_error
