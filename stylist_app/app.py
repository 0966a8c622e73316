"""Application facade wiring validation, outfit generation and history."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from logic.outfit_builder import build_outfits
from logic.validation import GenerateOutfitsRequest, GenerateOutfitsResponse, validation_failure
from memory.history_log import GenerationHistory, GenerationSummary
from models.clothing_item import ClothingItem, from_raw_metadata
from models.sample_wardrobe import build_sample_wardrobe
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging
from tools.observability import instrument_operation

NO_OUTFITS_MESSAGE = (
    "No suitable outfits found for this occasion. Try adding more items or selecting a different occasion."
)
EMPTY_CATALOG_MESSAGE = "No wardrobe items found. Please add clothing items first."
MISSING_OCCASION_MESSAGE = "Occasion is required"


def _payload_validation_failure(exc: ValidationError) -> Dict[str, Any]:
    return validation_failure("Outfit request failed validation", exc)


def _response(status: str, **fields: Any) -> Dict[str, Any]:
    return GenerateOutfitsResponse(status=status, **fields).model_dump()


class OutfitStylistApp:
    """Runs outfit generation over a caller-supplied catalog snapshot."""

    def __init__(self, config: StylistConfig | None = None, history: GenerationHistory | None = None) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.history = history or GenerationHistory(limit=self.config.history_limit)

    @instrument_operation("generate")
    def generate(
        self,
        user_id: str,
        items: Iterable[ClothingItem],
        occasion: str,
        max_outfits: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Generate ranked outfits and record an opaque summary when any are found."""

        catalog = list(items)
        if not occasion or not occasion.strip():
            return _response("error", message=MISSING_OCCASION_MESSAGE)
        if not catalog:
            return _response("error", message=EMPTY_CATALOG_MESSAGE)

        limit = self.config.default_max_outfits if max_outfits is None else max_outfits
        result = build_outfits(catalog, occasion, limit)
        outfits = [outfit.to_dict() for outfit in result.outfits]
        if not outfits:
            return _response("ok", message=NO_OUTFITS_MESSAGE, diagnostics=result.diagnostics)

        summary = self.history.record(user_id, occasion, len(outfits))
        return _response(
            "ok",
            outfits=outfits,
            message=f"Generated {len(outfits)} outfit(s) for {occasion}",
            summary=summary.to_dict(),
            diagnostics=result.diagnostics,
        )

    @instrument_operation(
        "generate_from_payload",
        input_model=GenerateOutfitsRequest,
        on_validation_error=_payload_validation_failure,
    )
    def generate_from_payload(
        self,
        user_id: str,
        occasion: str,
        items: List[Dict[str, Any]],
        max_outfits: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Validate a loose payload, then run :meth:`generate`."""

        catalog = [from_raw_metadata({**item, "user_id": user_id}) for item in items]
        return self.generate(user_id, catalog, occasion, max_outfits)

    def history_for(self, user_id: str, limit: int | None = None) -> List[GenerationSummary]:
        return self.history.list_for_user(user_id, limit=limit)

    def sample_wardrobe(self, user_id: str) -> List[ClothingItem]:
        return build_sample_wardrobe(user_id)


__all__ = ["OutfitStylistApp", "NO_OUTFITS_MESSAGE", "EMPTY_CATALOG_MESSAGE", "MISSING_OCCASION_MESSAGE"]
