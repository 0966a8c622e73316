"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from memory.history_log import GenerationHistory
from stylist_app.app import OutfitStylistApp
from stylist_app.config import StylistConfig


def _items_of(outfit: Dict[str, object]) -> List[Dict[str, object]]:
    return [outfit[slot] for slot in ("top", "bottom", "footwear", "layer") if outfit.get(slot)]


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[Dict[str, object]]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    scores = [float(outfit["compatibility_score"]) for outfit in outfits]
    checks["sorted"] = all(earlier >= later for earlier, later in zip(scores, scores[1:]))
    if expectations.get("requires_layer"):
        checks["requires_layer"] = all(outfit.get("layer") for outfit in outfits)
    if expectations.get("forbids_layer"):
        checks["forbids_layer"] = not any(outfit.get("layer") for outfit in outfits)
    if expectations.get("formal_rules"):
        checks["formal_rules"] = all(
            outfit["footwear"]["category"] == "formal_shoes"
            and outfit["top"]["category"] != "tshirt"
            and outfit["bottom"]["category"] != "jeans"
            for outfit in outfits
        )
    if expectations.get("work_sneakers_tagged"):
        checks["work_sneakers_tagged"] = all(
            "work" in outfit["footwear"]["occasion_tags"]
            for outfit in outfits
            if outfit["footwear"]["category"] == "sneakers"
        )
    if "min_color_score" in expectations:
        checks["min_color_score"] = all(
            float(outfit["color_score"]) >= float(expectations["min_color_score"]) for outfit in outfits
        )
    checks["items_present"] = all(len(_items_of(outfit)) >= 3 for outfit in outfits)
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, user_id: str = "eval_user") -> Dict[str, object]:
    stylist = OutfitStylistApp(config=StylistConfig(), history=GenerationHistory())
    response = stylist.generate_from_payload(
        user_id=user_id,
        occasion=scenario.occasion,
        items=scenario.wardrobe_items,
        max_outfits=scenario.max_outfits,
    )
    outfits = response.get("outfits", [])
    evaluation = _evaluate_expectations(scenario.expectations, outfits)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"] and response.get("status") == "ok",
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "response": response,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
