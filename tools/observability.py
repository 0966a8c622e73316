"""Structured logging around outfit generation calls."""

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Mapping, Sized
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from stylist_app.logging_config import ensure_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def request_fields(arguments: Mapping[str, Any]) -> Dict[str, Any]:
    """Describe a generation request without its catalog contents."""

    fields: Dict[str, Any] = {"occasion": arguments.get("occasion")}
    items = arguments.get("items")
    if isinstance(items, Sized):
        fields["catalog_size"] = len(items)
    if arguments.get("max_outfits") is not None:
        fields["max_outfits"] = arguments["max_outfits"]
    return fields


def result_fields(result: Any) -> Dict[str, Any]:
    """Describe a facade response by status, outfit count and best score."""

    if not isinstance(result, Mapping):
        return {}
    outfits = result.get("outfits") or []
    fields: Dict[str, Any] = {"status": result.get("status"), "outfit_count": len(outfits)}
    if outfits:
        fields["best_score"] = outfits[0].get("compatibility_score")
    return fields


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log the start, outcome and duration of a generation call.

    When ``input_model`` is given, the call's arguments (``self`` excluded)
    are validated against it and replaced by the validated values before the
    wrapped function runs. Validation errors go to ``on_validation_error``
    when supplied and are re-raised otherwise.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            arguments = {name: value for name, value in bound.arguments.items() if name != "self"}

            if input_model is not None:
                try:
                    validated = input_model.model_validate(arguments)
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "operation_validation_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        errors=[
                            {"loc": ".".join(str(part) for part in error["loc"]), "msg": error["msg"]}
                            for error in exc.errors()
                        ],
                        **request_fields(arguments),
                    )
                    if on_validation_error is not None:
                        return on_validation_error(exc)
                    raise
                bound.arguments.update(validated.model_dump())

            log_event(
                LOGGER,
                logging.INFO,
                "operation_started",
                operation=operation,
                correlation_id=correlation_id,
                **request_fields(arguments),
            )
            try:
                result = func(*bound.args, **bound.kwargs)
            except Exception:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "operation_failed",
                    operation=operation,
                    correlation_id=correlation_id,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    exc_info=True,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                "operation_completed",
                operation=operation,
                correlation_id=correlation_id,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                **result_fields(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_operation", "request_fields", "result_fields"]
