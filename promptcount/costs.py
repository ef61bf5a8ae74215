"""Fixed per-message token overheads for each model family."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from promptcount.errors import UnsupportedModelError

logger = structlog.get_logger()


@dataclass(frozen=True)
class FixedTokenCost:
    """Tokens the provider adds on top of the literal message text.

    ``name`` may be negative: on older models the role token is dropped
    when a message carries a name.
    """

    message: int
    name: int
    # Tool definition overheads, only used by the experimental tool counter.
    # TODO: measure these per model; they were fitted against gpt-3.5-turbo only.
    tools: int = 12
    tool_parameters: int = 11
    tool_parameter_property_type: int = 2
    tool_parameter_property_description: int = 2
    tool_parameter_property_enum: int = -3
    tool_parameter_property_enum_element: int = 3


# gpt-3.5-turbo-0301 wraps each message in start/end markers
_LEGACY_COST = FixedTokenCost(message=4, name=-1)
_COST = FixedTokenCost(message=3, name=1)

MODEL_COSTS: dict[str, FixedTokenCost] = {
    "gpt-3.5-turbo-0613": _COST,
    "gpt-3.5-turbo-16k-0613": _COST,
    "gpt-4-0314": _COST,
    "gpt-4-32k-0314": _COST,
    "gpt-4-0613": _COST,
    "gpt-4-32k-0613": _COST,
    "gpt-3.5-turbo-0301": _LEGACY_COST,
}

# Checked in order. Ids without a known snapshot get the costs of the
# newest snapshot in their family.
FALLBACK_RULES: tuple[tuple[str, str], ...] = (
    ("gpt-3.5-turbo", "gpt-3.5-turbo-0613"),
    ("gpt-4", "gpt-4-0613"),
)


def resolve_model(model: str) -> tuple[str, FixedTokenCost]:
    """Map a model id to the id whose costs apply, and those costs."""
    if model in MODEL_COSTS:
        return model, MODEL_COSTS[model]

    for fragment, canonical in FALLBACK_RULES:
        if fragment in model:
            logger.debug("token_model_fallback", model=model, resolved=canonical)
            return canonical, MODEL_COSTS[canonical]

    raise UnsupportedModelError(
        f"token counting method for model {model} is unknown", model=model
    )
