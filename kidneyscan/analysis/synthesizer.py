from collections.abc import Sequence
from typing import TypeVar

from kidneyscan.analysis.catalogs import (
    CKD_PARAMETERS,
    DIETARY_RECOMMENDATIONS,
    LIFESTYLE_RECOMMENDATIONS,
    OTHER_ISSUES,
    RECOMMENDATIONS,
)
from kidneyscan.analysis.fingerprint import fingerprint as file_fingerprint
from kidneyscan.analysis.models import (
    AnalysisResult,
    FileDescriptor,
    MediaCategory,
    Parameter,
    ParameterStatus,
    RiskTier,
)

T = TypeVar("T")

MAX_RECOMMENDATIONS = 3
MAX_DIETARY_RECOMMENDATIONS = 5
MAX_LIFESTYLE_RECOMMENDATIONS = 5


def _select(catalog: Sequence[T], fp: int, modulus: int) -> list[T]:
    """Keep catalog entries at index i where (fp + i) is divisible by modulus."""
    return [item for index, item in enumerate(catalog) if (fp + index) % modulus == 0]


def risk_tier(fp: int) -> RiskTier:
    probability = (fp % 100) / 100
    if probability > 0.7:
        return RiskTier.HIGH
    if probability > 0.3:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def other_issues(fp: int) -> tuple[str, ...]:
    return tuple(_select(OTHER_ISSUES, fp, 3))


def recommendations(fp: int) -> tuple[str, ...]:
    catalog = RECOMMENDATIONS[risk_tier(fp)]
    return tuple(_select(catalog, fp, 2)[:MAX_RECOMMENDATIONS])


def parameter_status(fp: int, parameter_name: str) -> ParameterStatus:
    remainder = (fp + len(parameter_name)) % 3
    if remainder == 0:
        return ParameterStatus.HIGH
    if remainder == 1:
        return ParameterStatus.LOW
    return ParameterStatus.NORMAL


def _describe(name: str, status: ParameterStatus) -> str:
    if status is ParameterStatus.HIGH:
        return f"Elevated {name} levels indicate potential kidney dysfunction"
    if status is ParameterStatus.LOW:
        return f"Low {name} levels suggest possible metabolic issues"
    return f"{name} levels are within normal range"


def parameters(fp: int) -> tuple[Parameter, ...]:
    """Fabricate the lab parameter panel for a report.

    The value multiplier is the position within the selected subset, not the
    position in the full catalog.
    """
    readings: list[Parameter] = []
    for position, definition in enumerate(_select(CKD_PARAMETERS, fp, 3)):
        raw_value = (fp * (position + 1)) % 100
        status = parameter_status(fp, definition.name)
        readings.append(
            Parameter(
                name=definition.name,
                short_form=definition.short_form,
                unit=definition.unit,
                status=status,
                value=f"{raw_value:.1f}{definition.unit}",
                description=_describe(definition.name, status),
            )
        )
    return tuple(readings)


def synthesize(fp: int, media_category: MediaCategory) -> AnalysisResult:
    """Derive a complete fabricated result from a fingerprint.

    Args:
        fp: Fingerprint of the submitted file.
        media_category: Images get no lab parameter panel.

    Returns:
        AnalysisResult that is identical for identical arguments.
    """
    is_image = media_category is MediaCategory.IMAGE
    return AnalysisResult(
        has_swelling=fp % 2 == 0,
        has_shrinkage=fp % 3 == 0,
        has_pores=fp % 4 == 0,
        other_issues=other_issues(fp),
        ckd_probability=(fp % 100) / 100,
        confidence=0.85 + (fp % 15) / 100,
        recommendations=recommendations(fp),
        parameters=None if is_image else parameters(fp),
        dietary_recommendations=tuple(
            _select(DIETARY_RECOMMENDATIONS, fp, 3)[:MAX_DIETARY_RECOMMENDATIONS]
        ),
        lifestyle_recommendations=tuple(
            _select(LIFESTYLE_RECOMMENDATIONS, fp, 3)[:MAX_LIFESTYLE_RECOMMENDATIONS]
        ),
        is_image=is_image,
    )


def analyze(file: FileDescriptor) -> AnalysisResult:
    """Fingerprint a file and synthesize its result."""
    return synthesize(file_fingerprint(file), file.media_category)
