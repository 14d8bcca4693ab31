from dataclasses import dataclass
from enum import Enum


class MediaCategory(str, Enum):
    """Coarse media class of a submitted file."""

    IMAGE = "image"
    DOCUMENT = "document"

    @classmethod
    def from_mime(cls, mime_type: str) -> "MediaCategory":
        """Classify by MIME type: any ``image/*`` type is an image."""
        return cls.IMAGE if mime_type.startswith("image/") else cls.DOCUMENT


class ParameterStatus(str, Enum):
    HIGH = "high"
    LOW = "low"
    NORMAL = "normal"


class RiskTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class FileDescriptor:
    """Identifying metadata of a submitted file. Content is never read."""

    name: str
    byte_size: int
    media_category: MediaCategory

    @property
    def is_image(self) -> bool:
        return self.media_category is MediaCategory.IMAGE


@dataclass(frozen=True)
class ParameterDefinition:
    """Catalog entry for a reportable CKD parameter."""

    name: str
    short_form: str
    unit: str


@dataclass(frozen=True)
class Parameter:
    """A single fabricated lab parameter reading."""

    name: str
    short_form: str
    unit: str
    status: ParameterStatus
    value: str
    description: str


@dataclass(frozen=True)
class AnalysisResult:
    """Fabricated findings for one analysis request."""

    has_swelling: bool
    has_shrinkage: bool
    has_pores: bool
    other_issues: tuple[str, ...]
    ckd_probability: float
    confidence: float
    recommendations: tuple[str, ...]
    dietary_recommendations: tuple[str, ...]
    lifestyle_recommendations: tuple[str, ...]
    is_image: bool
    parameters: tuple[Parameter, ...] | None = None
