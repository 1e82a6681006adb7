"""
JSON payloads of the command line (pydantic models, camelCase on the wire).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .feature import Feature


class FeatureInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field(alias="fullName")
    short_name: Optional[str] = Field(default=None, alias="shortName")
    name: str
    simple_name: str = Field(alias="simpleName")
    display_name: str = Field(alias="displayName")
    visibility: str
    auto_feature: bool = Field(default=False, alias="autoFeature")
    has_content: bool = Field(default=False, alias="hasContent")
    contained_features: List[str] = Field(default_factory=list, alias="containedFeatures")
    source: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: Feature) -> FeatureInfo:
        return cls(
            full_name=feature.full_name,
            short_name=feature.short_name,
            name=feature.name,
            simple_name=feature.simple_name(),
            display_name=feature.display_name(),
            visibility=feature.visibility.name,
            auto_feature=feature.is_auto_feature,
            has_content=feature.has_content,
            contained_features=list(feature.contained_features),
            source=str(feature.source) if feature.source else None,
        )


class FeatureList(BaseModel):
    features: List[FeatureInfo] = Field(default_factory=list)

    @classmethod
    def of(cls, features: List[Feature]) -> FeatureList:
        return cls(features=[FeatureInfo.from_feature(f) for f in features])


__all__ = ["FeatureInfo", "FeatureList"]
