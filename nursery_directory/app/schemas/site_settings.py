"""
Pydantic schema for the site settings record.

``SiteSettings`` is frozen: the built-in default is a shared constant
and must never be modified in place.  Remote settings are applied with
``merge_site_settings``, which returns a new instance.
"""

from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SiteSettings(BaseModel):
    """Hero section and contact configuration for the home page."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    title: str
    subtitle: str
    hero_image: str = Field(..., alias="heroImage")
    benefits: Tuple[str, ...] = ()
    contacts: Dict[str, Any] = Field(default_factory=dict)


DEFAULT_SITE_SETTINGS = SiteSettings(
    title="أكبر منصة للمشاتل في المملكة 🌿",
    subtitle="اكتشف أكثر من 500 مشتل ومتجر لأدوات الزراعة في مكان واحد",
    heroImage="https://placehold.co/1200x600/10b981/ffffff?text=Hero+Image",
    benefits=("توصيل سريع", "أفضل الأسعار", "استشارات مجانية", "دعم فني متاح"),
    contacts={"whatsapp": "966551234567"},
)


def merge_site_settings(base: SiteSettings, remote: Mapping[str, Any]) -> SiteSettings:
    """Overlay ``remote`` fields on ``base`` and return a new settings object.

    The merge is shallow: a remote ``contacts`` mapping replaces the
    base one as a whole.  Keys are the stored (camelCase) names.
    """
    merged = base.model_dump(by_alias=True)
    merged.update(remote)
    return SiteSettings.model_validate(merged)
