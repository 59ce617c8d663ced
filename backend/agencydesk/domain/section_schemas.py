# agencydesk/domain/section_schemas.py
"""
Content schemas for page section components.

Each component name maps to a pydantic model describing the flat shape
of its ``draft_content`` / ``published_content``. Keys are camelCase on
the wire, as the site templates consume them.
"""
from typing import Any, Dict, List, Optional, Type

from flask import current_app
from pydantic import BaseModel, ConfigDict, HttpUrl
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import ValidationError


class SectionContent(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Cta(SectionContent):
    href: str
    label: str


class Badge(SectionContent):
    icon: str
    text: str


class HeroSection(SectionContent):
    badge: Badge
    title: str
    subtitle: str
    hero_image: HttpUrl
    primary_cta: Cta
    accent_image: HttpUrl
    secondary_cta: Cta


class Promise(SectionContent):
    icon: str
    title: str
    description: str


class BrandPromise(SectionContent):
    promises: List[Promise]


class FinalCTA(SectionContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    primary_cta: Optional[Cta] = None
    accent_image: Optional[HttpUrl] = None
    trust_badges: Optional[List[Badge]] = None


class InfoBar(SectionContent):
    hours: str
    phone: str
    tagline: str


class PromoCard(SectionContent):
    eyebrow: Optional[str] = None
    title: str
    hours: Optional[str] = None
    cta_label: Optional[str] = None
    cta_link: Optional[str] = None
    image_url: Optional[HttpUrl] = None


class GalleryTeaser(SectionContent):
    images: List[HttpUrl]
    cta_label: Optional[str] = None


class CTABanner(SectionContent):
    title: str
    description: str
    cta_label: str


SECTION_SCHEMAS: Dict[str, Type[SectionContent]] = {
    "HeroSection": HeroSection,
    "HeroWelcome": HeroSection,
    "BrandPromise": BrandPromise,
    "FinalCTA": FinalCTA,
    "InfoBar": InfoBar,
    "PromoCard": PromoCard,
    "GalleryTeaser": GalleryTeaser,
    "CTABanner": CTABanner,
}


def get_section_schema(component: str) -> Optional[Type[SectionContent]]:
    return SECTION_SCHEMAS.get(component)


def validate_section_content(component: str, content: Any) -> None:
    """
    Validate section content against its component schema.

    Unknown components are accepted; a warning is logged so missing
    schemas get noticed.
    """
    schema = get_section_schema(component)

    if schema is None:
        current_app.logger.warning(
            "No content schema registered for component %s", component
        )
        return

    try:
        schema.model_validate(content)
    except PydanticValidationError as exc:
        details = [
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        summary = "; ".join(f"{d['path']}: {d['message']}" for d in details)
        raise ValidationError(
            f"Validation failed for {component}: {summary}",
            details=details,
        ) from exc
