"""
Page content block schemas.

A page layout is an ordered list of blocks discriminated by ``blockType``.
Blocks are stored as camelCase JSON exactly as editors submit them.

Dependencies: pydantic
System role: Page layout contracts
"""

from typing import Annotated, Literal, Union
import uuid

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

ButtonStyle = Literal["primary", "secondary", "outline", "ghost"]


class BlockModel(BaseModel):
    """Common block configuration (camelCase aliases, snake_case attributes)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseBlock(BlockModel):
    id: str | None = None
    block_name: str | None = None
    published: bool = True


class LinkButton(BlockModel):
    label: str
    url: str
    style: ButtonStyle = "primary"
    open_in_new_tab: bool = False


class HeroTag(BlockModel):
    label: str


class HeroBlock(BaseBlock):
    block_type: Literal["hero"] = "hero"
    heading: str
    subheading: str | None = None
    image_id: uuid.UUID | None = None
    show_overlay: bool = True
    background_blur: bool = True
    cta_buttons: list[LinkButton] = Field(default_factory=list)
    tags: list[HeroTag] = Field(default_factory=list)


class NavbarLogo(BlockModel):
    image_id: uuid.UUID | None = None
    text: str | None = None


class NavbarLink(BlockModel):
    label: str
    url: str


class NavbarCta(BlockModel):
    label: str = "Apply Now"
    url: str = "/contact"
    open_in_new_tab: bool = False


class NavbarBlock(BaseBlock):
    block_type: Literal["navbar"] = "navbar"
    logo: NavbarLogo = Field(default_factory=NavbarLogo)
    navigation_links: list[NavbarLink] = Field(default_factory=list)
    cta_button: NavbarCta | None = None


class RibbonLink(BlockModel):
    url: str | None = None
    open_in_new_tab: bool = False


class RibbonBlock(BaseBlock):
    block_type: Literal["ribbon"] = "ribbon"
    text: str
    background_color: Literal["blue", "red", "green", "yellow", "purple", "orange"] = "blue"
    text_color: Literal["white", "black"] = "white"
    link: RibbonLink = Field(default_factory=RibbonLink)
    dismissible: bool = True


class FranchiseGridBlock(BaseBlock):
    """
    Grid of franchise cards.

    ``automatic`` queries published franchises matching the toggles, newest
    updated first. ``manual`` shows ``selected_franchises`` in their given
    order (unpublished entries are dropped on public pages).
    """

    block_type: Literal["franchiseGrid"] = "franchiseGrid"
    heading: str | None = None
    show_filters: bool = True
    display_mode: Literal["automatic", "manual"] = "automatic"
    selected_franchises: list[uuid.UUID] = Field(default_factory=list)
    only_featured: bool = False
    only_sponsored: bool = False
    only_top_pick: bool = False
    category: str = Field("all", description="Industry name or slug; 'all' for every industry")
    limit: int = Field(100, ge=1, le=500)


class Highlight(BlockModel):
    title: str
    description: str | None = None


class AboutTeaserBlock(BaseBlock):
    block_type: Literal["aboutTeaser"] = "aboutTeaser"
    eyebrow: str = "About Future Franchise Owners"
    heading: str = "Seasoned franchise experts guiding your journey"
    description: str | None = Field(
        "<p>We combine decades of franchise ownership, coaching, and operations experience "
        "to help entrepreneurs make confident, informed decisions.</p>",
        description="Rich text (HTML)",
    )
    highlights: list[Highlight] = Field(default_factory=list)
    ctas: list[LinkButton] = Field(default_factory=list)
    image_id: uuid.UUID | None = None


class CallToActionBlock(BaseBlock):
    block_type: Literal["callToAction"] = "callToAction"
    eyebrow: str | None = None
    heading: str = "Ready to explore your franchise future?"
    description: str | None = None
    alignment: Literal["center", "left"] = "center"
    background_style: Literal["color", "gradient", "image"] = "gradient"
    background_color: str = "#004AAD"
    background_gradient: str = "linear-gradient(135deg, #004AAD 0%, #001C40 50%, #000814 100%)"
    background_image_id: uuid.UUID | None = None
    overlay_color: str = "#000000"
    overlay_opacity: float = Field(0.45, ge=0, le=1)
    ctas: list[LinkButton] = Field(default_factory=list)
    small_print: str | None = None


class BlogHighlightsBlock(BaseBlock):
    block_type: Literal["blogHighlights"] = "blogHighlights"
    heading: str = "Latest Blog Posts"
    subheading: str = "Stay updated with the latest franchise insights and business tips"
    feed_url: str = "https://quantumbc.substack.com/feed"
    limit: int = Field(6, ge=1, le=24)
    show_author: bool = True
    show_date: bool = True
    show_read_time: bool = True


class MapBlock(BaseBlock):
    block_type: Literal["map"] = "map"
    heading: str = "Find Franchise Opportunities Near You"
    description: str | None = (
        "Explore our network of franchise locations and discover opportunities in your area."
    )
    map_url: str = (
        "https://www.google.com/maps/d/u/0/embed?mid=1WvsN2zVD73ijJA6Kmyrv72IN36qRZxo&ehbc=2E312F"
    )
    height: int = Field(450, ge=300, le=800)
    show_view_button: bool = True
    button_text: str = "View Full Directory"


class FieldOption(BlockModel):
    label: str
    value: str


class FormField(BlockModel):
    field_type: Literal["text", "email", "tel", "number", "textarea", "select"] = "text"
    label: str
    name: str = Field(..., pattern=r"^[A-Za-z][A-Za-z0-9_]*$")
    placeholder: str | None = None
    required: bool = False
    width: Literal["full", "half", "third"] = "full"
    options: list[FieldOption] = Field(default_factory=list)


class FormBuilderBlock(BaseBlock):
    block_type: Literal["formBuilder"] = "formBuilder"
    heading: str = "Get in Touch"
    description: str | None = None
    form_fields: list[FormField] = Field(default_factory=list)
    submit_button_text: str = "Send Message"
    success_message: str = "Thank you! We'll get back to you soon."
    anchor_id: str | None = None


Block = Annotated[
    Union[
        HeroBlock,
        NavbarBlock,
        RibbonBlock,
        FranchiseGridBlock,
        AboutTeaserBlock,
        CallToActionBlock,
        BlogHighlightsBlock,
        MapBlock,
        FormBuilderBlock,
    ],
    Field(discriminator="block_type"),
]

block_adapter: TypeAdapter[Block] = TypeAdapter(Block)
layout_adapter: TypeAdapter[list[Block]] = TypeAdapter(list[Block])


def dump_layout(blocks: list[Block]) -> list[dict]:
    """Serialise blocks to the stored camelCase JSON shape."""
    return [block.model_dump(mode="json", by_alias=True) for block in blocks]
