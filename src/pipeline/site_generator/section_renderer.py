"""Generic section renderer.

Turns one ``PageSection`` into an HTML fragment. Dispatch is a table keyed by
content variant class; the table is checked against ``CONTENT_VARIANTS`` at
import time and a variant without a builder raises ``ConfigurationError``.
``UnknownContent`` renders an empty fragment and ``InvalidContent`` renders a
visible raw-edit affordance.

Examples
--------
>>> from src.pipeline.site_generator.models import PageSection, Website
>>> site = Website.from_dict({"businessName": "Acme"})
>>> "Welcome" in render_section(PageSection("s1", "hero", 0, {}), site)
True
>>> render_section(PageSection("s2", "marquee", 0, {}), site)
''
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from src.exceptions import ConfigurationError

from .markup import escape_html, phone_href
from .models import PageSection, Website, published_posts
from .sections import (
    CONTENT_VARIANTS,
    AboutIntroContent,
    BlogListContent,
    ContactFormContent,
    CtaContent,
    CustomContent,
    FaqContent,
    FeaturesContent,
    GalleryContent,
    HeroContent,
    ImageContent,
    InvalidContent,
    LocationsListContent,
    ServicesGridContent,
    TestimonialsContent,
    TextBlockContent,
    TrustBadgesContent,
    UnknownContent,
    VideoContent,
    parse_section_content,
)

logger = logging.getLogger(__name__)


def _subtitle(text: str | None, css_class: str = "section-subtitle") -> str:
    return f'<p class="{css_class}">{escape_html(text)}</p>' if text else ""


def _render_hero(content: HeroContent, section: PageSection, website: Website) -> str:
    buttons = ""
    if content.show_cta:
        buttons = (
            f'<a href="{escape_html(content.cta_link)}" class="btn btn-primary">'
            f"{escape_html(content.cta_text)}</a>"
        )
        if content.secondary_cta_text:
            link = content.secondary_cta_link or "/contact"
            buttons += (
                f'<a href="{escape_html(link)}" class="btn btn-secondary">'
                f"{escape_html(content.secondary_cta_text)}</a>"
            )
        buttons = f'<div class="hero-cta">{buttons}</div>'
    phone = ""
    if content.phone:
        phone = (
            f'<div class="phone-number"><a href="{phone_href(content.phone)}">'
            f"📞 {escape_html(content.phone)}</a></div>"
        )
    style = ""
    if content.background_image:
        style = f' style="background-image: url(\'{escape_html(content.background_image)}\')"'
    return f"""
<section class="hero" data-section-type="hero" data-section-id="{escape_html(section.id)}"{style}>
  <div class="container">
    <h1>{escape_html(content.headline)}</h1>
    {_subtitle(content.subheadline, "hero-subtitle")}
    {buttons}
    {phone}
  </div>
</section>"""


def _render_services_grid(
    content: ServicesGridContent, section: PageSection, website: Website
) -> str:
    cards = []
    for card in content.services:
        link = (
            f'<a href="{escape_html(card.link)}" class="service-link">Learn More →</a>'
            if card.link
            else ""
        )
        cards.append(
            f"""<div class="service-card">
      <div class="service-icon">{escape_html(card.icon)}</div>
      <h3>{escape_html(card.name)}</h3>
      {_subtitle(card.description, "service-description")}
      {link}
    </div>"""
        )
    return f"""
<section class="services-section" data-section-type="services-grid" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="services-grid">
    {''.join(cards)}
    </div>
  </div>
</section>"""


def _render_about_intro(
    content: AboutIntroContent, section: PageSection, website: Website
) -> str:
    features = ""
    if content.features:
        items = "".join(
            f'<li><span class="icon">{escape_html(f.icon)}</span>'
            f"<span>{escape_html(f.text)}</span></li>"
            for f in content.features
        )
        features = f'<ul class="features-list">{items}</ul>'
    image = ""
    if content.image:
        image = (
            f'<div class="about-image"><img src="{escape_html(content.image)}" '
            f'alt="{escape_html(content.title)}" loading="lazy"></div>'
        )
    description = f"<p>{escape_html(content.description)}</p>" if content.description else ""
    return f"""
<section class="about-section" data-section-type="about-intro" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="about-content">
      <div class="about-text">
        <h2>{escape_html(content.title)}</h2>
        {description}
        {features}
      </div>
      {image}
    </div>
  </div>
</section>"""


def _stars(rating: int) -> str:
    return "★" * rating + "☆" * (5 - rating)


def _render_testimonials(
    content: TestimonialsContent, section: PageSection, website: Website
) -> str:
    cards = []
    for item in content.testimonials:
        rating = f'<div class="rating">{_stars(item.rating)}</div>' if item.rating is not None else ""
        image = (
            f'<img src="{escape_html(item.image)}" alt="{escape_html(item.name)}" '
            f'class="testimonial-avatar" loading="lazy">'
            if item.image
            else ""
        )
        company = f"<span>{escape_html(item.company)}</span>" if item.company else ""
        cards.append(
            f"""<div class="testimonial-card">
      {rating}
      <blockquote>"{escape_html(item.quote)}"</blockquote>
      <div class="testimonial-author">{image}<div><strong>{escape_html(item.name)}</strong>{company}</div></div>
    </div>"""
        )
    return f"""
<section class="testimonials-section" data-section-type="testimonials" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="testimonials-grid">
    {''.join(cards)}
    </div>
  </div>
</section>"""


def _render_cta(content: CtaContent, section: PageSection, website: Website) -> str:
    secondary = ""
    if content.secondary_cta_text:
        link = content.secondary_cta_link or phone_href(website.phone)
        secondary = (
            f'<a href="{escape_html(link)}" class="btn btn-secondary">'
            f"{escape_html(content.secondary_cta_text)}</a>"
        )
    return f"""
<section class="cta-section" data-section-type="cta" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <h2>{escape_html(content.title)}</h2>
    {_subtitle(content.subtitle, "cta-subtitle")}
    <div class="cta-buttons">
      <a href="{escape_html(content.cta_link)}" class="btn btn-primary">{escape_html(content.cta_text)}</a>
      {secondary}
    </div>
  </div>
</section>"""


def _render_contact_form(
    content: ContactFormContent, section: PageSection, website: Website
) -> str:
    phone = content.phone or website.phone
    email = content.email or website.email
    details = []
    if phone:
        details.append(
            f'<p><strong>Phone:</strong> <a href="{phone_href(phone)}">{escape_html(phone)}</a></p>'
        )
    if email:
        details.append(
            f'<p><strong>Email:</strong> <a href="mailto:{escape_html(email)}">{escape_html(email)}</a></p>'
        )
    info = (
        f'<div class="contact-info"><h3>Get In Touch</h3>{"".join(details)}</div>'
        if details
        else ""
    )
    return f"""
<section class="contact-section" data-section-type="contact-form" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="contact-grid">
      <form class="contact-form">
        <input type="text" name="name" placeholder="Your Name" required>
        <input type="email" name="email" placeholder="Your Email" required>
        <input type="tel" name="phone" placeholder="Your Phone">
        <textarea name="message" rows="5" placeholder="How can we help?" required></textarea>
        <button type="submit" class="btn btn-primary">Send Message</button>
      </form>
      {info}
    </div>
  </div>
</section>"""


def _render_locations_list(
    content: LocationsListContent, section: PageSection, website: Website
) -> str:
    items = []
    for loc in content.locations:
        if loc.link:
            items.append(
                f'<a href="{escape_html(loc.link)}" class="location-item">📍 {escape_html(loc.city)}</a>'
            )
        else:
            items.append(f'<span class="location-item">📍 {escape_html(loc.city)}</span>')
    return f"""
<section class="locations-section" data-section-type="locations-list" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="locations-grid">{''.join(items)}</div>
  </div>
</section>"""


def _render_blog_list(
    content: BlogListContent, section: PageSection, website: Website
) -> str:
    posts = published_posts(website)
    if content.limit is not None:
        posts = posts[: max(0, content.limit)]
    if posts:
        cards = "".join(
            f"""<article class="blog-card">
      <h3><a href="/blog/{escape_html(p.slug)}.html">{escape_html(p.title)}</a></h3>
      {_subtitle(p.excerpt, "blog-excerpt")}
      <a href="/blog/{escape_html(p.slug)}.html" class="read-more">Read More →</a>
    </article>"""
            for p in posts
        )
        body = f'<div class="blog-grid">{cards}</div>'
    else:
        body = '<p class="empty-state">No blog posts yet. Check back soon!</p>'
    return f"""
<section class="blog-section" data-section-type="blog-list" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title"><h2>{escape_html(content.title)}</h2></div>
    {body}
  </div>
</section>"""


def _render_custom(content: CustomContent, section: PageSection, website: Website) -> str:
    return (
        f'<section class="custom-section" data-section-type="custom-content" '
        f'data-section-id="{escape_html(section.id)}"><div class="container">'
        f"{content.html}</div></section>"
    )


def _render_gallery(content: GalleryContent, section: PageSection, website: Website) -> str:
    figures = []
    for image in content.images:
        caption = f"<figcaption>{escape_html(image.caption)}</figcaption>" if image.caption else ""
        figures.append(
            f'<figure class="gallery-item"><img src="{escape_html(image.src)}" '
            f'alt="{escape_html(image.alt)}" loading="lazy">{caption}</figure>'
        )
    title = (
        f'<div class="section-title"><h2>{escape_html(content.title)}</h2></div>'
        if content.title
        else ""
    )
    return f"""
<section class="gallery-section" data-section-type="gallery" data-section-id="{escape_html(section.id)}">
  <div class="container">
    {title}
    <div class="gallery-grid" style="grid-template-columns: repeat({content.columns}, 1fr);">{''.join(figures)}</div>
  </div>
</section>"""


def _render_faq(content: FaqContent, section: PageSection, website: Website) -> str:
    items = "".join(
        f"""<div class="faq-item">
      <button class="faq-question" aria-expanded="false">{escape_html(item.question)}</button>
      <div class="faq-answer"><p>{escape_html(item.answer)}</p></div>
    </div>"""
        for item in content.faqs
    )
    return f"""
<section class="faq-section" data-section-type="faq" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="faq-list">{items}</div>
  </div>
</section>"""


def _render_trust_badges(
    content: TrustBadgesContent, section: PageSection, website: Website
) -> str:
    badges = "".join(
        f'<div class="trust-badge"><span class="badge-icon">{escape_html(b.icon)}</span>'
        f"<span>{escape_html(b.text)}</span></div>"
        for b in content.badges
    )
    return (
        f'<section class="trust-badges" data-section-type="trust-badges" '
        f'data-section-id="{escape_html(section.id)}"><div class="container">'
        f'<div class="badges-row">{badges}</div></div></section>'
    )


def _render_image(content: ImageContent, section: PageSection, website: Website) -> str:
    image = (
        f'<img src="{escape_html(content.image_url)}" alt="{escape_html(content.alt_text)}" '
        f'loading="lazy">'
    )
    if content.link_url:
        image = f'<a href="{escape_html(content.link_url)}">{image}</a>'
    caption = f"<figcaption>{escape_html(content.caption)}</figcaption>" if content.caption else ""
    return f"""
<section class="image-section" data-section-type="image" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <figure>{image}{caption}</figure>
  </div>
</section>"""


def _render_video(content: VideoContent, section: PageSection, website: Website) -> str:
    embed_url = content.embed_url
    if not embed_url:
        return ""
    title = f"<h2>{escape_html(content.title)}</h2>" if content.title else ""
    description = _subtitle(content.description)
    return f"""
<section class="video-section" data-section-type="video" data-section-id="{escape_html(section.id)}">
  <div class="container">
    {title}
    {description}
    <div class="video-wrapper">
      <iframe src="{escape_html(embed_url)}" title="{escape_html(content.title or 'Video')}" frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" allowfullscreen></iframe>
    </div>
  </div>
</section>"""


def _render_text_block(
    content: TextBlockContent, section: PageSection, website: Website
) -> str:
    paragraphs = "".join(
        f"<p>{escape_html(line)}</p>" for line in content.content.split("\n") if line.strip()
    )
    title = f"<h2>{escape_html(content.title)}</h2>" if content.title else ""
    return f"""
<section class="text-block-section" data-section-type="text-block" data-section-id="{escape_html(section.id)}">
  <div class="container" style="text-align: {content.alignment};">
    {title}
    {paragraphs}
  </div>
</section>"""


def _render_features(
    content: FeaturesContent, section: PageSection, website: Website
) -> str:
    cards = "".join(
        f"""<div class="feature-card">
      <div class="feature-icon">{escape_html(f.icon)}</div>
      <h3>{escape_html(f.title)}</h3>
      {_subtitle(f.description, "feature-description")}
    </div>"""
        for f in content.features
    )
    return f"""
<section class="features-section" data-section-type="features" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <div class="section-title">
      <h2>{escape_html(content.title)}</h2>
      {_subtitle(content.subtitle)}
    </div>
    <div class="features-grid">{cards}</div>
  </div>
</section>"""


def _render_unknown(content: UnknownContent, section: PageSection, website: Website) -> str:
    logger.debug("Skipping section %s with unknown type %r", section.id, content.tag)
    return ""


def _render_invalid(content: InvalidContent, section: PageSection, website: Website) -> str:
    return f"""
<section class="section-invalid" data-section-type="{escape_html(content.tag)}" data-section-id="{escape_html(section.id)}">
  <div class="container">
    <p class="invalid-flag">Invalid</p>
    <p class="invalid-reason">{escape_html(content.reason)}</p>
    <pre class="invalid-raw" contenteditable="true">{escape_html(content.raw)}</pre>
  </div>
</section>"""


SectionBuilder = Callable[[Any, PageSection, Website], str]

SECTION_BUILDERS: dict[type, SectionBuilder] = {
    HeroContent: _render_hero,
    ServicesGridContent: _render_services_grid,
    AboutIntroContent: _render_about_intro,
    TestimonialsContent: _render_testimonials,
    CtaContent: _render_cta,
    ContactFormContent: _render_contact_form,
    LocationsListContent: _render_locations_list,
    BlogListContent: _render_blog_list,
    CustomContent: _render_custom,
    GalleryContent: _render_gallery,
    FaqContent: _render_faq,
    TrustBadgesContent: _render_trust_badges,
    ImageContent: _render_image,
    VideoContent: _render_video,
    TextBlockContent: _render_text_block,
    FeaturesContent: _render_features,
    UnknownContent: _render_unknown,
    InvalidContent: _render_invalid,
}


def check_builders_exhaustive(
    builders: dict[type, SectionBuilder], variants: Iterable[type] = CONTENT_VARIANTS
) -> None:
    """Raise ``ConfigurationError`` if any content variant lacks a builder."""
    missing = sorted(v.__name__ for v in variants if v not in builders)
    if missing:
        raise ConfigurationError(
            "Section variants without a builder", context={"missing": missing}
        )


check_builders_exhaustive(SECTION_BUILDERS)


def render_section(section: PageSection, website: Website) -> str:
    """Render one section to an HTML fragment.

    Parameters
    ----------
    section : PageSection
        The section to render; its raw content is parsed here.
    website : Website
        Site context used for contact facts and blog listings.

    Returns
    -------
    str
        HTML fragment; empty for unknown section types.
    """
    content = parse_section_content(section)
    return SECTION_BUILDERS[type(content)](content, section, website)


def render_sections(sections: Iterable[PageSection], website: Website) -> str:
    """Render sections in ascending ``order`` and join them with newlines.

    Sections sharing an ``order`` keep their authored sequence.
    """
    ordered = sorted(enumerate(sections), key=lambda pair: (pair[1].order, pair[0]))
    return "\n".join(render_section(section, website) for _, section in ordered)


__all__ = [
    "SECTION_BUILDERS",
    "check_builders_exhaustive",
    "render_section",
    "render_sections",
]
