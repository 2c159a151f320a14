"""Long-form page bodies for the fixed site archetypes.

Each public ``generate_*`` function turns a ``BusinessFacts`` record into the
``<main>`` body of one archetype (home, about, services, contact, locations,
blog index, single service, single location, single post). The copy is
assembled from the business facts plus the industry vocabulary, so two runs
over the same website always produce identical markup. Every interpolated
fact is HTML-escaped; only ``custom_html`` and blog post bodies are trusted
markup.

Examples
--------
>>> from src.pipeline.site_generator.models import Website
>>> site = Website.from_dict({"businessName": "Acme", "industry": "plumbing"})
>>> facts = BusinessFacts.from_website(site)
>>> "Plumbing Services in" in generate_home_content(facts)
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence
from urllib.parse import quote

from src.config import (
    DEFAULT_CITY,
    DEFAULT_EMAIL,
    DEFAULT_INDUSTRY_LABEL,
    DEFAULT_PHONE,
    DEFAULT_VIDEO_ID,
)

from .markup import escape_html, format_date, industry_label, phone_href
from .markup import process_content_for_output
from .models import BlogPost, Location, Service, Website
from .vocabulary import IndustryVocabulary, get_vocabulary

logger = logging.getLogger(__name__)

HOME_SERVICE_LIMIT = 6
HOME_FAQ_CITY_LIMIT = 3
ABOUT_NEARBY_LIMIT = 3

HERO_IMAGE_URL = "https://images.unsplash.com/photo-1621905251189-08b45d6a269e?w=1200&h=600&fit=crop"
ABOUT_IMAGE_URL = "https://images.unsplash.com/photo-1581578731548-c64695cc6952?w=600&h=400&fit=crop"


@dataclass(frozen=True)
class BusinessFacts:
    """Facts about one business that every rich generator draws on."""

    name: str
    industry: str
    industry_label: str
    phone: str
    phone_href: str
    email: str
    city: str
    state: str
    base_url: str
    services: tuple[Service, ...]
    locations: tuple[Location, ...]
    vocabulary: IndustryVocabulary

    @classmethod
    def from_website(cls, website: Website) -> BusinessFacts:
        """Derive the facts from ``website``.

        The city and state come from the street address when one is set,
        otherwise from the first location.
        """
        if website.address is not None and website.address.city:
            city, state = website.address.city, website.address.state
        elif website.locations:
            city, state = website.locations[0].city, website.locations[0].state
        else:
            city, state = DEFAULT_CITY, ""
        phone = website.phone or DEFAULT_PHONE
        return cls(
            name=website.display_name,
            industry=website.industry,
            industry_label=industry_label(website.industry) or DEFAULT_INDUSTRY_LABEL,
            phone=phone,
            phone_href=phone_href(phone),
            email=website.email or DEFAULT_EMAIL,
            city=city,
            state=state,
            base_url=website.base_url,
            services=website.services,
            locations=website.locations,
            vocabulary=get_vocabulary(website.industry),
        )


@dataclass(frozen=True)
class _Copy:
    name: str
    label: str
    lower: str
    city: str
    phone: str
    tel: str


def _copy(facts: BusinessFacts) -> _Copy:
    label = escape_html(facts.industry_label)
    return _Copy(
        name=escape_html(facts.name),
        label=label,
        lower=label.lower(),
        city=escape_html(facts.city),
        phone=escape_html(facts.phone),
        tel=escape_html(facts.phone_href),
    )


def _phone_link(c: _Copy) -> str:
    return f'<a href="{c.tel}">{c.phone}</a>'


def _location_name(location: Location) -> str:
    return escape_html(location.display_name)


def _hero_emergency(
    c: _Copy,
    *,
    badge: str,
    headline: str,
    subheadline: str,
    description: str,
    urgency: Sequence[str],
    box_header: str,
    box_text: str,
    box_small: str,
    box_note: str,
) -> str:
    chips = "\n".join(f"            <span>{item}</span>" for item in urgency)
    return f"""
<section class="hero-emergency">
  <div class="container">
    <div class="hero-grid">
      <div class="hero-main">
        <div class="emergency-badge">
          <span class="pulse"></span>
          <span data-field="emergencyBadge">{badge}</span>
        </div>
        <h1 data-field="heroHeadline">{headline}</h1>
        <h2 data-field="heroSubheadline">{subheadline}</h2>
        <p class="hero-description" data-field="heroDescription">{description}</p>
        <div class="hero-urgency">
{chips}
        </div>
      </div>
      <div class="hero-call-box">
        <div class="call-box-header">{box_header}</div>
        <p>{box_text}</p>
        <a href="{c.tel}" class="call-box-button">
          <span class="call-icon">📱</span>
          <span><small>{box_small}</small><strong>{c.phone}</strong></span>
        </a>
        <p class="call-box-note">{box_note}</p>
      </div>
    </div>
  </div>
</section>"""


def _areas_pro(c: _Copy, locations: Sequence[Location], heading: str, intro: str) -> str:
    if not locations:
        return ""
    cards = "".join(
        f"""
      <a href="/locations/{escape_html(loc.slug)}" class="area-card-pro">
        <span class="area-pin">📍</span>
        <span class="area-city">{_location_name(loc)}</span>
        <span class="area-arrow">→</span>
      </a>"""
        for loc in locations
    )
    return f"""
<section class="areas-pro">
  <div class="container">
    <div class="section-intro centered">
      <span class="section-label">Service Areas</span>
      <h2>{heading}</h2>
      <p class="intro-text">{intro}</p>
    </div>
    <div class="areas-grid-pro">{cards}
    </div>
  </div>
</section>"""


def _final_cta_pro(c: _Copy, heading: str, text: str, label: str, subtext: str) -> str:
    return f"""
<section class="final-cta-pro">
  <div class="container">
    <div class="cta-box-pro">
      <h2>{heading}</h2>
      <p>{text}</p>
      <a href="{c.tel}" class="mega-phone-cta">
        <span class="mega-icon">📞</span>
        <span class="mega-content">
          <span class="mega-label">{label}</span>
          <span class="mega-number">{c.phone}</span>
        </span>
      </a>
      <p class="cta-subtext">{subtext}</p>
    </div>
  </div>
</section>"""


def _floating_call(c: _Copy) -> str:
    return f"""
<a href="{c.tel}" class="floating-call-btn" aria-label="Call Now">📞 <span>Call Now</span></a>"""


def _page_hero(c: _Copy, heading: str, subtitle: str, button: str) -> str:
    return f"""
<section class="page-hero">
  <div class="container">
    <h1>{heading}</h1>
    <p class="hero-subtitle">{subtitle}</p>
    <a href="{c.tel}" class="hero-phone-btn">📞 {button} {c.phone}</a>
  </div>
</section>"""


def _section_heading(badge: str, heading: str, intro: str = "") -> str:
    intro_html = f'\n      <p class="section-intro">{intro}</p>' if intro else ""
    return f"""
    <div class="text-center mb-40">
      <span class="section-badge">{badge}</span>
      <h2>{heading}</h2>{intro_html}
    </div>"""


def _final_cta_section(c: _Copy, heading: str, text: str, button: str) -> str:
    return f"""
<section class="final-cta-section">
  <div class="container">
    <h2>{heading}</h2>
    <p>{text}</p>
    <a href="{c.tel}" class="mega-cta-btn">📞 {button} {c.phone}</a>
  </div>
</section>"""


def _check_list(items: Sequence[str], marker: str) -> str:
    return "".join(f"<li><span>{marker}</span> {escape_html(item)}</li>" for item in items)


def generate_home_content(facts: BusinessFacts) -> str:
    """Return the home page body: hero, services, trust, process, FAQ and CTAs.

    Parameters
    ----------
    facts : BusinessFacts
        Business facts and industry vocabulary.

    Returns
    -------
    str
        HTML for the ``<main>`` element of ``index.html``.
    """
    c = _copy(facts)
    vocab = facts.vocabulary
    common_issue = escape_html(vocab.common_issue)
    service_cards = "".join(
        f"""
      <div class="service-card-pro" data-delay="{i * 100}">
        <div class="service-card-image">
          <img src="https://picsum.photos/seed/{quote(s.slug)}/400/250" alt="{escape_html(s.name)} services in {c.city}" loading="lazy">
        </div>
        <div class="service-icon-box"><span>{escape_html(s.icon or "✓")}</span></div>
        <h3>{escape_html(s.name)}</h3>
        <p>{escape_html(s.description)}</p>
        <a href="{c.tel}" class="service-call-btn">📞 Call for {escape_html(s.name)}</a>
      </div>"""
        for i, s in enumerate(facts.services[:HOME_SERVICE_LIMIT])
    )
    nearby = ", ".join(escape_html(loc.city) for loc in facts.locations[:HOME_FAQ_CITY_LIMIT])
    if len(facts.locations) > HOME_FAQ_CITY_LIMIT:
        nearby += " and more"
    areas_answer = (
        f"We serve {c.city} and surrounding areas including {nearby}."
        if nearby
        else f"We serve {c.city} and the surrounding areas."
    )
    faqs = (
        (
            "How quickly can you respond?",
            "We offer 24/7 emergency service and can often have someone at your "
            f"location within hours. Call {_phone_link(c)} now to check availability.",
        ),
        (
            "Do you offer free estimates?",
            "Yes! We provide free phone consultations and on-site estimates. "
            f"Call {_phone_link(c)} to get your free estimate today.",
        ),
        (
            "Do you work with insurance?",
            "Absolutely. We work with all major insurance companies and can help with "
            f"your claim. Call {_phone_link(c)} to learn more.",
        ),
        ("What areas do you serve?", f"{areas_answer} Call {_phone_link(c)} to confirm."),
        (
            "What should I do while waiting?",
            f"{escape_html(vocab.waiting_advice)} When you call us at {_phone_link(c)}, "
            "we'll walk you through exactly what to do.",
        ),
        (
            "How do I get started?",
            f"Simply call us at {_phone_link(c)}. You'll speak with a specialist who "
            "will help you right away.",
        ),
    )
    faq_items = "".join(
        f"""
      <div class="faq-item-pro">
        <h3>{question}</h3>
        <p>{answer}</p>
      </div>"""
        for question, answer in faqs
    )
    hero = _hero_emergency(
        c,
        badge="24/7 Emergency Service - Call Now!",
        headline=f"{c.label} Services in {c.city}",
        subheadline=f"{c.name} - Fast Response When You Need It Most",
        description=(
            f"Dealing with {common_issue}? Don't wait - every minute counts! {c.name} "
            f"provides immediate {c.lower} services throughout {c.city} and surrounding "
            f"areas. Our team is standing by right now to help you with "
            f"{escape_html(vocab.hero_service)}. Call us now for a free consultation "
            "and get the help you need today."
        ),
        urgency=("⚡ Fast Response", "🆓 Free Estimates", "🕐 Available 24/7"),
        box_header="Need Help Right Now?",
        box_text=f"Speak directly with a {c.lower} specialist who can help you immediately.",
        box_small="Tap to Call",
        box_note="Available 24 hours a day, 7 days a week",
    )
    areas = _areas_pro(
        c,
        facts.locations,
        f"{c.label} Services Near You",
        f"{c.name} provides {c.lower} services throughout {c.city} and the surrounding "
        "areas. No matter where you're located, we're just a phone call away.",
    )
    return f"""{hero}
<section class="hero-image-section">
  <div class="container">
    <div class="hero-image-wrapper">
      <img src="{HERO_IMAGE_URL}" alt="{c.label} services in {c.city} - {c.name} professional team" class="hero-main-image" loading="eager">
      <div class="image-caption">{c.name} - Professional {c.label} Services in {c.city}</div>
    </div>
  </div>
</section>
<section class="services-pro">
  <div class="container">
    <div class="section-intro">
      <span class="section-label">{escape_html(vocab.section_badge)}</span>
      <h2 data-field="servicesTitle">{c.label} Services in {c.city}</h2>
      <p class="intro-text" data-field="servicesDescription">{c.name} offers a full range of {c.lower} services to meet your needs. Whether you're dealing with {common_issue} or need {escape_html(vocab.common_service)}, we're here to help. Call us now to discuss your situation with one of our {escape_html(vocab.professionals)}.</p>
    </div>
    <div class="services-grid-pro">{service_cards}
    </div>
    <div class="services-cta-box">
      <h3>Need {c.label} Help in {c.city}?</h3>
      <p>Don't wait - call us now for immediate assistance with any {c.lower} issue.</p>
      <a href="{c.tel}" class="big-call-button">📞 Call Now: {c.phone}</a>
    </div>
  </div>
</section>
<section class="why-choose-pro">
  <div class="container">
    <div class="why-content">
      <span class="section-label">Why Call {c.name}?</span>
      <h2>Get {c.label} Help in {c.city} Today</h2>
      <p class="lead-paragraph">When you call {c.name}, you'll speak directly with a {c.lower} specialist who understands your situation. We'll discuss your needs, answer your questions, and provide a free estimate over the phone. If you decide to move forward, we can often have someone at your location the same day.</p>
      <div class="benefits-grid">
        <div class="benefit-card">
          <span class="benefit-icon">📞</span>
          <h4>Speak to a Real Person</h4>
          <p>No automated systems - talk directly with a knowledgeable {c.lower} expert who can answer all your questions.</p>
        </div>
        <div class="benefit-card">
          <span class="benefit-icon">🆓</span>
          <h4>Free Phone Consultation</h4>
          <p>Get expert advice and a preliminary estimate over the phone at no cost or obligation.</p>
        </div>
        <div class="benefit-card">
          <span class="benefit-icon">⚡</span>
          <h4>Same-Day Service Available</h4>
          <p>For {escape_html(vocab.emergency_issue)}, we can often dispatch a team to your location the same day you call.</p>
        </div>
        <div class="benefit-card">
          <span class="benefit-icon">🛠️</span>
          <h4>{escape_html(vocab.service_features[0])}</h4>
          <p>{escape_html(vocab.service_features[1])} on every job, from the first call to the final walkthrough.</p>
        </div>
      </div>
      <div class="mid-page-cta">
        <a href="{c.tel}" class="giant-phone-cta">
          <span class="cta-icon">📞</span>
          <span class="cta-text">
            <span class="cta-label">Call Now for Free Consultation</span>
            <span class="cta-number">{c.phone}</span>
          </span>
        </a>
      </div>
    </div>
  </div>
</section>
<section class="video-section">
  <div class="container">
    <div class="section-intro centered">
      <span class="section-label">See Us In Action</span>
      <h2>Watch How We Handle {c.label} Projects</h2>
      <p class="intro-text">See our team in action and learn more about our professional {c.lower} services.</p>
    </div>
    <div class="video-wrapper">
      <iframe width="560" height="315" src="https://www.youtube.com/embed/{DEFAULT_VIDEO_ID}" title="{c.label} Services in {c.city} - {c.name}" frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" allowfullscreen loading="lazy"></iframe>
    </div>
    <div class="video-cta">
      <p>Ready to get started? Call us now!</p>
      <a href="{c.tel}" class="video-call-btn">📞 {c.phone}</a>
    </div>
  </div>
</section>{areas}
<section class="process-pro">
  <div class="container">
    <div class="section-intro centered">
      <span class="section-label">What Happens When You Call</span>
      <h2>Simple 3-Step Process</h2>
    </div>
    <div class="process-steps">
      <div class="process-step">
        <div class="step-number">1</div>
        <div class="step-icon">📞</div>
        <h3>Call Us Now</h3>
        <p>Speak directly with a {c.lower} specialist who will listen to your situation and answer all your questions.</p>
      </div>
      <div class="process-step">
        <div class="step-number">2</div>
        <div class="step-icon">📋</div>
        <h3>Get a Free Estimate</h3>
        <p>We'll provide a clear, upfront estimate for the work needed - no hidden fees or surprises.</p>
      </div>
      <div class="process-step">
        <div class="step-number">3</div>
        <div class="step-icon">✅</div>
        <h3>Problem Solved</h3>
        <p>Our team handles everything from start to finish, getting your property back to normal quickly.</p>
      </div>
    </div>
    <div class="process-cta">
      <p>Ready to get started? The first step is simple:</p>
      <a href="{c.tel}" class="process-call-btn">📞 Call {c.phone}</a>
    </div>
  </div>
</section>
<section class="educational-section">
  <div class="container">
    <div class="edu-grid">
      <div class="edu-card">
        <h3>Signs You Need {c.label} Help</h3>
        <p>If you're experiencing any of these issues, don't wait - call us right away:</p>
        <ul class="edu-list">{_check_list(vocab.signs, "⚠️")}</ul>
        <a href="{c.tel}" class="edu-call-btn">Need Help? Call {c.phone}</a>
      </div>
      <div class="edu-card">
        <h3>Common {c.label} Problems We Solve</h3>
        <p>We handle all types of {c.lower} issues, including:</p>
        <ul class="edu-list">{_check_list(vocab.causes, "✓")}</ul>
        <a href="{c.tel}" class="edu-call-btn">Get Help Now: {c.phone}</a>
      </div>
    </div>
  </div>
</section>
<section class="faq-pro">
  <div class="container">
    <div class="section-intro centered">
      <span class="section-label">Questions?</span>
      <h2>Common Questions About Our {c.label} Services</h2>
      <p class="intro-text">Have questions? Call us at {_phone_link(c)} to speak with a specialist.</p>
    </div>
    <div class="faq-grid-pro">{faq_items}
    </div>
  </div>
</section>
<section class="about-pro">
  <div class="container">
    <div class="about-grid-with-image">
      <div class="about-image-col">
        <img src="{ABOUT_IMAGE_URL}" alt="{c.name} team providing {c.lower} services in {c.city}" class="about-section-image" loading="lazy">
      </div>
      <div class="about-content-col">
        <span class="section-label">About {c.name}</span>
        <h2>Your Trusted {c.label} Partner in {c.city}</h2>
        <p>{c.name} is dedicated to providing top-quality {c.lower} services to the {c.city} community. When you call us, you'll experience the difference that comes from working with a team that truly cares about solving your problem quickly and professionally.</p>
        <p>Whether you are facing {escape_html(vocab.emergency_scenario)} or planning routine work, our {escape_html(vocab.professionals)} are here to help. Give us a call today and let us show you why so many people in {c.city} choose {c.name}.</p>
        <a href="{c.tel}" class="about-call-btn">📞 Call Now: {c.phone}</a>
      </div>
    </div>
  </div>
</section>{_final_cta_pro(
        c,
        f"Ready to Solve Your {c.label} Problem?",
        "Don't wait another minute. Pick up the phone and call us now!",
        "Call Now - We're Ready to Help!",
        f"Free estimates • 24/7 availability • {c.city} and surrounding areas",
    )}{_floating_call(c)}
"""


def generate_about_content(facts: BusinessFacts) -> str:
    """Return the about page body."""
    c = _copy(facts)
    nearby = ", ".join(
        escape_html(loc.city) for loc in facts.locations[1 : 1 + ABOUT_NEARBY_LIMIT]
    )
    reach = f" and surrounding areas including {nearby}" if nearby else ""
    services = "".join(
        f"""
      <div class="service-item-compact">
        <span class="service-icon">{escape_html(s.icon or "✓")}</span>
        <div class="service-info">
          <h4>{escape_html(s.name)}</h4>
          <p>{escape_html(s.description)}</p>
        </div>
        <a href="{c.tel}" class="service-call">📞</a>
      </div>"""
        for s in facts.services
    )
    areas = "".join(
        f'<span class="area-tag">📍 {_location_name(loc)}</span>' for loc in facts.locations
    )
    values = (
        ("🎯", "Quality First", "We never cut corners. Every job receives our full attention and expertise, ensuring results that exceed expectations and stand the test of time."),
        ("⏱️", "Fast Response", "When you need help, you need it now. Our team is available 24/7 and we prioritize rapid response times for all service calls."),
        ("💬", "Clear Communication", "We believe in complete transparency. You'll always know exactly what we're doing, why we're doing it, and what it will cost."),
        ("🤝", "Customer Focus", "Your satisfaction is our top priority. We treat every customer like family and every property like our own."),
    )
    value_cards = "".join(
        f"""
      <div class="value-card">
        <span class="value-icon">{icon}</span>
        <h3>{title}</h3>
        <p>{text}</p>
      </div>"""
        for icon, title, text in values
    )
    benefits = (
        ("📞", "Real People, Real Answers", f"When you call {c.name}, you speak directly with a knowledgeable team member who can answer your questions and schedule service right away. No automated menus and no waiting on hold, just real help from real people."),
        ("⚡", "Fast, Reliable Service", f"We understand that {c.lower} issues don't wait for convenient times. That's why we offer 24/7 emergency service with rapid response times."),
        ("💵", "Upfront Pricing", "No surprises, no hidden fees. We provide clear, detailed estimates before any work begins so you know exactly what to expect."),
        ("✅", "Quality Guaranteed", "We stand behind our work. Every job we complete is backed by our satisfaction guarantee. If you're not completely happy, we'll make it right."),
    )
    benefit_rows = "".join(
        f"""
      <div class="benefit-row">
        <div class="benefit-icon-lg">{icon}</div>
        <div class="benefit-content">
          <h3>{title}</h3>
          <p>{text}</p>
        </div>
      </div>"""
        for icon, title, text in benefits
    )
    return f"""{_page_hero(c, f"About {c.name}", f"Your Trusted {c.label} Partner in {c.city}", "Call Us:")}
<section class="content-section">
  <div class="container">
    <div class="content-grid">
      <div class="content-main">
        <span class="section-badge">Our Story</span>
        <h2>Who We Are</h2>
        <p>{c.name} was founded with a simple mission: to provide the {c.city} community with reliable, professional {c.lower} services when they need it most. We understand that dealing with {escape_html(facts.vocabulary.common_issue)} can be stressful and overwhelming, which is why we've built our entire business around making the process as smooth and worry-free as possible.</p>
        <p>From our humble beginnings, we've grown to become one of the most trusted {c.lower} companies in the {c.city} area. Our success is built on hard work, dedication to quality, and an unwavering commitment to customer satisfaction.</p>
        <p>Today, {c.name} serves residential and commercial customers throughout {c.city}{reach}. No matter how big or small your {c.lower} needs, we're here to help. Give us a call at {_phone_link(c)} to experience the {c.name} difference for yourself.</p>
      </div>
    </div>
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">{_section_heading("Our Mission", "What We Stand For")}
    <div class="values-grid">{value_cards}
    </div>
  </div>
</section>
<section class="content-section">
  <div class="container">{_section_heading(f"Why Choose {c.name}", f"The {c.name} Difference", f"Here's what sets us apart from other {c.lower} companies in {c.city}:")}
    <div class="benefits-list-alt">{benefit_rows}
    </div>
    <div class="cta-box-centered">
      <p>Ready to experience the {c.name} difference?</p>
      <a href="{c.tel}" class="cta-phone-btn">📞 Call {c.phone}</a>
    </div>
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">{_section_heading("What We Do", f"Our {c.label} Services", f"{c.name} offers a complete range of {c.lower} services to meet all your needs:")}
    <div class="services-list-compact">{services}
    </div>
    <div class="text-center mt-30">
      <a href="/services" class="btn-outline">View All Services</a>
    </div>
  </div>
</section>
<section class="content-section">
  <div class="container">{_section_heading("Where We Serve", "Service Areas", f"{c.name} proudly serves {c.city} and the surrounding communities:")}
    <div class="areas-inline">{areas}</div>
    <p class="text-center mt-20">Don't see your area? Call us at {_phone_link(c)} to confirm service availability.</p>
  </div>
</section>{_final_cta_section(c, "Get in Touch Today", f"Ready to discuss your {c.lower} needs? Our friendly team is standing by to help.", "Call Now:")}
"""


def generate_contact_content(facts: BusinessFacts) -> str:
    """Return the contact page body with contact methods, form, areas and FAQ."""
    c = _copy(facts)
    email = escape_html(facts.email)
    options = "".join(
        f'<option value="{escape_html(s.slug)}">{escape_html(s.name)}</option>'
        for s in facts.services
    )
    areas = "".join(
        f"""
      <a href="/locations/{escape_html(loc.slug)}" class="area-card-contact">
        <span class="area-pin">📍</span>
        <span class="area-name">{_location_name(loc)}</span>
      </a>"""
        for loc in facts.locations
    )
    faqs = (
        ("How quickly can you respond?", f"We offer 24/7 emergency service and strive to respond as quickly as possible. For urgent situations, we can often have a team at your location within hours. Call {_phone_link(c)} for current availability."),
        ("Do you provide free estimates?", f"Yes! We provide free consultations and estimates for all {c.lower} services. Call us at {_phone_link(c)} to schedule your free estimate today."),
        ("What forms of payment do you accept?", "We accept all major credit cards, cash, and checks. We also work directly with insurance companies and can help you with your claim."),
        ("Do you offer emergency services?", f"Absolutely! We understand that {c.lower} emergencies don't wait for business hours. Our team is available 24/7 to help with urgent situations. Call {_phone_link(c)} anytime."),
    )
    faq_items = "".join(
        f"""
      <div class="faq-item">
        <h3>{question}</h3>
        <p>{answer}</p>
      </div>"""
        for question, answer in faqs
    )
    return f"""{_page_hero(c, f"Contact {c.name}", f"Get in Touch for Fast, Professional {c.label} Services", "Call Now:")}
<section class="content-section">
  <div class="container">
    <div class="contact-grid">
      <div class="contact-info-card">
        <h2>Reach Us Directly</h2>
        <p>The fastest way to get help is to call us. Our team is available 24/7 to answer your questions and schedule service.</p>
        <div class="contact-methods">
          <div class="contact-method primary">
            <span class="method-icon">📞</span>
            <div class="method-details">
              <span class="method-label">Call Us 24/7</span>
              <a href="{c.tel}" class="method-value">{c.phone}</a>
            </div>
          </div>
          <div class="contact-method">
            <span class="method-icon">📧</span>
            <div class="method-details">
              <span class="method-label">Email Us</span>
              <a href="mailto:{email}" class="method-value">{email}</a>
            </div>
          </div>
          <div class="contact-method">
            <span class="method-icon">🕐</span>
            <div class="method-details">
              <span class="method-label">Business Hours</span>
              <span class="method-value">24/7 Emergency Service Available</span>
            </div>
          </div>
        </div>
        <div class="emergency-note">
          <strong>🚨 Have an Emergency?</strong>
          <p>For {escape_html(facts.vocabulary.emergency_issue)}, call us immediately at {_phone_link(c)}. We offer 24/7 emergency service with rapid response times.</p>
        </div>
      </div>
      <div class="contact-form-card">
        <h3>Send Us a Message</h3>
        <p>Fill out the form below and we'll get back to you as soon as possible. For immediate assistance, please call us directly.</p>
        <form class="contact-form">
          <div class="form-group">
            <label for="name">Your Name *</label>
            <input type="text" id="name" name="name" required placeholder="John Smith">
          </div>
          <div class="form-row">
            <div class="form-group">
              <label for="email">Email Address *</label>
              <input type="email" id="email" name="email" required placeholder="john@example.com">
            </div>
            <div class="form-group">
              <label for="phone">Phone Number *</label>
              <input type="tel" id="phone" name="phone" required placeholder="(555) 123-4567">
            </div>
          </div>
          <div class="form-group">
            <label for="service">Service Needed</label>
            <select id="service" name="service">
              <option value="">Select a service...</option>{options}
              <option value="other">Other</option>
            </select>
          </div>
          <div class="form-group">
            <label for="message">How Can We Help? *</label>
            <textarea id="message" name="message" rows="4" required placeholder="Please describe your situation..."></textarea>
          </div>
          <button type="submit" class="form-submit-btn">Send Message</button>
        </form>
      </div>
    </div>
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">{_section_heading("Service Areas", "Where We Provide Service", f"{c.name} serves {c.city} and the following surrounding areas:")}
    <div class="areas-grid-contact">{areas}
    </div>
    <p class="text-center mt-20">Not sure if we service your area? Call {_phone_link(c)} to find out!</p>
  </div>
</section>
<section class="content-section">
  <div class="container">{_section_heading("Common Questions", "Frequently Asked Questions")}
    <div class="faq-list">{faq_items}
    </div>
  </div>
</section>{_final_cta_section(c, f"Need {c.label} Help?", "Don't wait. Call us now for fast, professional service!", "Call")}
"""


def generate_services_content(facts: BusinessFacts) -> str:
    """Return the services overview body with one card per service."""
    c = _copy(facts)
    cards = "".join(
        f"""
      <div class="service-card-lg">
        <div class="service-card-img">
          <img src="https://picsum.photos/seed/{quote(s.slug)}/400/200" alt="{escape_html(s.name)}" loading="lazy">
        </div>
        <div class="service-card-icon">{escape_html(s.icon or "✓")}</div>
        <h3>{escape_html(s.name)}</h3>
        <p>{escape_html(s.description)}</p>
        <div class="service-card-actions">
          <a href="/services/{escape_html(s.slug)}" class="btn-learn-more">Learn More →</a>
          <a href="{c.tel}" class="btn-call-service">📞 Call Now</a>
        </div>
      </div>"""
        for s in facts.services
    )
    features = (
        ("📞", "24/7 Availability", "We're here when you need us, day or night."),
        ("⚡", "Fast Response", "Quick arrival times for all service calls."),
        ("💵", "Fair Pricing", "Upfront quotes with no hidden fees."),
        ("✅", "Quality Work", "Professional results guaranteed."),
    )
    feature_items = "".join(
        f"""
      <div class="feature-item">
        <span class="feature-icon">{icon}</span>
        <h4>{title}</h4>
        <p>{text}</p>
      </div>"""
        for icon, title, text in features
    )
    areas = "".join(
        f'<a href="/locations/{escape_html(loc.slug)}" class="area-tag-link">📍 {_location_name(loc)}</a>'
        for loc in facts.locations
    )
    areas_section = ""
    if areas:
        areas_section = f"""
<section class="content-section">
  <div class="container">{_section_heading("Service Areas", "Where We Provide Services")}
    <div class="areas-inline">{areas}</div>
  </div>
</section>"""
    return f"""{_page_hero(c, f"Our {c.label} Services", f"Complete {c.label} Solutions for {c.city} and Surrounding Areas", "Call for Service:")}
<section class="content-section">
  <div class="container">{_section_heading("What We Offer", f"Professional {c.label} Services", f"{c.name} provides comprehensive {c.lower} services to meet all your needs. Click on any service to learn more, or call us at {_phone_link(c)} to discuss your specific situation.")}
    <div class="services-card-grid">{cards}
    </div>
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">{_section_heading(f"Why {c.name}", "Why Choose Our Services")}
    <div class="features-row">{feature_items}
    </div>
  </div>
</section>{areas_section}{_final_cta_section(c, f"Need {c.label} Service?", "Call now to speak with a specialist about your needs.", "Call")}
"""


def generate_locations_content(facts: BusinessFacts) -> str:
    """Return the service-areas overview body with one card per location."""
    c = _copy(facts)
    cards = "".join(
        f"""
      <a href="/locations/{escape_html(loc.slug)}" class="location-card-lg">
        <div class="location-card-img">
          <img src="https://picsum.photos/seed/{quote(loc.slug)}/400/200" alt="{_location_name(loc)}" loading="lazy">
        </div>
        <div class="location-card-pin">📍</div>
        <h3>{_location_name(loc)}</h3>
        <p>{c.label} services for {escape_html(loc.city)} residents and businesses.</p>
        <span class="location-card-link">View Services →</span>
      </a>"""
        for loc in facts.locations
    )
    tags = "".join(
        f'<span class="service-tag">{escape_html(s.icon or "✓")} {escape_html(s.name)}</span>'
        for s in facts.services
    )
    return f"""{_page_hero(c, "Service Areas", f"{c.label} Services Throughout {c.city} and Surrounding Areas", "Call Us:")}
<section class="content-section">
  <div class="container">{_section_heading("Where We Serve", "Our Service Areas", f"{c.name} proudly provides professional {c.lower} services to the following communities. Click on your location to learn more about our services in your area.")}
    <div class="locations-card-grid">{cards}
    </div>
    <div class="text-center mt-40">
      <p>Don't see your city listed? We may still be able to help!</p>
      <a href="{c.tel}" class="cta-phone-btn-outline">📞 Call to Confirm: {c.phone}</a>
    </div>
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">{_section_heading("Our Services", "Services Available in All Areas", f"No matter where you're located, {c.name} offers the same great services:")}
    <div class="services-list-inline">{tags}</div>
  </div>
</section>{_final_cta_section(c, "Need Service in Your Area?", "Call now to confirm availability and schedule service.", "Call")}
"""


def generate_blog_index_content(facts: BusinessFacts, posts: Sequence[BlogPost]) -> str:
    """Return the blog index body.

    Parameters
    ----------
    facts : BusinessFacts
        Business facts.
    posts : Sequence[BlogPost]
        Posts to list, already filtered to published ones and ordered.

    Returns
    -------
    str
        HTML body; an empty-state message replaces the grid when ``posts``
        is empty.
    """
    c = _copy(facts)
    if posts:
        cards = "".join(
            f"""
      <article class="blog-card">
        <div class="blog-card-image"><span class="blog-card-icon">📰</span></div>
        <div class="blog-card-content">
          <span class="blog-card-date">{escape_html(format_date(p.published_at))}</span>
          <h3><a href="/blog/{escape_html(p.slug)}.html">{escape_html(p.title)}</a></h3>
          <p>{escape_html(p.excerpt)}</p>
          <a href="/blog/{escape_html(p.slug)}.html" class="blog-read-more">Read More →</a>
        </div>
      </article>"""
            for p in posts
        )
        listing = f'<div class="blog-card-grid">{cards}\n    </div>'
    else:
        listing = '<p class="blog-empty">No blog posts yet. Check back soon!</p>'
    return f"""{_page_hero(c, f"{c.name} Blog", f"Tips, Guides, and News About {c.label} Services", "Questions? Call")}
<section class="content-section">
  <div class="container">
    {listing}
  </div>
</section>
<section class="content-section alt-bg">
  <div class="container">
    <div class="blog-cta-box">
      <h2>Have Questions About {c.label}?</h2>
      <p>Our experts are happy to help! Call us for free advice and consultations.</p>
      <a href="{c.tel}" class="cta-phone-btn">📞 Call {c.phone}</a>
    </div>
  </div>
</section>
"""


def _service_details(custom_html: str | None) -> str:
    if not custom_html:
        return ""
    return f"""
<section class="service-details">
  <div class="container">
    <div class="custom-content">{custom_html}</div>
  </div>
</section>"""


def generate_service_page_content(
    facts: BusinessFacts, service: Service, custom_html: str | None = None
) -> str:
    """Return the body of ``services/<slug>.html``.

    Parameters
    ----------
    facts : BusinessFacts
        Business facts.
    service : Service
        The service the page describes.
    custom_html : str, optional
        Trusted HTML (for example AI-written copy) placed in a
        ``service-details`` block after the hero.

    Returns
    -------
    str
        HTML for the page body.
    """
    c = _copy(facts)
    name = escape_html(service.name)
    lower = name.lower()
    icon = escape_html(service.icon or "✓")
    description = escape_html(service.description)
    why = (
        "Licensed and insured professionals",
        "Upfront, transparent pricing",
        "Same-day service available",
        "100% satisfaction guarantee",
        f"Local experts who know {facts.city}",
    )
    process = (
        ("1️⃣", "Call us for a free consultation"),
        ("2️⃣", "We'll assess your needs and provide a quote"),
        ("3️⃣", "Our team completes the work professionally"),
        ("4️⃣", "We follow up to ensure your satisfaction"),
        ("5️⃣", "Enjoy our workmanship guarantee"),
    )
    process_items = "".join(f"<li><span>{mark}</span> {text}</li>" for mark, text in process)
    hero = _hero_emergency(
        c,
        badge=f"{icon} {name}",
        headline=f"{name} in {c.city}",
        subheadline=f"{c.name} - Professional {name} Services",
        description=(
            f"{description} Our team of experienced professionals is ready to help you "
            f"with all your {lower} needs. We serve {c.city} and the surrounding areas "
            "with fast, reliable service. Call us today for a free estimate!"
        ),
        urgency=("⚡ Fast Response", "🆓 Free Estimates", "🕐 Available 24/7"),
        box_header=f"Need {name}?",
        box_text="Speak directly with a specialist who can help you immediately.",
        box_small="Tap to Call",
        box_note="Available 24 hours a day, 7 days a week",
    )
    areas = _areas_pro(
        c,
        facts.locations,
        f"{name} Near You",
        f"We provide {lower} services throughout {c.city} and the surrounding areas.",
    )
    return f"""{hero}{_service_details(custom_html)}
<section class="services-pro">
  <div class="container">
    <div class="section-intro">
      <span class="section-label">{icon} About This Service</span>
      <h2>{name} Services in {c.city}</h2>
      <p class="intro-text">{c.name} offers professional {lower} services to homeowners and businesses throughout {c.city}. Our experienced {escape_html(facts.vocabulary.professionals)} are equipped with the latest tools and technology to handle any job, big or small. We pride ourselves on quality workmanship, transparent pricing, and exceptional customer service.</p>
    </div>
    <div class="edu-grid">
      <div class="edu-card">
        <h3>Why Choose Us for {name}?</h3>
        <ul class="edu-list">{_check_list(why, "✓")}</ul>
        <a href="{c.tel}" class="edu-call-btn">Call Now: {c.phone}</a>
      </div>
      <div class="edu-card">
        <h3>Our {name} Process</h3>
        <ul class="edu-list">{process_items}</ul>
        <a href="{c.tel}" class="edu-call-btn">Get Started: {c.phone}</a>
      </div>
    </div>
    <div class="services-cta-box">
      <h3>Ready for Professional {name}?</h3>
      <p>Don't wait - call us now for immediate assistance with your {lower} needs.</p>
      <a href="{c.tel}" class="big-call-button">📞 Call Now: {c.phone}</a>
    </div>
  </div>
</section>{areas}{_final_cta_pro(
        c,
        f"Get {name} Today!",
        "Pick up the phone and call us now for fast, professional service.",
        "Call Now - We're Ready to Help!",
        f"Free estimates • Same-day service • {c.city} and surrounding areas",
    )}{_floating_call(c)}
"""


def generate_location_page_content(
    facts: BusinessFacts, location: Location, custom_html: str | None = None
) -> str:
    """Return the body of ``locations/<slug>.html``.

    ``custom_html`` is embedded the same way as on service pages.
    """
    c = _copy(facts)
    city = escape_html(location.city)
    place = _location_name(location)
    if location.description:
        description = escape_html(location.description)
    else:
        description = (
            f"Looking for reliable {c.lower} services in {place}? {c.name} is proud to "
            f"serve the {city} community with professional, high-quality services. Our "
            f"team of local experts understands the unique needs of {city} residents "
            "and businesses."
        )
    cards = "".join(
        f"""
      <div class="service-card-pro" data-delay="{i * 100}">
        <div class="service-icon-box"><span>{escape_html(s.icon or "✓")}</span></div>
        <h3>{escape_html(s.name)}</h3>
        <p>{escape_html(s.description)}</p>
        <a href="/services/{escape_html(s.slug)}" class="service-call-btn">Learn More →</a>
      </div>"""
        for i, s in enumerate(facts.services[:HOME_SERVICE_LIMIT])
    )
    benefits = (
        ("📍", f"Local to {city}", f"We're part of the {city} community and treat every customer like a neighbor."),
        ("⚡", "Fast Response", f"Because we're local, we can often provide same-day service to {city} customers."),
        ("🆓", "Free Estimates", f"Get a free, no-obligation quote for any {c.lower} project in {city}."),
        ("✅", "Satisfaction Guarantee", "We stand behind our work with a 100% satisfaction guarantee."),
    )
    benefit_cards = "".join(
        f"""
        <div class="benefit-card">
          <span class="benefit-icon">{icon}</span>
          <h4>{title}</h4>
          <p>{text}</p>
        </div>"""
        for icon, title, text in benefits
    )
    hero = _hero_emergency(
        c,
        badge=f"📍 Serving {place}",
        headline=f"{c.label} Services in {place}",
        subheadline=f"{c.name} - Your Local {c.label} Experts",
        description=description,
        urgency=("📍 Local Experts", "⚡ Fast Response", "🆓 Free Estimates"),
        box_header=f"Need Help in {city}?",
        box_text=f"We're your local {c.lower} specialists, ready to help!",
        box_small=f"Call {city}",
        box_note=f"Serving {place} and nearby areas",
    )
    return f"""{hero}{_service_details(custom_html)}
<section class="services-pro">
  <div class="container">
    <div class="section-intro">
      <span class="section-label">Our Services in {city}</span>
      <h2>{c.label} Services Available in {place}</h2>
      <p class="intro-text">{c.name} offers a comprehensive range of {c.lower} services to residents and businesses in {city}. No matter what you need, our experienced local team is here to help.</p>
    </div>
    <div class="services-grid-pro">{cards}
    </div>
    <div class="services-cta-box">
      <h3>Need {c.label} Help in {city}?</h3>
      <p>Our local team is ready to assist you with any {c.lower} needs.</p>
      <a href="{c.tel}" class="big-call-button">📞 Call Now: {c.phone}</a>
    </div>
  </div>
</section>
<section class="why-choose-pro">
  <div class="container">
    <div class="why-content">
      <span class="section-label">Why {city} Chooses Us</span>
      <h2>{c.name} in {place}</h2>
      <p class="lead-paragraph">As a trusted {c.lower} provider in {city}, we've built our reputation on quality workmanship, honest pricing, and exceptional customer service. Our team knows {city} and understands the specific needs of local homes and businesses.</p>
      <div class="benefits-grid">{benefit_cards}
      </div>
    </div>
  </div>
</section>{_final_cta_pro(
        c,
        f"Ready for {c.label} Service in {city}?",
        f"Call your local {c.lower} experts today!",
        f"Call {city} Now!",
        f"Free estimates • Local experts • Serving {place}",
    )}{_floating_call(c)}
"""


def _share_links(url: str, title: str) -> str:
    u = quote(url, safe="")
    t = quote(title, safe="")
    return (
        f'<a href="https://twitter.com/intent/tweet?url={u}&amp;text={t}" target="_blank" rel="noopener noreferrer">Twitter</a>\n'
        f'        <a href="https://www.facebook.com/sharer/sharer.php?u={u}" target="_blank" rel="noopener noreferrer">Facebook</a>\n'
        f'        <a href="https://www.linkedin.com/shareArticle?mini=true&amp;url={u}&amp;title={t}" target="_blank" rel="noopener noreferrer">LinkedIn</a>'
    )


def generate_blog_post_content(facts: BusinessFacts, post: BlogPost) -> str:
    """Return the article body of ``blog/<slug>.html``.

    The post HTML is trusted but post-processed: external links open in a
    new tab and images are lazy-loaded.
    """
    canonical = f"{facts.base_url}/blog/{post.slug}"
    title = escape_html(post.title)
    image = ""
    if post.featured_image:
        image = f"""
    <figure class="blog-featured-image">
      <img src="{escape_html(post.featured_image)}" alt="{title}" itemprop="image" loading="lazy">
    </figure>"""
    tags = ""
    if post.tags:
        tags = '<span class="blog-tags">' + "".join(
            f'<span class="blog-tag">{escape_html(tag)}</span>' for tag in post.tags
        ) + "</span>"
    return f"""
<article class="blog-post" itemscope itemtype="https://schema.org/BlogPosting">
  <meta itemprop="mainEntityOfPage" content="{escape_html(canonical)}">
  <header class="blog-post-header">{image}
    <div class="blog-post-meta">
      <time datetime="{escape_html(post.published_at)}" itemprop="datePublished">{escape_html(format_date(post.published_at))}</time>
      {tags}
    </div>
    <h1 itemprop="headline">{title}</h1>
    <div class="blog-author" itemprop="author" itemscope itemtype="https://schema.org/Person">
      <span itemprop="name">{escape_html(post.author or facts.name)}</span>
    </div>
  </header>
  <div class="blog-post-content" itemprop="articleBody">
    {process_content_for_output(post.content)}
  </div>
  <footer class="blog-post-footer">
    <div class="blog-share">
      <span>Share:</span>
      {_share_links(canonical, post.title)}
    </div>
    <a href="/blog" class="back-to-blog">← Back to Blog</a>
  </footer>
</article>
"""


__all__ = [
    "BusinessFacts",
    "generate_about_content",
    "generate_blog_index_content",
    "generate_blog_post_content",
    "generate_contact_content",
    "generate_home_content",
    "generate_location_page_content",
    "generate_locations_content",
    "generate_service_page_content",
    "generate_services_content",
]
