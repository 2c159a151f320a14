"""Template copy used whenever AI generation is unavailable or fails.

Output uses only ``h2``, ``h3``, ``p``, ``ul``, ``ol`` and ``li`` so it can
be embedded anywhere a custom-content section may appear.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from src.pipeline.site_generator.markup import escape_html

from .prompts import request_location

if TYPE_CHECKING:
    from .writer import ContentRequest


def _items(tag: str, entries: tuple[str, ...]) -> str:
    rows = "\n".join(f"    <li>{entry}</li>" for entry in entries)
    return f"<{tag}>\n{rows}\n</{tag}>"


def _home(name: str, industry: str, location: str, service: str) -> str:
    return f"""
<h2>Welcome to {name}</h2>
<p>{name} is your trusted partner for professional {industry} services in {location}. With years of experience and a commitment to excellence, we deliver outstanding results that exceed your expectations.</p>

<h3>Why Choose {name}?</h3>
<p>When you need reliable {industry} services, you deserve a company that puts your needs first. Here's what sets us apart:</p>
{_items("ul", (
    "Experienced Professionals - Our team brings years of expertise to every project",
    "24/7 Availability - We're here when you need us, including emergencies",
    "Transparent Pricing - No hidden fees or surprise charges",
    "Quality Guaranteed - We stand behind our work with satisfaction guarantees",
    "Licensed &amp; Insured - Full coverage for your peace of mind",
))}

<h3>Our Services</h3>
<p>We offer comprehensive {industry} solutions tailored to your specific needs. From routine maintenance to complex projects, our skilled technicians handle it all with professionalism and care.</p>

<h3>Serving {location} and Surrounding Areas</h3>
<p>{name} proudly serves {location} and the surrounding communities. Our local team understands the unique needs of our area and is committed to providing fast, responsive service.</p>

<h3>Get Started Today</h3>
<p>Ready to experience the {name} difference? Contact us now for a free consultation and estimate. Our friendly team is standing by to help with all your {industry} needs.</p>"""


def _about(name: str, industry: str, location: str, service: str) -> str:
    return f"""
<h2>About {name}</h2>
<p>{name} has been serving the {location} community with dedication and excellence. Our mission is to provide top-quality {industry} services that exceed expectations and build lasting relationships with our customers.</p>

<h3>Our Story</h3>
<p>Founded with a commitment to quality and customer service, {name} has grown to become a trusted name in the {industry} industry. We take pride in every project we complete and treat every customer like family.</p>

<h3>Our Values</h3>
{_items("ul", (
    "Integrity - We believe in honest, transparent service",
    "Quality - We never cut corners on quality",
    "Customer Focus - Your satisfaction is our top priority",
    "Reliability - We're there when you need us",
))}

<h3>Our Team</h3>
<p>Our team consists of highly trained, certified professionals who bring years of experience to every job. We invest in ongoing training to ensure our team stays current with the latest techniques and best practices.</p>

<h3>Community Commitment</h3>
<p>As a local business, we believe in giving back to the community that has supported us. We actively participate in local events and strive to be a positive force in our neighborhood.</p>"""


def _service(name: str, industry: str, location: str, service: str) -> str:
    return f"""
<h2>Professional {service} Services</h2>
<p>{name} offers comprehensive {service} services designed to meet your specific needs. Our experienced team uses the latest techniques and equipment to deliver exceptional results.</p>

<h3>What We Offer</h3>
<p>Our {service} service includes:</p>
{_items("ul", (
    "Thorough assessment and consultation",
    "Professional-grade equipment and materials",
    "Experienced, certified technicians",
    "Complete project management",
    "Quality assurance and follow-up",
))}

<h3>Our Process</h3>
{_items("ol", (
    "Free Consultation - We assess your needs and provide a detailed quote",
    "Planning - We develop a customized plan for your project",
    "Professional Execution - Our team delivers quality workmanship",
    "Quality Check - We verify everything meets our high standards",
    "Follow-Up - We ensure your complete satisfaction",
))}

<h3>Why Choose Us for {service}?</h3>
{_items("ul", (
    f"Years of experience in {service}",
    "Licensed and insured professionals",
    "Competitive pricing with no hidden fees",
    "Satisfaction guaranteed on all work",
    "Fast response times",
))}

<h3>Ready to Get Started?</h3>
<p>Contact {name} today for a free estimate on your {service} project. Our friendly team is ready to help!</p>"""


def _location(name: str, industry: str, location: str, service: str) -> str:
    return f"""
<h2>{industry.title()} Services in {location}</h2>
<p>{name} proudly serves {location} with professional {industry} services. Our local team understands the unique needs of our community and is ready to help 24/7.</p>

<h3>Your Local {industry.title()} Experts</h3>
<p>When you need {industry} services in {location}, choose a company that's part of your community. {name} has built strong relationships with residents and businesses throughout the area.</p>

<h3>Services Available in {location}</h3>
<p>We offer a full range of {industry} services to meet your needs, including emergency services, routine maintenance, and major projects.</p>

<h3>Why {location} Chooses {name}</h3>
{_items("ul", (
    f"Local Knowledge - We understand {location}'s unique needs",
    "Fast Response - Being local means we get there quickly",
    "Community Trust - We're your neighbors first",
    "24/7 Availability - Emergencies don't wait, and neither do we",
))}

<h3>Contact Us in {location}</h3>
<p>Ready to get started? Our {location} team is standing by to help with all your {industry} needs. Call now for a free consultation!</p>"""


def _contact(name: str, industry: str, location: str, service: str) -> str:
    return """
<h2>Get In Touch</h2>
<p>We'd love to hear from you! Whether you have a question about our services, need a quote, or want to schedule an appointment, our team is ready to help.</p>

<h3>Fast Response Guaranteed</h3>
<p>We understand your time is valuable. Our team responds to all inquiries within 24 hours, and often much sooner. For emergencies, call us directly for immediate assistance.</p>"""


FALLBACK_BUILDERS: dict[str, Callable[[str, str, str, str], str]] = {
    "home": _home,
    "about": _about,
    "service": _service,
    "location": _location,
    "contact": _contact,
}


def fallback_content(request: ContentRequest) -> str:
    """Return template copy for ``request``, keyed by its page type.

    Unknown page types get a single welcome paragraph.

    Examples
    --------
    >>> from src.pipeline.content_writer.writer import ContentRequest
    >>> fallback_content(ContentRequest("Acme", "plumbing", page_type="contact")).strip()[:20]
    '<h2>Get In Touch</h2>'
    """
    name = escape_html(request.business_name)
    industry = escape_html(request.industry or "local service")
    location = escape_html(request_location(request))
    service = escape_html(request.service_name or "Our")
    builder = FALLBACK_BUILDERS.get(request.page_type)
    if builder is None:
        return f"<p>Welcome to {name}. Contact us for {industry} services in {location}.</p>"
    return builder(name, industry, location, service)


__all__ = ["FALLBACK_BUILDERS", "fallback_content"]
