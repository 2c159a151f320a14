"""Layout shell shared by every generated page.

The header, footer, client script and CSS variable block are produced by the
functions in this module and nothing else, so pages built by the section
renderer and pages built by the rich generators look and navigate the same.
``wrap`` assembles a complete HTML document around any page body.
"""

from __future__ import annotations

import datetime as dt
import logging
from urllib.parse import quote

from src.config import (
    DEFAULT_EMAIL,
    DEFAULT_PHONE,
    FOOTER_LINK_LIMIT,
    MOBILE_MENU_SERVICE_LIMIT,
    NAV_DROPDOWN_LIMIT,
)

from .colors import css_variable_block
from .markup import escape_html, initials, phone_href
from .models import BrandColors, Page, Website

logger = logging.getLogger(__name__)

SOCIAL_ICONS: tuple[tuple[str, str, str], ...] = (
    ("facebook", "Facebook", "📘"),
    ("twitter", "Twitter", "🐦"),
    ("instagram", "Instagram", "📷"),
    ("linkedin", "LinkedIn", "💼"),
    ("youtube", "YouTube", "📺"),
)

FONT_LINKS = (
    '<link rel="preconnect" href="https://fonts.googleapis.com">\n'
    '  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>\n'
    '  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap" rel="stylesheet">'
)

BASE_CSS = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: var(--text); background: var(--bg); }
a { color: var(--primary); text-decoration: none; transition: color 0.3s ease; }
a:hover { color: var(--primary-dark); }
img { max-width: 100%; }
.container { max-width: 1200px; margin: 0 auto; padding: 0 20px; }
.header { background: var(--bg); box-shadow: 0 2px 10px rgba(0,0,0,0.1); position: sticky; top: 0; z-index: 1000; }
.header-inner { display: flex; justify-content: space-between; align-items: center; padding: 15px 0; }
.logo { display: flex; align-items: center; gap: 12px; }
.logo-icon { width: 45px; height: 45px; background: linear-gradient(135deg, var(--primary), var(--secondary)); border-radius: 10px; display: flex; align-items: center; justify-content: center; color: white; font-weight: 800; }
.logo-image, .footer-logo-image { height: 45px; width: auto; object-fit: contain; }
.logo-text { font-size: 1.25rem; font-weight: 700; color: var(--text); }
.nav { display: flex; align-items: center; gap: 5px; }
.nav-link { display: inline-block; padding: 10px 15px; color: var(--text); font-weight: 500; }
.nav-link:hover { color: var(--primary); }
.nav-dropdown { position: relative; }
.dropdown-toggle .arrow { font-size: 0.7rem; margin-left: 4px; }
.dropdown-menu { position: absolute; top: 100%; left: 0; background: white; min-width: 240px; border-radius: 12px; box-shadow: 0 15px 40px rgba(0,0,0,0.15); padding: 10px; opacity: 0; visibility: hidden; transform: translateY(10px); transition: all 0.3s ease; }
.nav-dropdown:hover .dropdown-menu { opacity: 1; visibility: visible; transform: translateY(0); }
.dropdown-item { display: flex; align-items: center; gap: 10px; padding: 12px 15px; color: var(--text); border-radius: 8px; }
.dropdown-item:hover { background: #f0f7ff; color: var(--primary); }
.dropdown-item.view-all { border-top: 1px solid #eee; margin-top: 8px; color: var(--primary); font-weight: 600; }
.header-actions { display: flex; align-items: center; gap: 15px; }
.header-cta { display: inline-flex; align-items: center; gap: 8px; background: var(--primary); color: white !important; padding: 12px 24px; border-radius: 8px; font-weight: 600; }
.header-cta:hover { background: var(--primary-dark); }
.mobile-menu-btn { display: none; background: none; border: none; font-size: 1.5rem; cursor: pointer; padding: 5px; }
.mobile-menu { display: none; flex-direction: column; background: white; border-top: 1px solid #eee; padding: 15px 20px; }
.mobile-menu.active { display: flex; }
.mobile-menu a { padding: 12px 0; color: var(--text); border-bottom: 1px solid #f0f0f0; }
.mobile-submenu { padding-left: 20px !important; font-size: 0.9rem; color: var(--text-light) !important; }
.mobile-phone { margin-top: 10px; color: var(--primary) !important; font-weight: 600; }
.btn { display: inline-block; padding: 14px 28px; border-radius: 8px; font-weight: 600; transition: all 0.3s ease; }
.btn-primary { background: var(--primary); color: white; }
.btn-primary:hover { background: var(--primary-dark); color: white; }
.btn-secondary { background: transparent; color: var(--primary); border: 2px solid var(--primary); }
.section-title { text-align: center; margin-bottom: 50px; }
.section-title h2 { font-size: 2.25rem; margin-bottom: 12px; }
.section-subtitle { color: var(--text-light); font-size: 1.1rem; }
.hero { background: linear-gradient(135deg, var(--primary), var(--secondary)); background-size: cover; color: white; padding: 100px 0; text-align: center; }
.hero h1 { font-size: 3rem; margin-bottom: 20px; }
.hero-subtitle { font-size: 1.25rem; opacity: 0.9; margin-bottom: 30px; }
.hero-cta, .cta-buttons { display: flex; gap: 15px; justify-content: center; flex-wrap: wrap; }
.hero .btn-primary { background: white; color: var(--primary); }
.hero .btn-secondary { color: white; border-color: white; }
.phone-number { margin-top: 20px; font-size: 1.25rem; }
.phone-number a { color: white; }
.services-section, .about-section, .testimonials-section, .contact-section, .locations-section, .blog-section, .faq-section, .features-section, .gallery-section, .image-section, .video-section, .text-block-section, .custom-section { padding: 80px 0; }
.services-grid, .features-grid, .testimonials-grid, .blog-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 30px; }
.service-card, .feature-card, .testimonial-card, .blog-card { background: white; padding: 30px; border-radius: 12px; box-shadow: 0 4px 20px rgba(0,0,0,0.08); }
.service-icon, .feature-icon { font-size: 2.5rem; margin-bottom: 15px; }
.about-content { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 50px; align-items: center; }
.features-list { list-style: none; margin-top: 20px; }
.features-list li { display: flex; gap: 10px; padding: 8px 0; }
.rating { color: #fbbf24; margin-bottom: 10px; }
.testimonial-author { display: flex; align-items: center; gap: 12px; margin-top: 15px; }
.testimonial-avatar { width: 48px; height: 48px; border-radius: 50%; object-fit: cover; }
.cta-section { background: var(--primary); color: white; padding: 80px 0; text-align: center; }
.cta-section .btn-primary { background: white; color: var(--primary); }
.cta-section .btn-secondary { color: white; border-color: white; }
.contact-grid { display: grid; grid-template-columns: 2fr 1fr; gap: 40px; }
.contact-form { display: flex; flex-direction: column; gap: 15px; }
.contact-form input, .contact-form textarea, .contact-form select { padding: 14px; border: 1px solid #ddd; border-radius: 8px; font: inherit; }
.locations-grid { display: flex; flex-wrap: wrap; gap: 15px; justify-content: center; }
.location-item { background: #f8fafc; padding: 12px 20px; border-radius: 30px; }
.trust-badges { background: #f8fafc; padding: 30px 0; }
.badges-row { display: flex; flex-wrap: wrap; justify-content: center; gap: 30px; }
.trust-badge { display: flex; align-items: center; gap: 8px; font-weight: 600; }
.gallery-grid { display: grid; gap: 20px; }
.gallery-item img { width: 100%; border-radius: 8px; }
.faq-item { border-bottom: 1px solid #eee; padding: 20px 0; }
.faq-question { background: none; border: none; font: inherit; font-weight: 600; font-size: 1.1rem; text-align: left; width: 100%; cursor: pointer; }
.faq-answer { margin-top: 10px; color: var(--text-light); }
.video-wrapper { position: relative; padding-bottom: 56.25%; height: 0; overflow: hidden; border-radius: 12px; }
.video-wrapper iframe { position: absolute; top: 0; left: 0; width: 100%; height: 100%; }
.empty-state { text-align: center; color: var(--text-light); padding: 40px 0; }
.section-invalid { padding: 30px 0; background: #fef2f2; border: 2px dashed #ef4444; }
.invalid-flag { color: #b91c1c; font-weight: 700; text-transform: uppercase; }
.invalid-raw { white-space: pre-wrap; background: white; padding: 15px; border-radius: 8px; font-size: 0.85rem; }
.footer { background: #111827; color: #d1d5db; padding: 60px 0 30px; }
.footer a { color: #d1d5db; }
.footer a:hover { color: white; }
.footer-map { margin-bottom: 40px; }
.footer-grid { display: grid; grid-template-columns: 2fr 1fr 1fr 1fr; gap: 40px; }
.footer-logo { display: flex; align-items: center; gap: 12px; margin-bottom: 15px; }
.footer .logo-text { color: white; }
.footer-col h4 { color: white; margin-bottom: 15px; }
.footer-col ul { list-style: none; }
.footer-col li { padding: 5px 0; }
.footer-contact, .nap-info { display: flex; flex-direction: column; gap: 8px; margin-top: 15px; }
.nap-address { display: flex; gap: 8px; }
.nap-address address { font-style: normal; }
.footer-bottom { border-top: 1px solid #374151; margin-top: 40px; padding-top: 25px; display: flex; flex-wrap: wrap; justify-content: space-between; gap: 15px; }
.footer-social { display: flex; gap: 12px; font-size: 1.25rem; }
.footer-legal { display: flex; gap: 10px; }
#backToTop { position: fixed; bottom: 30px; right: 30px; width: 50px; height: 50px; border-radius: 50%; background: var(--primary); color: white; border: none; cursor: pointer; display: none; align-items: center; justify-content: center; font-size: 1.5rem; box-shadow: 0 4px 15px rgba(0,0,0,0.2); z-index: 999; }
@media (max-width: 900px) {
  .nav, .header-actions { display: none; }
  .mobile-menu-btn { display: block; }
  .footer-grid, .contact-grid { grid-template-columns: 1fr; }
  .hero h1 { font-size: 2.25rem; }
}
"""

CLIENT_JS = """
function toggleMobileMenu() {
  var menu = document.getElementById('mobileMenu');
  if (menu) { menu.classList.toggle('active'); }
}
document.querySelectorAll('a[href^="#"]').forEach(function (anchor) {
  anchor.addEventListener('click', function (e) {
    var id = this.getAttribute('href');
    if (id.length < 2) { return; }
    var target = document.querySelector(id);
    if (target) {
      e.preventDefault();
      target.scrollIntoView({ behavior: 'smooth' });
    }
  });
});
document.querySelectorAll('form').forEach(function (form) {
  form.addEventListener('submit', function (e) {
    e.preventDefault();
    alert('Thank you for your message! We will get back to you soon.');
    this.reset();
  });
});
var backToTopBtn = document.getElementById('backToTop');
if (backToTopBtn) {
  window.addEventListener('scroll', function () {
    backToTopBtn.style.display = window.scrollY > 300 ? 'flex' : 'none';
  });
}
"""


def generate_css(colors: BrandColors) -> str:
    """Return the CSS variable block followed by the shared base stylesheet."""
    return css_variable_block(colors) + "\n" + BASE_CSS


def generate_js() -> str:
    """Return the small client script appended to every page."""
    return CLIENT_JS


def _logo(website: Website, image_class: str) -> str:
    name = escape_html(website.display_name)
    if website.logo:
        return f'<img src="{escape_html(website.logo)}" alt="{name}" class="{image_class}">'
    return f'<div class="logo-icon">{escape_html(initials(website.display_name))}</div>'


def render_header(website: Website) -> str:
    """Render the site header with dropdown navigation and the mobile menu.

    The Areas dropdown is only emitted when the website has locations.
    """
    phone = website.phone or DEFAULT_PHONE
    service_items = "".join(
        f'<a href="/services/{escape_html(s.slug)}" class="dropdown-item">'
        f'<span class="dropdown-icon">{escape_html(s.icon or "✓")}</span>{escape_html(s.name)}</a>'
        for s in website.services[:NAV_DROPDOWN_LIMIT]
    )
    areas = ""
    if website.locations:
        location_items = "".join(
            f'<a href="/locations/{escape_html(loc.slug)}" class="dropdown-item">'
            f'<span class="dropdown-icon">📍</span>{escape_html(loc.display_name)}</a>'
            for loc in website.locations[:NAV_DROPDOWN_LIMIT]
        )
        areas = f"""
        <div class="nav-dropdown">
          <a href="#" class="nav-link dropdown-toggle">Areas <span class="arrow">▼</span></a>
          <div class="dropdown-menu">{location_items}</div>
        </div>"""
    mobile_services = "".join(
        f'<a href="/services/{escape_html(s.slug)}" class="mobile-submenu">{escape_html(s.name)}</a>'
        for s in website.services[:MOBILE_MENU_SERVICE_LIMIT]
    )
    return f"""
<header class="header">
  <div class="container">
    <div class="header-inner">
      <a href="/" class="logo">
        {_logo(website, "logo-image")}
        <span class="logo-text">{escape_html(website.display_name)}</span>
      </a>
      <nav class="nav">
        <a href="/" class="nav-link">Home</a>
        <a href="/about" class="nav-link">About</a>
        <div class="nav-dropdown">
          <a href="/services" class="nav-link dropdown-toggle">Services <span class="arrow">▼</span></a>
          <div class="dropdown-menu">
            {service_items}
            <a href="/services" class="dropdown-item view-all">View All Services →</a>
          </div>
        </div>{areas}
        <a href="/blog" class="nav-link">Blog</a>
        <a href="/contact" class="nav-link">Contact</a>
      </nav>
      <div class="header-actions">
        <a href="{phone_href(phone)}" class="header-cta">📞 Call Now</a>
      </div>
      <button class="mobile-menu-btn" onclick="toggleMobileMenu()" aria-label="Menu">☰</button>
    </div>
  </div>
  <div class="mobile-menu" id="mobileMenu">
    <a href="/">Home</a>
    <a href="/about">About</a>
    <a href="/services">Services</a>
    {mobile_services}
    <a href="/blog">Blog</a>
    <a href="/contact">Contact</a>
    <a href="{phone_href(phone)}" class="mobile-phone">📞 {escape_html(phone)}</a>
  </div>
</header>"""


def _nap_block(website: Website, phone: str, email: str) -> str:
    address = website.address
    if address is None:
        return f"""
      <div class="footer-contact">
        <a href="{phone_href(phone)}" class="contact-item"><span>📞</span> {escape_html(phone)}</a>
        <a href="mailto:{escape_html(email)}" class="contact-item"><span>✉️</span> {escape_html(email)}</a>
      </div>"""
    return f"""
      <div class="nap-info" itemscope itemtype="https://schema.org/LocalBusiness">
        <meta itemprop="name" content="{escape_html(website.display_name)}">
        <div class="nap-address" itemprop="address" itemscope itemtype="https://schema.org/PostalAddress">
          <span class="address-icon">📍</span>
          <address>
            <span itemprop="streetAddress">{escape_html(address.street)}</span><br>
            <span itemprop="addressLocality">{escape_html(address.city)}</span>,
            <span itemprop="addressRegion">{escape_html(address.state)}</span>
            <span itemprop="postalCode">{escape_html(address.zip)}</span>
          </address>
        </div>
        <div class="nap-phone"><span>📞</span> <a href="{phone_href(phone)}" itemprop="telephone">{escape_html(phone)}</a></div>
        <div class="nap-email"><span>✉️</span> <a href="mailto:{escape_html(email)}" itemprop="email">{escape_html(email)}</a></div>
      </div>"""


def map_embed_url(website: Website) -> str | None:
    """Return the Google Maps embed URL for the business address, if any."""
    if website.address is None:
        return None
    return f"https://www.google.com/maps?q={quote(website.address.one_line, safe='')}&output=embed"


def render_footer(website: Website, build_date: dt.date) -> str:
    """Render the footer: optional map, NAP block, link columns and legal links.

    Parameters
    ----------
    website : Website
        Source of services, locations, contact facts and social links.
    build_date : datetime.date
        Supplies the copyright year.

    Returns
    -------
    str
        Footer markup followed by the back-to-top button.
    """
    phone = website.phone or DEFAULT_PHONE
    email = website.email or DEFAULT_EMAIL
    map_url = map_embed_url(website)
    map_html = ""
    if map_url:
        map_html = (
            f'<div class="footer-map"><iframe src="{escape_html(map_url)}" width="100%" '
            f'height="200" style="border:0; border-radius: 8px;" allowfullscreen="" '
            f'loading="lazy" referrerpolicy="no-referrer-when-downgrade" '
            f'title="Our Location"></iframe></div>'
        )
    service_links = "".join(
        f'<li><a href="/services/{escape_html(s.slug)}">{escape_html(s.name)}</a></li>'
        for s in website.services[:FOOTER_LINK_LIMIT]
    )
    location_links = "".join(
        f'<li><a href="/locations/{escape_html(loc.slug)}">{escape_html(loc.display_name)}</a></li>'
        for loc in website.locations[:FOOTER_LINK_LIMIT]
    ) or "<li>Contact us for service areas</li>"
    socials = "".join(
        f'<a href="{escape_html(website.seo_settings.social_links[key])}" target="_blank" '
        f'rel="noopener noreferrer" aria-label="{label}" class="social-icon">{icon}</a>'
        for key, label, icon in SOCIAL_ICONS
        if website.seo_settings.social_links.get(key)
    )
    description = escape_html(website.seo_settings.site_description)
    return f"""
<footer class="footer">
  <div class="container">
    {map_html}
    <div class="footer-grid">
      <div class="footer-col footer-brand">
        <div class="footer-logo">
          {_logo(website, "footer-logo-image")}
          <span class="logo-text">{escape_html(website.display_name)}</span>
        </div>
        <p class="footer-description">{description}</p>
        {_nap_block(website, phone, email)}
      </div>
      <div class="footer-col">
        <h4>Our Services</h4>
        <ul>{service_links}</ul>
      </div>
      <div class="footer-col">
        <h4>Service Areas</h4>
        <ul>{location_links}</ul>
      </div>
      <div class="footer-col">
        <h4>Quick Links</h4>
        <ul>
          <li><a href="/">Home</a></li>
          <li><a href="/about">About Us</a></li>
          <li><a href="/services">All Services</a></li>
          <li><a href="/blog">Blog</a></li>
          <li><a href="/contact">Contact</a></li>
          <li><a href="/sitemap">Sitemap</a></li>
        </ul>
      </div>
    </div>
    <div class="footer-bottom">
      <p>&copy; {build_date.year} {escape_html(website.display_name)}. All rights reserved.</p>
      <div class="footer-social">{socials}</div>
      <div class="footer-legal">
        <a href="/privacy-policy">Privacy Policy</a>
        <span>|</span>
        <a href="/terms-of-service">Terms of Service</a>
      </div>
    </div>
  </div>
</footer>
<button id="backToTop" onclick="window.scrollTo({{top: 0, behavior: 'smooth'}})" aria-label="Back to top">↑</button>"""


def canonical_url(page: Page, website: Website) -> str:
    """Return ``<base>/<slug>``, or the base alone for the home page.

    Falls back to ``"/"`` when the site has no known base URL.

    Examples
    --------
    >>> from src.pipeline.site_generator.models import Page, Website
    >>> site = Website(id="w", name="Acme", base_url="https://acme.test")
    >>> canonical_url(Page("p", "About", "about", "about"), site)
    'https://acme.test/about'
    >>> canonical_url(Page("h", "Home", "", "home"), Website(id="w", name="Acme"))
    '/'
    """
    base = website.base_url.rstrip("/")
    if page.slug:
        return f"{base}/{page.slug}"
    return base or "/"


def render_head(page: Page, website: Website, css: str) -> str:
    """Render the ``<head>`` element: metadata, social cards, favicon and CSS."""
    title = escape_html(page.seo.title or page.title or website.display_name)
    description = escape_html(
        page.seo.description or website.seo_settings.site_description
    )
    keywords = escape_html(", ".join(page.seo.keywords or website.keywords))
    canonical = escape_html(canonical_url(page, website))
    image = escape_html(
        page.seo.og_image or website.seo_settings.default_image or website.logo or ""
    )
    icon = escape_html(website.logo or "/favicon.ico")
    return f"""<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <meta name="keywords" content="{keywords}">
  <link rel="canonical" href="{canonical}">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:type" content="website">
  <meta property="og:url" content="{canonical}">
  <meta property="og:image" content="{image}">
  <meta property="og:site_name" content="{escape_html(website.display_name)}">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="{title}">
  <meta name="twitter:description" content="{description}">
  <meta name="twitter:image" content="{image}">
  <link rel="icon" href="{icon}" type="image/x-icon">
  <link rel="apple-touch-icon" href="{icon}">
  {FONT_LINKS}
  <style>{css}</style>
</head>"""


def wrap(
    body: str,
    page: Page,
    website: Website,
    *,
    build_date: dt.date,
    extra_css: str = "",
    schemas_html: str = "",
) -> str:
    """Wrap a page body into a complete HTML document.

    Parameters
    ----------
    body : str
        Page body produced by either rendering strategy.
    page : Page
        Page whose SEO metadata and slug drive the head section.
    website : Website
        Site providing colors, navigation and contact facts.
    build_date : datetime.date
        Date stamped into the footer.
    extra_css : str, optional
        Page-type specific CSS appended after the base stylesheet.
    schemas_html : str, optional
        Pre-rendered JSON-LD ``<script>`` blocks placed at the end of ``<head>``.

    Returns
    -------
    str
        The full document, starting with ``<!DOCTYPE html>``.
    """
    css = generate_css(website.colors) + extra_css
    head = render_head(page, website, css)
    if schemas_html:
        head = head.replace("</head>", f"  {schemas_html}\n</head>")
    return f"""<!DOCTYPE html>
<html lang="en">
{head}
<body>
{render_header(website)}
<main>
{body}
</main>
{render_footer(website, build_date)}
<script>{generate_js()}</script>
</body>
</html>
"""


__all__ = [
    "BASE_CSS",
    "canonical_url",
    "generate_css",
    "generate_js",
    "map_embed_url",
    "render_footer",
    "render_head",
    "render_header",
    "wrap",
]
