"""Privacy policy, terms of service and the HTML sitemap page.

The footer of every page links to ``/privacy-policy``, ``/terms-of-service``
and ``/sitemap``; these bodies back those links. The "Last Updated" stamp is
the injected build date, never the wall clock.
"""

from __future__ import annotations

import datetime as dt

from src.config import DEFAULT_LEGAL_EMAIL

from .markup import escape_html, format_date
from .models import Website, published_posts


def _stamp(build_date: dt.date) -> str:
    return f'<p class="last-updated">Last Updated: {format_date(build_date.isoformat())}</p>'


def _contact_block(website: Website) -> str:
    email = escape_html(website.email or DEFAULT_LEGAL_EMAIL)
    return (
        f"<p><strong>{escape_html(website.display_name)}</strong><br>\n"
        f'      Email: <a href="mailto:{email}">{email}</a></p>'
    )


def _bullets(items: tuple[str, ...]) -> str:
    return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


def privacy_policy_content(website: Website, build_date: dt.date) -> str:
    """Return the privacy policy body for ``website``."""
    name = escape_html(website.display_name)
    return f"""
<section class="legal-content">
  <h1>Privacy Policy</h1>
  {_stamp(build_date)}
  <h2>Introduction</h2>
  <p>{name} ("we," "our," or "us") respects your privacy and is committed to protecting your personal information. This Privacy Policy explains how we collect, use, disclose, and safeguard your information when you visit our website or use our services.</p>
  <h2>Information We Collect</h2>
  <h3>Personal Information</h3>
  <p>We may collect personal information that you voluntarily provide to us when you:</p>
  {_bullets(("Fill out contact forms", "Request quotes or estimates", "Subscribe to our newsletter", "Contact us via phone, email, or social media"))}
  <p>This information may include your name, email address, phone number, address, and any other information you choose to provide.</p>
  <h3>Automatically Collected Information</h3>
  <p>When you visit our website, we may automatically collect certain information about your device, including:</p>
  {_bullets(("IP address", "Browser type and version", "Operating system", "Pages visited and time spent", "Referring website addresses"))}
  <h2>How We Use Your Information</h2>
  <p>We use the information we collect to:</p>
  {_bullets(("Respond to your inquiries and provide customer service", "Process and fulfill service requests", "Send you marketing communications (with your consent)", "Improve our website and services", "Comply with legal obligations"))}
  <h2>Information Sharing</h2>
  <p>We do not sell, trade, or otherwise transfer your personal information to outside parties except:</p>
  {_bullets(("To trusted third parties who assist us in operating our website or conducting our business", "When required by law or to protect our rights", "With your consent"))}
  <h2>Cookies and Tracking Technologies</h2>
  <p>We may use cookies and similar tracking technologies to track activity on our website and store certain information. You can instruct your browser to refuse all cookies or to indicate when a cookie is being sent.</p>
  <h2>Data Security</h2>
  <p>We implement appropriate security measures to protect your personal information. However, no method of transmission over the Internet or electronic storage is 100% secure.</p>
  <h2>Your Rights</h2>
  <p>Depending on your location, you may have certain rights regarding your personal information, including the right to access, correct, or delete your data. To exercise these rights, please contact us.</p>
  <h2>Children's Privacy</h2>
  <p>Our website is not intended for children under 13 years of age. We do not knowingly collect personal information from children under 13.</p>
  <h2>Changes to This Policy</h2>
  <p>We may update this Privacy Policy from time to time. We will notify you of any changes by posting the new Privacy Policy on this page and updating the "Last Updated" date.</p>
  <h2>Contact Us</h2>
  <p>If you have questions about this Privacy Policy, please contact us at:</p>
  {_contact_block(website)}
</section>
"""


def terms_of_service_content(website: Website, build_date: dt.date) -> str:
    """Return the terms of service body for ``website``."""
    name = escape_html(website.display_name)
    return f"""
<section class="legal-content">
  <h1>Terms of Service</h1>
  {_stamp(build_date)}
  <h2>Agreement to Terms</h2>
  <p>By accessing and using the website of {name} ("we," "our," or "us"), you agree to be bound by these Terms of Service. If you do not agree to these terms, please do not use our website.</p>
  <h2>Use of Our Website</h2>
  <p>You agree to use our website only for lawful purposes and in a way that does not infringe the rights of others or restrict their use of the website.</p>
  <p>You agree not to:</p>
  {_bullets(("Use the website in any way that violates applicable laws or regulations", "Attempt to gain unauthorized access to any part of the website", "Transmit any harmful code or malware", "Collect or harvest any information from the website", "Impersonate any person or entity"))}
  <h2>Intellectual Property</h2>
  <p>All content on this website, including text, graphics, logos, images, and software, is the property of {name} or its content suppliers and is protected by copyright and other intellectual property laws.</p>
  <p>You may not reproduce, distribute, modify, or create derivative works from any content without our express written permission.</p>
  <h2>Services</h2>
  <p>We reserve the right to modify, suspend, or discontinue any aspect of our services at any time without prior notice. Specific service agreements may be subject to additional terms.</p>
  <h2>Limitation of Liability</h2>
  <p>{name} shall not be liable for any indirect, incidental, special, consequential, or punitive damages resulting from your use of or inability to use the website or services.</p>
  <p>In no event shall our total liability exceed the amount you paid to us for services in the twelve (12) months preceding the claim.</p>
  <h2>Disclaimer of Warranties</h2>
  <p>The website and services are provided "as is" and "as available" without any warranties of any kind, either express or implied, including but not limited to:</p>
  {_bullets(("Merchantability", "Fitness for a particular purpose", "Non-infringement", "Accuracy or completeness of content"))}
  <h2>Indemnification</h2>
  <p>You agree to indemnify and hold harmless {name} and its officers, directors, employees, and agents from any claims, damages, losses, liabilities, and expenses arising from your use of the website or violation of these terms.</p>
  <h2>Governing Law</h2>
  <p>These Terms of Service shall be governed by and construed in accordance with the laws of the state in which {name} operates, without regard to conflict of law principles.</p>
  <h2>Changes to Terms</h2>
  <p>We reserve the right to modify these Terms of Service at any time. Changes will be effective immediately upon posting to the website. Your continued use of the website constitutes acceptance of the modified terms.</p>
  <h2>Contact Information</h2>
  <p>If you have any questions about these Terms of Service, please contact us at:</p>
  {_contact_block(website)}
</section>
"""


def _link_list(links: list[tuple[str, str]]) -> str:
    items = "".join(
        f'<li><a href="{escape_html(href)}">{escape_html(label)}</a></li>'
        for href, label in links
    )
    return f"<ul>{items}</ul>"


def html_sitemap_content(website: Website) -> str:
    """Return the human-readable sitemap: core, service, area, blog and legal links."""
    groups: list[tuple[str, list[tuple[str, str]]]] = [
        (
            "Main Pages",
            [
                ("/", "Home"),
                ("/about", "About Us"),
                ("/services", "Services"),
                ("/contact", "Contact"),
                ("/blog", "Blog"),
                ("/search", "Search"),
            ],
        ),
        ("Services", [(f"/services/{s.slug}", s.name) for s in website.services]),
        (
            "Service Areas",
            [(f"/locations/{loc.slug}", loc.display_name) for loc in website.locations],
        ),
        (
            "Blog",
            [(f"/blog/{p.slug}.html", p.title) for p in published_posts(website)],
        ),
        (
            "Legal",
            [("/privacy-policy", "Privacy Policy"), ("/terms-of-service", "Terms of Service")],
        ),
    ]
    body = "".join(
        f"\n    <h2>{heading}</h2>\n    {_link_list(links)}" for heading, links in groups if links
    )
    return f"""
<section class="legal-content">
  <h1>Sitemap</h1>
  <p>Browse all pages on our website:</p>
  <div class="sitemap-links">{body}
  </div>
</section>
"""


__all__ = ["html_sitemap_content", "privacy_policy_content", "terms_of_service_content"]
