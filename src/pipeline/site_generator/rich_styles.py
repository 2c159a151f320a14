"""Archetype stylesheets appended after the shared base CSS.

Each archetype generator in ``rich_content`` is paired with one of these
functions. They only reference the theme custom properties emitted by
``colors.css_variable_block`` so brand colors flow through unchanged.
"""

from __future__ import annotations

HOME_CSS = """
/* Rich landing layout */
.hero-emergency { background: linear-gradient(135deg, var(--secondary) 0%, var(--primary) 100%); color: #fff; padding: 80px 0; }
.hero-grid { display: grid; grid-template-columns: 1.4fr 1fr; gap: 48px; align-items: center; }
.emergency-badge { display: inline-flex; align-items: center; gap: 10px; background: rgba(255,255,255,0.15); padding: 8px 18px; border-radius: 999px; font-weight: 600; margin-bottom: 20px; }
.pulse { width: 10px; height: 10px; border-radius: 50%; background: var(--accent); animation: pulse 1.6s infinite; }
@keyframes pulse { 0% { box-shadow: 0 0 0 0 rgba(245,158,11,0.7); } 70% { box-shadow: 0 0 0 12px rgba(245,158,11,0); } 100% { box-shadow: 0 0 0 0 rgba(245,158,11,0); } }
.hero-main h1 { font-size: 3rem; line-height: 1.1; margin-bottom: 12px; }
.hero-main h2 { font-size: 1.4rem; font-weight: 500; opacity: 0.9; margin-bottom: 20px; }
.hero-description { font-size: 1.1rem; line-height: 1.7; opacity: 0.95; }
.hero-urgency { display: flex; flex-wrap: wrap; gap: 12px; margin-top: 24px; }
.hero-urgency span { background: rgba(255,255,255,0.12); padding: 8px 14px; border-radius: 8px; font-weight: 600; }
.hero-call-box { background: #fff; color: var(--text); border-radius: 16px; padding: 32px; box-shadow: 0 20px 60px rgba(0,0,0,0.25); text-align: center; }
.call-box-header { font-size: 1.4rem; font-weight: 800; margin-bottom: 8px; }
.call-box-button { display: flex; align-items: center; justify-content: center; gap: 12px; background: var(--accent); color: #fff; padding: 16px; border-radius: 12px; text-decoration: none; margin: 16px 0; }
.call-box-button small { display: block; font-size: 0.8rem; opacity: 0.9; }
.call-box-button strong { font-size: 1.5rem; }
.call-box-note { font-size: 0.85rem; color: var(--text-light); }
.hero-image-section { padding: 40px 0 0; }
.hero-main-image { width: 100%; border-radius: 16px; box-shadow: 0 10px 40px rgba(0,0,0,0.12); }
.image-caption { text-align: center; color: var(--text-light); margin-top: 10px; font-size: 0.9rem; }
.section-intro { max-width: 760px; margin-bottom: 40px; }
.section-intro.centered { margin-left: auto; margin-right: auto; text-align: center; }
.section-label { display: inline-block; color: var(--primary); font-weight: 700; text-transform: uppercase; letter-spacing: 0.05em; font-size: 0.85rem; margin-bottom: 10px; }
.intro-text, .lead-paragraph { font-size: 1.1rem; line-height: 1.8; color: var(--text-light); }
.services-pro, .why-choose-pro, .video-section, .areas-pro, .process-pro, .educational-section, .faq-pro, .about-pro, .service-details { padding: 80px 0; }
.why-choose-pro, .process-pro, .faq-pro { background: #f8fafc; }
.services-grid-pro { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 24px; }
.service-card-pro { background: #fff; border-radius: 16px; padding: 24px; box-shadow: 0 4px 20px rgba(0,0,0,0.06); }
.service-card-image img { width: 100%; border-radius: 12px; margin-bottom: 16px; }
.service-icon-box { font-size: 2rem; margin-bottom: 10px; }
.service-call-btn, .edu-call-btn, .video-call-btn, .area-phone-btn, .process-call-btn, .about-call-btn { display: inline-block; margin-top: 14px; color: var(--primary); font-weight: 700; text-decoration: none; }
.services-cta-box { margin-top: 48px; text-align: center; background: var(--primary); color: #fff; padding: 40px; border-radius: 16px; }
.big-call-button, .giant-phone-cta, .mega-phone-cta { display: inline-flex; align-items: center; gap: 14px; background: var(--accent); color: #fff; font-weight: 800; font-size: 1.3rem; padding: 18px 36px; border-radius: 12px; text-decoration: none; margin-top: 16px; }
.benefits-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 20px; margin-top: 32px; }
.benefit-card { background: #fff; border-radius: 12px; padding: 24px; }
.benefit-icon { font-size: 2rem; }
.mid-page-cta { text-align: center; margin-top: 40px; }
.cta-label, .mega-label { display: block; font-size: 0.85rem; font-weight: 600; opacity: 0.9; }
.cta-number, .mega-number { display: block; font-size: 1.6rem; }
.video-wrapper { position: relative; padding-bottom: 56.25%; height: 0; overflow: hidden; border-radius: 16px; }
.video-wrapper iframe { position: absolute; inset: 0; width: 100%; height: 100%; }
.video-cta, .area-call-cta, .process-cta { text-align: center; margin-top: 32px; }
.areas-grid-pro { display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 16px; }
.area-card-pro { display: flex; align-items: center; justify-content: space-between; gap: 10px; padding: 16px 20px; border: 2px solid #e5e7eb; border-radius: 12px; text-decoration: none; color: var(--text); font-weight: 600; }
.area-card-pro:hover { border-color: var(--primary); color: var(--primary); }
.process-steps { display: grid; grid-template-columns: repeat(3, 1fr); gap: 24px; }
.process-step { background: #fff; padding: 32px; border-radius: 16px; text-align: center; position: relative; }
.step-number { position: absolute; top: -14px; left: 50%; transform: translateX(-50%); background: var(--primary); color: #fff; width: 32px; height: 32px; border-radius: 50%; display: flex; align-items: center; justify-content: center; font-weight: 800; }
.step-icon { font-size: 2.4rem; margin: 12px 0; }
.edu-grid { display: grid; grid-template-columns: repeat(2, 1fr); gap: 24px; }
.edu-card { background: #fff; border: 1px solid #e5e7eb; border-radius: 16px; padding: 32px; }
.edu-list { list-style: none; padding: 0; margin: 16px 0; }
.edu-list li { display: flex; gap: 10px; padding: 8px 0; border-bottom: 1px solid #f1f5f9; }
.faq-grid-pro { display: grid; grid-template-columns: repeat(2, 1fr); gap: 20px; }
.faq-item-pro { background: #fff; padding: 24px; border-radius: 12px; }
.faq-item-pro a, .intro-text a { color: var(--primary); font-weight: 600; }
.about-grid-with-image { display: grid; grid-template-columns: 1fr 1fr; gap: 48px; align-items: center; }
.about-section-image { width: 100%; border-radius: 16px; }
.final-cta-pro { padding: 80px 0; background: linear-gradient(135deg, var(--primary) 0%, var(--secondary) 100%); color: #fff; text-align: center; }
.cta-subtext { margin-top: 16px; opacity: 0.85; }
.service-details .custom-content { max-width: 860px; margin: 0 auto; line-height: 1.8; }
.floating-call-btn { position: fixed; right: 20px; bottom: 20px; z-index: 999; background: var(--accent); color: #fff; padding: 14px 22px; border-radius: 999px; font-weight: 800; text-decoration: none; box-shadow: 0 8px 24px rgba(0,0,0,0.25); }
@media (max-width: 900px) {
  .hero-grid, .about-grid-with-image, .edu-grid, .faq-grid-pro, .process-steps { grid-template-columns: 1fr; }
  .hero-main h1 { font-size: 2.2rem; }
}
"""

PAGE_CSS = """
/* Inner page layout */
.page-hero { background: linear-gradient(135deg, var(--secondary) 0%, var(--primary) 100%); color: #fff; padding: 80px 0 60px; text-align: center; }
.page-hero h1 { font-size: 2.8rem; margin-bottom: 12px; }
.hero-subtitle { font-size: 1.2rem; opacity: 0.9; margin-bottom: 24px; }
.hero-phone-btn, .mega-cta-btn, .cta-phone-btn { display: inline-block; background: var(--accent); color: #fff; font-weight: 800; padding: 16px 32px; border-radius: 12px; text-decoration: none; }
.cta-phone-btn-outline, .btn-outline { display: inline-block; border: 2px solid var(--primary); color: var(--primary); font-weight: 700; padding: 12px 28px; border-radius: 10px; text-decoration: none; }
.content-section { padding: 80px 0; }
.content-section.alt-bg { background: #f8fafc; }
.content-main { max-width: 820px; margin: 0 auto; }
.content-main p { line-height: 1.8; margin-bottom: 1.2em; }
.section-badge { display: inline-block; background: var(--primary-light); color: #fff; padding: 6px 14px; border-radius: 999px; font-size: 0.8rem; font-weight: 700; margin-bottom: 12px; }
.text-center { text-align: center; }
.mb-40 { margin-bottom: 40px; }
.mt-20 { margin-top: 20px; }
.mt-30 { margin-top: 30px; }
.mt-40 { margin-top: 40px; }
.values-grid, .features-row { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 24px; }
.value-card, .feature-item { background: #fff; padding: 28px; border-radius: 16px; text-align: center; box-shadow: 0 4px 16px rgba(0,0,0,0.05); }
.value-icon, .feature-icon { font-size: 2.2rem; display: block; margin-bottom: 10px; }
.benefits-list-alt { max-width: 860px; margin: 0 auto; }
.benefit-row { display: flex; gap: 24px; padding: 24px 0; border-bottom: 1px solid #e5e7eb; }
.benefit-icon-lg { font-size: 2.6rem; }
.cta-box-centered { text-align: center; margin-top: 40px; }
.services-list-compact { display: grid; grid-template-columns: repeat(auto-fit, minmax(320px, 1fr)); gap: 16px; }
.service-item-compact { display: flex; align-items: center; gap: 16px; background: #fff; padding: 18px; border-radius: 12px; }
.service-item-compact .service-info { flex: 1; }
.service-call { font-size: 1.4rem; text-decoration: none; }
.areas-inline, .services-list-inline { display: flex; flex-wrap: wrap; justify-content: center; gap: 12px; }
.area-tag, .area-tag-link, .service-tag { background: #fff; border: 1px solid #e5e7eb; padding: 10px 18px; border-radius: 999px; color: var(--text); text-decoration: none; font-weight: 600; }
.area-tag-link:hover { border-color: var(--primary); color: var(--primary); }
.contact-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 40px; }
.contact-info-card, .contact-form-card { background: #fff; border-radius: 16px; padding: 36px; box-shadow: 0 4px 20px rgba(0,0,0,0.06); }
.contact-methods { margin: 24px 0; display: grid; gap: 16px; }
.contact-method { display: flex; gap: 16px; align-items: center; }
.contact-method.primary .method-value { font-size: 1.4rem; font-weight: 800; }
.method-icon { font-size: 1.8rem; }
.method-label { display: block; font-size: 0.85rem; color: var(--text-light); }
.method-value { color: var(--primary); text-decoration: none; font-weight: 600; }
.emergency-note { background: #fef3c7; border-left: 4px solid var(--accent); padding: 16px 20px; border-radius: 8px; }
.contact-form .form-group { margin-bottom: 16px; }
.contact-form .form-row { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
.contact-form label { display: block; font-weight: 600; margin-bottom: 6px; }
.contact-form input, .contact-form select, .contact-form textarea { width: 100%; padding: 12px; border: 1px solid #d1d5db; border-radius: 8px; font: inherit; }
.form-submit-btn { width: 100%; background: var(--primary); color: #fff; border: 0; padding: 14px; border-radius: 10px; font-weight: 700; cursor: pointer; }
.areas-grid-contact { display: grid; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); gap: 12px; }
.area-card-contact { display: flex; gap: 10px; background: #fff; padding: 14px 18px; border-radius: 10px; text-decoration: none; color: var(--text); }
.faq-list { max-width: 820px; margin: 0 auto; }
.faq-item { padding: 20px 0; border-bottom: 1px solid #e5e7eb; }
.faq-item a { color: var(--primary); }
.services-card-grid, .locations-card-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 24px; }
.service-card-lg, .location-card-lg { display: block; background: #fff; border-radius: 16px; overflow: hidden; box-shadow: 0 4px 20px rgba(0,0,0,0.06); padding-bottom: 24px; color: var(--text); text-decoration: none; }
.service-card-lg h3, .service-card-lg p, .location-card-lg h3, .location-card-lg p { padding: 0 24px; }
.service-card-img img, .location-card-img img { width: 100%; height: 200px; object-fit: cover; }
.service-card-icon, .location-card-pin { font-size: 2rem; padding: 12px 24px 0; }
.service-card-actions { display: flex; gap: 12px; padding: 0 24px; margin-top: 12px; }
.btn-learn-more, .btn-call-service { flex: 1; text-align: center; padding: 10px; border-radius: 8px; text-decoration: none; font-weight: 700; }
.btn-learn-more { border: 2px solid var(--primary); color: var(--primary); }
.btn-call-service { background: var(--accent); color: #fff; }
.location-card-link { display: block; padding: 0 24px; color: var(--primary); font-weight: 700; }
.final-cta-section { background: var(--secondary); color: #fff; padding: 80px 0; text-align: center; }
.final-cta-section p { opacity: 0.9; margin: 12px 0 24px; }
@media (max-width: 900px) {
  .contact-grid, .contact-form .form-row { grid-template-columns: 1fr; }
  .page-hero h1 { font-size: 2rem; }
}
"""

BLOG_CSS = """
/* Blog index and articles */
.blog-card-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 24px; }
.blog-card { background: #fff; border-radius: 16px; overflow: hidden; box-shadow: 0 4px 20px rgba(0,0,0,0.06); }
.blog-card-image { height: 140px; display: flex; align-items: center; justify-content: center; background: var(--primary-light); font-size: 3rem; }
.blog-card-content { padding: 24px; }
.blog-card-date { font-size: 0.85rem; color: var(--text-light); }
.blog-card-content h3 a { color: var(--text); text-decoration: none; }
.blog-read-more { color: var(--primary); font-weight: 700; text-decoration: none; }
.blog-empty { text-align: center; color: var(--text-light); font-size: 1.1rem; padding: 40px 0; }
.blog-cta-box { text-align: center; max-width: 640px; margin: 0 auto; }
.blog-post { max-width: 800px; margin: 0 auto; padding: 40px 20px 80px; }
.blog-post-header { margin-bottom: 40px; }
.blog-featured-image { margin: 0 0 30px; }
.blog-featured-image img { width: 100%; height: auto; border-radius: 16px; box-shadow: 0 10px 40px rgba(0,0,0,0.1); }
.blog-post-meta { display: flex; align-items: center; gap: 15px; margin-bottom: 15px; font-size: 0.9rem; color: var(--text-light); }
.blog-tags { display: flex; gap: 8px; }
.blog-tag { background: var(--primary-light); color: #fff; padding: 4px 10px; border-radius: 20px; font-size: 0.8rem; }
.blog-post-header h1 { font-size: 2.5rem; line-height: 1.2; margin-bottom: 15px; }
.blog-author { color: var(--text-light); font-size: 0.95rem; }
.blog-post-content { line-height: 1.8; font-size: 1.1rem; }
.blog-post-content h2 { font-size: 1.75rem; margin: 2em 0 0.75em; }
.blog-post-content h3 { font-size: 1.4rem; margin: 1.75em 0 0.5em; }
.blog-post-content p, .blog-post-content ul, .blog-post-content ol { margin: 1.25em 0; }
.blog-post-content ul, .blog-post-content ol { padding-left: 2em; }
.blog-post-content blockquote { margin: 2em 0; padding: 1.5em 2em; border-left: 4px solid var(--primary); font-style: italic; }
.blog-post-content img { max-width: 100%; height: auto; border-radius: 12px; margin: 2em 0; }
.blog-post-content a { color: var(--primary); text-decoration: underline; text-underline-offset: 2px; }
.blog-post-footer { margin-top: 60px; padding-top: 30px; border-top: 1px solid #e5e7eb; display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 20px; }
.blog-share { display: flex; gap: 15px; align-items: center; }
.blog-share a { color: var(--primary); font-weight: 600; text-decoration: none; }
.back-to-blog { color: var(--text-light); text-decoration: none; }
"""

LEGAL_CSS = """
/* Legal and utility pages */
.legal-content { max-width: 800px; margin: 0 auto; padding: 60px 20px; line-height: 1.8; }
.legal-content h1 { font-size: 2.5rem; margin-bottom: 1rem; }
.legal-content h2 { font-size: 1.5rem; margin: 2rem 0 1rem; border-bottom: 2px solid var(--primary); padding-bottom: 0.5rem; }
.legal-content h3 { font-size: 1.2rem; margin: 1.5rem 0 0.75rem; }
.legal-content p, .legal-content li { margin-bottom: 1rem; color: var(--text-light); }
.legal-content ul { padding-left: 2rem; margin-bottom: 1rem; }
.legal-content a { color: var(--primary); text-decoration: underline; }
.last-updated { font-style: italic; color: var(--text-light); border-left: 3px solid var(--primary); padding-left: 1rem; margin-bottom: 2rem; }
.sitemap-links ul { list-style: none; padding-left: 0; }
.search-box { width: 100%; padding: 14px 18px; font-size: 1.1rem; border: 2px solid #e5e7eb; border-radius: 12px; margin-bottom: 24px; }
.search-result { padding: 16px 0; border-bottom: 1px solid #e5e7eb; }
.search-result a { color: var(--primary); font-weight: 700; text-decoration: none; font-size: 1.1rem; }
.search-result .search-type { font-size: 0.75rem; text-transform: uppercase; color: var(--text-light); margin-left: 8px; }
"""


def home_css() -> str:
    """Return the stylesheet for home, single service and single location pages."""
    return HOME_CSS


def page_css() -> str:
    """Return the stylesheet for about, services, contact and locations pages."""
    return PAGE_CSS


def blog_css() -> str:
    """Return the stylesheet for the blog index and blog posts."""
    return PAGE_CSS + BLOG_CSS


def legal_css() -> str:
    """Return the stylesheet for legal, sitemap and search pages."""
    return LEGAL_CSS


__all__ = ["blog_css", "home_css", "legal_css", "page_css"]
