"""Export assembler: turn a ``Website`` into the complete static file set.

``export_website`` produces every output file in a fixed order. The four core
archetypes (home, about, services, contact) are always rendered by the rich
strategies, whatever ``website.pages`` holds; other pages resolve their
strategy from a table keyed by page type and fall back to the injected
section renderer. Per-service, per-location and per-post pages use their
dedicated templates.

System Boundaries
-----------------
- Pure with respect to the content model: no I/O, no clock reads beyond the
  ``build_date`` default.
- Any exception raised while producing one file aborts the export with an
  ``ExportError`` naming that file's path; no partial file set is returned.

Examples
--------
>>> import datetime as dt
>>> from src.pipeline.site_generator.models import Website
>>> site = Website.from_dict({"businessName": "Acme", "industry": "hvac"})
>>> [f.path for f in export_website(site, build_date=dt.date(2024, 1, 1))][:4]
['index.html', 'about.html', 'services.html', 'contact.html']
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping
from xml.sax.saxutils import escape as xml_escape

from src.config import DEFAULT_BASE_URL, SITEMAP_CHANGEFREQ, SITEMAP_PRIORITIES
from src.exceptions import ExportError

from .layout import wrap
from .legal import html_sitemap_content, privacy_policy_content, terms_of_service_content
from .markup import escape_html
from .models import (
    BlogPost,
    Location,
    Page,
    PageSEO,
    Service,
    Website,
    published_posts,
    resolve_page_location,
)
from .rich_content import (
    BusinessFacts,
    generate_about_content,
    generate_blog_index_content,
    generate_blog_post_content,
    generate_contact_content,
    generate_home_content,
    generate_location_page_content,
    generate_locations_content,
    generate_service_page_content,
    generate_services_content,
)
from .rich_styles import blog_css, home_css, legal_css, page_css
from .schema import (
    build_article_schema,
    build_faq_schema,
    build_page_schemas,
    render_schema_scripts,
    resolve_page_service,
)
from .section_renderer import render_sections
from .sections import CustomContent, FaqContent, parse_section_content

logger = logging.getLogger(__name__)

SectionRenderer = Callable[[Iterable[Any], Website], str]


@dataclass(frozen=True)
class ExportedFile:
    """One output artifact: a relative forward-slash path and its text."""

    path: str
    content: str


@dataclass(frozen=True)
class RenderStrategy:
    """A rich page body generator paired with its archetype stylesheet."""

    body: Callable[[BusinessFacts, Website], str]
    css: Callable[[], str]


def _blog_index_body(facts: BusinessFacts, website: Website) -> str:
    return generate_blog_index_content(facts, published_posts(website))


DEFAULT_STRATEGIES: dict[str, RenderStrategy] = {
    "home": RenderStrategy(lambda facts, _: generate_home_content(facts), home_css),
    "about": RenderStrategy(lambda facts, _: generate_about_content(facts), page_css),
    "services": RenderStrategy(lambda facts, _: generate_services_content(facts), page_css),
    "contact": RenderStrategy(lambda facts, _: generate_contact_content(facts), page_css),
    "locations": RenderStrategy(lambda facts, _: generate_locations_content(facts), page_css),
    "blog": RenderStrategy(_blog_index_body, blog_css),
}

# (page type, slug, default title, output path)
CORE_PAGES: tuple[tuple[str, str, str, str], ...] = (
    ("home", "", "Home", "index.html"),
    ("about", "about", "About Us", "about.html"),
    ("services", "services", "Services", "services.html"),
    ("contact", "contact", "Contact", "contact.html"),
)

# Page types rendered by a dedicated step rather than as an extra page.
DEDICATED_PAGE_TYPES = frozenset(
    {"home", "about", "services", "contact", "service-single", "location", "blog", "blog-post"}
)

RESERVED_SLUGS = frozenset(
    {
        "index",
        "about",
        "services",
        "contact",
        "blog",
        "privacy-policy",
        "terms-of-service",
        "sitemap",
        "search",
    }
)


def resolve_strategy(
    page_type: str, strategies: Mapping[str, RenderStrategy] | None = None
) -> RenderStrategy | None:
    """Return the rich strategy for ``page_type``, or ``None`` for the section list.

    Parameters
    ----------
    page_type : str
        The page's archetype tag.
    strategies : Mapping[str, RenderStrategy] | None, optional
        Strategy table; ``DEFAULT_STRATEGIES`` when omitted.

    Returns
    -------
    RenderStrategy | None
        ``None`` means the page is rendered from its sections.
    """
    table = DEFAULT_STRATEGIES if strategies is None else strategies
    return table.get(page_type)


def _custom_html(page: Page | None) -> str | None:
    if page is None:
        return None
    blocks = [
        content.html
        for content in (parse_section_content(s) for s in page.sections)
        if isinstance(content, CustomContent) and content.html
    ]
    return "\n".join(blocks) or None


def _faq_pairs(page: Page) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for section in page.sections:
        content = parse_section_content(section)
        if isinstance(content, FaqContent):
            pairs.extend((item.question, item.answer) for item in content.faqs)
    return pairs


def _core_page(website: Website, page_type: str, slug: str, title: str) -> Page:
    authored = website.find_page(page_type)
    if authored is not None:
        return dataclasses.replace(authored, slug=slug)
    seo_title = website.display_name if page_type == "home" else f"{title} | {website.display_name}"
    return Page(id=page_type, title=title, slug=slug, type=page_type, seo=PageSEO(title=seo_title))


def _authored_service_page(website: Website, service: Service) -> Page | None:
    for page in website.pages:
        if page.type == "service-single" and resolve_page_service(page, website) == service:
            return page
    return None


def _authored_location_page(website: Website, location: Location) -> Page | None:
    for page in website.pages:
        if page.type == "location" and resolve_page_location(page, website) == location:
            return page
    return None


def _service_page(website: Website, facts: BusinessFacts, service: Service) -> Page:
    authored = _authored_service_page(website, service)
    city = facts.city
    seo = PageSEO(
        title=f"{service.name} in {city} | {facts.name}",
        description=(
            f"Professional {service.name.lower()} services in {city}. "
            f"{service.description} Call {facts.phone} for a free estimate."
        ).replace("  ", " "),
        keywords=(service.name, f"{service.name} {city}", facts.name),
    )
    if authored is not None and authored.seo.title:
        seo = authored.seo
    return Page(
        id=authored.id if authored else f"service-{service.id}",
        title=service.name,
        slug=f"services/{service.slug}",
        type="service-single",
        sections=authored.sections if authored else (),
        seo=seo,
        service_id=service.id,
    )


def _location_page(website: Website, facts: BusinessFacts, location: Location) -> Page:
    authored = _authored_location_page(website, location)
    place = location.display_name
    label = facts.industry_label
    seo = PageSEO(
        title=f"{label} Services in {place} | {facts.name}",
        description=(
            f"Professional {label.lower()} services in {place}. {facts.name} serves "
            f"{location.city} with fast, reliable service. Call {facts.phone} today!"
        ),
        keywords=(f"{label} {location.city}", f"{location.city} {label}", f"{facts.name} {location.city}"),
    )
    if authored is not None and authored.seo.title:
        seo = authored.seo
    return Page(
        id=authored.id if authored else f"location-{location.id}",
        title=place,
        slug=f"locations/{location.slug}",
        type="location",
        sections=authored.sections if authored else (),
        seo=seo,
        location_id=location.id,
    )


def _post_page(website: Website, post: BlogPost) -> Page:
    return Page(
        id=post.id,
        title=post.title,
        slug=f"blog/{post.slug}",
        type="blog-post",
        seo=PageSEO(
            title=post.seo.title or f"{post.title} | {website.display_name}",
            description=post.seo.description or post.excerpt,
            keywords=post.seo.keywords or post.tags,
            og_image=post.seo.og_image or post.featured_image,
        ),
    )


def _utility_page(website: Website, page_id: str, title: str, description: str) -> Page:
    return Page(
        id=page_id,
        title=title,
        slug=page_id,
        type="custom",
        seo=PageSEO(
            title=f"{title} | {website.display_name}",
            description=description,
            keywords=(title.lower(), website.display_name),
        ),
    )


def _extra_pages(website: Website) -> list[Page]:
    pages = []
    for page in sorted(website.pages, key=lambda p: p.order):
        if not page.published or page.type in DEDICATED_PAGE_TYPES or not page.slug:
            continue
        head, _, rest = page.slug.partition("/")
        if page.slug in RESERVED_SLUGS or (rest and head in {"services", "locations", "blog"}):
            logger.warning("Skipping page %s: slug %r collides with a reserved path", page.id, page.slug)
            continue
        pages.append(page)
    return pages


class _Assembler:
    """Accumulates files in order, converting generator failures to ``ExportError``."""

    def __init__(
        self,
        website: Website,
        build_date: dt.date,
        strategies: Mapping[str, RenderStrategy],
        section_renderer: SectionRenderer,
    ) -> None:
        self.website = website
        self.build_date = build_date
        self.strategies = strategies
        self.section_renderer = section_renderer
        self.facts = BusinessFacts.from_website(website)
        self.files: list[ExportedFile] = []
        self._paths: set[str] = set()

    def emit(self, path: str, produce: Callable[[], str]) -> None:
        if path in self._paths:
            logger.warning("Skipping duplicate output path %s", path)
            return
        try:
            content = produce()
        except Exception as exc:
            raise ExportError(
                f"Failed to generate {path}",
                context={"path": path, "error": f"{type(exc).__name__}: {exc}"},
            ) from exc
        self._paths.add(path)
        self.files.append(ExportedFile(path=path, content=content))
        logger.debug("Generated %s (%d chars)", path, len(content))

    def document(
        self, body: str, page: Page, css: str, extra_schemas: Iterable[dict[str, Any]] = ()
    ) -> str:
        schemas = build_page_schemas(page, self.website) + list(extra_schemas)
        return wrap(
            body,
            page,
            self.website,
            build_date=self.build_date,
            extra_css=css,
            schemas_html=render_schema_scripts(schemas),
        )

    def render_page(self, page: Page) -> str:
        strategy = resolve_strategy(page.type, self.strategies)
        if strategy is not None:
            return self.document(strategy.body(self.facts, self.website), page, strategy.css())
        faqs = _faq_pairs(page)
        extra = [build_faq_schema(faqs)] if faqs else []
        return self.document(self.section_renderer(page.sections, self.website), page, "", extra)

    def render_service(self, service: Service) -> str:
        page = _service_page(self.website, self.facts, service)
        body = generate_service_page_content(self.facts, service, _custom_html(page))
        return self.document(body, page, home_css())

    def render_location(self, location: Location) -> str:
        page = _location_page(self.website, self.facts, location)
        body = generate_location_page_content(self.facts, location, _custom_html(page))
        return self.document(body, page, home_css())

    def render_post(self, post: BlogPost) -> str:
        page = _post_page(self.website, post)
        body = generate_blog_post_content(self.facts, post)
        return self.document(body, page, blog_css(), [build_article_schema(post, self.website)])

    def render_utility(self, page: Page, body: str) -> str:
        return self.document(body, page, legal_css())


def export_website(
    website: Website,
    *,
    build_date: dt.date | None = None,
    strategies: Mapping[str, RenderStrategy] | None = None,
    section_renderer: SectionRenderer = render_sections,
) -> list[ExportedFile]:
    """Produce the full static file set for ``website``.

    Parameters
    ----------
    website : Website
        The content model; it is never mutated.
    build_date : datetime.date | None, optional
        Date used for the footer year, sitemap ``lastmod`` and legal stamps.
        Defaults to today.
    strategies : Mapping[str, RenderStrategy] | None, optional
        Rich strategy table keyed by page type; ``DEFAULT_STRATEGIES`` when
        omitted.
    section_renderer : callable, optional
        Renders the section list of pages without a rich strategy.

    Returns
    -------
    list[ExportedFile]
        Files in deterministic order: core pages, extra pages, service and
        location pages, blog index and posts, legal and sitemap pages,
        ``sitemap.xml``, ``robots.txt`` and ``search.html``.

    Raises
    ------
    ExportError
        If any single file fails to generate; ``context["path"]`` names it.
    """
    build_date = build_date or dt.date.today()
    table = DEFAULT_STRATEGIES if strategies is None else strategies
    logger.info(
        "Exporting website %s (%d services, %d locations, %d posts)",
        website.id,
        len(website.services),
        len(website.locations),
        len(website.blog_posts),
    )
    out = _Assembler(website, build_date, table, section_renderer)

    for page_type, slug, title, path in CORE_PAGES:
        page = _core_page(website, page_type, slug, title)
        out.emit(path, lambda page=page: out.render_page(page))

    for page in _extra_pages(website):
        out.emit(f"{page.slug}.html", lambda page=page: out.render_page(page))

    for service in website.services:
        out.emit(f"services/{service.slug}.html", lambda s=service: out.render_service(s))
    for location in website.locations:
        out.emit(f"locations/{location.slug}.html", lambda loc=location: out.render_location(loc))

    blog_page = _core_page(website, "blog", "blog", "Blog")
    out.emit("blog.html", lambda: out.render_page(blog_page))
    for post in published_posts(website):
        out.emit(f"blog/{post.slug}.html", lambda p=post: out.render_post(p))

    name = website.display_name
    privacy = _utility_page(
        website,
        "privacy-policy",
        "Privacy Policy",
        f"Privacy Policy for {name}. Learn how we collect, use, and protect your personal information.",
    )
    terms = _utility_page(
        website,
        "terms-of-service",
        "Terms of Service",
        f"Terms of Service for {name}. Read our terms and conditions for using our services.",
    )
    sitemap = _utility_page(
        website, "sitemap", "Sitemap", f"Sitemap for {name}. Find all pages on our website."
    )
    out.emit(
        "privacy-policy.html",
        lambda: out.render_utility(privacy, privacy_policy_content(website, build_date)),
    )
    out.emit(
        "terms-of-service.html",
        lambda: out.render_utility(terms, terms_of_service_content(website, build_date)),
    )
    out.emit("sitemap.html", lambda: out.render_utility(sitemap, html_sitemap_content(website)))

    out.emit("sitemap.xml", lambda: build_sitemap_xml(website, build_date))
    out.emit("robots.txt", lambda: build_robots_txt(website))
    out.emit("search.html", lambda: build_search_page(website, build_date))

    logger.info("Exported %d files for website %s", len(out.files), website.id)
    return out.files


def sitemap_entries(website: Website) -> list[tuple[str, str]]:
    """Return ``(path, category)`` pairs listed in ``sitemap.xml``.

    Five core pages, then one entry per service, location and published post.
    """
    entries = [
        ("", "home"),
        ("about", "about"),
        ("services", "services"),
        ("contact", "contact"),
        ("blog", "blog"),
    ]
    entries += [(f"services/{s.slug}", "service") for s in website.services]
    entries += [(f"locations/{loc.slug}", "location") for loc in website.locations]
    entries += [(f"blog/{p.slug}", "post") for p in published_posts(website)]
    return entries


def build_sitemap_xml(website: Website, build_date: dt.date) -> str:
    """Return ``sitemap.xml`` with one ``<url>`` per core page, service, location and post."""
    base = website.base_url or DEFAULT_BASE_URL
    lastmod = build_date.isoformat()
    urls = "".join(
        f"""  <url>
    <loc>{xml_escape(f"{base}/{path}" if path else base)}</loc>
    <lastmod>{lastmod}</lastmod>
    <changefreq>{SITEMAP_CHANGEFREQ[category]}</changefreq>
    <priority>{SITEMAP_PRIORITIES[category]}</priority>
  </url>
"""
        for path, category in sitemap_entries(website)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{urls}</urlset>\n"
    )


def build_robots_txt(website: Website) -> str:
    """Return an allow-all ``robots.txt`` referencing the sitemap."""
    base = website.base_url or DEFAULT_BASE_URL
    return f"""# robots.txt for {website.display_name}
User-agent: *
Allow: /

# Sitemap location
Sitemap: {base}/sitemap.xml

Crawl-delay: 1

Disallow: /api/
Disallow: /admin/
Disallow: /*.json$
"""


def search_records(website: Website) -> list[dict[str, str]]:
    """Return the searchable ``{title, url, description, type}`` records."""
    description = website.seo_settings.site_description
    records = [
        {"title": "Home", "url": "/", "description": description, "type": "page"},
        {"title": "About Us", "url": "/about", "description": f"About {website.display_name}", "type": "page"},
        {"title": "Services", "url": "/services", "description": f"Services offered by {website.display_name}", "type": "page"},
        {"title": "Contact", "url": "/contact", "description": f"Contact {website.display_name}", "type": "page"},
        {"title": "Blog", "url": "/blog", "description": f"Articles from {website.display_name}", "type": "page"},
    ]
    records += [
        {"title": s.name, "url": f"/services/{s.slug}", "description": s.description, "type": "service"}
        for s in website.services
    ]
    records += [
        {
            "title": loc.display_name,
            "url": f"/locations/{loc.slug}",
            "description": loc.description or f"Service in {loc.display_name}",
            "type": "location",
        }
        for loc in website.locations
    ]
    records += [
        {"title": p.title, "url": f"/blog/{p.slug}.html", "description": p.excerpt, "type": "post"}
        for p in published_posts(website)
    ]
    return records


SEARCH_SCRIPT = """
(function() {
  var index = JSON.parse(document.getElementById('searchIndex').textContent);
  var input = document.getElementById('searchInput');
  var results = document.getElementById('searchResults');
  function escapeHtml(text) {
    return String(text).replace(/[&<>"']/g, function(c) {
      return {'&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&#39;'}[c];
    });
  }
  function render(query) {
    var q = query.trim().toLowerCase();
    var matches = index.filter(function(item) {
      return !q || (item.title + ' ' + item.description).toLowerCase().indexOf(q) !== -1;
    });
    if (matches.length === 0) {
      results.innerHTML = '<li class="search-empty">No results found.</li>';
      return;
    }
    results.innerHTML = matches.map(function(item) {
      return '<li class="search-result"><a href="' + escapeHtml(item.url) + '">' + escapeHtml(item.title) +
        '</a><span class="search-type">' + escapeHtml(item.type) + '</span><p>' + escapeHtml(item.description) + '</p></li>';
    }).join('');
  }
  input.addEventListener('input', function() { render(input.value); });
  input.value = new URLSearchParams(window.location.search).get('q') || '';
  render(input.value);
})();
"""


def build_search_page(website: Website, build_date: dt.date) -> str:
    """Return ``search.html``: an embedded record index plus a substring filter.

    The ``q`` query parameter pre-fills the filter.
    """
    index_json = json.dumps(search_records(website), ensure_ascii=False).replace("</", "<\\/")
    page = _utility_page(website, "search", "Search", f"Search {website.display_name}.")
    body = f"""
<section class="legal-content">
  <h1>Search</h1>
  <input type="search" id="searchInput" class="search-box" placeholder="Search {escape_html(website.display_name)}..." aria-label="Search">
  <ul id="searchResults" class="search-results"></ul>
  <script type="application/json" id="searchIndex">{index_json}</script>
  <script>{SEARCH_SCRIPT}</script>
</section>
"""
    return wrap(body, page, website, build_date=build_date, extra_css=legal_css())


EDITOR_STYLES = """
<style>
  [data-editable]:hover { outline: 2px dashed rgba(59, 130, 246, 0.5) !important; cursor: pointer !important; }
  [data-editable].selected { outline: 2px solid #3b82f6 !important; outline-offset: 2px; }
  [data-editable][contenteditable="true"] { outline: 2px solid #10b981 !important; outline-offset: 2px; min-height: 1em; }
  .edit-overlay { position: relative; }
  .edit-overlay::after { content: attr(data-edit-label); position: absolute; top: -20px; left: 0; background: #3b82f6; color: #fff; font-size: 10px; padding: 2px 6px; border-radius: 3px; pointer-events: none; opacity: 0; transition: opacity 0.15s; }
  .edit-overlay:hover::after { opacity: 1; }
</style>
"""

EDITOR_SCRIPT = """
<script>
(function() {
  function tag(selector, type, label, filter) {
    document.querySelectorAll(selector).forEach(function(el, i) {
      if (filter && !filter(el)) return;
      el.setAttribute('data-editable', 'true');
      el.setAttribute('data-edit-type', type);
      el.setAttribute('data-edit-id', type + '-' + i);
      el.setAttribute('data-edit-label', label || el.tagName);
      el.classList.add('edit-overlay');
    });
  }
  function initEditableElements() {
    tag('h1, h2, h3, h4, h5, h6', 'heading');
    tag('p', 'text', 'Text', function(el) { return el.textContent.trim().length > 0; });
    tag('img', 'image', 'Image');
    tag('a.btn, button, .hero-cta a', 'button', 'Button');
    document.querySelectorAll('iframe[src*="youtube"], iframe[src*="vimeo"], .video-section iframe').forEach(function(el, i) {
      if (el.parentElement.classList.contains('video-edit-wrapper')) return;
      var wrapper = document.createElement('div');
      wrapper.className = 'video-edit-wrapper edit-overlay';
      wrapper.style.cssText = 'position:relative;display:block;width:100%;';
      wrapper.setAttribute('data-editable', 'true');
      wrapper.setAttribute('data-edit-type', 'video');
      wrapper.setAttribute('data-edit-id', 'video-' + i);
      wrapper.setAttribute('data-video-src', el.getAttribute('src') || '');
      wrapper.setAttribute('data-edit-label', 'Video - Double-click to edit');
      el.parentNode.insertBefore(wrapper, el);
      wrapper.appendChild(el);
      var overlay = document.createElement('div');
      overlay.className = 'video-click-overlay';
      overlay.style.cssText = 'position:absolute;inset:0;cursor:pointer;z-index:10;background:transparent;';
      wrapper.appendChild(overlay);
    });
  }
  document.addEventListener('click', function(e) {
    var target = e.target.closest('[data-editable]');
    if (!target) return;
    e.preventDefault();
    e.stopPropagation();
    document.querySelectorAll('.selected').forEach(function(el) { el.classList.remove('selected'); });
    target.classList.add('selected');
    var rect = target.getBoundingClientRect();
    var type = target.getAttribute('data-edit-type');
    var src = type === 'video' ? (target.getAttribute('data-video-src') || '') : (target.getAttribute('src') || '');
    window.parent.postMessage({
      type: 'element-selected',
      data: {
        elementType: type,
        elementId: target.getAttribute('data-edit-id'),
        tagName: target.tagName,
        content: target.textContent || src,
        href: target.getAttribute('href') || '',
        src: src,
        alt: target.getAttribute('alt') || '',
        rect: {top: rect.top, left: rect.left, width: rect.width, height: rect.height}
      }
    }, '*');
  }, true);
  document.addEventListener('dblclick', function(e) {
    var target = e.target.closest('[data-editable]');
    if (!target) return;
    var type = target.getAttribute('data-edit-type');
    if (type === 'text' || type === 'heading' || type === 'button') {
      e.preventDefault();
      target.setAttribute('contenteditable', 'true');
      target.focus();
    } else if (type === 'video') {
      e.preventDefault();
      window.parent.postMessage({
        type: 'edit-video',
        data: {elementId: target.getAttribute('data-edit-id'), videoUrl: target.getAttribute('data-video-src') || ''}
      }, '*');
    }
  }, true);
  document.addEventListener('blur', function(e) {
    var target = e.target.closest && e.target.closest('[contenteditable="true"]');
    if (!target) return;
    target.removeAttribute('contenteditable');
    window.parent.postMessage({
      type: 'content-updated',
      data: {
        elementId: target.getAttribute('data-edit-id'),
        elementType: target.getAttribute('data-edit-type'),
        newContent: target.textContent
      }
    }, '*');
  }, true);
  window.addEventListener('message', function(e) {
    var msg = e.data || {};
    if (msg.type === 'update-element') {
      var el = document.querySelector('[data-edit-id="' + msg.data.elementId + '"]');
      if (!el) return;
      if (msg.data.property === 'text') el.textContent = msg.data.value;
      else if (['src', 'href', 'alt'].indexOf(msg.data.property) !== -1) el.setAttribute(msg.data.property, msg.data.value);
    } else if (msg.type === 'deselect') {
      document.querySelectorAll('.selected').forEach(function(el) { el.classList.remove('selected'); });
    } else if (msg.type === 'update-video') {
      var wrapper = document.querySelector('[data-edit-id="' + msg.data.elementId + '"]');
      if (!wrapper) return;
      var iframe = wrapper.querySelector('iframe');
      if (iframe) iframe.setAttribute('src', msg.data.videoUrl);
      wrapper.setAttribute('data-video-src', msg.data.videoUrl);
    }
  });
  initEditableElements();
  document.querySelectorAll('a').forEach(function(a) {
    a.addEventListener('click', function(e) { e.preventDefault(); });
  });
})();
</script>
"""


def make_editable_preview(html: str) -> str:
    """Inject the in-page editor styles and script before the closing ``</body>``.

    Documents without a ``</body>`` tag get the editor appended at the end.
    """
    editor = EDITOR_STYLES + EDITOR_SCRIPT
    marker = html.rfind("</body>")
    if marker == -1:
        return html + editor
    return html[:marker] + editor + html[marker:]


def editable_preview_files(files: Iterable[ExportedFile]) -> list[ExportedFile]:
    """Return ``files`` with every ``.html`` document turned into an editable preview."""
    return [
        dataclasses.replace(f, content=make_editable_preview(f.content))
        if f.path.endswith(".html")
        else f
        for f in files
    ]


__all__ = [
    "CORE_PAGES",
    "DEFAULT_STRATEGIES",
    "ExportedFile",
    "RenderStrategy",
    "build_robots_txt",
    "build_search_page",
    "build_sitemap_xml",
    "editable_preview_files",
    "export_website",
    "make_editable_preview",
    "resolve_strategy",
    "search_records",
    "sitemap_entries",
]
