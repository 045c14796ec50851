"""
Sample Data

Default categories and starter content loaded into a fresh store so the
editor has something to show on first run.
"""

from cms.shared.db.store import MemoryStore
from cms.shared.models import Category, Content, ContentStatus, ContentType


DEFAULT_CATEGORIES = [
    {"name": "Blog", "description": "Blog posts and articles", "color": "#3B82F6", "slug": "blog"},
    {"name": "Pages", "description": "Static pages", "color": "#10B981", "slug": "pages"},
    {"name": "Notes", "description": "Personal notes", "color": "#F59E0B", "slug": "notes"},
]

SAMPLE_CONTENT = [
    {
        "title": "Welcome to Your CMS",
        "content": (
            "<h1>Welcome to Your Personal Content Management System</h1>"
            "<p>This is your first post! You can edit this content using the rich text editor.</p>"
            "<p>Features include:</p>"
            "<ul><li>Rich text editing</li><li>Category management</li>"
            "<li>Media library</li><li>Content organization</li></ul>"
        ),
        "excerpt": "Welcome to your personal content management system",
        "slug": "welcome-to-your-cms",
        "category": "blog",
        "tags": ["welcome", "cms", "getting-started"],
        "status": ContentStatus.PUBLISHED,
        "content_type": ContentType.RICHTEXT,
    },
    {
        "title": "About Page",
        "content": (
            "<h1>About</h1>"
            "<p>This is your about page. You can customize this content to tell your story.</p>"
        ),
        "excerpt": "Learn more about this site",
        "slug": "about",
        "category": "pages",
        "tags": ["about", "info"],
        "status": ContentStatus.PUBLISHED,
        "content_type": ContentType.RICHTEXT,
    },
    {
        "title": "Landing Page Demo",
        "content": (
            '<section class="hero-section"><div class="container mx-auto text-center">'
            '<h1 class="text-4xl font-bold mb-4">Welcome to Our Service</h1>'
            '<p class="text-xl mb-8">Experience the power of visual page building</p>'
            '<button class="bg-white text-blue-600 px-8 py-3 rounded-lg">Get Started</button>'
            "</div></section>"
            '<section class="py-16 bg-gray-50"><div class="container mx-auto px-4">'
            '<div class="grid grid-cols-1 md:grid-cols-3 gap-8">'
            '<div class="text-center"><h3>Feature 1</h3><p>Amazing feature description</p></div>'
            '<div class="text-center"><h3>Feature 2</h3><p>Another great feature</p></div>'
            '<div class="text-center"><h3>Feature 3</h3><p>One more awesome feature</p></div>'
            "</div></div></section>"
        ),
        "excerpt": "A sample landing page built with the page builder",
        "slug": "landing-page-demo",
        "category": "pages",
        "tags": ["demo", "landing", "page-builder"],
        "status": ContentStatus.PUBLISHED,
        "content_type": ContentType.PAGE,
        "page_css": (
            ".hero-section { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); } "
            ".container { max-width: 1200px; }"
        ),
    },
]


def seed_store(store: MemoryStore) -> None:
    """Append the default categories and sample content to ``store``."""
    with store.lock:
        store.collection(Category.collection_name).extend(
            Category.new(**fields) for fields in DEFAULT_CATEGORIES
        )
        store.collection(Content.collection_name).extend(
            Content.new(**fields) for fields in SAMPLE_CONTENT
        )
