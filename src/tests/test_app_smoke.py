"""End-to-end smoke tests for the Lectern application.

Builds an app over a temporary content directory and exercises every
route: listings, markdown pages, static files, the lectionary and errors.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lectern.config import Settings
from lectern.main import create_app


@pytest.fixture()
def content(tmp_path):
    (tmp_path / "index.md").write_text('```toml\ntitle = "Welcome"\n```\n\n# Hi there')
    (tmp_path / "photo.md").write_text('```toml\ntitle = "A Photo"\ntags = ["travel"]\n```\nText')
    (tmp_path / "photo.webp").write_bytes(b"RIFF0000WEBP")
    (tmp_path / ".photo").write_text("Sunset over the bay")
    (tmp_path / "plain.md").write_text("# No frontmatter here")
    (tmp_path / ".secret.md").write_text("# Secret")
    (tmp_path / "blog").mkdir()
    (tmp_path / "blog" / "post-2.md").write_text("x")
    (tmp_path / "blog" / "post-10.md").write_text("x")
    (tmp_path / "blog" / "post-1.md").write_text("x")
    return tmp_path


@pytest.fixture()
def site_app(content):
    """A fresh app instance pointing at the temp content directory."""
    return create_app(Settings(content_dir=content, site_title="Test Site"))


@pytest_asyncio.fixture()
async def client(site_app):
    """Async HTTP client wired to the app (no lifespan)."""
    transport = ASGITransport(app=site_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ============================================================
# Directory listings
# ============================================================


class TestListing:
    @pytest.mark.asyncio
    async def test_root_listing(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert "<title>Test Site</title>" in resp.text
        assert "Sunset over the bay" in resp.text
        assert 'href="/photo"' in resp.text
        assert 'href="/plain"' in resp.text

    @pytest.mark.asyncio
    async def test_hidden_files_not_listed(self, client):
        resp = await client.get("/")
        assert "secret" not in resp.text.lower()

    @pytest.mark.asyncio
    async def test_subdirectory_natural_order(self, client):
        resp = await client.get("/blog")
        assert resp.status_code == 200
        text = resp.text
        assert text.index("Post 1<") < text.index("Post 2<") < text.index("Post 10<")

    @pytest.mark.asyncio
    async def test_trailing_slash_normalized(self, client):
        resp = await client.get("/blog/")
        assert resp.status_code == 200
        assert "<title>Blog</title>" in resp.text

    @pytest.mark.asyncio
    async def test_nav_present(self, client):
        resp = await client.get("/plain")
        assert '<a href="/">Home</a>' in resp.text
        assert '<a href="/blog">Blog</a>' in resp.text


# ============================================================
# Markdown pages
# ============================================================


class TestMarkdownPage:
    @pytest.mark.asyncio
    async def test_page_with_frontmatter(self, client):
        resp = await client.get("/photo")
        assert resp.status_code == 200
        assert "<title>A Photo</title>" in resp.text
        assert '<li class="tag">travel</li>' in resp.text
        assert "title =" not in resp.text

    @pytest.mark.asyncio
    async def test_page_without_frontmatter(self, client):
        resp = await client.get("/plain")
        assert resp.status_code == 200
        assert "<title>Test Site</title>" in resp.text
        assert "No frontmatter here</h1>" in resp.text
        assert 'class="tags"' not in resp.text

    @pytest.mark.asyncio
    async def test_query_string_ignored(self, client):
        resp = await client.get("/photo/?ref=home")
        assert resp.status_code == 200
        assert "<title>A Photo</title>" in resp.text


# ============================================================
# Static files
# ============================================================


class TestStaticFiles:
    @pytest.mark.asyncio
    async def test_file_streamed_verbatim(self, client):
        resp = await client.get("/photo.webp")
        assert resp.status_code == 200
        assert resp.content == b"RIFF0000WEBP"

    @pytest.mark.asyncio
    async def test_markdown_source(self, client):
        resp = await client.get("/plain.md")
        assert resp.status_code == 200
        assert resp.text == "# No frontmatter here"

    @pytest.mark.asyncio
    async def test_stylesheet(self, client):
        resp = await client.get("/static/style.css")
        assert resp.status_code == 200
        assert "pic-grid" in resp.text


# ============================================================
# Lectionary
# ============================================================


class TestLectionary:
    @pytest.mark.asyncio
    async def test_lectionary_renders(self, client):
        resp = await client.get("/lectionary")
        assert resp.status_code == 200
        assert "<title>Lectionary</title>" in resp.text
        assert "Easter Sunday" in resp.text
        assert 'class="today"' in resp.text


# ============================================================
# Errors
# ============================================================


class TestErrors:
    @pytest.mark.asyncio
    async def test_missing_page(self, client):
        resp = await client.get("/does-not-exist")
        assert resp.status_code == 404
        assert "This page doesn&#39;t exist!" in resp.text
        assert '<a href="/blog">Blog</a>' in resp.text

    @pytest.mark.asyncio
    async def test_missing_static_file(self, client):
        resp = await client.get("/nope.png")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_encoded_traversal_rejected(self, client):
        resp = await client.get("/%2E%2E/secret.txt")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_null_byte_path_not_found(self, client):
        resp = await client.get("/a%00b")
        assert resp.status_code == 404
        assert "This page doesn&#39;t exist!" in resp.text
