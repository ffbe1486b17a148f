"""Pytest configuration and shared fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from recipesniper.models import ParsedIngredient
from recipesniper.store import InMemoryStore, get_store

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP layer")


# =============================================================================
# Page Markup Fixtures
# =============================================================================


def _json_ld_page(payload) -> str:
    return f"""
    <html>
      <head>
        <title>  Simple Bread  </title>
        <script type="application/ld+json">{json.dumps(payload)}</script>
      </head>
      <body><h1>Simple Bread</h1></body>
    </html>
    """


@pytest.fixture
def bread_ingredients():
    """Ingredient lines of a simple bread recipe."""
    return ["2 cups all-purpose flour", "1 cup sugar", "3 large eggs"]


@pytest.fixture
def json_ld_recipe_page(bread_ingredients):
    """Page with a top-level JSON-LD Recipe block."""
    return _json_ld_page(
        {
            "@context": "https://schema.org",
            "@type": "Recipe",
            "name": "Simple Bread",
            "recipeIngredient": bread_ingredients,
        }
    )


@pytest.fixture
def json_ld_graph_page():
    """Page where the Recipe node sits inside an @graph wrapper."""
    return _json_ld_page(
        {
            "@context": "https://schema.org",
            "@graph": [
                {"@type": "WebPage", "name": "Pancakes"},
                {
                    "@type": ["Recipe", "NewsArticle"],
                    "name": "Pancakes",
                    "recipeIngredient": ["1 1/2 cups milk", "", "2 tbsp butter"],
                },
            ],
        }
    )


@pytest.fixture
def markup_recipe_page():
    """Page without metadata, using a WP Recipe Maker ingredient list."""
    return """
    <html>
      <head><title>Garlic Bread</title></head>
      <body>
        <div class="wprm-recipe-ingredients">
          <ul>
            <li><span>4</span> <span>cloves</span> <span>garlic</span></li>
            <li>1/2 cup butter</li>
            <li>   </li>
            <li>Salt to taste</li>
          </ul>
        </div>
        <ul class="ingredients">
          <li>should not be used</li>
        </ul>
      </body>
    </html>
    """


@pytest.fixture
def plain_page():
    """Page with neither metadata nor an ingredient list."""
    return "<html><head><title>About us</title></head><body><p>Hello</p></body></html>"


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def bread_recipe(store):
    """Stored recipe contributing flour, yeast and salt."""
    return store.add_recipe(
        url="https://example.com/bread",
        title="Bread",
        ingredients=[
            ParsedIngredient(name="flour", quantity="2", unit="cups", raw_text="2 cups flour"),
            ParsedIngredient(name="yeast", quantity="1", unit="tsp", raw_text="1 tsp yeast"),
            ParsedIngredient(name="salt", raw_text="salt"),
        ],
    )


@pytest.fixture
def cake_recipe(store):
    """Stored recipe contributing flour and sugar."""
    return store.add_recipe(
        url="https://example.com/cake",
        title="Chocolate Cake",
        ingredients=[
            ParsedIngredient(name="Flour", quantity="3", unit="cups", raw_text="3 cups Flour"),
            ParsedIngredient(name="sugar", quantity="1", unit="cup", raw_text="1 cup sugar"),
        ],
    )


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(store):
    """Test client whose routes share the `store` fixture."""
    from recipesniper.main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
