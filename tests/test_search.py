"""Tests for listing search and category filters."""

from folio.core.search import filter_articles, filter_projects, list_categories
from folio.core.types import Article, Project


def _articles():
    return [
        Article(slug="react", title="Learning react basics", content="Components.", category="Web"),
        Article(slug="sql", title="SQL joins", content="Joins explained with React-free examples.", category="Data"),
        Article(slug="misc", title="Weekend notes", content="Nothing technical.", category=None),
        Article(slug="vue", title="Vue intro", content="Templates and state.", category="Web"),
    ]


def test_empty_query_and_all_categories_returns_everything():
    articles = _articles()
    assert filter_articles(articles, "", "all") == articles


def test_query_is_case_insensitive_on_title():
    matches = filter_articles(_articles(), "REACT", "all")
    assert [a.slug for a in matches] == ["react", "sql"]


def test_query_matches_content():
    matches = filter_articles(_articles(), "templates", "all")
    assert [a.slug for a in matches] == ["vue"]


def test_category_filter_is_exact():
    assert [a.slug for a in filter_articles(_articles(), "", "Web")] == ["react", "vue"]
    assert filter_articles(_articles(), "", "web") == []


def test_query_and_category_combine():
    assert [a.slug for a in filter_articles(_articles(), "react", "Web")] == ["react"]


def test_list_categories_in_first_seen_order():
    assert list_categories(_articles()) == ["all", "Web", "Data"]


def test_list_categories_of_empty_collection():
    assert list_categories([]) == ["all"]


def test_filter_projects_by_exact_category():
    projects = [
        Project(title="Folio", category="Tools"),
        Project(title="Site", category="Web"),
        Project(title="Scratch"),
        Project(title="Linter", category="Tools"),
    ]

    assert filter_projects(projects) == projects
    assert [p.title for p in filter_projects(projects, "Tools")] == ["Folio", "Linter"]
    assert filter_projects(projects, "tools") == []
