"""
Pytest configuration and shared fixtures for the LIPIcs filter tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import FilterSettings
from lipics_filter.knowledge.base import parse_knowledge_base
from lipics_filter.knowledge.resolver import KnowledgeResolver
from lipics_filter.pandoc.ast import text_to_inlines
from lipics_filter.pandoc.meta import MetaInlines, MetaList, MetaMap, MetaString


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def test_settings():
    """Settings independent of the environment."""
    return FilterSettings(
        log_level="DEBUG",
        log_file=None,
        default_mode="pandoc",
    )


# ============================================================================
# Fixtures: Metadata builders
# ============================================================================

def global_synonym(text: str):
    return MetaInlines(text_to_inlines(text))


def scoped_synonym(name: str, scope: str):
    return MetaMap({"name": MetaInlines(text_to_inlines(name)), "scope": MetaString(scope)})


def knowledge_entry(*synonyms):
    return MetaMap({"synonyms": MetaList(list(synonyms))})


@pytest.fixture
def complexity_meta():
    """
    Three entries:
        0: NP, nondeterministic polynomial time
        1: P, polynomial time
        2: class@complexity, complexity class
    """
    return {
        "knowledges": MetaList([
            knowledge_entry(global_synonym("NP"), global_synonym("nondeterministic polynomial time")),
            knowledge_entry(MetaString("P"), global_synonym("polynomial time")),
            knowledge_entry(scoped_synonym("class", "complexity"), global_synonym("complexity class")),
        ])
    }


@pytest.fixture
def complexity_resolver(complexity_meta):
    return KnowledgeResolver(parse_knowledge_base(complexity_meta))


@pytest.fixture
def empty_resolver():
    return KnowledgeResolver(parse_knowledge_base({}))
