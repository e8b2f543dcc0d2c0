"""Pairing knowledge for wine-lens."""

from wine_lens.pairing.knowledge import KeywordMatch, PairingKnowledgeBase, default_knowledge_base
from wine_lens.pairing.repository import HarmonizeRule, KeywordProfile, KeywordRepository

__all__ = [
    "HarmonizeRule",
    "KeywordMatch",
    "KeywordProfile",
    "KeywordRepository",
    "PairingKnowledgeBase",
    "default_knowledge_base",
]
