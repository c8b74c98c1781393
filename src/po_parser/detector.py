#!/usr/bin/env python3
"""
Vendor detection: route OCR text to exactly one grammar.
"""

import logging
from typing import Callable, List, Tuple

from .vendor_grammars import (
    VendorGrammar,
    EmptyGrammar,
    RippleJunctionGrammar,
    FAWorldGrammar,
    ViolentGentlemenGrammar,
    BakerBoysGrammar,
    GenericGrammar,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]

# Evaluated top to bottom, first match wins. Corrupted OCR can carry more than
# one vendor marker, so the order is part of the contract.
VENDOR_RULES: List[Tuple[Predicate, Callable[[], VendorGrammar]]] = [
    (grammar_class().matches, grammar_class)
    for grammar_class in (
        RippleJunctionGrammar,
        FAWorldGrammar,
        ViolentGentlemenGrammar,
        BakerBoysGrammar,
    )
]


def detect(text: str) -> VendorGrammar:
    """
    Select the grammar for a document's OCR text.

    Args:
        text: Raw OCR text

    Returns:
        A fresh grammar instance; EmptyGrammar for blank text, GenericGrammar
        when no vendor marker is present

    Raises:
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"OCR text must be a string, got {type(text).__name__}")

    if not text.strip():
        return EmptyGrammar()

    for predicate, grammar_class in VENDOR_RULES:
        if predicate(text):
            grammar = grammar_class()
            logger.debug(f"Detected vendor grammar: {grammar.name}")
            return grammar

    logger.debug("No vendor marker found, using generic grammar")
    return GenericGrammar()
