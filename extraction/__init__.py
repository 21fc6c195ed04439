"""Rule-based extraction of structured voice attributes from free text."""

from extraction.extractor import extract_voice_attributes
from extraction.models import ParsedAttributes

__all__ = ["ParsedAttributes", "extract_voice_attributes"]
